"""Protocol constants for the Xbus message stream."""

from __future__ import annotations

from enum import IntEnum


class HeaderByte(IntEnum):
    """Bytes that open every MTData2 message."""

    PREAMBLE = 0xFA
    BID = 0xFF
    MID = 0x36


class DataId(IntEnum):
    """Identifiers of the data packets carried inside a message."""

    TEMPERATURE_DOUBLE = 0x0813
    QUATERNION_FLOAT_ENU = 0x2010
    QUATERNION_DOUBLE_ENU = 0x2013
    EULER_FLOAT_ENU = 0x2030
    EULER_DOUBLE_ENU = 0x2033
    BARO_PRESSURE_DOUBLE_ENU = 0x3010
    DELTA_V_DOUBLE_ENU = 0x4013
    ACCEL_FLOAT_ENU = 0x4020
    ACCEL_DOUBLE_ENU = 0x4023
    FREE_ACCEL_DOUBLE_ENU = 0x4033
    ACCEL_HR_FLOAT_ENU = 0x4040
    GYRO_FLOAT_ENU = 0x8020
    GYRO_DOUBLE_ENU = 0x8023
    GYRO_HR_FLOAT_ENU = 0x8040
    LATLON_FLOAT_ENU = 0x5040
    LATLON_DOUBLE_ENU = 0x5043
    ALTITUDE_FLOAT_ENU = 0x5020
    ALTITUDE_DOUBLE_ENU = 0x5023
    VELOCITY_FLOAT_ENU = 0xD010
    VELOCITY_DOUBLE_ENU = 0xD013
    MAG_FLOAT_ENU = 0xC020
    MAG_DOUBLE_ENU = 0xC023
    GNSS_PVTDATA_ENU = 0x7010

    @classmethod
    def from_bytes(cls, high: int, low: int) -> "DataId":
        """Return the identifier made of a high and a low byte.

        Raises ValueError if a byte is out of range or the identifier is unknown.
        """
        for value in (high, low):
            if not 0 <= value <= 0xFF:
                raise ValueError(f"byte out of range: {value!r}")
        return cls((high << 8) | low)


class Event(IntEnum):
    """States of the message parser."""

    WAIT_PREAMBLE = 0
    WAIT_PACKETS = 1