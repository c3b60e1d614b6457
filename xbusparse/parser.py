"""Incremental parser for MTData2 messages on an Xbus byte stream."""

from __future__ import annotations

import logging
from collections import deque
from enum import IntEnum
from typing import Iterable

from .consts import DataId, Event, HeaderByte
from .gnss import PvtData
from .swap import decode_float32, decode_float64, decode_floats, swap_uint32

logger = logging.getLogger(__name__)

_PAYLOAD_SIZE = 512
_EMPTY_READ = 0xFF  # value seen when reading from an exhausted line

# data id -> (attribute, float width, flag raised on update)
_VECTORS: dict[DataId, tuple[str, int, str | None]] = {
    DataId.EULER_FLOAT_ENU: ("euler", 4, None),
    DataId.EULER_DOUBLE_ENU: ("euler", 8, None),
    DataId.QUATERNION_FLOAT_ENU: ("quat", 4, None),
    DataId.QUATERNION_DOUBLE_ENU: ("quat", 8, None),
    DataId.GYRO_FLOAT_ENU: ("gyro", 4, None),
    DataId.GYRO_DOUBLE_ENU: ("gyro", 8, None),
    DataId.GYRO_HR_FLOAT_ENU: ("gyro_hr", 4, "gyro_hr"),
    DataId.ACCEL_FLOAT_ENU: ("accel", 4, None),
    DataId.ACCEL_DOUBLE_ENU: ("accel", 8, None),
    DataId.FREE_ACCEL_DOUBLE_ENU: ("free_accel", 8, "free_accel"),
    DataId.ACCEL_HR_FLOAT_ENU: ("accel_hr", 4, "accel_hr"),
    DataId.MAG_FLOAT_ENU: ("mag", 4, None),
    DataId.MAG_DOUBLE_ENU: ("mag", 8, "mag"),
    DataId.DELTA_V_DOUBLE_ENU: ("delta_v", 8, None),
    DataId.LATLON_FLOAT_ENU: ("latlon", 4, None),
    DataId.LATLON_DOUBLE_ENU: ("latlon", 8, None),
    DataId.VELOCITY_FLOAT_ENU: ("velocity", 4, None),
    DataId.VELOCITY_DOUBLE_ENU: ("velocity", 8, None),
}

_SCALARS: dict[DataId, tuple[str, int]] = {
    DataId.TEMPERATURE_DOUBLE: ("temperature", 8),
    DataId.ALTITUDE_FLOAT_ENU: ("altitude", 4),
    DataId.ALTITUDE_DOUBLE_ENU: ("altitude", 8),
}


class ParseStatus(IntEnum):
    """Result of one call to Xbus.read()."""

    WAIT_BEGIN_BYTE = 0
    WAIT_PACKET_BYTE = 1
    FAIL = 2
    OK = 3


def _update_vector(old: tuple[float, ...], payload: bytes, width: int) -> tuple[float, ...]:
    count = min(len(payload) // width, len(old))
    fresh = decode_floats(payload[: count * width], width)
    return tuple(fresh) + old[count:]


def _pad(payload: bytes, width: int) -> bytes:
    return payload[:width].ljust(width, b"\x00")


class Xbus:
    """Collects bytes from the line and decodes the MTData2 messages in them.

    Bytes are handed over with feed(); read() consumes as many as a complete
    message needs and stores the decoded values in the public attributes.
    """

    def __init__(self) -> None:
        self._buffer: deque[int] = deque()

        self.altitude = 0.0
        self.temperature = 0.0
        self.latlon: tuple[float, ...] = (0.0, 0.0)
        self.gyro: tuple[float, ...] = (0.0, 0.0, 0.0)
        self.accel: tuple[float, ...] = (0.0, 0.0, 0.0)
        self.mag: tuple[float, ...] = (0.0, 0.0, 0.0)
        self.velocity: tuple[float, ...] = (0.0, 0.0, 0.0)
        self.euler: tuple[float, ...] = (0.0, 0.0, 0.0)
        self.delta_v: tuple[float, ...] = (0.0, 0.0, 0.0)
        self.free_accel: tuple[float, ...] = (0.0, 0.0, 0.0)
        self.quat: tuple[float, ...] = (0.0, 0.0, 0.0, 0.0)
        self.accel_hr: tuple[float, ...] = (0.0, 0.0, 0.0)
        self.gyro_hr: tuple[float, ...] = (0.0, 0.0, 0.0)
        self.baro = 0
        self.gnss = PvtData()

        self._updated: set[str] = set()
        self._event = Event.WAIT_PREAMBLE
        self._status = ParseStatus.WAIT_BEGIN_BYTE
        self._header_length = 0
        self._consumed = 0
        self._checksum = 0
        self._payload = bytearray(_PAYLOAD_SIZE)

    def feed(self, data: Iterable[int] | bytes) -> None:
        """Append received bytes to the input buffer."""
        self._buffer.extend(bytes(data))

    def available(self) -> int:
        """Number of bytes waiting in the input buffer."""
        return len(self._buffer)

    def read(self) -> ParseStatus:
        """Parse what is buffered and report where the parser stands."""
        while self._event == Event.WAIT_PREAMBLE and len(self._buffer) >= 4:
            self._checksum = 0
            if self._next_byte() != HeaderByte.PREAMBLE:
                continue
            bid, mid, length = self._next_byte(), self._next_byte(), self._next_byte()
            if bid == HeaderByte.BID and mid == HeaderByte.MID:
                self._event = Event.WAIT_PACKETS
                self._header_length = length
                self._consumed = 0
                self._subtract(bytes((bid, mid, length)))

        if self._event == Event.WAIT_PREAMBLE:
            self._status = ParseStatus.WAIT_BEGIN_BYTE
        else:
            self._status = ParseStatus.WAIT_PACKET_BYTE

        while (
            self._event == Event.WAIT_PACKETS
            and len(self._buffer) >= self._header_length - self._consumed + 1
        ):
            high, low, length = self._next_byte(), self._next_byte(), self._next_byte()
            self._consumed = (self._consumed + 3) & 0xFF
            self._parse_packet(high, low, length)
            self._subtract(bytes((high, low, length)) + bytes(self._payload[:length]))

            if self._consumed == self._header_length:
                self._event = Event.WAIT_PREAMBLE
                self._consumed = 0
                received = self._next_byte()
                self._status = (
                    ParseStatus.OK if received == self._checksum else ParseStatus.FAIL
                )

        return self._status

    def get_gnss(self) -> PvtData | None:
        """Return the GNSS record if it changed since the last call, else None."""
        if "gnss" in self._updated:
            self._updated.discard("gnss")
            return self.gnss
        return None

    def get_gyro_hr(self) -> tuple[float, ...] | None:
        """Return the high-rate gyroscope reading if it changed since the last call."""
        if "gyro_hr" in self._updated:
            self._updated.discard("gyro_hr")
            return self.gyro_hr
        return None

    def get_accel_hr(self) -> tuple[float, ...] | None:
        """Return the high-rate accelerometer reading once one has arrived.

        The update flag is left set, so later calls keep returning the latest reading.
        """
        if "accel_hr" in self._updated:
            return self.accel_hr
        return None

    def get_free_accel(self) -> tuple[float, ...] | None:
        """Return the free acceleration if it changed since the last call."""
        if "free_accel" in self._updated:
            self._updated.discard("free_accel")
            return self.free_accel
        return None

    def get_mag(self) -> tuple[float, ...] | None:
        """Return the double-precision magnetic field if it changed since the last call."""
        if "mag" in self._updated:
            self._updated.discard("mag")
            return self.mag
        return None

    def _next_byte(self) -> int:
        return self._buffer.popleft() if self._buffer else _EMPTY_READ

    def _subtract(self, data: bytes) -> None:
        self._checksum = (self._checksum - sum(data)) & 0xFF

    def _read_payload(self, length: int) -> bytes:
        payload = bytes(self._next_byte() for _ in range(length))
        self._payload[:length] = payload
        self._consumed = (self._consumed + length) & 0xFF
        return payload

    def _parse_packet(self, high: int, low: int, length: int) -> None:
        try:
            data_id = DataId.from_bytes(high, low)
        except ValueError:
            logger.warning("no matched data id: %02X %02X %d", high, low, length)
            self._consumed = 0
            self._event = Event.WAIT_PREAMBLE
            return

        payload = self._read_payload(length)

        if data_id in _VECTORS:
            name, width, flag = _VECTORS[data_id]
            setattr(self, name, _update_vector(getattr(self, name), payload, width))
            if flag:
                self._updated.add(flag)
        elif data_id in _SCALARS:
            name, width = _SCALARS[data_id]
            decode = decode_float32 if width == 4 else decode_float64
            setattr(self, name, decode(_pad(payload, width)))
        elif data_id == DataId.BARO_PRESSURE_DOUBLE_ENU:
            self.baro = swap_uint32(_pad(payload, 4))
        elif data_id == DataId.GNSS_PVTDATA_ENU:
            self.gnss = PvtData.from_payload(payload)
            self._updated.add("gnss")