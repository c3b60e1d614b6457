"""GNSS position, velocity and time record."""

from __future__ import annotations

import struct
from dataclasses import dataclass, fields
from typing import ClassVar

_LAYOUT = struct.Struct(">IH6BIi4B4i2I5i2Ii7H")


@dataclass(frozen=True)
class PvtData:
    """One GNSS PVT record as carried in a GNSS data packet."""

    SIZE: ClassVar[int] = _LAYOUT.size

    itow: int = 0
    year: int = 0
    month: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    valid: int = 0
    t_acc: int = 0
    nano: int = 0
    fix_type: int = 0
    flags: int = 0
    num_sv: int = 0
    reserved: int = 0
    lon: int = 0
    lat: int = 0
    height: int = 0
    h_msl: int = 0
    h_acc: int = 0
    v_acc: int = 0
    vel_n: int = 0
    vel_e: int = 0
    vel_d: int = 0
    g_speed: int = 0
    head_mot: int = 0
    s_acc: int = 0
    head_acc: int = 0
    head_veh: int = 0
    g_dop: int = 0
    p_dop: int = 0
    t_dop: int = 0
    v_dop: int = 0
    h_dop: int = 0
    n_dop: int = 0
    e_dop: int = 0

    @classmethod
    def from_payload(cls, payload: bytes) -> "PvtData":
        """Decode a packet payload; a short payload is zero-filled, extra bytes are ignored."""
        raw = bytes(payload[: cls.SIZE]).ljust(cls.SIZE, b"\x00")
        names = [f.name for f in fields(cls)]
        return cls(**dict(zip(names, _LAYOUT.unpack(raw))))