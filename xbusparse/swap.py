"""Decoding of big-endian values as sent on the Xbus line."""

from __future__ import annotations

import struct


def _take(data: bytes, size: int) -> bytes:
    chunk = bytes(data[:size])
    if len(chunk) < size:
        raise ValueError(f"need {size} bytes, got {len(chunk)}")
    return chunk


def swap_uint16(data: bytes) -> int:
    """Return the unsigned 16-bit value held big-endian in the first 2 bytes."""
    return int.from_bytes(_take(data, 2), "big")


def swap_uint32(data: bytes) -> int:
    """Return the unsigned 32-bit value held big-endian in the first 4 bytes."""
    return int.from_bytes(_take(data, 4), "big")


def swap_uint64(data: bytes) -> int:
    """Return the unsigned 64-bit value held big-endian in the first 8 bytes."""
    return int.from_bytes(_take(data, 8), "big")


def decode_float32(data: bytes) -> float:
    """Return the IEEE single held big-endian in the first 4 bytes."""
    return struct.unpack(">f", _take(data, 4))[0]


def decode_float64(data: bytes) -> float:
    """Return the IEEE double held big-endian in the first 8 bytes."""
    return struct.unpack(">d", _take(data, 8))[0]


def decode_floats(data: bytes, width: int) -> tuple[float, ...]:
    """Return every big-endian float of the given width (4 or 8) in data."""
    codes = {4: "f", 8: "d"}
    if width not in codes:
        raise ValueError(f"width must be 4 or 8, got {width!r}")
    raw = bytes(data)
    if len(raw) % width:
        raise ValueError(f"{len(raw)} bytes is not a multiple of {width}")
    return struct.unpack(f">{len(raw) // width}{codes[width]}", raw)