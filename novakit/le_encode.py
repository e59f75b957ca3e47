"""Little-endian binary encoding of scalar values."""

from __future__ import annotations

import math
import struct
from typing import Any

from novakit.anyarray import _format_value

_INT8_MAX = 2**7 - 1
_INT16_MAX = 2**15 - 1
_INT32_MAX = 2**31 - 1
_UINT8_MAX = 2**8 - 1
_UINT16_MAX = 2**16 - 1
_UINT32_MAX = 2**32 - 1


def le_encode_string(value: str) -> bytes:
    """Encode a string as its UTF-8 bytes."""
    return value.encode("utf-8")


def le_encode_bool(value: bool) -> bytes:
    """Encode a boolean as a single 0 or 1 byte."""
    return b"\x01" if value else b"\x00"


def le_encode_int8(value: int) -> bytes:
    """Encode the low 8 bits of ``value``."""
    return struct.pack("<B", value & 0xFF)


def le_encode_uint8(value: int) -> bytes:
    """Encode the low 8 bits of ``value``."""
    return struct.pack("<B", value & 0xFF)


def le_encode_int16(value: int) -> bytes:
    """Encode the low 16 bits of ``value``, little-endian."""
    return struct.pack("<H", value & 0xFFFF)


def le_encode_uint16(value: int) -> bytes:
    """Encode the low 16 bits of ``value``, little-endian."""
    return struct.pack("<H", value & 0xFFFF)


def le_encode_int32(value: int) -> bytes:
    """Encode the low 32 bits of ``value``, little-endian."""
    return struct.pack("<I", value & 0xFFFFFFFF)


def le_encode_uint32(value: int) -> bytes:
    """Encode the low 32 bits of ``value``, little-endian."""
    return struct.pack("<I", value & 0xFFFFFFFF)


def le_encode_int64(value: int) -> bytes:
    """Encode the low 64 bits of ``value``, little-endian."""
    return struct.pack("<Q", value & 0xFFFFFFFFFFFFFFFF)


def le_encode_uint64(value: int) -> bytes:
    """Encode the low 64 bits of ``value``, little-endian."""
    return struct.pack("<Q", value & 0xFFFFFFFFFFFFFFFF)


def le_encode_int(value: int) -> bytes:
    """Encode a signed integer in the narrowest of 1, 2, 4 or 8 bytes.

    The width is chosen by the upper bound only, so every negative value
    is written as a single (wrapped) byte.
    """
    if value <= _INT8_MAX:
        return le_encode_int8(value)
    if value <= _INT16_MAX:
        return le_encode_int16(value)
    if value <= _INT32_MAX:
        return le_encode_int32(value)
    return le_encode_int64(value)


def le_encode_uint(value: int) -> bytes:
    """Encode an unsigned integer in the narrowest of 1, 2, 4 or 8 bytes."""
    if value < 0:
        raise ValueError(f"unsigned value expected, got {value}")
    if value <= _UINT8_MAX:
        return le_encode_uint8(value)
    if value <= _UINT16_MAX:
        return le_encode_uint16(value)
    if value <= _UINT32_MAX:
        return le_encode_uint32(value)
    return le_encode_uint64(value)


def le_encode_float32(value: float) -> bytes:
    """Encode a float in IEEE-754 single precision; out-of-range values become infinities."""
    try:
        return struct.pack("<f", value)
    except OverflowError:
        return struct.pack("<f", math.copysign(math.inf, value))


def le_encode_float64(value: float) -> bytes:
    """Encode a float in IEEE-754 double precision."""
    return struct.pack("<d", value)


def _encode_one(value: Any) -> bytes:
    if isinstance(value, bool):
        return le_encode_bool(value)
    if isinstance(value, int):
        return le_encode_int(value)
    if isinstance(value, str):
        return le_encode_string(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, float):
        return le_encode_float64(value)
    return le_encode_string(_format_value(value))


def le_encode(*args: Any) -> bytes:
    """Concatenate the encodings of the given values.

    Encoding stops at the first ``None``; values of other kinds are
    written as their text form.
    """
    parts = []
    for value in args:
        if value is None:
            break
        parts.append(_encode_one(value))
    return b"".join(parts)


def le_encode_by_length(length: int, *args: Any) -> bytes:
    """Encode the values, then pad with zero bytes or cut to ``length``."""
    encoded = le_encode(*args)
    if len(encoded) < length:
        return encoded + bytes(length - len(encoded))
    return encoded[:length]