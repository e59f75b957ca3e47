"""Little-endian binary decoding of scalar values."""

from __future__ import annotations

import struct
from typing import Any, Tuple

_FORMATS = {
    "bool": "?",
    "int8": "b",
    "uint8": "B",
    "int16": "h",
    "uint16": "H",
    "int32": "i",
    "uint32": "I",
    "int64": "q",
    "uint64": "Q",
    "float32": "f",
    "float64": "d",
}


def le_fill_up_size(data: bytes, length: int) -> bytes:
    """Cut ``data`` to ``length`` bytes, or pad it with zero bytes up to it."""
    data = bytes(data)
    if len(data) >= length:
        return data[:length]
    return data + bytes(length - len(data))


def le_decode(data: bytes, *args: str) -> Tuple[Any, ...]:
    """Read values of the named types one after another from ``data``.

    Type names are ``bool``, ``int8`` to ``int64``, ``uint8`` to ``uint64``,
    ``float32`` and ``float64``. Raises ``ValueError`` for an unknown type
    name or when the data runs out.
    """
    buffer = bytes(data)
    offset = 0
    values = []
    for name in args:
        try:
            code = _FORMATS[name]
        except KeyError:
            raise ValueError(f"unsupported type for decoding: {name!r}") from None
        size = struct.calcsize("<" + code)
        if offset + size > len(buffer):
            raise ValueError(
                f"not enough data to decode {name}: need {size} bytes, "
                f"{len(buffer) - offset} left"
            )
        (value,) = struct.unpack_from("<" + code, buffer, offset)
        values.append(value)
        offset += size
    return tuple(values)


def le_decode_to_string(data: bytes) -> str:
    """Decode bytes as UTF-8 text, replacing invalid sequences."""
    return bytes(data).decode("utf-8", errors="replace")


def le_decode_to_bool(data: bytes) -> bool:
    """Return false for empty or all-zero data, true otherwise."""
    return any(bytes(data))


def _require_non_empty(data: bytes) -> bytes:
    data = bytes(data)
    if not data:
        raise ValueError("empty slice given")
    return data


def le_decode_to_int8(data: bytes) -> int:
    """Read the first byte as a signed 8-bit integer."""
    return struct.unpack("<b", _require_non_empty(data)[:1])[0]


def le_decode_to_uint8(data: bytes) -> int:
    """Read the first byte as an unsigned 8-bit integer."""
    return _require_non_empty(data)[0]


def le_decode_to_int16(data: bytes) -> int:
    return struct.unpack("<h", le_fill_up_size(data, 2))[0]


def le_decode_to_uint16(data: bytes) -> int:
    return struct.unpack("<H", le_fill_up_size(data, 2))[0]


def le_decode_to_int32(data: bytes) -> int:
    return struct.unpack("<i", le_fill_up_size(data, 4))[0]


def le_decode_to_uint32(data: bytes) -> int:
    return struct.unpack("<I", le_fill_up_size(data, 4))[0]


def le_decode_to_int64(data: bytes) -> int:
    return struct.unpack("<q", le_fill_up_size(data, 8))[0]


def le_decode_to_uint64(data: bytes) -> int:
    return struct.unpack("<Q", le_fill_up_size(data, 8))[0]


def le_decode_to_float32(data: bytes) -> float:
    return struct.unpack("<f", le_fill_up_size(data, 4))[0]


def le_decode_to_float64(data: bytes) -> float:
    return struct.unpack("<d", le_fill_up_size(data, 8))[0]


def le_decode_to_uint(data: bytes) -> int:
    """Decode an unsigned integer whose width follows the data length.

    One byte reads as 8 bits, two as 16, up to four as 32, more as 64;
    narrower widths read unsigned. Empty data raises ``ValueError``.
    """
    data = bytes(data)
    if len(data) < 2:
        return le_decode_to_uint8(data)
    if len(data) < 3:
        return le_decode_to_uint16(data)
    if len(data) < 5:
        return le_decode_to_uint32(data)
    return le_decode_to_uint64(data)


def le_decode_to_int(data: bytes) -> int:
    """Decode an integer whose width follows the data length.

    Widths below 64 bits read unsigned; a 64-bit value reads signed.
    Empty data raises ``ValueError``.
    """
    data = bytes(data)
    if len(data) < 5:
        return le_decode_to_uint(data)
    return le_decode_to_int64(data)