"""Loose conversion of arbitrary values to numbers, text, booleans and bytes."""

from __future__ import annotations

import base64
import dataclasses
import json
import math
import re
import struct
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Optional

from novakit.anyarray import AnyArray, _format_value
from novakit.anydict import AnyDict
from novakit.le_decode import (
    le_decode_to_float32,
    le_decode_to_float64,
    le_decode_to_int64,
    le_decode_to_uint64,
)
from novakit.le_encode import le_encode

_EMPTY_STRINGS = frozenset({"", "0", "no", "off", "false"})
_SIGNED_DECIMAL = re.compile(r"[+-]?[0-9]+")
_SIGNED_HEX = re.compile(r"[+-]?[0-9a-fA-F]+")
_UNSIGNED_DECIMAL = re.compile(r"[0-9]+")
_UNSIGNED_HEX = re.compile(r"[0-9a-fA-F]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_BYTES_LIKE = (bytes, bytearray, memoryview)


def _wrap_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >> (bits - 1) else value


def _wrap_unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _float_to_int64(value: float) -> int:
    if math.isfinite(value):
        truncated = math.trunc(value)
        if _INT64_MIN <= truncated <= _INT64_MAX:
            return truncated
    return _INT64_MIN


def _float_to_uint64(value: float) -> int:
    if math.isfinite(value):
        truncated = math.trunc(value)
        if 0 <= truncated <= _UINT64_MAX:
            return truncated
    return _wrap_unsigned(_float_to_int64(value), 64)


def _round_float32(value: float) -> float:
    try:
        packed = struct.pack("<f", value)
    except OverflowError:
        packed = struct.pack("<f", math.copysign(math.inf, value))
    return struct.unpack("<f", packed)[0]


def _parse_float(text: str) -> Optional[float]:
    """Parse a float strictly: no surrounding spaces, no underscores."""
    if not text or not text.isascii() or text != text.strip() or "_" in text:
        return None
    body = text.lstrip("+-")
    if body[:2].lower() == "0x":
        if "p" not in body.lower():
            return None
        try:
            return float.fromhex(text)
        except (ValueError, OverflowError):
            return None
    try:
        return float(text)
    except ValueError:
        return None


def _int_method(value: Any) -> Optional[int]:
    if isinstance(value, (str, *_BYTES_LIKE)) or getattr(type(value), "__int__", None) is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _split_sign(text: str) -> "tuple[bool, str]":
    if text and text[0] in "+-":
        return text[0] == "-", text[1:]
    return False, text


def _float_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return format(Decimal(repr(value)).normalize(), "f")


def _datetime_text(value: datetime) -> str:
    offset = value.utcoffset()
    if value.replace(tzinfo=None) == datetime.min and (offset is None or not offset):
        return ""
    text = value.strftime("%Y-%m-%d %H:%M:%S")
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")
    if value.tzinfo is not None:
        text += " " + value.strftime("%z")
        zone = value.tzname()
        if zone:
            text += " " + zone
    return text


def _json_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, AnyArray):
        return obj.to_list()
    if isinstance(obj, AnyDict):
        return obj.to_dict()
    if isinstance(obj, _BYTES_LIKE):
        return base64.b64encode(bytes(obj)).decode("ascii")
    raise TypeError(f"value of type {type(obj).__name__} is not JSON serialisable")


def _to_json(value: Any) -> str:
    return json.dumps(
        value,
        default=_json_default,
        separators=(",", ":"),
        sort_keys=True,
        ensure_ascii=False,
        allow_nan=False,
    )


def float_format(value: float, length: int) -> float:
    """Round ``value`` to ``length`` decimal places; a negative length keeps it as is."""
    if length < 0:
        return float(value)
    return float(f"{float(value):.{length}f}")


def to_string(value: Any) -> str:
    """Render any value as text; containers become compact JSON."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float_text(value)
    if isinstance(value, str):
        return value
    if isinstance(value, _BYTES_LIKE):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, datetime):
        return _datetime_text(value)
    if isinstance(value, (AnyArray, AnyDict)):
        return value.to_json()
    if isinstance(value, (dict, list, tuple)) or (
        dataclasses.is_dataclass(value) and not isinstance(value, type)
    ):
        try:
            return _to_json(value)
        except (TypeError, ValueError):
            return _format_value(value)
    return str(value)


def to_float64(value: Any) -> float:
    """Convert to a double; text that does not parse gives 0.0."""
    if value is None:
        return 0.0
    if isinstance(value, float):
        return value
    if isinstance(value, _BYTES_LIKE):
        return le_decode_to_float64(value)
    if not isinstance(value, (int, str)) and getattr(type(value), "__float__", None) is not None:
        try:
            return float(value)
        except (TypeError, ValueError, OverflowError):
            pass
    parsed = _parse_float(to_string(value))
    return 0.0 if parsed is None else parsed


def to_float32(value: Any) -> float:
    """Convert to a single-precision float."""
    if value is None:
        return 0.0
    if isinstance(value, _BYTES_LIKE):
        return le_decode_to_float32(value)
    return _round_float32(to_float64(value))


def to_int64(value: Any) -> int:
    """Convert to a signed 64-bit integer, parsing text as decimal, hex or float."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return _wrap_signed(value, 64)
    if isinstance(value, float):
        return _float_to_int64(value)
    if isinstance(value, _BYTES_LIKE):
        return le_decode_to_int64(value)
    number = _int_method(value)
    if number is not None:
        return _wrap_signed(number, 64)

    minus, text = _split_sign(to_string(value))
    candidates = []
    if len(text) > 2 and text[0] == "0" and text[1] in "xX" and _SIGNED_HEX.fullmatch(text[2:]):
        candidates.append(int(text[2:], 16))
    if _SIGNED_DECIMAL.fullmatch(text):
        candidates.append(int(text))
    for parsed in candidates:
        if _INT64_MIN <= parsed <= _INT64_MAX:
            return _wrap_signed(-parsed if minus else parsed, 64)

    fallback = to_float64(value)
    if math.isnan(fallback):
        return 0
    return _float_to_int64(fallback)


def to_int(value: Any) -> int:
    return to_int64(value)


def to_int8(value: Any) -> int:
    return _wrap_signed(to_int64(value), 8)


def to_int16(value: Any) -> int:
    return _wrap_signed(to_int64(value), 16)


def to_int32(value: Any) -> int:
    return _wrap_signed(to_int64(value), 32)


def to_uint64(value: Any) -> int:
    """Convert to an unsigned 64-bit integer; a leading sign in text is dropped."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return _wrap_unsigned(value, 64)
    if isinstance(value, float):
        return _float_to_uint64(value)
    if isinstance(value, _BYTES_LIKE):
        return le_decode_to_uint64(value)
    number = _int_method(value)
    if number is not None:
        return _wrap_unsigned(number, 64)

    _, text = _split_sign(to_string(value))
    candidates = []
    if len(text) > 2 and text[0] == "0" and text[1] in "xX" and _UNSIGNED_HEX.fullmatch(text[2:]):
        candidates.append(int(text[2:], 16))
    if _UNSIGNED_DECIMAL.fullmatch(text):
        candidates.append(int(text))
    for parsed in candidates:
        if parsed <= _UINT64_MAX:
            return parsed

    fallback = to_float64(value)
    if math.isnan(fallback):
        return 0
    return _float_to_uint64(fallback)


def to_uint(value: Any) -> int:
    return _wrap_unsigned(to_int64(value), 64)


def to_uint8(value: Any) -> int:
    return _wrap_unsigned(to_int64(value), 8)


def to_uint16(value: Any) -> int:
    return _wrap_unsigned(to_int64(value), 16)


def to_uint32(value: Any) -> int:
    return _wrap_unsigned(to_int64(value), 32)


def to_bool(value: Any) -> bool:
    """Convert to a boolean; "", "0", "no", "off" and "false" are false."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, _BYTES_LIKE):
        return bytes(value).decode("utf-8", errors="replace").lower() not in _EMPTY_STRINGS
    if isinstance(value, str):
        return value.lower() not in _EMPTY_STRINGS
    if isinstance(value, (int, float)):
        return to_string(value).lower() not in _EMPTY_STRINGS
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return len(value) != 0
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    if getattr(type(value), "__bool__", None) is not None:
        return bool(value)
    return to_string(value).lower() not in _EMPTY_STRINGS


def to_bytes(value: Any) -> bytes:
    """Convert to bytes: text as UTF-8, maps as JSON, byte-range sequences as raw bytes."""
    if value is None:
        return b""
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, _BYTES_LIKE):
        return bytes(value)
    if getattr(type(value), "__bytes__", None) is not None:
        return bytes(value)
    if isinstance(value, (dict, AnyDict)):
        return _to_json(value).encode("utf-8")
    if isinstance(value, (list, tuple, AnyArray)):
        converted = [to_int32(item) for item in value]
        if all(0 <= number <= 0xFF for number in converted):
            return bytes(converted)
    return le_encode(value)


def to_datetime_unix_milli(value: Any) -> datetime:
    """Interpret the value as milliseconds since the epoch, in local time."""
    return (_EPOCH + timedelta(milliseconds=to_int64(value))).astimezone()


def _match_fields(cls: type, data: dict) -> dict:
    exact = {field.name for field in dataclasses.fields(cls) if field.init}
    folded = {name.lower(): name for name in exact}
    result = {}
    for key, item in data.items():
        name = key if key in exact else folded.get(str(key).lower())
        if name is not None:
            result[name] = item
    return result


def to_struct(value: Any, cls: type) -> Any:
    """Convert a value into ``cls`` through a JSON round trip.

    Raises ``TypeError`` or ``ValueError`` when the value cannot be
    serialised or does not fit the target type.
    """
    decoded = json.loads(_to_json(value))
    if dataclasses.is_dataclass(cls) and isinstance(cls, type):
        if not isinstance(decoded, dict):
            raise TypeError(f"cannot unmarshal JSON {type(decoded).__name__} into {cls.__name__}")
        return cls(**_match_fields(cls, decoded))
    if cls is float and isinstance(decoded, int) and not isinstance(decoded, bool):
        return float(decoded)
    if isinstance(decoded, cls) and not (isinstance(decoded, bool) and cls is not bool):
        return decoded
    raise TypeError(f"cannot unmarshal JSON {type(decoded).__name__} into {cls.__name__}")