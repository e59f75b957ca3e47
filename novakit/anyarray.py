"""A thread-safe list wrapper with chainable helpers."""

from __future__ import annotations

import json
import random
import re
import threading
from dataclasses import fields, is_dataclass
from decimal import Decimal
from typing import Any, Callable, Iterable, Iterator, Optional


def _format_float(value: float) -> str:
    """Format a float the way a ``%v`` verb renders it."""
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "+Inf" if value > 0 else "-Inf"
    dec = Decimal(repr(value)).normalize()
    if dec.is_zero():
        return "-0" if str(value).startswith("-") else "0"
    exponent = dec.adjusted()
    if exponent < -4 or exponent >= 21:
        sign, digits, _ = dec.as_tuple()
        mantissa = str(digits[0])
        if len(digits) > 1:
            mantissa += "." + "".join(str(d) for d in digits[1:])
        exp_sign = "-" if exponent < 0 else "+"
        return f"{'-' if sign else ''}{mantissa}e{exp_sign}{abs(exponent):02d}"
    return format(dec, "f")


def _format_value(value: Any) -> str:
    """Render a value in the default value format used for joins and output."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return "[" + " ".join(str(b) for b in value) + "]"
    if isinstance(value, AnyArray):
        return str(value)
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_value(v) for v in value) + "]"
    if isinstance(value, dict):
        items = list(value.items())
        try:
            items.sort(key=lambda kv: kv[0])
        except TypeError:
            pass
        body = " ".join(f"{_format_value(k)}:{_format_value(v)}" for k, v in items)
        return f"map[{body}]"
    if is_dataclass(value) and not isinstance(value, type):
        return "{" + " ".join(_format_value(getattr(value, f.name)) for f in fields(value)) + "}"
    return str(value)


def is_zero(value: Any) -> bool:
    """Tell whether a value is the empty value of its kind."""
    if value is None:
        return True
    if isinstance(value, (bool, int, float, complex)):
        return value == 0
    if isinstance(value, (str, bytes, bytearray, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    if isinstance(value, AnyArray):
        return len(value) == 0
    if is_dataclass(value) and not isinstance(value, type):
        return all(is_zero(getattr(value, f.name)) for f in fields(value))
    return False


class AnyArray:
    """An ordered, lock-protected sequence with chainable operations."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, data: Optional[Iterable[Any]] = None) -> None:
        self._data: list = list(data) if data is not None else []
        self._lock = threading.RLock()

    @classmethod
    def of(cls, *args: Any) -> "AnyArray":
        """Build an array from positional values."""
        return cls(args)

    @classmethod
    def make(cls, size: int) -> "AnyArray":
        """Build an array of ``size`` empty slots."""
        return cls([None] * size)

    def _check_index(self, index: int) -> None:
        if not self.has(index):
            raise IndexError(f"index {index} out of range [0:{len(self._data)}]")

    def is_empty(self) -> bool:
        with self._lock:
            return not self._data

    def is_not_empty(self) -> bool:
        return not self.is_empty()

    def has(self, index: int) -> bool:
        with self._lock:
            return 0 <= index < len(self._data)

    def set(self, index: int, value: Any) -> "AnyArray":
        with self._lock:
            self._check_index(index)
            self._data[index] = value
            return self

    def get(self, index: int) -> Any:
        with self._lock:
            self._check_index(index)
            return self._data[index]

    def get_by_indexes(self, *args: int) -> "AnyArray":
        with self._lock:
            return AnyArray(self.get(i) for i in args)

    def append(self, *args: Any) -> "AnyArray":
        with self._lock:
            self._data.extend(args)
            return self

    def first(self) -> Any:
        with self._lock:
            if not self._data:
                raise IndexError("first of empty array")
            return self._data[0]

    def last(self) -> Any:
        with self._lock:
            return self._data[-1] if self._data else None

    def to_list(self) -> list:
        with self._lock:
            return list(self._data)

    def get_indexes(self) -> list:
        with self._lock:
            return list(range(len(self._data)))

    def index_of(self, value: Any) -> int:
        with self._lock:
            return next((i for i, v in enumerate(self._data) if v == value), -1)

    def indexes_of(self, *args: Any) -> "AnyArray":
        with self._lock:
            return AnyArray(
                i for value in args for i, v in enumerate(self._data) if v == value
            )

    def copy(self) -> "AnyArray":
        return AnyArray(self.to_list())

    def shuffle(self) -> "AnyArray":
        with self._lock:
            random.shuffle(self._data)
            return self

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_list())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnyArray):
            return NotImplemented
        return self.to_list() == other.to_list()

    def len_without_empty(self) -> int:
        return len(self.remove_empty())

    def filter(self, fn: Callable[[Any], bool]) -> "AnyArray":
        with self._lock:
            self._data = [v for v in self._data if fn(v)]
            return self

    def remove_empty(self) -> "AnyArray":
        """Return a new array without empty values; this one is left as is."""
        with self._lock:
            return AnyArray(v for v in self._data if not is_zero(v))

    def join(self, sep: str) -> str:
        with self._lock:
            return sep.join(_format_value(v) for v in self._data)

    def join_without_empty(self, sep: str = " ") -> str:
        return self.remove_empty().join(sep)

    def __contains__(self, target: Any) -> bool:
        with self._lock:
            return any(v == target for v in self._data)

    def contains(self, target: Any) -> bool:
        return target in self

    def not_in(self, target: Any) -> bool:
        return target not in self

    def all_empty(self) -> bool:
        return len(self.remove_empty()) == 0

    def any_empty(self) -> bool:
        with self._lock:
            return len(self.remove_empty()) != len(self._data)

    def chunk(self, size: int) -> list:
        if size <= 0:
            raise ValueError("chunk size must be positive")
        with self._lock:
            return [self._data[i:i + size] for i in range(0, len(self._data), size)]

    def pluck(self, fn: Callable[[Any], Any]) -> "AnyArray":
        with self._lock:
            return AnyArray(fn(v) for v in self._data)

    def unique(self) -> "AnyArray":
        """Drop values whose text form was already seen, keeping first ones."""
        with self._lock:
            seen: set = set()
            result = []
            for value in self._data:
                key = _format_value(value)
                if key not in seen:
                    seen.add(key)
                    result.append(value)
            self._data = result
            return self

    def remove_by_index(self, index: int) -> "AnyArray":
        with self._lock:
            if 0 <= index < len(self._data):
                del self._data[index]
            return self

    def remove_by_indexes(self, *args: int) -> "AnyArray":
        """Remove indexes one after another; later indexes see the shifted array."""
        with self._lock:
            for index in args:
                self.remove_by_index(index)
            return self

    def remove_by_value(self, target: Any) -> "AnyArray":
        with self._lock:
            self._data = [v for v in self._data if v != target]
            return self

    def remove_by_values(self, *args: Any) -> "AnyArray":
        with self._lock:
            for target in args:
                self.remove_by_value(target)
            return self

    def every(self, fn: Callable[[Any], Any]) -> "AnyArray":
        with self._lock:
            self._data = [fn(v) for v in self._data]
            return self

    def each(self, fn: Callable[[int, Any], None]) -> "AnyArray":
        with self._lock:
            for idx, value in enumerate(self._data):
                fn(idx, value)
            return self

    def clean(self) -> "AnyArray":
        with self._lock:
            self._data = []
            return self

    def to_json(self) -> str:
        with self._lock:
            return json.dumps(self._data, separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: "str | bytes") -> "AnyArray":
        return cls().load_json(text)

    def load_json(self, text: "str | bytes") -> "AnyArray":
        """Replace the contents with a JSON array."""
        decoded = json.loads(text)
        if decoded is None:
            decoded = []
        if not isinstance(decoded, list):
            raise ValueError(f"cannot load JSON {type(decoded).__name__} into an array")
        with self._lock:
            self._data = decoded
            return self

    def __str__(self) -> str:
        with self._lock:
            return "[" + " ".join(_format_value(v) for v in self._data) + "]"

    def __repr__(self) -> str:
        return f"AnyArray({self.to_list()!r})"

    def to_string(self, fmt: str = "%v") -> str:
        """Render the array through a format holding ``%v`` or ``%s``."""
        text = str(self)
        return re.sub(r"%[%vs]", lambda m: "%" if m.group() == "%%" else text, fmt)


def cast(array: Optional[AnyArray], fn: Callable[[Any], Any]) -> Optional[AnyArray]:
    """Return a new array with ``fn`` applied to every value."""
    if array is None:
        return None
    return AnyArray(fn(v) for v in array.to_list())


def to_any(value: Any) -> Optional[list]:
    """Turn a sequence into a plain list; anything else yields ``None``."""
    if isinstance(value, AnyArray):
        return value.to_list()
    if isinstance(value, (list, tuple, bytes, bytearray)):
        return list(value)
    return None