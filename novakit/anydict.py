"""A thread-safe, insertion-ordered dictionary with chainable helpers."""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Mapping, Optional, Tuple

from novakit.anyarray import AnyArray, _format_value, is_zero


@dataclass
class AnyOrderlyItem:
    """One key/value pair of an ordered dictionary."""

    key: Any
    value: Any


def _json_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, int) and not isinstance(key, bool):
        return str(key)
    raise TypeError(f"unsupported JSON object key type: {type(key).__name__}")


class AnyDict:
    """An ordered mapping addressable by key, by value and by position."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, mapping: Optional[Mapping[Hashable, Any]] = None) -> None:
        self._data: dict = {}
        self._lock = threading.RLock()
        if mapping is not None:
            for key, value in mapping.items():
                self.set(key, value)

    def _replace(self, items: Iterable[Tuple[Any, Any]]) -> "AnyDict":
        new_data: dict = {}
        for key, value in items:
            new_data[key] = value
        self._data = new_data
        return self

    def _key_list(self) -> list:
        return list(self._data.keys())

    def _value_list(self) -> list:
        return list(self._data.values())

    def set(self, key: Hashable, value: Any) -> "AnyDict":
        """Store a value; a new key goes to the end, an existing one keeps its place."""
        with self._lock:
            self._data[key] = value
            return self

    def get(self, key: Hashable) -> Tuple[Any, bool]:
        """Return ``(value, found)``; the value is ``None`` when the key is absent."""
        with self._lock:
            if key in self._data:
                return self._data[key], True
            return None, False

    def get_key_by_index(self, index: int) -> Any:
        with self._lock:
            keys = self._key_list()
            if not 0 <= index < len(keys):
                raise IndexError(f"index {index} out of range [0:{len(keys)}]")
            return keys[index]

    def get_keys_by_indexes(self, *args: int) -> AnyArray:
        with self._lock:
            return AnyArray(self.get_key_by_index(i) for i in args)

    def get_key_by_value(self, value: Any) -> Any:
        """Return the first key holding ``value``, or ``None``."""
        with self._lock:
            return next((k for k, v in self._data.items() if v == value), None)

    def get_keys_by_values(self, *args: Any) -> AnyArray:
        with self._lock:
            return AnyArray(self.get_key_by_value(v) for v in args)

    def get_value_by_index(self, index: int) -> Any:
        with self._lock:
            values = self._value_list()
            if not 0 <= index < len(values):
                raise IndexError(f"index {index} out of range [0:{len(values)}]")
            return values[index]

    def get_values_by_indexes(self, *args: int) -> AnyArray:
        with self._lock:
            return AnyArray(self.get_value_by_index(i) for i in args)

    def get_value_by_key(self, key: Hashable) -> Any:
        """Return the value of ``key``, or ``None`` when it is absent."""
        with self._lock:
            return self._data.get(key)

    def get_values_by_keys(self, *args: Hashable) -> AnyArray:
        with self._lock:
            return AnyArray(self._data.get(k) for k in args)

    def get_index_by_key(self, key: Hashable) -> int:
        with self._lock:
            return next((i for i, k in enumerate(self._data) if k == key), -1)

    def get_indexes_by_keys(self, *args: Hashable) -> AnyArray:
        with self._lock:
            keys = self._key_list()
            return AnyArray(i for key in args for i, k in enumerate(keys) if k == key)

    def get_index_by_value(self, value: Any) -> int:
        with self._lock:
            return next((i for i, v in enumerate(self._data.values()) if v == value), -1)

    def get_indexes_by_values(self, *args: Any) -> AnyArray:
        """Return every position of every given value, value by value."""
        with self._lock:
            values = self._value_list()
            return AnyArray(i for value in args for i, v in enumerate(values) if v == value)

    def has_key(self, key: Hashable) -> bool:
        return self.get_index_by_key(key) > -1

    def has_keys(self, *args: Hashable) -> bool:
        return len(self.get_indexes_by_keys(*args)) == len(args)

    def has_value(self, value: Any) -> bool:
        return self.get_index_by_value(value) > -1

    def has_values(self, *args: Any) -> bool:
        return len(self.get_indexes_by_values(*args)) == len(args)

    def has_index(self, index: int) -> bool:
        with self._lock:
            return 0 <= index < len(self._data)

    def has_indexes(self, *args: int) -> bool:
        with self._lock:
            return all(self.has_index(i) for i in args)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnyDict):
            return NotImplemented
        return list(self.to_dict().items()) == list(other.to_dict().items())

    def len_without_empty(self) -> int:
        return len(self.copy().remove_empty())

    def is_empty(self) -> bool:
        return len(self) == 0

    def copy(self) -> "AnyDict":
        with self._lock:
            return AnyDict(self._data)

    def to_orderly_items(self) -> list:
        with self._lock:
            return [AnyOrderlyItem(k, v) for k, v in self._data.items()]

    def to_dict(self) -> dict:
        with self._lock:
            return dict(self._data)

    def __str__(self) -> str:
        return _format_value(self.to_dict())

    def __repr__(self) -> str:
        return f"AnyDict({self.to_dict()!r})"

    def keys(self) -> AnyArray:
        with self._lock:
            return AnyArray(self._key_list())

    def values(self) -> AnyArray:
        with self._lock:
            return AnyArray(self._value_list())

    def indexes(self) -> AnyArray:
        with self._lock:
            return AnyArray(range(len(self._data)))

    def first_key(self) -> Any:
        return self.get_key_by_index(0)

    def first_value(self) -> Any:
        return self.get_value_by_index(0)

    def last_key(self) -> Any:
        with self._lock:
            return self.get_key_by_index(len(self._data) - 1)

    def last_value(self) -> Any:
        with self._lock:
            return self.get_value_by_index(len(self._data) - 1)

    def filter(self, fn: Callable[[Any, Any], bool]) -> "AnyDict":
        """Keep only the pairs for which ``fn(key, value)`` is true."""
        with self._lock:
            return self._replace((k, v) for k, v in list(self._data.items()) if fn(k, v))

    def remove_by_key(self, key: Hashable) -> "AnyDict":
        with self._lock:
            return self._replace((k, v) for k, v in list(self._data.items()) if k != key)

    def remove_by_value(self, value: Any) -> "AnyDict":
        """Remove every pair whose value equals ``value``."""
        with self._lock:
            return self._replace((k, v) for k, v in list(self._data.items()) if v != value)

    def remove_empty(self) -> "AnyDict":
        """Remove every pair whose value is empty."""
        with self._lock:
            return self._replace((k, v) for k, v in list(self._data.items()) if not is_zero(v))

    def join(self, sep: str = " ") -> str:
        with self._lock:
            return sep.join(_format_value(v) for v in self._data.values())

    def join_without_empty(self, sep: str = " ") -> str:
        return self.copy().remove_empty().join(sep)

    def in_keys(self, *args: Hashable) -> bool:
        return self.has_keys(*args)

    def not_in_keys(self, *args: Hashable) -> bool:
        return not self.in_keys(*args)

    def in_values(self, *args: Any) -> bool:
        return self.has_values(*args)

    def not_in_values(self, *args: Any) -> bool:
        return not self.in_values(*args)

    def every(self, fn: Callable[[Any, Any], Tuple[Any, Any]]) -> "AnyDict":
        """Replace each pair with the ``(key, value)`` that ``fn`` returns."""
        with self._lock:
            return self._replace(fn(k, v) for k, v in list(self._data.items()))

    def each(self, fn: Callable[[Any, Any], None]) -> "AnyDict":
        with self._lock:
            for key, value in list(self._data.items()):
                fn(key, value)
            return self

    def clean(self) -> "AnyDict":
        with self._lock:
            self._data = {}
            return self

    def to_json(self) -> str:
        """Serialise as a JSON object with keys in sorted order."""
        with self._lock:
            pairs = sorted((_json_key(k), v) for k, v in self._data.items())
        body = ",".join(
            json.dumps(k, ensure_ascii=False) + ":"
            + json.dumps(v, separators=(",", ":"), ensure_ascii=False)
            for k, v in pairs
        )
        return "{" + body + "}"

    @classmethod
    def from_json(cls, text: "str | bytes") -> "AnyDict":
        return cls().load_json(text)

    def load_json(self, text: "str | bytes") -> "AnyDict":
        """Merge the pairs of a JSON object into this dictionary."""
        decoded = json.loads(text)
        if decoded is None:
            return self
        if not isinstance(decoded, dict):
            raise ValueError(f"cannot load JSON {type(decoded).__name__} into a dictionary")
        with self._lock:
            for key, value in decoded.items():
                self._data[key] = value
            return self


def cast(src: AnyDict, fn: Callable[[Any, Any], Any]) -> AnyDict:
    """Return a new dictionary whose values are ``fn(key, value)``."""
    result = AnyDict()
    for item in src.to_orderly_items():
        result.set(item.key, fn(item.key, item.value))
    return result


def zip_dict(keys: Iterable[Hashable], values: Iterable[Any]) -> AnyDict:
    """Pair keys with values in order; there must be a value for every key."""
    key_list = list(keys)
    value_list = list(values)
    if len(value_list) < len(key_list):
        raise ValueError(f"{len(key_list)} keys but only {len(value_list)} values")
    result = AnyDict()
    for key, value in zip(key_list, value_list):
        result.set(key, value)
    return result