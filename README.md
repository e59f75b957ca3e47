# novakit

A small toolkit of everyday helpers, using only the standard library:

- `novakit.anyarray`: `AnyArray`, a lock-protected list wrapper with chainable helpers (`filter`, `unique`, `chunk`, `pluck`, `join`, `join_without_empty`, `remove_empty`, `remove_by_index`, `remove_by_value`, JSON with `to_json` / `from_json` / `load_json`), plus `cast`, `to_any` and `is_zero`.
- `novakit.anydict`: `AnyDict`, an insertion-ordered dictionary that can be looked up by key, by value or by position, with `AnyOrderlyItem`, `cast` and `zip_dict`.
- `novakit.convert`: lenient conversion of arbitrary values: `to_int` … `to_int64`, `to_uint` … `to_uint64`, `to_float32`, `to_float64`, `to_string`, `to_bool`, `to_bytes`, `to_datetime_unix_milli`, `to_struct` and `float_format`.
- `novakit.le_encode`: little-endian encoding of integers, floats, booleans and strings (`le_encode`, `le_encode_by_length`, `le_encode_int16`, `le_encode_float64`, …).
- `novakit.le_decode`: the matching decoders (`le_decode`, `le_decode_to_int`, `le_decode_to_uint32`, `le_decode_to_bool`, `le_fill_up_size`, …).
- `novakit.digest`: `md5`, `sha256` and `sm3` lower-case hex digests.
- `novakit.compression`: zlib `compress` and `decompress`.

## Install

```
pip install .
```

## Examples

```python
from novakit.anyarray import AnyArray
from novakit.anydict import AnyDict

numbers = AnyArray([1, 2, 3, 1, 2, 3])
print(numbers.unique())                                  # [1 2 3]
print(AnyArray(["a", "", "c"]).join_without_empty(";"))  # a;c

scores = AnyDict().set("score", 18).set("age", 100)
print(scores.get_key_by_value(100))                      # age
print(scores.first_key(), scores.last_value())           # score 100
print(scores.to_json())                                  # {"age":100,"score":18}
```

```python
from novakit.convert import to_int, to_bool, to_string

to_int("0x1F")     # 31
to_bool("off")     # False
to_string(3.0)     # "3"
```

```python
from novakit.le_encode import le_encode, le_encode_by_length
from novakit.le_decode import le_decode

le_encode(1, "ab")                                    # b"\x01ab"
le_encode_by_length(4, 1)                             # b"\x01\x00\x00\x00"
le_decode(b"\x01\x00\x02\x00\x00\x00", "uint16", "int32")  # (1, 2)
```

```python
from novakit.digest import sha256, sm3
from novakit.compression import compress, decompress

print(sha256(b"abc"))
print(sm3(b"abc"))
assert decompress(compress(b"payload")) == b"payload"
```

## What it does not do

The package works on values in memory only. It has no filesystem layer (no file or directory objects, no copying of files between paths), no command-line tool and no storage of its own.

## Tests

```
pip install .[test]
pytest
```