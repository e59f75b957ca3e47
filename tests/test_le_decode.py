import math

import pytest

from novakit.le_decode import (
    le_decode,
    le_decode_to_bool,
    le_decode_to_float32,
    le_decode_to_float64,
    le_decode_to_int,
    le_decode_to_int8,
    le_decode_to_int16,
    le_decode_to_int32,
    le_decode_to_int64,
    le_decode_to_string,
    le_decode_to_uint,
    le_decode_to_uint8,
    le_decode_to_uint16,
    le_decode_to_uint32,
    le_decode_to_uint64,
    le_fill_up_size,
)
from novakit.le_encode import (
    le_encode_bool,
    le_encode_float32,
    le_encode_float64,
    le_encode_int,
    le_encode_int8,
    le_encode_int16,
    le_encode_int32,
    le_encode_int64,
    le_encode_string,
    le_encode_uint,
    le_encode_uint16,
    le_encode_uint32,
    le_encode_uint64,
)


def test_fill_up_size_pads_with_zeros():
    assert le_fill_up_size(b"\x01", 4) == b"\x01\x00\x00\x00"


def test_fill_up_size_cuts_long_input():
    data = b"abcdef"
    assert le_fill_up_size(data, 3) == data[:3]
    assert le_fill_up_size(data, len(data)) == data


def test_string_round_trip():
    text = "héllo 世界"
    assert le_decode_to_string(le_encode_string(text)) == text


def test_bool_decoding():
    assert le_decode_to_bool(b"") is False
    assert le_decode_to_bool(bytes(4)) is False
    assert le_decode_to_bool(le_encode_bool(True)) is True
    assert le_decode_to_bool(le_encode_bool(False)) is False


@pytest.mark.parametrize("value", [-128, -1, 0, 1, 127])
def test_int8_round_trip(value):
    assert le_decode_to_int8(le_encode_int8(value)) == value


def test_int8_and_uint8_reject_empty():
    with pytest.raises(ValueError):
        le_decode_to_int8(b"")
    with pytest.raises(ValueError):
        le_decode_to_uint8(b"")


def test_uint8_reads_first_byte():
    assert le_decode_to_uint8(bytes([200, 7])) == 200


@pytest.mark.parametrize("value", [-32768, -2, 0, 300, 32767])
def test_int16_round_trip(value):
    assert le_decode_to_int16(le_encode_int16(value)) == value


@pytest.mark.parametrize("value", [0, 513, 65535])
def test_uint16_round_trip(value):
    assert le_decode_to_uint16(le_encode_uint16(value)) == value


@pytest.mark.parametrize("value", [-(2**31), -5, 0, 70000, 2**31 - 1])
def test_int32_round_trip(value):
    assert le_decode_to_int32(le_encode_int32(value)) == value


@pytest.mark.parametrize("value", [0, 70000, 2**32 - 1])
def test_uint32_round_trip(value):
    assert le_decode_to_uint32(le_encode_uint32(value)) == value


@pytest.mark.parametrize("value", [-(2**63), -9, 0, 2**40, 2**63 - 1])
def test_int64_round_trip(value):
    assert le_decode_to_int64(le_encode_int64(value)) == value


@pytest.mark.parametrize("value", [0, 2**40, 2**64 - 1])
def test_uint64_round_trip(value):
    assert le_decode_to_uint64(le_encode_uint64(value)) == value


def test_short_input_is_zero_padded():
    assert le_decode_to_uint32(le_encode_uint16(513)) == 513
    assert le_decode_to_int64(b"") == 0


def test_float_round_trips():
    assert le_decode_to_float64(le_encode_float64(3.14159)) == 3.14159
    assert le_decode_to_float32(le_encode_float32(1.5)) == 1.5
    assert math.isinf(le_decode_to_float32(le_encode_float32(1e40)))


@pytest.mark.parametrize("value", [1, 200, 300, 70000, 2**40])
def test_uint_round_trip_over_widths(value):
    assert le_decode_to_uint(le_encode_uint(value)) == value


@pytest.mark.parametrize("value", [5, 300, 70000, 2**40])
def test_int_round_trip_over_widths(value):
    assert le_decode_to_int(le_encode_int(value)) == value


def test_int_reads_narrow_widths_unsigned():
    assert le_decode_to_int(le_encode_int(-1)) == 255


def test_int_reads_wide_values_signed():
    assert le_decode_to_int(le_encode_int64(-7)) == -7


def test_int_rejects_empty():
    with pytest.raises(ValueError):
        le_decode_to_int(b"")
    with pytest.raises(ValueError):
        le_decode_to_uint(b"")


def test_decode_sequence_of_types():
    data = le_encode_int32(7) + le_encode_float64(1.5) + le_encode_bool(True) + le_encode_int8(-3)
    assert le_decode(data, "int32", "float64", "bool", "int8") == (7, 1.5, True, -3)


def test_decode_with_no_types_returns_empty():
    assert le_decode(b"abc") == ()


def test_decode_raises_when_data_runs_out():
    with pytest.raises(ValueError):
        le_decode(le_encode_int16(1), "int32")


def test_decode_rejects_unknown_type():
    with pytest.raises(ValueError):
        le_decode(bytes(8), "complex128")