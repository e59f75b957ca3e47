import zlib

import pytest

from novakit.compression import compress, decompress


@pytest.mark.parametrize(
    "payload", [b"", b"a", b"hello world", bytes(range(256)) * 4, "数据".encode()]
)
def test_round_trip(payload):
    assert decompress(compress(payload)) == payload


def test_zlib_header():
    assert compress(b"hello")[0] == 0x78


def test_repetitive_data_shrinks():
    payload = b"abc" * 1000
    assert len(compress(payload)) < len(payload)


def test_accepts_bytes_like():
    assert decompress(bytearray(compress(memoryview(b"xyz")))) == b"xyz"


def test_invalid_data_raises():
    with pytest.raises(zlib.error):
        decompress(b"not a zlib stream")


def test_truncated_data_raises():
    stream = compress(b"some data that will be cut short" * 10)
    with pytest.raises(zlib.error):
        decompress(stream[: len(stream) // 2])