"""Zlib compression helpers."""

from __future__ import annotations

import zlib


def compress(data: bytes) -> bytes:
    """Compress ``data`` into a zlib stream at the default level."""
    return zlib.compress(bytes(data))


def decompress(data: bytes) -> bytes:
    """Decompress a zlib stream; raises ``zlib.error`` on bad or truncated input."""
    decompressor = zlib.decompressobj()
    result = decompressor.decompress(bytes(data))
    result += decompressor.flush()
    if not decompressor.eof:
        raise zlib.error("incomplete or truncated zlib stream")
    return result