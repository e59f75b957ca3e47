"""Hex digests: MD5, SHA-256 and SM3."""

from __future__ import annotations

import hashlib
import struct

_MASK = 0xFFFFFFFF

_SM3_IV = (
    0x7380166F, 0x4914B2B9, 0x172442D7, 0xDA8A0600,
    0xA96F30BC, 0x163138AA, 0xE38DEE4D, 0xB0FB0E4E,
)


def md5(data: bytes) -> str:
    """Return the MD5 digest of ``data`` as lower-case hex."""
    return hashlib.md5(bytes(data)).hexdigest()


def sha256(data: bytes) -> str:
    """Return the SHA-256 digest of ``data`` as lower-case hex."""
    return hashlib.sha256(bytes(data)).hexdigest()


def _rotl(x: int, n: int) -> int:
    n %= 32
    return ((x << n) | (x >> (32 - n))) & _MASK


def _p0(x: int) -> int:
    return x ^ _rotl(x, 9) ^ _rotl(x, 17)


def _p1(x: int) -> int:
    return x ^ _rotl(x, 15) ^ _rotl(x, 23)


def _sm3_compress(state: tuple, block: bytes) -> tuple:
    w = list(struct.unpack(">16I", block))
    for j in range(16, 68):
        w.append(
            _p1(w[j - 16] ^ w[j - 9] ^ _rotl(w[j - 3], 15))
            ^ _rotl(w[j - 13], 7)
            ^ w[j - 6]
        )
    w_prime = [a ^ b for a, b in zip(w[:64], w[4:68])]

    a, b, c, d, e, f, g, h = state
    for j in range(64):
        t = 0x79CC4519 if j < 16 else 0x7A879D8A
        a12 = _rotl(a, 12)
        ss1 = _rotl((a12 + e + _rotl(t, j)) & _MASK, 7)
        ss2 = ss1 ^ a12
        if j < 16:
            ff = a ^ b ^ c
            gg = e ^ f ^ g
        else:
            ff = (a & b) | (a & c) | (b & c)
            gg = (e & f) | (~e & _MASK & g)
        tt1 = (ff + d + ss2 + w_prime[j]) & _MASK
        tt2 = (gg + h + ss1 + w[j]) & _MASK
        d, c, b, a = c, _rotl(b, 9), a, tt1
        h, g, f, e = g, _rotl(f, 19), e, _p0(tt2)

    return tuple(x ^ y for x, y in zip((a, b, c, d, e, f, g, h), state))


def sm3(data: bytes) -> str:
    """Return the SM3 digest of ``data`` as lower-case hex."""
    message = bytes(data)
    bit_length = len(message) * 8
    padded = message + b"\x80" + b"\x00" * ((55 - len(message)) % 64)
    padded += struct.pack(">Q", bit_length)

    state = _SM3_IV
    for offset in range(0, len(padded), 64):
        state = _sm3_compress(state, padded[offset:offset + 64])
    return struct.pack(">8I", *state).hex()