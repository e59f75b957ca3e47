"""Utility toolkit: ordered collections, loose conversions, little-endian codecs, digests and zlib helpers."""

__version__ = "0.1.0"