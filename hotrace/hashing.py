"""The two hash functions used for double hashing."""

from __future__ import annotations

__all__ = ["hash1", "hash2"]

_MASK64 = (1 << 64) - 1
_FNV_OFFSET = 0x811C9DC5
_FNV_PRIME = 0x01000193


def _as_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def hash1(data: bytes | bytearray | memoryview | str) -> int:
    """FNV-1a style hash computed in 64-bit unsigned arithmetic."""
    h = _FNV_OFFSET
    for byte in _as_bytes(data):
        h ^= byte
        h = (h * _FNV_PRIME) & _MASK64
    return h


def hash2(data: bytes | bytearray | memoryview | str, prime: int) -> int:
    """One-at-a-time hash reduced modulo ``prime`` and forced odd.

    The result is used as the probe step, so it is never zero.
    """
    if prime <= 0:
        raise ValueError("prime must be a positive integer")
    h = 0
    for byte in _as_bytes(data):
        h = (h + byte) & _MASK64
        h = (h + (h << 10)) & _MASK64
        h ^= h >> 6
    h = (h + (h << 3)) & _MASK64
    h ^= h >> 11
    h = (h + (h << 15)) & _MASK64
    return (h % prime) | 1