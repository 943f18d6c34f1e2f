"""Combining the hashes of several values into a single 64-bit hash."""

from __future__ import annotations

import struct
from typing import Any

_MASK = (1 << 64) - 1
_GOLDEN = 0x9E3779B9
_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3


def _fnv1a(data: bytes) -> int:
    result = _FNV_OFFSET
    for byte in data:
        result = ((result ^ byte) * _FNV_PRIME) & _MASK
    return result


def update_seed(seed: int, value: int) -> int:
    """Mix ``value`` into ``seed`` using 64-bit wrapping arithmetic."""
    seed &= _MASK
    value &= _MASK
    mixed = (value + _GOLDEN + ((seed << 6) & _MASK) + (seed >> 2)) & _MASK
    return seed ^ mixed


def hash_value(value: Any) -> int:
    """Return a deterministic 64-bit hash of a single value.

    Integers hash to themselves (wrapped to 64 bits), ``None`` to zero,
    and tuples and lists to the combined hash of their elements.
    """
    if value is None:
        return 0
    if isinstance(value, int):
        return value & _MASK
    if isinstance(value, float):
        if value == 0.0:
            return 0
        return _fnv1a(struct.pack("<d", value))
    if isinstance(value, str):
        return _fnv1a(value.encode("utf-8", "surrogatepass"))
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _fnv1a(bytes(value))
    if isinstance(value, (tuple, list)):
        return hash_multi(*value)
    return hash(value) & _MASK


def hash_multi(*args: Any) -> int:
    """Combine the hashes of all arguments, in order; zero when empty."""
    if not args:
        return 0
    first, *rest = args
    seed = hash_value(first)
    for item in rest:
        seed = update_seed(seed, hash_value(item))
    return seed