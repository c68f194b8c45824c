"""Hash functions for the open-addressing tables."""

import struct

from .prime import PRIME_A, PRIME_B

_MASK = (1 << 64) - 1


def _to_bits(value) -> int:
    if value is None:
        return 0
    if isinstance(value, float):
        return struct.unpack("<q", struct.pack("<d", value))[0]
    return int(value)


def _hash_bytes(data: bytes, a: int, m: int) -> int:
    h = 0
    for byte in data:
        ch = byte - 256 if byte >= 128 else byte  # characters are signed
        h = (((h * a) & _MASK) ^ (ch & _MASK)) % m
    return h


def hash_function(value, a: int, m: int) -> int:
    """Hash ``value`` with multiplier ``a`` into the range ``[0, m)``."""
    if m <= 0:
        raise ValueError("bucket count must be positive")
    if isinstance(value, str):
        return _hash_bytes(value.encode("utf-8"), a, m)
    if isinstance(value, (bytes, bytearray)):
        return _hash_bytes(bytes(value), a, m)

    bits = _to_bits(value)
    ll = bits & 0xFFFF
    lu = (bits & 0xFFFF0000) >> 16
    ul = (bits & 0xFFFF00000000) >> 32
    uu = (bits & 0xFFFF000000000000) >> 48
    mixed = (
        ((a * ll * ll * ll * ll) & _MASK)
        ^ ((a * a * lu * lu * lu) & _MASK)
        ^ ((a * a * a * ul * ul) & _MASK)
        ^ ((a * a * a * a * uu) & _MASK)
    )
    return mixed % m


def get_hash(value, num_buckets: int, attempt: int) -> int:
    """Return the bucket to probe on the given attempt (double hashing)."""
    hash_a = hash_function(value, PRIME_A, num_buckets)
    if attempt == 0:
        return hash_a % num_buckets
    hash_b = hash_function(value, PRIME_B, num_buckets)
    step = hash_b + (hash_b == 0)
    return ((hash_a + attempt * step) & _MASK) % num_buckets