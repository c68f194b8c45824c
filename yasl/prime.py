"""Primality helpers used for sizing hash tables."""

import math

PRIME_A = 37
PRIME_B = 67

PRIMES_UNDER_200 = (
    2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71,
    73, 79, 83, 89, 97, 101, 103, 107, 109, 113, 127, 131, 137, 139, 149, 151,
    157, 163, 167, 173, 179, 181, 191, 193, 197, 199,
)


def is_prime(x: int) -> bool:
    """Return whether ``x`` is prime."""
    if x < 2:
        return False
    if x < 4:
        return True
    for p in PRIMES_UNDER_200:
        if x % p == 0:
            return x == p
    return all(x % i for i in range(201, math.isqrt(x) + 1, 2))


def next_prime(x: int) -> int:
    """Return the smallest prime that is at least ``x``."""
    while not is_prime(x):
        x += 1
    return x