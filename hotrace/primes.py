"""Integer square roots and prime search used to size the hash table."""

from __future__ import annotations

import math

__all__ = ["isqrt", "is_prime", "next_prime"]


def isqrt(x: int) -> int:
    """Return the largest integer whose square does not exceed ``x``."""
    if x < 0:
        raise ValueError("isqrt() is not defined for negative numbers")
    return math.isqrt(x)


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    limit = isqrt(n)
    return all(n % i and n % (i + 2) for i in range(5, limit + 1, 6))


def next_prime(n: int) -> int:
    """Return the first prime found by searching odd numbers upward from ``n``.

    Values of 1 or less give 2; an even ``n`` starts the search at ``n + 1``.
    """
    if n <= 1:
        return 2
    if n % 2 == 0:
        n += 1
    while not is_prime(n):
        n += 2
    return n