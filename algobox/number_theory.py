"""Prime sieving, bit counting and base-three checks."""

from __future__ import annotations

from itertools import pairwise
from math import isqrt


def primes_in_range(left: int, right: int) -> list[int]:
    """Primes ``p`` with ``left <= p <= right``, found with a sieve of Eratosthenes."""
    if right < 2:
        return []
    sieve = bytearray([1]) * (right + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, isqrt(right) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, right + 1, i)))
    return [i for i in range(max(2, left), right + 1) if sieve[i]]


def closest_primes(left: int, right: int) -> list[int]:
    """The first pair of consecutive primes in range with the smallest gap; ``[-1, -1]`` if none."""
    primes = primes_in_range(left, right)
    if len(primes) < 2:
        return [-1, -1]
    low, high = min(pairwise(primes), key=lambda pair: pair[1] - pair[0])
    return [low, high]


def count_bits(n: int) -> list[int]:
    """Number of set bits of every integer from 0 to ``n``.

    Raises ValueError for negative ``n``.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    bits = [0]
    offset = 1
    for i in range(1, n + 1):
        if offset * 2 == i:
            offset = i
        bits.append(bits[i - offset] + 1)
    return bits


def check_powers_of_three(n: int) -> bool:
    """True when ``n`` is a sum of distinct powers of three."""
    while n > 0:
        n, digit = divmod(n, 3)
        if digit == 2:
            return False
    return True