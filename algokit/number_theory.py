"""Modular arithmetic and prime sieving."""

from __future__ import annotations

import math
from functools import reduce
from operator import xor
from typing import Iterable


def chinese_remainder(remainders: Iterable[int], moduli: Iterable[int]) -> int:
    """The unique x in [0, prod(moduli)) with x = r_i (mod m_i) for every i."""
    rs = list(remainders)
    ms = list(moduli)
    if len(rs) != len(ms):
        raise ValueError("remainders and moduli must have the same length")
    if any(m <= 0 for m in ms):
        raise ValueError("moduli must be positive")
    total = math.prod(ms)
    x = 0
    for r, m in zip(rs, ms):
        part = total // m
        try:
            inverse = pow(part, -1, m)
        except ValueError:
            raise ValueError("moduli must be pairwise coprime") from None
        x += r * part * inverse
    return x % total


def discrete_log(a: int, b: int, m: int) -> int | None:
    """Smallest x >= 0 with a**x = b (mod m), or None if there is none.

    Baby-step giant-step, with common factors of a and m divided out first.
    """
    if m <= 0:
        raise ValueError("modulus must be positive")
    if a == 0:
        return None if b else 1
    a %= m
    b %= m
    k, shift = 1, 0
    while True:
        g = math.gcd(a, m)
        if g == 1:
            break
        if b == k:
            return shift
        if b % g:
            return None
        b //= g
        m //= g
        shift += 1
        k = k * a // g % m

    sq = math.isqrt(m) + 1
    giant = pow(a, sq, m)

    baby: dict[int, int] = {}
    cur = b
    for i in range(sq + 1):
        baby[cur] = i
        cur = cur * a % m

    cur = k
    for j in range(1, sq + 1):
        cur = cur * giant % m
        i = baby.get(cur)
        if i is not None:
            return sq * j - i + shift
    return None


def linear_sieve(limit: int) -> tuple[list[int], list[int]]:
    """Smallest prime factor of every n below limit, and the primes below limit.

    Entries 0 and 1 of the factor list are 0.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    spf = [0] * limit
    primes: list[int] = []
    for i in range(2, limit):
        if spf[i] == 0:
            spf[i] = i
            primes.append(i)
        for p in primes:
            if p > spf[i] or i * p >= limit:
                break
            spf[i * p] = p
    return spf, primes


def xor_pyramid_top(values: Iterable[int]) -> int:
    """Top of the pyramid where each entry is the xor of the two below it."""
    row = list(values)
    last = len(row) - 1
    return reduce(xor, (v for i, v in enumerate(row) if last & i == i), 0)