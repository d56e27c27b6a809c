"""Dynamic-programming solutions: digit DPs, edit distance and line-container optimisations."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Sequence

from algokit.lichao import Line, LiChaoTree

MOD = 1_000_000_007


def _bounds(a: int, b: int) -> tuple[list[int], list[int]]:
    if a < 0 or a > b:
        raise ValueError("need 0 <= a <= b")
    high = [int(c) for c in str(b)]
    low = [int(c) for c in str(a).zfill(len(high))]
    return low, high


def digit_sum_in_range(a: int, b: int) -> int:
    """Sum of the digits of every integer in [a, b]."""
    low, high = _bounds(a, b)
    n = len(high)

    @lru_cache(maxsize=None)
    def go(idx: int, tight_low: bool, tight_high: bool) -> tuple[int, int]:
        if idx == n:
            return 0, 1
        total = count = 0
        first = low[idx] if tight_low else 0
        last = high[idx] if tight_high else 9
        for d in range(first, last + 1):
            s, q = go(idx + 1, tight_low and d == low[idx], tight_high and d == high[idx])
            total += d * q + s
            count += q
        return total, count

    return go(0, True, True)[0]


def magic_numbers(m: int, d: int, low: str, high: str) -> int:
    """Count numbers in [low, high] divisible by m whose digit d appears at every
    even position (1-based) and nowhere else, modulo 10**9 + 7.

    low and high are decimal strings of the same length.
    """
    if m < 1:
        raise ValueError("m must be positive")
    if not 0 <= d <= 9:
        raise ValueError("d must be a single digit")
    if not low or len(low) != len(high):
        raise ValueError("low and high must be non-empty and of equal length")
    if not (low.isdigit() and high.isdigit()):
        raise ValueError("low and high must be decimal digit strings")
    lo = [int(c) for c in low]
    hi = [int(c) for c in high]

    nxt = [[int(mod == 0)] * 8 for mod in range(m)]
    for idx in range(len(lo) - 1, -1, -1):
        cur = [[0] * 8 for _ in range(m)]
        for mod in range(m):
            for mask in range(8):
                tight_low = bool(mask & 4)
                tight_high = bool(mask & 2)
                zero = bool(mask & 1)
                if zero and mod:
                    continue
                if idx % 2:
                    if tight_high and d > hi[idx]:
                        continue
                    if tight_low and d < lo[idx]:
                        continue
                    digits = [d]
                else:
                    first = lo[idx] if tight_low else 0
                    last = hi[idx] if tight_high else 9
                    digits = [
                        i for i in range(first, last + 1)
                        if i != d or (d == 0 and zero)
                    ]
                total = 0
                for i in digits:
                    state = (
                        (tight_low and i == lo[idx]) * 4
                        + (tight_high and i == hi[idx]) * 2
                        + (zero and i == 0)
                    )
                    total += nxt[(mod * 10 + i) % m][state]
                cur[mod][mask] = total % MOD
        nxt = cur
    return nxt[0][7]


def edit_distance(a: str, b: str) -> int:
    """Fewest insertions, deletions and substitutions turning a into b."""
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                cur.append(prev[j - 1])
            else:
                cur.append(1 + min(prev[j], cur[j - 1], prev[j - 1]))
        prev = cur
    return prev[-1]


def max_digit_product(a: int, b: int) -> int:
    """The number in [a, b] whose digits have the largest product.

    Ties go to the smallest such number.
    """
    low, high = _bounds(a, b)
    n = len(high)

    def choices(idx: int, tight_low: bool, tight_high: bool) -> range:
        return range(low[idx] if tight_low else 0, (high[idx] if tight_high else 9) + 1)

    def step(idx: int, tl: bool, th: bool, zero: bool, dgt: int) -> tuple[bool, bool, bool]:
        return tl and dgt == low[idx], th and dgt == high[idx], zero and dgt == 0

    @lru_cache(maxsize=None)
    def best(idx: int, tl: bool, th: bool, zero: bool) -> int:
        if idx == n:
            return 1
        result = -1
        for dgt in choices(idx, tl, th):
            factor = 1 if zero and dgt == 0 else dgt
            result = max(result, factor * best(idx + 1, *step(idx, tl, th, zero, dgt)))
        return result

    number = 0
    tl, th, zero = True, True, True
    for idx in range(n):
        target = best(idx, tl, th, zero)
        for dgt in choices(idx, tl, th):
            factor = 1 if zero and dgt == 0 else dgt
            nstate = step(idx, tl, th, zero, dgt)
            if factor * best(idx + 1, *nstate) == target:
                break
        number = number * 10 + dgt
        tl, th, zero = nstate
    return number


def product_sum(values: Iterable[int]) -> int:
    """Largest sum of a_i * i (1-based) after moving at most one element to any position."""
    a = list(values)
    n = len(a)
    if not n:
        return 0
    prefix = [0]
    for v in a:
        prefix.append(prefix[-1] + v)
    base = sum(i * v for i, v in enumerate(a, start=1))
    best = base
    low, high = min(a), max(a)

    tree = LiChaoTree(low, high, maximize=True)
    for i in range(n, 0, -1):
        v = a[i - 1]
        if i < n:
            best = max(best, base - v * i + prefix[i] + tree.query(v))
        tree.add(Line(i, -prefix[i]))

    tree = LiChaoTree(low, high, maximize=True)
    for i in range(1, n + 1):
        v = a[i - 1]
        if i > 1:
            best = max(best, base - v * i + prefix[i - 1] + tree.query(v))
        tree.add(Line(i, -prefix[i - 1]))
    return best


def yakiniku(distances: Sequence[int], values: Sequence[Sequence[int]]) -> int:
    """Best score over the restaurant table.

    distances holds the n - 1 gaps between consecutive restaurants and
    values[i][q] the worth of ticket q at restaurant i; the score for the
    last ticket is maximised over starting restaurants.
    """
    n = len(values)
    if n == 0:
        raise ValueError("values must not be empty")
    m = len(values[0])
    if any(len(row) != m for row in values):
        raise ValueError("every row of values must have the same length")
    if len(distances) != n - 1:
        raise ValueError(f"expected {n - 1} distances, got {len(distances)}")
    position = [0]
    for gap in distances:
        position.append(position[-1] + gap)

    dp = [[0] * m for _ in range(n)]
    for q in range(m):
        for i in range(n):
            best = dp[i][q]
            for q2 in range(q):
                for j in range(i, n):
                    best = max(best, dp[j][q2] + values[j][q2] - (position[j] - position[i]))
            dp[i][q] = best
    if m == 0:
        return 0
    return max(0, max(row[m - 1] for row in dp))