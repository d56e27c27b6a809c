"""Solutions to assorted contest problems, plus a random test-case generator."""

from __future__ import annotations

import random
from bisect import bisect_right
from collections import deque
from functools import cache
from typing import Iterable, Iterator, Sequence

from algokit.graphs import bfs, topological_sort
from algokit.segment_tree import SparseTable

_PRODUCT_LIMIT = 10**18
_MAX_DIGITS = 18


def _smallest_with_product(num: int) -> int:
    """Smallest number whose digits multiply to num, or 0 if it needs over 18 digits.

    Products of 1 also map to 0.
    """
    digits: list[int] = []
    for d in range(9, 1, -1):
        while num % d == 0 and len(digits) <= _MAX_DIGITS:
            digits.append(d)
            num //= d
    if len(digits) > _MAX_DIGITS or not digits:
        return 0
    return int("".join(map(str, reversed(digits))))


def _powers(base: int, count: int, limit: int) -> Iterator[int]:
    value = 1
    for _ in range(count):
        if value > limit:
            return
        yield value
        value *= base


@cache
def _digit_product_keys() -> tuple[int, ...]:
    keys = {10}
    limit = _PRODUCT_LIMIT
    for d in _powers(2, 3 * _MAX_DIGITS + 1, limit):
        for c in _powers(3, 2 * _MAX_DIGITS + 1, limit // d):
            for b in _powers(5, _MAX_DIGITS + 1, limit // (c * d)):
                for a in _powers(7, _MAX_DIGITS + 1, limit // (b * c * d)):
                    keys.add(_smallest_with_product(a * b * c * d))
    return tuple(sorted(keys))


def count_digit_products(n: int) -> int:
    """How many distinct products of digits occur among the numbers 1..n."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return bisect_right(_digit_product_keys(), n)


def slime_eating(values: Sequence[int], queries: Iterable[int]) -> list[int]:
    """For each starting size x, how many slimes are eaten from the right end.

    A slime of size v is eaten while v <= x, after which x becomes x xor v.
    """
    a = list(values)
    if any(v < 1 for v in a):
        raise ValueError("slime sizes must be positive")
    n = len(a)
    suffix = [0] * (n + 1)
    for i in range(n - 1, -1, -1):
        suffix[i] = suffix[i + 1] ^ a[i]
    msb = [v.bit_length() - 1 for v in a]
    table = SparseTable(msb) if a else None

    answers: list[int] = []
    for y in queries:
        if y < 0:
            raise ValueError("starting sizes must not be negative")
        x = y
        idx = n
        while idx > 0 and a[idx - 1] <= x:
            bit = x.bit_length() - 1
            if msb[idx - 1] == bit:
                idx -= 1
                x = y ^ suffix[idx]
                continue
            # Every slime down to the nearest one with a top bit >= bit is eaten.
            lo, hi, found = 0, idx - 2, -1
            while lo <= hi:
                mid = (lo + hi) // 2
                if table.query(mid, idx - 2) >= bit:
                    found = mid
                    lo = mid + 1
                else:
                    hi = mid - 1
            idx = found + 1
            x = y ^ suffix[idx]
        answers.append(n - idx)
    return answers


def slabstone_area(rectangles: Sequence[tuple[int, int, int, int]], gap: int) -> int:
    """Area freed by pushing the slabs left, keeping gap between slabs that share rows.

    Each rectangle is (x1, y1, x2, y2). The result is the bounding height
    times the shrink in total width, or 0 when the packing does not shrink it.
    """
    rects = list(rectangles)
    if not rects:
        raise ValueError("at least one rectangle is needed")
    if gap < 0:
        raise ValueError("gap must not be negative")
    for x1, y1, x2, y2 in rects:
        if x2 < x1 or y2 < y1:
            raise ValueError(f"rectangle {(x1, y1, x2, y2)} has its corners swapped")
    n = len(rects)
    width = [x2 - x1 for x1, _, x2, _ in rects]
    reach = list(width)
    after: list[list[int]] = [[] for _ in range(n)]
    indegree = [0] * n
    for i, (ax1, ay1, _, ay2) in enumerate(rects):
        for j in range(i):
            bx1, by1, _, by2 = rects[j]
            if ay1 >= by2 or by1 >= ay2:
                continue
            if ax1 < bx1:
                after[i].append(j)
                indegree[j] += 1
            else:
                after[j].append(i)
                indegree[i] += 1

    old = max(r[2] for r in rects) - min(r[0] for r in rects)
    height = max(r[3] for r in rects) - min(r[1] for r in rects)
    packed = 0
    queue = deque(i for i in range(n) if indegree[i] == 0)
    while queue:
        u = queue.popleft()
        packed = max(packed, reach[u])
        for v in after[u]:
            indegree[v] -= 1
            reach[v] = max(reach[v], reach[u] + width[v] + gap)
            if indegree[v] == 0:
                queue.append(v)

    if old < packed:
        return 0
    return height * (old - packed)


def longest_weighted_path(
    weights: Sequence[int], edges: Iterable[tuple[int, int, int]]
) -> tuple[int, list[int] | None]:
    """Heaviest path in a DAG starting at a vertex with no incoming edges.

    A path weighs the sum of its vertex weights and edge weights. The path is
    returned as vertices, or None when a tie was met on the way to the answer.
    """
    n = len(weights)
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    indegree = [0] * n
    for a, b, w in edges:
        if not (0 <= a < n and 0 <= b < n):
            raise ValueError(f"edge ({a}, {b}) has a vertex outside 0..{n - 1}")
        adjacency[a].append((b, w))
        indegree[b] += 1
    plain = [[v for v, _ in nbrs] for nbrs in adjacency]
    order = topological_sort(plain)

    dist = [0] * n
    tie = [False] * n
    nxt: list[int | None] = [None] * n
    for u in reversed(order):
        best = weights[u]
        for v, w in adjacency[u]:
            current = dist[v] + weights[u] + w
            if best > current:
                continue
            if best == current:
                tie[u] = True
            nxt[u] = v
            best = current
        dist[u] = best

    longest = 0
    several = False
    start: int | None = None
    for source in range(n):
        if indegree[source]:
            continue
        current = dist[source]
        if longest > current:
            continue
        if longest == current:
            several = True
        else:
            several = any(tie[v] for v in bfs(plain, source))
        longest = current
        start = source

    if several:
        return longest, None
    path: list[int] = []
    while start is not None:
        path.append(start)
        start = nxt[start]
    return longest, path


def random_test_arrays(count: int, rng: random.Random | None = None) -> list[list[int]]:
    """count random arrays of 1 to 8 values, each value between 1 and 100."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng if rng is not None else random.Random()
    return [
        [rng.randint(1, 100) for _ in range(rng.randint(1, 8))]
        for _ in range(count)
    ]