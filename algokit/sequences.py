"""Solutions to classic problems on sequences, permutations and sliding windows."""

from __future__ import annotations

import math
from collections import deque
from typing import Iterable, Sequence

from sortedcontainers import SortedList


def _positions(values: Sequence[int]) -> list[int]:
    """1-based position of every number 1..n in a permutation; index 0 is unused."""
    n = len(values)
    pos = [0] * (n + 1)
    seen = [False] * (n + 1)
    for index, v in enumerate(values, start=1):
        if not 1 <= v <= n or seen[v]:
            raise ValueError("values must be a permutation of 1..n")
        seen[v] = True
        pos[v] = index
    return pos


def collecting_numbers(values: Sequence[int]) -> int:
    """Rounds needed to collect 1..n in increasing order, each round scanning left to right."""
    pos = _positions(values)
    n = len(values)
    return 1 + sum(pos[x + 1] < pos[x] for x in range(1, n))


def collecting_numbers_with_swaps(
    values: Sequence[int], swaps: Iterable[tuple[int, int]]
) -> list[int]:
    """Number of rounds after each swap of two 1-based positions in the permutation."""
    arr = [0, *values]
    pos = _positions(values)
    n = len(values)
    rounds = 1 + sum(pos[x + 1] < pos[x] for x in range(1, n))

    def descents(pairs: set[int]) -> int:
        return sum(pos[x + 1] < pos[x] for x in pairs)

    answers: list[int] = []
    for a, b in swaps:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"swap ({a}, {b}) has a position outside 1..{n}")
        u, v = arr[a], arr[b]
        pairs = {x for y in (u, v) for x in (y - 1, y) if 1 <= x < n}
        rounds -= descents(pairs)
        arr[a], arr[b] = v, u
        pos[u], pos[v] = b, a
        rounds += descents(pairs)
        answers.append(rounds)
    return answers


def josephus(n: int) -> list[int]:
    """Order in which children 1..n leave a circle when every second one is removed."""
    if n < 0:
        raise ValueError("n must not be negative")
    circle = deque(range(1, n + 1))
    removed: list[int] = []
    while circle:
        circle.rotate(-1)
        removed.append(circle.popleft())
    return removed


def josephus_skip(n: int, k: int) -> list[int]:
    """Order in which children 1..n leave a circle when k children are skipped each time."""
    if n < 0:
        raise ValueError("n must not be negative")
    if k < 0:
        raise ValueError("k must not be negative")
    children = SortedList(range(1, n + 1))
    removed: list[int] = []
    start = 0
    while children:
        start %= len(children)
        start = (start + k) % len(children)
        removed.append(children.pop(start))
    return removed


def nearest_smaller_values(values: Iterable[int]) -> list[int]:
    """For each value, the 1-based position of the nearest strictly smaller value to its left, or 0."""
    data = list(values)
    stack: list[int] = []
    result: list[int] = []
    for i, current in enumerate(data, start=1):
        while stack and data[stack[-1] - 1] >= current:
            stack.pop()
        result.append(stack[-1] if stack else 0)
        stack.append(i)
    return result


def nested_ranges(ranges: Sequence[tuple[int, int]]) -> tuple[list[bool], list[bool]]:
    """For each range, whether it contains another range and whether another contains it."""
    order = sorted(range(len(ranges)), key=lambda i: (ranges[i][0], -ranges[i][1]))
    contains = [False] * len(ranges)
    contained = [False] * len(ranges)
    max_r = -math.inf
    for i in order:
        r = ranges[i][1]
        if r <= max_r:
            contained[i] = True
        max_r = max(max_r, r)
    min_r = math.inf
    for i in reversed(order):
        r = ranges[i][1]
        if r >= min_r:
            contains[i] = True
        min_r = min(min_r, r)
    return contains, contained


def playlist(songs: Iterable[int]) -> int:
    """Length of the longest run of consecutive songs with no repeats."""
    last_seen: dict[int, int] = {}
    start = best = 0
    for i, song in enumerate(songs):
        if last_seen.get(song, -1) >= start:
            start = last_seen[song] + 1
        last_seen[song] = i
        best = max(best, i - start + 1)
    return best


def sliding_window_median(values: Sequence[int], k: int) -> list[int]:
    """Median of every window of k consecutive values; the lower one when k is even."""
    n = len(values)
    if not 1 <= k <= n:
        raise ValueError(f"window size must be in 1..{n}")
    window = SortedList(values[:k])
    middle = (k - 1) // 2
    medians = [window[middle]]
    for i in range(k, n):
        window.remove(values[i - k])
        window.add(values[i])
        medians.append(window[middle])
    return medians


def subarray_sums(values: Iterable[int], target: int) -> int:
    """Number of contiguous non-empty runs of values whose sum is target."""
    seen: dict[int, int] = {0: 1}
    prefix = count = 0
    for v in values:
        prefix += v
        count += seen.get(prefix - target, 0)
        seen[prefix] = seen.get(prefix, 0) + 1
    return count


def sum_of_two_values(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """1-based positions of two distinct values summing to target, or None if there are none."""
    pairs = sorted((v, i) for i, v in enumerate(values, start=1))
    left, right = 0, len(pairs) - 1
    while left < right:
        total = pairs[left][0] + pairs[right][0]
        if total > target:
            right -= 1
        elif total < target:
            left += 1
        else:
            return pairs[left][1], pairs[right][1]
    return None


def traffic_lights(length: int, positions: Iterable[int]) -> list[int]:
    """Longest stretch of a street of the given length without a light, after each light is added."""
    if length <= 0:
        raise ValueError("length must be positive")
    lights = SortedList([0, length])
    gaps = SortedList([length])
    longest: list[int] = []
    for p in positions:
        if not 0 < p < length:
            raise ValueError(f"position {p} is not strictly inside the street")
        if p in lights:
            raise ValueError(f"a light already stands at {p}")
        index = lights.bisect_right(p)
        right = lights[index]
        left = lights[index - 1]
        gaps.remove(right - left)
        gaps.add(p - left)
        gaps.add(right - p)
        lights.add(p)
        longest.append(gaps[-1])
    return longest