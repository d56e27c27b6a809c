"""Greedy, two-pointer and sorting solutions to classic scheduling and selection problems."""

from __future__ import annotations

import heapq
import math
from typing import Iterable, Sequence

from sortedcontainers import SortedList


def apartments(applicants: Iterable[int], sizes: Iterable[int], tolerance: int) -> int:
    """How many applicants get an apartment whose size is within tolerance of what they want."""
    wanted = sorted(applicants)
    offered = sorted(sizes)
    i = j = matched = 0
    while i < len(wanted) and j < len(offered):
        if abs(offered[j] - wanted[i]) <= tolerance:
            matched += 1
            i += 1
            j += 1
        elif offered[j] > wanted[i]:
            i += 1
        else:
            j += 1
    return matched


def _fits(values: Sequence[int], max_sum: int, parts: int) -> bool:
    count = 1
    current = 0
    for v in values:
        if v > max_sum:
            return False
        current += v
        if current > max_sum:
            count += 1
            current = v
    return count <= parts


def array_division(values: Iterable[int], parts: int) -> int:
    """Smallest possible maximum sum when values is cut into at most parts contiguous pieces."""
    if parts < 1:
        raise ValueError("parts must be at least 1")
    data = list(values)
    low = 0
    high = max(0, sum(v for v in data if v > 0))
    best = high
    while low <= high:
        mid = (low + high) // 2
        if _fits(data, mid, parts):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best


def ferris_wheel(weights: Iterable[int], limit: int) -> int:
    """Fewest gondolas, each holding one or two children of total weight at most limit."""
    w = sorted(weights)
    left, right = 0, len(w) - 1
    pairs = 0
    while left < right:
        if w[left] + w[right] <= limit:
            pairs += 1
            left += 1
        right -= 1
    return len(w) - pairs


def movie_festival(movies: Iterable[tuple[int, int]]) -> int:
    """Largest number of whole movies, given as (start, end), that can be watched one after another."""
    watched = 0
    free_from = -math.inf
    for end, start in sorted((end, start) for start, end in movies):
        if start >= free_from:
            watched += 1
            free_from = end
    return watched


def stick_lengths(lengths: Iterable[int]) -> int:
    """Least total cost to make every stick the same length, cost being the absolute change."""
    data = sorted(lengths)
    if not data:
        raise ValueError("lengths must not be empty")
    median = data[len(data) // 2]
    return sum(abs(x - median) for x in data)


def towers(cubes: Iterable[int]) -> int:
    """Fewest towers built from cubes taken in order, each cube on a strictly larger one."""
    tops: SortedList = SortedList()
    for cube in cubes:
        index = tops.bisect_right(cube)
        if index < len(tops):
            del tops[index]
        tops.add(cube)
    return len(tops)


def restaurant_customers(intervals: Iterable[tuple[int, int]]) -> int:
    """Most customers present at once; an arrival at a departure time counts as overlapping."""
    events: list[tuple[int, int]] = []
    for arrival, departure in intervals:
        events.append((arrival, 0))
        events.append((departure, 1))
    events.sort()
    present = best = 0
    for _, kind in events:
        present += 1 if kind == 0 else -1
        best = max(best, present)
    return best


def room_allocation(customers: Sequence[tuple[int, int]]) -> tuple[int, list[int]]:
    """Fewest rooms for (arrival, departure) stays, and the 1-based room of each customer.

    A room frees up only for an arrival strictly after the previous departure.
    """
    order = sorted(range(len(customers)), key=lambda i: customers[i][0])
    rooms_used = 0
    assigned = [0] * len(customers)
    busy: list[tuple[int, int]] = []
    for i in order:
        arrival, departure = customers[i]
        if busy and arrival > busy[0][0]:
            _, room = heapq.heappop(busy)
        else:
            rooms_used += 1
            room = rooms_used
        heapq.heappush(busy, (departure, room))
        assigned[i] = room
    return rooms_used, assigned


def concert_tickets(prices: Iterable[int], offers: Iterable[int]) -> list[int | None]:
    """For each customer in turn, the dearest remaining ticket within their offer, or None."""
    available = SortedList(prices)
    bought: list[int | None] = []
    for offer in offers:
        index = available.bisect_right(offer)
        if index == 0:
            bought.append(None)
        else:
            bought.append(available.pop(index - 1))
    return bought


def distinct_numbers(values: Iterable[int]) -> int:
    """Number of distinct values."""
    return len(set(values))


def maximum_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run of values."""
    best: int | None = None
    current = 0
    for v in values:
        current = v if best is None else max(current + v, v)
        best = current if best is None else max(best, current)
    if best is None:
        raise ValueError("values must not be empty")
    return best