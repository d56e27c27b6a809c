"""Range-query structures over a fixed-length array, using inclusive bounds."""

from __future__ import annotations

from typing import Iterable


class LazySumTree:
    """Range addition and range sum, both over inclusive index ranges."""

    def __init__(self, values: Iterable[int]) -> None:
        data = list(values)
        if not data:
            raise ValueError("values must not be empty")
        self._n = len(data)
        self._sum = [0] * (4 * self._n)
        self._lazy = [0] * (4 * self._n)
        self._build(1, 0, self._n - 1, data)

    def __len__(self) -> int:
        return self._n

    def _build(self, node: int, lo: int, hi: int, data: list[int]) -> None:
        if lo == hi:
            self._sum[node] = data[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, data)
        self._build(2 * node + 1, mid + 1, hi, data)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def _apply(self, node: int, lo: int, hi: int, value: int) -> None:
        self._sum[node] += value * (hi - lo + 1)
        self._lazy[node] += value

    def _push(self, node: int, lo: int, hi: int) -> None:
        pending = self._lazy[node]
        if pending:
            mid = (lo + hi) // 2
            self._apply(2 * node, lo, mid, pending)
            self._apply(2 * node + 1, mid + 1, hi, pending)
            self._lazy[node] = 0

    def _check(self, left: int, right: int) -> None:
        if not 0 <= left <= right < self._n:
            raise IndexError(f"invalid range [{left}, {right}] for length {self._n}")

    def range_add(self, left: int, right: int, value: int) -> None:
        self._check(left, right)
        self._update(1, 0, self._n - 1, left, right, value)

    def _update(self, node: int, lo: int, hi: int, left: int, right: int, value: int) -> None:
        if hi < left or lo > right:
            return
        if left <= lo and hi <= right:
            self._apply(node, lo, hi, value)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, left, right, value)
        self._update(2 * node + 1, mid + 1, hi, left, right, value)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def query(self, left: int, right: int) -> int:
        self._check(left, right)
        return self._query(1, 0, self._n - 1, left, right)

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> int:
        if hi < left or lo > right:
            return 0
        if left <= lo and hi <= right:
            return self._sum[node]
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        return self._query(2 * node, lo, mid, left, right) + self._query(
            2 * node + 1, mid + 1, hi, left, right
        )


class SparseTable:
    """Static range-maximum queries in constant time."""

    def __init__(self, values: Iterable[int]) -> None:
        row = list(values)
        if not row:
            raise ValueError("values must not be empty")
        self._n = len(row)
        self._table = [row]
        step = 1
        while 2 * step <= self._n:
            prev = self._table[-1]
            self._table.append([max(a, b) for a, b in zip(prev, prev[step:])])
            step *= 2

    def __len__(self) -> int:
        return self._n

    def query(self, left: int, right: int) -> int:
        if not 0 <= left <= right < self._n:
            raise IndexError(f"invalid range [{left}, {right}] for length {self._n}")
        k = (right - left + 1).bit_length() - 1
        row = self._table[k]
        return max(row[left], row[right - (1 << k) + 1])