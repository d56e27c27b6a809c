"""Line containers answering minimum (or maximum) queries over lines."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class Line:
    """The line y = slope * x + intercept."""

    slope: int
    intercept: int

    def value(self, x: int) -> int:
        return self.slope * x + self.intercept


class _Node:
    __slots__ = ("line", "left", "right")

    def __init__(self) -> None:
        self.line: Line | None = None
        self.left: _Node | None = None
        self.right: _Node | None = None


class LiChaoTree:
    """Envelope of lines over the integer points of [low, high].

    Nodes are created only as lines descend into them, so wide domains
    cost memory proportional to the lines added.
    """

    def __init__(self, low: int, high: int, *, maximize: bool = False) -> None:
        if low > high:
            raise ValueError("low must not exceed high")
        self.low = low
        self.high = high
        self.maximize = maximize
        self._root = _Node()

    def _better(self, a: int, b: int) -> bool:
        return a > b if self.maximize else a < b

    def add(self, line: Line) -> None:
        node, lo, hi = self._root, self.low, self.high
        while True:
            if node.line is None:
                node.line = line
                return
            mid = (lo + hi) // 2
            mid_better = self._better(line.value(mid), node.line.value(mid))
            low_better = self._better(line.value(lo), node.line.value(lo))
            if mid_better:
                node.line, line = line, node.line
            if lo == hi:
                return
            if low_better != mid_better:
                if node.left is None:
                    node.left = _Node()
                node, hi = node.left, mid
            else:
                if node.right is None:
                    node.right = _Node()
                node, lo = node.right, mid + 1

    def query(self, x: int) -> int:
        """Best value at x among all lines added."""
        if not self.low <= x <= self.high:
            raise ValueError(f"{x} is outside [{self.low}, {self.high}]")
        best: int | None = None
        node, lo, hi = self._root, self.low, self.high
        while node is not None and node.line is not None:
            v = node.line.value(x)
            if best is None or self._better(v, best):
                best = v
            if lo == hi:
                break
            mid = (lo + hi) // 2
            if x <= mid:
                node, hi = node.left, mid
            else:
                node, lo = node.right, mid + 1
        if best is None:
            raise ValueError("no lines have been added")
        return best


class ConvexHullTrick:
    """Minimum of lines added in decreasing slope order, queried at non-decreasing x."""

    def __init__(self) -> None:
        self._lines: deque[Line] = deque()

    def __len__(self) -> int:
        return len(self._lines)

    def add(self, line: Line) -> None:
        lines = self._lines
        while len(lines) > 1 and (
            (lines[-2].intercept - lines[-1].intercept) * (line.slope - lines[-2].slope)
            >= (lines[-2].intercept - line.intercept) * (lines[-1].slope - lines[-2].slope)
        ):
            lines.pop()
        lines.append(line)

    def query(self, x: int) -> int:
        lines = self._lines
        if not lines:
            raise ValueError("no lines have been added")
        while len(lines) > 1 and lines[0].value(x) >= lines[1].value(x):
            lines.popleft()
        return lines[0].value(x)