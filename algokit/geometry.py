"""Planar geometry on points with integer or float coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence, Union

EPS = 1e-9

# x coordinate of the far end of the ray cast by point_in_polygon.
_FAR = 10**18


@dataclass(frozen=True, order=True)
class Point:
    """A point or vector in the plane, ordered by x and then by y."""

    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def dot(self, other: Point) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> float:
        return self.x * other.y - self.y * other.x

    def norm(self) -> float:
        return math.hypot(self.x, self.y)


PointLike = Union[Point, Sequence[float]]


class Location(Enum):
    """Where a point lies with respect to a polygon."""

    OUTSIDE = 0
    INSIDE = 1
    BOUNDARY = 2


def _pt(p: PointLike) -> Point:
    return p if isinstance(p, Point) else Point(*p)


def cross(p: PointLike, q: PointLike, r: PointLike) -> float:
    """Cross product of (q - p) and (r - q): positive for a left turn."""
    p, q, r = _pt(p), _pt(q), _pt(r)
    return (q - p).cross(r - q)


def convex_hull(points: Iterable[PointLike]) -> list[Point]:
    """Points of the convex hull, collinear boundary points included.

    The lower chain comes first from left to right without its last point,
    followed by the upper chain from left to right without its first point.
    """
    pts = sorted(_pt(p) for p in points)
    if not pts:
        return []
    lower: list[Point] = []
    upper: list[Point] = []
    for p in pts:
        while len(lower) > 1 and cross(lower[-2], lower[-1], p) < 0:
            lower.pop()
        lower.append(p)
        while len(upper) > 1 and cross(upper[-2], upper[-1], p) > 0:
            upper.pop()
        upper.append(p)
    return lower[:-1] + upper[1:]


def in_range(p: PointLike, l: PointLike, r: PointLike) -> bool:
    """Whether p lies in the bounding box of l and r."""
    p, l, r = _pt(p), _pt(l), _pt(r)
    return (
        min(l.x, r.x) <= p.x <= max(l.x, r.x)
        and min(l.y, r.y) <= p.y <= max(l.y, r.y)
    )


def _segment_hit(i: Point, j: Point, l: Point, r: Point, upper_hit: bool) -> bool:
    c1 = (l - i).cross(r - i)
    c2 = (l - j).cross(r - j)
    c3 = (i - l).cross(j - l)
    c4 = (i - r).cross(j - r)
    if c1 == 0 and in_range(i, l, r):
        return True
    if c2 == 0 and in_range(j, l, r):
        return upper_hit
    if c3 == 0 and in_range(l, i, j):
        return True
    if c4 == 0 and in_range(r, i, j):
        return True
    return ((c1 > 0) != (c2 > 0)) and ((c3 > 0) != (c4 > 0))


def segments_intersect(i: PointLike, j: PointLike, l: PointLike, r: PointLike) -> bool:
    """Whether segment i-j and segment l-r share at least one point."""
    return _segment_hit(_pt(i), _pt(j), _pt(l), _pt(r), True)


def _edges(polygon: list[Point]) -> list[tuple[Point, Point]]:
    return list(zip(polygon, polygon[-1:] + polygon[:-1]))


def point_in_polygon(polygon: Iterable[PointLike], point: PointLike) -> Location:
    """Locate a point relative to a simple polygon by casting a ray to +x.

    Where the ray passes through a vertex only the lower end of each edge
    counts, so every vertex is counted consistently.
    """
    d = _pt(point)
    shifted = [_pt(p) - d for p in polygon]
    origin = Point(0, 0)
    far = Point(_FAR, 0)
    crossings = 0
    for cur, prev in _edges(shifted):
        if cur.cross(prev) == 0 and in_range(origin, cur, prev):
            return Location.BOUNDARY
        if cur.y == 0 and prev.y == 0:
            continue
        low, high = (cur, prev) if cur.y <= prev.y else (prev, cur)
        if _segment_hit(low, high, far, origin, False):
            crossings += 1
    return Location.INSIDE if crossings % 2 else Location.OUTSIDE


def triangle_doubled_area(a: PointLike, b: PointLike, c: PointLike) -> float:
    """Twice the area of triangle abc."""
    a, b, c = _pt(a), _pt(b), _pt(c)
    return abs((b - a).cross(c - a))


def doubled_polygon_area(points: Iterable[PointLike]) -> float:
    """Twice the area of a convex polygon, summed as a fan from its first vertex."""
    pts = [_pt(p) for p in points]
    if len(pts) < 3:
        raise ValueError("a polygon needs at least three vertices")
    first = pts[0]
    return sum(triangle_doubled_area(first, b, a) for a, b in zip(pts[1:], pts[2:]))


def squares_intersect(square_a: Iterable[PointLike], square_b: Iterable[PointLike]) -> bool:
    """Whether two squares, each given by its four corners in order, overlap."""
    a = [_pt(p) for p in square_a]
    b = [_pt(p) for p in square_b]
    if len(a) != 4 or len(b) != 4:
        raise ValueError("each square needs exactly four corners")
    if any(
        segments_intersect(p, q, r, s)
        for p, q in _edges(a)
        for r, s in _edges(b)
    ):
        return True
    if all(point_in_polygon(a, p) is Location.INSIDE for p in b):
        return True
    return all(point_in_polygon(b, p) is Location.INSIDE for p in a)


def circle_line_intersection(r: float, a: float, b: float, c: float) -> tuple[Point, ...]:
    """Points where the circle of radius r at the origin meets ax + by + c = 0."""
    norm2 = a * a + b * b
    if norm2 == 0:
        raise ValueError("a and b cannot both be zero")
    x0 = -a * c / norm2
    y0 = -b * c / norm2
    if c * c > r * r * norm2 + EPS:
        return ()
    if abs(c * c - r * r * norm2) < EPS:
        return (Point(x0, y0),)
    d = r * r - c * c / norm2
    mult = math.sqrt(d / norm2)
    return (
        Point(x0 + b * mult, y0 - a * mult),
        Point(x0 - b * mult, y0 + a * mult),
    )


def circle_circle_intersection(x2: float, y2: float, r1: float, r2: float) -> tuple[Point, ...]:
    """Points shared by the circle of radius r1 at the origin and radius r2 at (x2, y2)."""
    if x2 == 0 and y2 == 0:
        raise ValueError("concentric circles have no single intersection set")
    return circle_line_intersection(
        r1, -2 * x2, -2 * y2, x2 * x2 + y2 * y2 + r1 * r1 - r2 * r2
    )