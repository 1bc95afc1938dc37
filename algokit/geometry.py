"""Planar geometry: point distance and the closest pair of points."""

from __future__ import annotations

import math
from itertools import combinations
from typing import Sequence

Point = tuple[float, float]
# A point tagged with its position in the input, so equal points stay distinct.
_Tagged = tuple[float, float, int]


def distance(p: Sequence[float], q: Sequence[float]) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p[0] - q[0], p[1] - q[1])


def _brute_force(points: list[_Tagged]) -> tuple[float, _Tagged, _Tagged]:
    return min(
        ((distance(a, b), a, b) for a, b in combinations(points, 2)),
        key=lambda found: found[0],
    )


def _closest(by_x: list[_Tagged], by_y: list[_Tagged]) -> tuple[float, _Tagged, _Tagged]:
    n = len(by_x)
    if n <= 3:
        return _brute_force(by_x)

    mid = n // 2
    mid_x = by_x[mid][0]
    left_members = set(by_x[:mid])
    left_y = [p for p in by_y if p in left_members]
    right_y = [p for p in by_y if p not in left_members]

    best = min(
        _closest(by_x[:mid], left_y),
        _closest(by_x[mid:], right_y),
        key=lambda found: found[0],
    )

    strip = [p for p in by_y if abs(p[0] - mid_x) < best[0]]
    for i, a in enumerate(strip):
        for b in strip[i + 1:]:
            if b[1] - a[1] >= best[0]:
                break
            d = distance(a, b)
            if d < best[0]:
                best = (d, a, b)
    return best


def closest_pair(points: Sequence[Sequence[float]]) -> tuple[Point, Point]:
    """The two points nearest to each other, by divide and conquer."""
    if len(points) < 2:
        raise ValueError("closest_pair needs at least two points")
    tagged = [(p[0], p[1], i) for i, p in enumerate(points)]
    by_x = sorted(tagged)
    by_y = sorted(tagged, key=lambda t: (t[1], t[0], t[2]))
    _, a, b = _closest(by_x, by_y)
    return tuple(points[a[2]]), tuple(points[b[2]])