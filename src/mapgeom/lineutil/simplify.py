"""
simplify.py

Point-count reduction for polylines before they are drawn or hit-tested.

Two stages run back to back: radial vertex reduction drops points that sit
within tolerance of the last kept point, then Ramer-Douglas-Peucker keeps
only points that deviate from the current chord by more than tolerance.
Both stages work on squared distances so no square root is taken per
comparison.

Public functions:
- `simplify(points, tolerance)` -> list[Point]
- `reduce_points(points, sq_tolerance)` -> list[Point]
- `simplify_dp(points, sq_tolerance)` -> list[Point]
- `simplify_rings(rings, tolerance)` -> list[list[Point]]
- `closest_point_on_segment(p, p1, p2)` -> Point
- `point_to_segment_distance(p, p1, p2)` -> float

"""
from typing import List, Sequence
import math
import logging
import numpy as np

from mapgeom.lineutil.types import Point
from mapgeom.lineutil.utils import as_point, as_point_list
from mapgeom.lineutil.config import SIMPLIFY

logger = logging.getLogger(__name__)


def _sq_dist(p1: Point, p2: Point) -> float:
    dx = p2.x - p1.x
    dy = p2.y - p1.y
    return dx * dx + dy * dy


def sq_closest_point_on_segment(p: Point, p1: Point, p2: Point, sq_dist: bool = False):
    """Closest point to ``p`` on segment p1-p2, or its squared distance.

    The projection parameter is clamped to the segment. A zero-length
    segment skips the projection and measures against ``p1``.
    """
    x = p1.x
    y = p1.y
    dx = p2.x - x
    dy = p2.y - y
    dot = dx * dx + dy * dy

    if dot > 0:
        t = ((p.x - x) * dx + (p.y - y) * dy) / dot
        if t > 1:
            x = p2.x
            y = p2.y
        elif t > 0:
            x += dx * t
            y += dy * t

    dx = p.x - x
    dy = p.y - y
    return dx * dx + dy * dy if sq_dist else Point(x, y)


def closest_point_on_segment(p, p1, p2) -> Point:
    return sq_closest_point_on_segment(as_point(p), as_point(p1), as_point(p2))


def point_to_segment_distance(p, p1, p2) -> float:
    return math.sqrt(sq_closest_point_on_segment(as_point(p), as_point(p1), as_point(p2), True))


def reduce_points(points: Sequence[Point], sq_tolerance: float) -> List[Point]:
    """Drop points within sqrt(sq_tolerance) of the last kept point.

    The first point is always kept and the last point is appended when the
    loop did not keep it.
    """
    pts = as_point_list(points)
    if not pts:
        return []
    reduced = [pts[0]]
    prev = 0
    for i in range(1, len(pts)):
        if _sq_dist(pts[i], pts[prev]) > sq_tolerance:
            reduced.append(pts[i])
            prev = i
    if prev < len(pts) - 1:
        reduced.append(pts[-1])
    return reduced


def simplify_dp(points: Sequence[Point], sq_tolerance: float) -> List[Point]:
    """Ramer-Douglas-Peucker simplification with squared tolerance.

    Spans are processed from an explicit stack, so deep or pathological
    inputs never hit the interpreter recursion limit. The first point with
    the largest deviation wins ties.
    """
    pts = as_point_list(points)
    n = len(pts)
    if n == 0:
        return []
    markers = np.zeros(n, dtype=bool)
    markers[0] = markers[n - 1] = True

    stack = [(0, n - 1)]
    while stack:
        first, last = stack.pop()
        max_sq_dist = 0.0
        index = first
        for i in range(first + 1, last):
            d = sq_closest_point_on_segment(pts[i], pts[first], pts[last], True)
            if d > max_sq_dist:
                index = i
                max_sq_dist = d
        if index > first and max_sq_dist > sq_tolerance:
            markers[index] = True
            stack.append((index, last))
            stack.append((first, index))

    return [pts[i] for i in np.flatnonzero(markers)]


def simplify(points: Sequence[Point], tolerance=None) -> List[Point]:
    """Reduce the number of points in a polyline while keeping its shape.

    ``tolerance`` is linear; it is squared before the vertex reduction and
    Douglas-Peucker stages. A missing or zero tolerance, or an empty input,
    returns a new list with the same points.
    """
    pts = as_point_list(points)
    if not tolerance or not pts:
        return list(pts)

    sq_tolerance = tolerance * tolerance
    reduced = reduce_points(pts, sq_tolerance)
    simplified = simplify_dp(reduced, sq_tolerance)
    logger.debug('simplify: %d -> %d -> %d points (tolerance=%s)',
                 len(pts), len(reduced), len(simplified), tolerance)
    return simplified


def simplify_rings(rings, tolerance: float = SIMPLIFY['default_tolerance']) -> List[List[Point]]:
    """Simplify each ring or clipped part independently."""
    return [simplify(ring, tolerance) for ring in rings]
