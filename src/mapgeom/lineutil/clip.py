"""
clip.py

Viewport clipping for projected polylines and polygons.

Segments are clipped with Cohen-Sutherland outcodes. When a polyline is
clipped segment by segment, each segment starts where the previous one
ended, so the previous end code can be reused instead of recomputed. That
code lives in a :class:`ClipState` owned by one clip chain; never share a
state between chains that are clipped concurrently.

Public functions:
- `get_bit_code(p, bounds)` -> int
- `clip_segment(a, b, bounds, use_last_code, round_coords, state)` -> (Point, Point) | False
- `clip_points(points, bounds)` / `clip_rings(rings, bounds)` -> list of visible parts
- `clip_polygon(points, bounds)` -> clipped ring (Sutherland-Hodgman)

"""
from typing import List, Optional, Sequence
import math
import logging

from mapgeom.lineutil.types import Bounds, Point
from mapgeom.lineutil.utils import as_point, as_point_list
from mapgeom.lineutil.config import CLIP

logger = logging.getLogger(__name__)

# outcode bits
LEFT = 1
RIGHT = 2
BOTTOM = 4
TOP = 8


def _round_half_up(v: float) -> float:
    return float(math.floor(v + 0.5))


def get_bit_code(p: Point, bounds: Bounds) -> int:
    """Outcode of ``p``: one bit per violated side, 0 inside or on the edge."""
    code = 0
    if p.x < bounds.min.x:
        code |= LEFT
    elif p.x > bounds.max.x:
        code |= RIGHT
    if p.y < bounds.min.y:
        code |= BOTTOM
    elif p.y > bounds.max.y:
        code |= TOP
    return code


def _round_within(value: float, lo: float, hi: float) -> float:
    # a coordinate inside the window must not be rounded out of it
    rounded = _round_half_up(value)
    if lo <= value <= hi and not lo <= rounded <= hi:
        return value
    return rounded


def get_edge_intersection(a: Point, b: Point, code: int, bounds: Bounds,
                          round_coords: bool = False) -> Point:
    """Intersection of segment a-b with the edge named by the highest set bit of ``code``.

    With ``round_coords`` only the interpolated coordinate is rounded; the
    other one stays on the edge.
    """
    dx = b.x - a.x
    dy = b.y - a.y
    lo = bounds.min
    hi = bounds.max

    if code & TOP:
        x = a.x + dx * (hi.y - a.y) / dy
        y = hi.y
    elif code & BOTTOM:
        x = a.x + dx * (lo.y - a.y) / dy
        y = lo.y
    elif code & RIGHT:
        x = hi.x
        y = a.y + dy * (hi.x - a.x) / dx
    elif code & LEFT:
        x = lo.x
        y = a.y + dy * (lo.x - a.x) / dx
    else:
        raise ValueError(f'Outcode {code} names no edge')

    if round_coords:
        if code & (TOP | BOTTOM):
            x = _round_within(x, lo.x, hi.x)
        else:
            y = _round_within(y, lo.y, hi.y)
    return Point(x, y)


class ClipState:
    """Outcode of the last clipped segment's end point for one clip chain."""

    __slots__ = ('last_code',)

    def __init__(self):
        self.last_code: Optional[int] = None

    def reset(self) -> None:
        self.last_code = None


def clip_segment(a, b, bounds: Bounds, use_last_code: bool = False,
                 round_coords: bool = CLIP['round'], state: Optional[ClipState] = None):
    """Clip segment a-b to ``bounds``.

    Returns the (possibly shortened) ``(a, b)`` pair, or ``False`` when the
    segment lies entirely outside. Only new intersection points are rounded.

    With ``use_last_code`` and a primed ``state``, the start code is taken
    from the state instead of being recomputed; the caller asserts that ``a``
    equals the previous segment's ``b``. ``b``'s code is always stored back.
    """
    a = as_point(a)
    b = as_point(b)
    if use_last_code and state is not None and state.last_code is not None:
        code_a = state.last_code
    else:
        code_a = get_bit_code(a, bounds)
    code_b = get_bit_code(b, bounds)

    if state is not None:
        state.last_code = code_b

    while True:
        # trivial accept
        if not (code_a | code_b):
            return a, b
        # trivial reject
        if code_a & code_b:
            return False

        code_out = code_a or code_b
        p = get_edge_intersection(a, b, code_out, bounds, round_coords)
        new_code = get_bit_code(p, bounds)

        if code_out == code_a:
            a = p
            code_a = new_code
        else:
            b = p
            code_b = new_code


class SegmentClipper:
    """Clips one chain of connected segments against fixed bounds.

    Usage:
        clipper = SegmentClipper(bounds, round_coords=True)
        for j in range(len(points) - 1):
            seg = clipper.clip(points[j], points[j + 1], use_last_code=j > 0)
        clipper.reset()   # before the next, unrelated chain
    """

    def __init__(self, bounds: Bounds, round_coords: bool = CLIP['round']):
        self.bounds = bounds
        self.round_coords = round_coords
        self.state = ClipState()

    def clip(self, a, b, use_last_code: bool = False):
        return clip_segment(a, b, self.bounds, use_last_code, self.round_coords, self.state)

    def reset(self) -> None:
        self.state.reset()


def clip_points(points: Sequence[Point], bounds: Bounds,
                round_coords: bool = CLIP['round']) -> List[List[Point]]:
    """Split a polyline into the parts visible inside ``bounds``.

    A part ends where a segment leaves the bounds or at the last segment;
    rejected segments start a new part.
    """
    pts = as_point_list(points)
    parts: List[List[Point]] = []
    if len(pts) < 2:
        return parts

    clipper = SegmentClipper(bounds, round_coords)
    current: List[Point] = []
    last_j = len(pts) - 2
    for j in range(last_j + 1):
        segment = clipper.clip(pts[j], pts[j + 1], use_last_code=j > 0)
        if not segment:
            continue
        current.append(segment[0])
        # segment left the bounds, or the polyline ends here
        if segment[1] != pts[j + 1] or j == last_j:
            current.append(segment[1])
            parts.append(current)
            current = []
    return parts


def clip_rings(rings, bounds: Bounds, round_coords: bool = CLIP['round']) -> List[List[Point]]:
    """Clip several rings, each as its own chain, into one flat list of parts."""
    parts: List[List[Point]] = []
    for ring in rings:
        parts.extend(clip_points(ring, bounds, round_coords))
    logger.debug('clip_rings: %d rings -> %d visible parts', len(rings), len(parts))
    return parts


def clip_polygon(points: Sequence[Point], bounds: Bounds,
                 round_coords: bool = CLIP['round']) -> List[Point]:
    """Sutherland-Hodgman clipping of a closed ring against ``bounds``.

    Edges are processed left, bottom, right, top. The result may be empty.
    """
    pts = as_point_list(points)
    codes = [get_bit_code(p, bounds) for p in pts]

    for edge in (LEFT, BOTTOM, RIGHT, TOP):
        clipped: List[Point] = []
        clipped_codes: List[int] = []
        n = len(pts)
        j = n - 1
        for i in range(n):
            a, code_a = pts[i], codes[i]
            b, code_b = pts[j], codes[j]
            if not (code_a & edge):
                # b -> a enters the bounds
                if code_b & edge:
                    p = get_edge_intersection(b, a, edge, bounds, round_coords)
                    clipped.append(p)
                    clipped_codes.append(get_bit_code(p, bounds))
                clipped.append(a)
                clipped_codes.append(code_a)
            elif not (code_b & edge):
                # b -> a leaves the bounds
                p = get_edge_intersection(b, a, edge, bounds, round_coords)
                clipped.append(p)
                clipped_codes.append(get_bit_code(p, bounds))
            j = i
        pts, codes = clipped, clipped_codes
    return pts
