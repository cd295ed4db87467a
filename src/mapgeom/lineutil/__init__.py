"""Polyline simplification, viewport clipping and visual-center utilities."""

from .types import (
    Point, LatLng, Bounds, LatLngBounds,
    SingleRing, MultiRing, RingGeometry, is_flat, as_rings,
)
from .errors import GeometryError, InvalidInputError
from .simplify import (
    simplify, simplify_rings, reduce_points, simplify_dp,
    closest_point_on_segment, point_to_segment_distance, sq_closest_point_on_segment,
)
from .clip import (
    LEFT, RIGHT, BOTTOM, TOP,
    get_bit_code, get_edge_intersection, ClipState, SegmentClipper,
    clip_segment, clip_points, clip_rings, clip_polygon,
)
from .projection import ProjectionPort, PlanarProjection, MercatorProjection, haversine_distance
from .center import polyline_center, polygon_center, centroid, bounds_area
from .circle import CircleFootprint, project_circle
from .utils import as_point, as_latlng, configure_logging
