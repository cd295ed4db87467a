"""
center.py

"Visual center" queries for polylines and polygons given in geographic
coordinates.

Both centers are computed in projected space. Geometry far from the
projection origin loses precision once projected, so small geometries are
first shifted by a local centroid, projected, measured, unprojected and
shifted back. Large geometries are not shifted.

Public functions:
- `polyline_center(latlngs, projection)` -> LatLng (length-weighted midpoint)
- `polygon_center(latlngs, projection)` -> LatLng (area-weighted centroid)
- `centroid(latlngs)` -> LatLng (flat-ring centroid in lat/lng space)
- `bounds_area(bounds, distance)` -> float

"""
from typing import Callable, List, Tuple
import logging
import numpy as np

from mapgeom.lineutil.types import LatLng, LatLngBounds, MultiRing, Point, as_rings
from mapgeom.lineutil.errors import InvalidInputError
from mapgeom.lineutil.projection import ProjectionPort, haversine_distance
from mapgeom.lineutil.config import CENTER

logger = logging.getLogger(__name__)

DistanceFn = Callable[[LatLng, LatLng], float]


def _first_ring(latlngs) -> Tuple[LatLng, ...]:
    if latlngs is None:
        raise InvalidInputError('latlngs not passed')
    rings = as_rings(latlngs)
    if isinstance(rings, MultiRing) and rings.rings:
        logger.warning('latlngs are not flat! Only the first ring will be used')
        rings = rings.rings[0]
    if isinstance(rings, MultiRing) or len(rings.points) == 0:
        raise InvalidInputError('latlngs not passed')
    return rings.points


def centroid(latlngs) -> LatLng:
    """Area-weighted centroid of the ring treated as flat (lat, lng) coordinates.

    A ring with zero signed area (a straight line, a single point) falls back
    to the mean of its vertices.
    """
    ring = _first_ring(latlngs)
    arr = np.asarray(ring, dtype=float)
    lat = arr[:, 0]
    lng = arr[:, 1]
    lat_n = np.roll(lat, -1)
    lng_n = np.roll(lng, -1)
    cross = lng * lat_n - lng_n * lat
    area = cross.sum() / 2.0
    if area == 0:
        return LatLng(float(lat.mean()), float(lng.mean()))
    c_lng = ((lng + lng_n) * cross).sum() / (6.0 * area)
    c_lat = ((lat + lat_n) * cross).sum() / (6.0 * area)
    return LatLng(float(c_lat), float(c_lng))


def bounds_area(bounds: LatLngBounds, distance: DistanceFn = haversine_distance) -> float:
    """Approximate ground area of a bounding box (west edge × north edge)."""
    return (distance(bounds.north_west, bounds.south_west)
            * distance(bounds.north_east, bounds.north_west))


def _shift_origin(ring, area_threshold: float, distance: DistanceFn) -> LatLng:
    bounds = LatLngBounds.from_latlngs(ring)
    if bounds_area(bounds, distance) < area_threshold:
        return centroid(ring)
    return LatLng(0.0, 0.0)


def _project_shifted(ring, origin: LatLng, projection: ProjectionPort) -> List[Point]:
    return [projection.project(LatLng(ll.lat - origin.lat, ll.lng - origin.lng)) for ll in ring]


def _unproject_shifted(point: Point, origin: LatLng, projection: ProjectionPort) -> LatLng:
    ll = projection.unproject(point)
    return LatLng(ll[0] + origin.lat, ll[1] + origin.lng)


def polyline_center(latlngs, projection: ProjectionPort,
                    area_threshold: float = CENTER['area_threshold'],
                    distance: DistanceFn = haversine_distance) -> LatLng:
    """Point halfway along the polyline, measured in projected space.

    Raises InvalidInputError on empty input. Nested input uses only its
    first ring and logs a warning. A polyline whose points all project to
    the same place returns its first point.
    """
    ring = _first_ring(latlngs)
    origin = _shift_origin(ring, area_threshold, distance)
    points = _project_shifted(ring, origin, projection)

    half_dist = 0.0
    for i in range(len(points) - 1):
        half_dist += projection.distance(points[i], points[i + 1]) / 2

    if half_dist == 0:
        center = points[0]
    else:
        dist = 0.0
        center = points[-1]
        for i in range(len(points) - 1):
            p1 = points[i]
            p2 = points[i + 1]
            seg_dist = projection.distance(p1, p2)
            dist += seg_dist
            if dist > half_dist:
                ratio = (dist - half_dist) / seg_dist
                center = Point(p2.x - ratio * (p2.x - p1.x),
                               p2.y - ratio * (p2.y - p1.y))
                break

    return _unproject_shifted(center, origin, projection)


def polygon_center(latlngs, projection: ProjectionPort,
                   area_threshold: float = CENTER['area_threshold'],
                   distance: DistanceFn = haversine_distance) -> LatLng:
    """Area-weighted centroid of the projected ring.

    Same input handling as `polyline_center`; a zero-area ring returns its
    first point.
    """
    ring = _first_ring(latlngs)
    origin = _shift_origin(ring, area_threshold, distance)
    points = _project_shifted(ring, origin, projection)

    area = x = y = 0.0
    j = len(points) - 1
    for i in range(len(points)):
        p1 = points[i]
        p2 = points[j]
        f = p1.y * p2.x - p2.y * p1.x
        x += (p1.x + p2.x) * f
        y += (p1.y + p2.y) * f
        area += f * 3
        j = i

    if area == 0:
        center = points[0]
    else:
        center = Point(x / area, y / area)
    return _unproject_shifted(center, origin, projection)
