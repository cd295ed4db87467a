"""Value types shared by the simplification, clipping and center routines.

Planar geometry uses :class:`Point` (projected or pixel units); geographic
geometry uses :class:`LatLng`. Ring geometry crossing the public boundary is
tagged as either :class:`SingleRing` or :class:`MultiRing` so that callers
never have to guess the nesting of a coordinate array.
"""
from typing import NamedTuple, Tuple, Union
import numpy as np
from shapely.geometry import LineString, MultiLineString


class Point(NamedTuple):
    x: float
    y: float

    def add(self, other) -> 'Point':
        return Point(self.x + other[0], self.y + other[1])

    def subtract(self, other) -> 'Point':
        return Point(self.x - other[0], self.y - other[1])

    def distance_to(self, other) -> float:
        return float(np.hypot(other[0] - self.x, other[1] - self.y))


class LatLng(NamedTuple):
    lat: float
    lng: float


class Bounds(NamedTuple):
    """Axis-aligned rectangle; ``min`` holds the smaller x and y."""
    min: Point
    max: Point

    @classmethod
    def from_points(cls, points) -> 'Bounds':
        arr = np.asarray(points, dtype=float).reshape(-1, 2)
        if arr.shape[0] == 0:
            raise ValueError('Bounds need at least one point')
        lo = arr.min(axis=0)
        hi = arr.max(axis=0)
        return cls(Point(float(lo[0]), float(lo[1])), Point(float(hi[0]), float(hi[1])))

    def contains(self, p) -> bool:
        return self.min.x <= p[0] <= self.max.x and self.min.y <= p[1] <= self.max.y

    def intersects(self, other: 'Bounds') -> bool:
        return (other.max.x >= self.min.x and other.min.x <= self.max.x
                and other.max.y >= self.min.y and other.min.y <= self.max.y)


class LatLngBounds(NamedTuple):
    south_west: LatLng
    north_east: LatLng

    @classmethod
    def from_latlngs(cls, latlngs) -> 'LatLngBounds':
        arr = np.asarray(latlngs, dtype=float).reshape(-1, 2)
        if arr.shape[0] == 0:
            raise ValueError('LatLngBounds need at least one coordinate')
        lo = arr.min(axis=0)
        hi = arr.max(axis=0)
        return cls(LatLng(float(lo[0]), float(lo[1])), LatLng(float(hi[0]), float(hi[1])))

    @property
    def north_west(self) -> LatLng:
        return LatLng(self.north_east.lat, self.south_west.lng)

    @property
    def south_east(self) -> LatLng:
        return LatLng(self.south_west.lat, self.north_east.lng)


# ============================================================
# Tagged ring geometry
# ============================================================
def _ring_from_coords(coords) -> Tuple[LatLng, ...]:
    # shapely stores (x=lng, y=lat[, z])
    return tuple(LatLng(float(c[1]), float(c[0])) for c in coords)


class SingleRing(NamedTuple):
    """One flat ring (or open polyline) of geographic coordinates."""
    points: Tuple[LatLng, ...]

    @classmethod
    def from_shapely(cls, geom) -> 'SingleRing':
        if geom.geom_type == 'Polygon':
            return cls(_ring_from_coords(geom.exterior.coords))
        if geom.geom_type in ('LineString', 'LinearRing'):
            return cls(_ring_from_coords(geom.coords))
        raise TypeError(f'Cannot build a single ring from {geom.geom_type}')

    def to_shapely(self) -> LineString:
        return LineString([(p.lng, p.lat) for p in self.points])


class MultiRing(NamedTuple):
    """Several rings, e.g. a polygon with holes or a multi-polyline."""
    rings: Tuple[SingleRing, ...]

    @classmethod
    def from_shapely(cls, geom) -> 'MultiRing':
        if geom.geom_type == 'Polygon':
            rings = [geom.exterior] + list(geom.interiors)
        elif geom.geom_type == 'MultiPolygon':
            rings = [poly.exterior for poly in geom.geoms]
        elif geom.geom_type == 'MultiLineString':
            rings = list(geom.geoms)
        else:
            raise TypeError(f'Cannot build multiple rings from {geom.geom_type}')
        return cls(tuple(SingleRing(_ring_from_coords(r.coords)) for r in rings))

    def to_shapely(self) -> MultiLineString:
        return MultiLineString([r.to_shapely() for r in self.rings])


RingGeometry = Union[SingleRing, MultiRing]


def _is_coordinate_container(value) -> bool:
    if isinstance(value, (LatLng, Point, str, bytes)):
        return False
    return isinstance(value, (list, tuple, np.ndarray))


def is_flat(latlngs) -> bool:
    """True if ``latlngs`` is a single ring, False if it is a set of rings.

    Tagged geometry answers directly. Raw sequences are flat when their
    first element is a coordinate rather than a list of coordinates; an
    empty sequence counts as flat.
    """
    if isinstance(latlngs, SingleRing):
        return True
    if isinstance(latlngs, MultiRing):
        return False
    if isinstance(latlngs, np.ndarray):
        return latlngs.ndim <= 2
    if len(latlngs) == 0:
        return True
    first = latlngs[0]
    if not _is_coordinate_container(first):
        return True
    # an empty inner list is an empty ring, not a coordinate
    if len(first) == 0:
        return False
    inner = first[0]
    return not (isinstance(inner, (LatLng, Point)) or _is_coordinate_container(inner))


def as_rings(latlngs) -> RingGeometry:
    """Tag raw coordinate input as a :class:`SingleRing` or :class:`MultiRing`."""
    if isinstance(latlngs, (SingleRing, MultiRing)):
        return latlngs
    from mapgeom.lineutil.utils import as_latlng
    if is_flat(latlngs):
        return SingleRing(tuple(as_latlng(p) for p in latlngs))
    return MultiRing(tuple(
        ring if isinstance(ring, SingleRing) else SingleRing(tuple(as_latlng(p) for p in ring))
        for ring in latlngs))
