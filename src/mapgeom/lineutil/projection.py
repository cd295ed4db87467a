"""Projection ports consumed by the center and circle routines.

The line utilities never project coordinates themselves; they call an object
satisfying :class:`ProjectionPort`. Two ports are provided:

- :class:`PlanarProjection` treats (lat, lng) as flat (x=lng, y=lat) units.
- :class:`MercatorProjection` projects EPSG:4326 to a metric CRS (Web
  Mercator by default) through ``pyproj``.

`haversine_distance` is the spherical great-circle distance used to estimate
how large a geometry's bounding box is on the ground.
"""
from typing import Protocol, runtime_checkable
import math
import numpy as np
from pyproj import Transformer

from mapgeom.lineutil.types import LatLng, Point
from mapgeom.lineutil.config import EARTH


@runtime_checkable
class ProjectionPort(Protocol):
    earth: bool

    def project(self, latlng: LatLng) -> Point:
        ...

    def unproject(self, point: Point) -> LatLng:
        ...

    def distance(self, p1: Point, p2: Point) -> float:
        ...


def haversine_distance(a: LatLng, b: LatLng, radius: float = EARTH['R']) -> float:
    """Great-circle distance between two coordinates on a sphere (m)."""
    lat1 = np.radians(a[0])
    lat2 = np.radians(b[0])
    sin_dlat = np.sin(np.radians(b[0] - a[0]) / 2)
    sin_dlon = np.sin(np.radians(b[1] - a[1]) / 2)
    h = sin_dlat * sin_dlat + np.cos(lat1) * np.cos(lat2) * sin_dlon * sin_dlon
    c = 2 * np.arctan2(np.sqrt(h), np.sqrt(1 - h))
    return float(radius * c)


class PlanarProjection:
    """Identity projection: x is longitude, y is latitude."""

    earth = False

    def project(self, latlng: LatLng) -> Point:
        return Point(float(latlng[1]), float(latlng[0]))

    def unproject(self, point: Point) -> LatLng:
        return LatLng(float(point[1]), float(point[0]))

    def distance(self, p1: Point, p2: Point) -> float:
        return math.hypot(p2[0] - p1[0], p2[1] - p1[1])


class MercatorProjection:
    """Project geographic coordinates to a metric CRS with ``pyproj``.

    Parameters:
    - crs: target CRS understood by pyproj (default Web Mercator).
    """

    earth = True

    def __init__(self, crs: str = "EPSG:3857"):
        self.crs = crs
        self._to_xy = Transformer.from_crs("EPSG:4326", crs, always_xy=True)
        self._to_ll = Transformer.from_crs(crs, "EPSG:4326", always_xy=True)

    def project(self, latlng: LatLng) -> Point:
        x, y = self._to_xy.transform(latlng[1], latlng[0])
        return Point(float(x), float(y))

    def unproject(self, point: Point) -> LatLng:
        lng, lat = self._to_ll.transform(point[0], point[1])
        return LatLng(float(lat), float(lng))

    def distance(self, p1: Point, p2: Point) -> float:
        return math.hypot(p2[0] - p1[0], p2[1] - p1[1])
