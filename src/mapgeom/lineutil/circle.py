"""Projected footprint of a geographic circle given in metres.

On an earth projection the circle's latitude radius is exact but its
longitude radius depends on latitude; near the poles, and for very small
radii, the spherical law of cosines degenerates to NaN or zero and a
``lat_r / cos(lat)`` approximation is used instead.
"""
from typing import NamedTuple
import math
import numpy as np

from mapgeom.lineutil.types import LatLng, Point
from mapgeom.lineutil.errors import InvalidInputError
from mapgeom.lineutil.projection import ProjectionPort
from mapgeom.lineutil.utils import as_latlng
from mapgeom.lineutil.config import EARTH


class CircleFootprint(NamedTuple):
    point: Point        # projected center
    radius: float       # horizontal radius (projected units)
    radius_y: float     # vertical radius (projected units)


def project_circle(center, radius_m: float, projection: ProjectionPort,
                   earth_radius: float = EARTH['R']) -> CircleFootprint:
    """Project a circle of ``radius_m`` metres around ``center``."""
    if radius_m is None or math.isnan(radius_m):
        raise InvalidInputError('Circle radius cannot be NaN')
    ll = as_latlng(center)
    lat, lng = ll.lat, ll.lng

    if not getattr(projection, 'earth', False):
        point = projection.project(ll)
        shifted = projection.unproject(Point(point.x - radius_m, point.y))
        radius = abs(point.x - projection.project(shifted).x)
        return CircleFootprint(point, radius, radius)

    d = math.pi / 180
    lat_r = (radius_m / earth_radius) / d
    top = projection.project(LatLng(lat + lat_r, lng))
    bottom = projection.project(LatLng(lat - lat_r, lng))
    point = Point((top.x + bottom.x) / 2, (top.y + bottom.y) / 2)
    lat2 = projection.unproject(point).lat

    with np.errstate(invalid='ignore', divide='ignore'):
        num = np.cos(np.float64(lat_r * d)) - np.sin(lat * d) * np.sin(lat2 * d)
        den = np.cos(np.float64(lat * d)) * np.cos(lat2 * d)
        lng_r = float(np.arccos(num / den)) / d

    if math.isnan(lng_r) or lng_r == 0:
        # degenerate near the poles or for tiny radii
        with np.errstate(invalid='ignore', divide='ignore'):
            lng_r = float(lat_r / np.cos(np.float64(d * lat)))

    if math.isnan(lng_r):
        radius = 0.0
    else:
        radius = abs(point.x - projection.project(LatLng(lat2, lng - lng_r)).x)
    radius_y = abs(point.y - top.y)
    return CircleFootprint(point, radius, radius_y)
