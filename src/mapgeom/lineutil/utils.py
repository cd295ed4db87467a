"""
utils.py

Coercion and logging helpers shared by the line utilities.

The public helpers:
- `as_point(p)` / `as_latlng(p)` : normalise tuples, numpy rows and
  attribute objects into :class:`Point` / :class:`LatLng`
- `as_point_list(points)` : coerce a whole sequence once at the boundary
- `configure_logging(level)` : attach a console handler to the package logger

"""

from typing import Any, List
import sys
import logging
import numpy as np

from mapgeom.lineutil.types import Point, LatLng


def _pair(value: Any, kind: str) -> np.ndarray:
    try:
        arr = np.asarray(value, dtype=float).ravel()
    except (TypeError, ValueError) as e:
        raise TypeError(f'{kind} expects two numbers, got {value!r}') from e
    if arr.size != 2:
        raise TypeError(f'{kind} expects two numbers, got {value!r}')
    return arr


def as_point(p: Any) -> Point:
    """Return ``p`` as a :class:`Point`.

    Accepts Points, ``(x, y)`` pairs, 2-element numpy arrays and objects
    exposing ``x``/``y`` attributes.
    """
    if isinstance(p, Point):
        return p
    if hasattr(p, 'x') and hasattr(p, 'y') and not isinstance(p, np.ndarray):
        return Point(float(p.x), float(p.y))
    arr = _pair(p, 'as_point')
    return Point(float(arr[0]), float(arr[1]))


def as_latlng(p: Any) -> LatLng:
    """Return ``p`` as a :class:`LatLng`; pairs are read as ``(lat, lng)``."""
    if isinstance(p, LatLng):
        return p
    if hasattr(p, 'lat') and hasattr(p, 'lng'):
        return LatLng(float(p.lat), float(p.lng))
    arr = _pair(p, 'as_latlng')
    return LatLng(float(arr[0]), float(arr[1]))


def as_point_list(points: Any) -> List[Point]:
    if points is None:
        return []
    return [as_point(p) for p in points]


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a console handler to the ``mapgeom`` logger once.

    Repeated calls only update the level, so importing applications can call
    this freely without duplicating output.
    """
    log = logging.getLogger('mapgeom')
    if not log.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
        log.addHandler(h)
    log.setLevel(level)
    for h in log.handlers:
        h.setLevel(level)
    return log
