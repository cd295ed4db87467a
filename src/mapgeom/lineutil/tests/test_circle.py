import math
import pytest

from mapgeom.lineutil.circle import project_circle, CircleFootprint
from mapgeom.lineutil.errors import InvalidInputError
from mapgeom.lineutil.projection import PlanarProjection, MercatorProjection
from mapgeom.lineutil.types import LatLng, Point


class EarthPlanar(PlanarProjection):
    """Planar degrees flagged as an earth projection."""
    earth = True


def test_planar_circle_radius_in_projected_units():
    fp = project_circle((0.0, 0.0), 5.0, PlanarProjection())
    assert isinstance(fp, CircleFootprint)
    assert fp.point == Point(0.0, 0.0)
    assert fp.radius == 5.0
    assert fp.radius_y == 5.0


def test_nan_radius_rejected():
    with pytest.raises(InvalidInputError, match='NaN'):
        project_circle((0.0, 0.0), float('nan'), PlanarProjection())


def test_mercator_circle_at_equator():
    fp = project_circle(LatLng(0.0, 0.0), 1000.0, MercatorProjection())
    expected = 1000.0 * 6378137.0 / 6371000.0
    assert fp.radius_y == pytest.approx(expected, rel=1e-6)
    assert fp.radius == pytest.approx(expected, rel=1e-4)
    assert fp.point.x == pytest.approx(0.0, abs=1e-6)


def test_tiny_radius_uses_latitude_fallback():
    # cos(lat_r) rounds to 1, so the law-of-cosines radius collapses to 0
    fp = project_circle(LatLng(0.0, 0.0), 1e-7, MercatorProjection())
    assert fp.radius > 0
    assert fp.radius == pytest.approx(1e-7 * 6378137.0 / 6371000.0, rel=1e-3)


def test_earth_circle_widens_with_latitude():
    lat_r = 1000.0 / 6371000.0 * 180.0 / math.pi
    fp = project_circle(LatLng(60.0, 10.0), 1000.0, EarthPlanar())
    assert fp.radius_y == pytest.approx(lat_r, rel=1e-9)
    assert fp.radius == pytest.approx(2 * lat_r, rel=1e-3)
