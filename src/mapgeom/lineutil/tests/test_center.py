import logging
import numpy as np
import pytest

from mapgeom.lineutil.center import polyline_center, polygon_center, centroid, bounds_area
from mapgeom.lineutil.errors import InvalidInputError
from mapgeom.lineutil.projection import PlanarProjection, MercatorProjection
from mapgeom.lineutil.types import LatLng, LatLngBounds, MultiRing, SingleRing


@pytest.fixture
def planar():
    return PlanarProjection()


# --- input validation ---

@pytest.mark.parametrize('bad', [None, [], (), SingleRing(()), MultiRing(())])
def test_polyline_center_rejects_empty(planar, bad):
    with pytest.raises(InvalidInputError, match='latlngs not passed'):
        polyline_center(bad, planar)


def test_polygon_center_rejects_empty(planar):
    with pytest.raises(InvalidInputError):
        polygon_center([], planar)


def test_invalid_input_is_value_error(planar):
    with pytest.raises(ValueError):
        polyline_center([], planar)


# --- polyline center ---

def test_polyline_center_identical_points(planar):
    c = polyline_center([(10.0, 20.0)] * 4, planar)
    assert c == pytest.approx((10.0, 20.0))


def test_polyline_center_single_point(planar):
    c = polyline_center([(3.0, 4.0)], planar)
    assert c == pytest.approx((3.0, 4.0))


def test_polyline_center_symmetric_three_points(planar):
    c = polyline_center([(0, 0), (0, 1), (0, 2)], planar)
    assert c == LatLng(0.0, 1.0)


def test_polyline_center_uneven_segments(planar):
    c = polyline_center([(0, 0), (0, 1), (0, 4)], planar)
    assert c.lat == pytest.approx(0.0)
    assert c.lng == pytest.approx(2.0)


def test_polyline_center_large_geometry(planar):
    # spans tens of kilometres, so no local shift is applied
    c = polyline_center([(0, 0), (2, 0), (2, 2)], planar)
    assert c == pytest.approx((2.0, 0.0))


def test_polyline_center_nested_uses_first_ring(planar, caplog):
    nested = [[(0, 0), (0, 1), (0, 2)], [(5, 5), (5, 9)]]
    with caplog.at_level(logging.WARNING, logger='mapgeom.lineutil.center'):
        c = polyline_center(nested, planar)
    assert c == LatLng(0.0, 1.0)
    assert 'not flat' in caplog.text


def test_polyline_center_tagged_multiring(planar, caplog):
    rings = MultiRing((SingleRing((LatLng(0, 0), LatLng(0, 2))), SingleRing((LatLng(9, 9),))))
    with caplog.at_level(logging.WARNING):
        c = polyline_center(rings, planar)
    assert c == pytest.approx((0.0, 1.0))
    assert len(caplog.records) == 1


def test_polyline_center_flat_input_does_not_warn(planar, caplog):
    with caplog.at_level(logging.WARNING):
        polyline_center([(0, 0), (0, 2)], planar)
    assert caplog.records == []


def test_polyline_center_numpy_input(planar):
    arr = np.array([[0.0, 0.0], [0.0, 1.0], [0.0, 2.0]])
    assert polyline_center(arr, planar) == pytest.approx((0.0, 1.0))


def test_polyline_center_mercator_equator():
    c = polyline_center([(0, 0), (0, 5), (0, 10)], MercatorProjection())
    assert c.lat == pytest.approx(0.0, abs=1e-9)
    assert c.lng == pytest.approx(5.0, abs=1e-9)


def test_polyline_center_mercator_small_far_geometry():
    # a few metres of line far from the projection origin
    line = [(45.0, 10.0), (45.0, 10.00001), (45.0, 10.00002)]
    c = polyline_center(line, MercatorProjection())
    assert c.lat == pytest.approx(45.0, abs=1e-9)
    assert c.lng == pytest.approx(10.00001, abs=1e-9)


# --- polygon center ---

def test_polygon_center_square(planar):
    square = [(0, 0), (0, 2), (2, 2), (2, 0)]
    assert polygon_center(square, planar) == pytest.approx((1.0, 1.0))


def test_polygon_center_zero_area_returns_first_point(planar):
    assert polygon_center([(0, 0), (0, 1), (0, 2)], planar) == pytest.approx((0.0, 0.0))


def test_polygon_center_small_polygon(planar):
    sq = [(50.0, 8.0), (50.0, 8.0001), (50.0001, 8.0001), (50.0001, 8.0)]
    c = polygon_center(sq, planar)
    assert c.lat == pytest.approx(50.00005, abs=1e-12)
    assert c.lng == pytest.approx(8.00005, abs=1e-12)


# --- helpers ---

def test_centroid_triangle():
    assert centroid([(0, 0), (0, 3), (3, 0)]) == pytest.approx((1.0, 1.0))


def test_centroid_collinear_falls_back_to_mean():
    assert centroid([(0, 0), (0, 1), (0, 5)]) == pytest.approx((0.0, 2.0))


def test_bounds_area_small_and_large():
    tiny = LatLngBounds(LatLng(45.0, 10.0), LatLng(45.0001, 10.0001))
    big = LatLngBounds(LatLng(0.0, 0.0), LatLng(1.0, 1.0))
    assert bounds_area(tiny) < 1700
    assert bounds_area(big) > 1e10


def test_bounds_area_custom_distance():
    b = LatLngBounds(LatLng(0.0, 0.0), LatLng(2.0, 3.0))
    planar_distance = lambda a, c: float(np.hypot(a[0] - c[0], a[1] - c[1]))
    assert bounds_area(b, planar_distance) == pytest.approx(6.0)


def test_polyline_center_nested_latlng_rings(planar, caplog):
    nested = [[LatLng(0, 0), LatLng(0, 2)], [LatLng(5, 5), LatLng(5, 9)]]
    with caplog.at_level(logging.WARNING, logger='mapgeom.lineutil.center'):
        c = polyline_center(nested, planar)
    assert c == pytest.approx((0.0, 1.0))
    assert 'not flat' in caplog.text


def test_polyline_center_single_point_rings(planar):
    assert polyline_center([[LatLng(0, 0)], [LatLng(5, 5)]], planar) == pytest.approx((0.0, 0.0))
