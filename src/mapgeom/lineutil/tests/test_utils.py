import logging
import numpy as np
import pytest

from mapgeom.lineutil.types import LatLng, Point
from mapgeom.lineutil.utils import as_latlng, as_point, as_point_list, configure_logging


class XY:
    def __init__(self, x, y):
        self.x = x
        self.y = y


def test_as_point_variants():
    assert as_point((1, 2)) == Point(1.0, 2.0)
    assert as_point(np.array([3, 4])) == Point(3.0, 4.0)
    assert as_point(XY(5, 6)) == Point(5.0, 6.0)
    p = Point(7, 8)
    assert as_point(p) is p


def test_as_point_rejects_bad_values():
    with pytest.raises(TypeError):
        as_point((1, 2, 3))
    with pytest.raises(TypeError):
        as_point('ab')


def test_as_latlng_reads_lat_first():
    assert as_latlng((10, 20)) == LatLng(10.0, 20.0)
    ll = LatLng(1, 2)
    assert as_latlng(ll) is ll


def test_as_point_list_none():
    assert as_point_list(None) == []


def test_configure_logging_idempotent():
    log = logging.getLogger('mapgeom')
    before = list(log.handlers)
    try:
        configure_logging(logging.DEBUG)
        configure_logging(logging.WARNING)
        added = [h for h in log.handlers if h not in before]
        assert len(log.handlers) == max(1, len(before))
        assert log.level == logging.WARNING
    finally:
        for h in added:
            log.removeHandler(h)
        log.setLevel(logging.NOTSET)
