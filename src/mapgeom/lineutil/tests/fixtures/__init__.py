from mapgeom.lineutil.types import Point


def straight_polyline(n=11, spacing=1.0):
    """Points along the x axis, ``spacing`` apart."""
    return [Point(float(i * spacing), 0.0) for i in range(n)]
