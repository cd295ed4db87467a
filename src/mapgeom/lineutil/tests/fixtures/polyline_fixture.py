import numpy as np

from mapgeom.lineutil.types import Point


def sine_polyline(n=50, spacing=10.0, amplitude=20.0, period=30.0):
    """Sampled sine wave along x.

    Consecutive samples are at least ``spacing`` apart, so radial vertex
    reduction drops nothing for tolerances below ``spacing``.
    """
    xs = np.arange(n, dtype=float) * spacing
    ys = amplitude * np.sin(xs / period)
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]


def noisy_polyline(n=500, noise=0.3, seed=42):
    """Random walk along x with small lateral jitter."""
    rng = np.random.default_rng(seed)
    xs = np.cumsum(rng.uniform(0.05, 0.5, size=n))
    ys = np.cumsum(rng.normal(0.0, noise, size=n))
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]
