# -*- coding: utf-8 -*-

"""
lineutil/config.py

Central constants for the polyline simplification, clipping and center
routines. Values live here so renderers, hit-testing code and tests agree on
the same thresholds.

Contents:
---------
1. EARTH:
   - Mean radius of the spherical earth used for great-circle distances
     and for converting circle radii from metres to degrees.

2. CENTER:
   - Bounding-area threshold below which polyline/polygon centers are
     computed around a local centroid instead of (0, 0). Rounding errors
     in the projected midpoint were observed below this value.

3. SIMPLIFY:
   - Default tolerance for callers that simplify per zoom level and do
     not carry their own setting.

4. CLIP:
   - Default rounding behaviour for clip intersections. Pixel renderers
     usually want integer coordinates and pass ``round_coords=True``.

Usage:
------
    from mapgeom.lineutil.config import CENTER, EARTH

Every function that reads one of these values also accepts it as a keyword
argument, so a single call can override it without touching this module.

"""

# ───────────────────────────────────────────────────────────────────────────────
# 1) SPHERICAL EARTH
# ───────────────────────────────────────────────────────────────────────────────
EARTH = {
    'R': 6371000.0,             # Mean earth radius (m)
}

# ───────────────────────────────────────────────────────────────────────────────
# 2) CENTER COMPUTATION
# ───────────────────────────────────────────────────────────────────────────────
CENTER = {
    'area_threshold': 1700.0,   # Bounding-box area (m²) below which a local centroid shift is applied
}

# ───────────────────────────────────────────────────────────────────────────────
# 3) SIMPLIFICATION
# ───────────────────────────────────────────────────────────────────────────────
SIMPLIFY = {
    'default_tolerance': 1.0,   # Linear tolerance (px); squared internally
}

# ───────────────────────────────────────────────────────────────────────────────
# 4) CLIPPING
# ───────────────────────────────────────────────────────────────────────────────
CLIP = {
    'round': False,             # Round new intersection points to integers
}
