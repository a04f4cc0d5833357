"""Geodetic to earth-centred cartesian conversion on the WGS84 ellipsoid."""

from __future__ import annotations

import math

SQUASH = 0.9966471893352525192801545
EQURAD = 6378137.0
E2 = abs(1 - SQUASH * SQUASH)


def geod_to_cart(latitude: float, longitude: float, altitude: float) -> tuple[float, float, float]:
    """Convert degrees/metres geodetic coordinates to ECEF (X, Y, Z) metres."""
    lam = math.radians(longitude)
    phi = math.radians(latitude)
    h = altitude
    sphi = math.sin(phi)
    n = EQURAD / math.sqrt(1 - E2 * sphi * sphi)
    cphi = math.cos(phi)
    x = (h + n) * cphi * math.cos(lam)
    y = (h + n) * cphi * math.sin(lam)
    z = (h + n - E2 * n) * sphi
    return x, y, z