import math

import pytest

from terrainview.geod import EQURAD, SQUASH, geod_to_cart


def test_equator_prime_meridian():
    x, y, z = geod_to_cart(0.0, 0.0, 0.0)
    assert x == pytest.approx(EQURAD)
    assert y == pytest.approx(0.0, abs=1e-9)
    assert z == pytest.approx(0.0, abs=1e-9)


def test_north_pole_is_polar_radius():
    x, y, z = geod_to_cart(90.0, 0.0, 0.0)
    assert abs(x) < 1e-6 and abs(y) < 1e-6
    assert z == pytest.approx(EQURAD * SQUASH)


def test_longitude_90_is_on_y_axis():
    x, y, z = geod_to_cart(0.0, 90.0, 0.0)
    assert abs(x) < 1e-6
    assert y == pytest.approx(EQURAD)


@pytest.mark.parametrize("lat,lon", [(0.0, 0.0), (0.0, 45.0), (0.0, -120.0)])
def test_altitude_adds_radially_on_equator(lat, lon):
    r0 = math.hypot(*geod_to_cart(lat, lon, 0.0))
    r1 = math.hypot(*geod_to_cart(lat, lon, 1000.0))
    assert r1 - r0 == pytest.approx(1000.0)


def test_southern_hemisphere_mirrors_northern():
    n = geod_to_cart(45.0, 10.0, 500.0)
    s = geod_to_cart(-45.0, 10.0, 500.0)
    assert s[0] == pytest.approx(n[0])
    assert s[1] == pytest.approx(n[1])
    assert s[2] == pytest.approx(-n[2])