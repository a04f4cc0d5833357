import math

import pytest

from terrainview.sphere import BoundingSphere
from terrainview.vec import Vec3, dist_sqr


def test_default_sphere_is_empty():
    s = BoundingSphere()
    assert s.empty()
    assert not s.valid()


def test_first_point_becomes_center():
    s = BoundingSphere()
    p = Vec3(4, 5, 6)
    s.expand_by(p)
    assert s.center == p
    assert s.radius == 0.0
    assert s.valid()


def test_inside_point_leaves_sphere_unchanged():
    s = BoundingSphere(Vec3(0, 0, 0), 10.0)
    s.expand_by(Vec3(1, 2, 3))
    assert s.center == Vec3(0, 0, 0)
    assert s.radius == 10.0


def test_two_points_give_midpoint_sphere():
    s = BoundingSphere()
    a, b = Vec3(0, 0, 0), Vec3(2, 0, 0)
    s.expand_by(a)
    s.expand_by(b)
    assert s.radius == pytest.approx(math.sqrt(dist_sqr(a, b)) / 2)
    assert tuple(s.center) == pytest.approx(((a.x + b.x) / 2, 0.0, 0.0))


def test_all_points_enclosed():
    points = [Vec3(i * 1.3, (i % 4) - 2.0, -i * 0.7) for i in range(20)]
    s = BoundingSphere()
    for p in points:
        s.expand_by(p)
    for p in points:
        assert math.sqrt(dist_sqr(s.center, p)) <= s.radius + 1e-9