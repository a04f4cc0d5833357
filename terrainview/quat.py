"""Quaternion helpers; quaternions are (x, y, z, w) tuples."""

from __future__ import annotations

import math

import numpy as np

Quat = tuple[float, float, float, float]


def quat_from_euler(z: float, y: float, x: float) -> Quat:
    """Quaternion from z-y-x Euler angles in radians."""
    zd2, yd2, xd2 = 0.5 * z, 0.5 * y, 0.5 * x
    szd2, syd2, sxd2 = math.sin(zd2), math.sin(yd2), math.sin(xd2)
    czd2, cyd2, cxd2 = math.cos(zd2), math.cos(yd2), math.cos(xd2)
    cxcz = cxd2 * czd2
    cxsz = cxd2 * szd2
    sxsz = sxd2 * szd2
    sxcz = sxd2 * czd2
    return (
        sxcz * cyd2 - cxsz * syd2,
        cxcz * syd2 + sxsz * cyd2,
        cxsz * cyd2 - sxcz * syd2,
        cxcz * cyd2 + sxsz * syd2,
    )


def quat_from_lon_lat(lon: float, lat: float) -> Quat:
    """Rotation from the earth-centred frame to the local horizontal frame (degrees)."""
    lon = math.radians(lon)
    lat = math.radians(lat)
    zd2 = 0.5 * lon
    yd2 = -0.25 * math.pi - 0.5 * lat
    szd2, syd2 = math.sin(zd2), math.sin(yd2)
    czd2, cyd2 = math.cos(zd2), math.cos(yd2)
    return (-szd2 * syd2, czd2 * syd2, szd2 * cyd2, czd2 * cyd2)


def quat_from_ypr(yaw: float, pitch: float, roll: float) -> Quat:
    """Quaternion from yaw, pitch and roll in degrees."""
    return quat_from_euler(math.radians(yaw), math.radians(pitch), math.radians(roll))


def quat_mul(p: Quat, q: Quat) -> Quat:
    """Hamilton product ``p * q``."""
    px, py, pz, pw = p
    qx, qy, qz, qw = q
    return (
        pw * qx + px * qw + py * qz - pz * qy,
        pw * qy - px * qz + py * qw + pz * qx,
        pw * qz + px * qy - py * qx + pz * qw,
        pw * qw - px * qx - py * qy - pz * qz,
    )


def quat_inv(q: Quat) -> Quat:
    """Multiplicative inverse of ``q``."""
    x, y, z, w = q
    n2 = x * x + y * y + z * z + w * w
    if n2 == 0.0:
        raise ZeroDivisionError("cannot invert a zero quaternion")
    return (-x / n2, -y / n2, -z / n2, w / n2)


def quat_to_mat4(q: Quat) -> np.ndarray:
    """4x4 rotation matrix ``M`` such that ``M @ v`` rotates column vector ``v``."""
    x, y, z, w = q
    n2 = x * x + y * y + z * z + w * w
    s = 2.0 / n2 if n2 > 0.0 else 0.0
    xx, yy, zz = s * x * x, s * y * y, s * z * z
    xy, yz, xz = s * x * y, s * y * z, s * x * z
    wx, wy, wz = s * w * x, s * w * y, s * w * z
    return np.array(
        [
            [1.0 - yy - zz, xy - wz, xz + wy, 0.0],
            [xy + wz, 1.0 - xx - zz, yz - wx, 0.0],
            [xz - wy, yz + wx, 1.0 - xx - yy, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )