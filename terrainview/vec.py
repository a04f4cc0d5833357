"""Small immutable vector types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

FLT_MIN = 1.1754943508222875e-38


@dataclass(frozen=True)
class Vec3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z


@dataclass(frozen=True)
class Vec2:
    """A two-component vector, typically texture coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


def normalize(v: Vec3) -> Vec3:
    """Return ``v`` scaled to unit length, or the zero vector if too short."""
    norm = math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)
    if norm <= FLT_MIN:
        return Vec3(0.0, 0.0, 0.0)
    inv = 1.0 / norm
    return Vec3(inv * v.x, inv * v.y, inv * v.z)


def dist_sqr(a: Vec3, b: Vec3) -> float:
    """Squared euclidean distance between two points."""
    dx = a.x - b.x
    dy = a.y - b.y
    dz = a.z - b.z
    return dx * dx + dy * dy + dz * dz