"""Bounding spheres that grow to enclose points."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .vec import Vec3, dist_sqr


@dataclass
class BoundingSphere:
    """A sphere; a negative radius marks it as empty."""

    center: Vec3 = field(default_factory=Vec3)
    radius: float = -1.0

    def valid(self) -> bool:
        return 0 <= self.radius

    def empty(self) -> bool:
        return not self.valid()

    def expand_by(self, v: Vec3) -> None:
        """Grow the sphere as little as possible so that it contains ``v``."""
        if self.empty():
            self.center = v
            self.radius = 0.0
            return

        d2 = dist_sqr(self.center, v)
        if d2 <= self.radius * self.radius:
            return

        dist = math.sqrt(d2)
        new_radius = 0.5 * (self.radius + dist)
        factor = (new_radius - self.radius) / dist
        c = self.center
        self.center = Vec3(
            c.x + factor * (v.x - c.x),
            c.y + factor * (v.y - c.y),
            c.z + factor * (v.z - c.z),
        )
        self.radius = new_radius