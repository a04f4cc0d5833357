"""The aircraft, used as the camera that looks at the terrain."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from .geod import geod_to_cart
from .quat import quat_from_lon_lat, quat_from_ypr, quat_inv, quat_mul, quat_to_mat4

# Rotates the x-forward, y-right, z-down simulation frame into the
# OpenGL camera frame with x-right, y-up, z-back.
_SIM_TO_GL = (-0.5, -0.5, 0.5, 0.5)


def _zero_vec3() -> np.ndarray:
    return np.zeros(3)


def _translation(x: float, y: float, z: float) -> np.ndarray:
    m = np.identity(4)
    m[:3, 3] = (x, y, z)
    return m


@dataclass
class Plane:
    """Position (degrees, metres, ECEF metres), attitude (degrees) and view matrix."""

    latitude: float = 0.0
    longitude: float = 0.0
    alt: float = 0.0

    roll: float = 0.0
    pitch: float = 0.0
    heading: float = 0.0

    X: float = math.nan
    Y: float = math.nan
    Z: float = math.nan

    speed: float = 0.0

    vroll: float = 0.0
    vpitch: float = 0.0
    vheading: float = 0.0

    vX: float = 0.0
    vY: float = 0.0
    vZ: float = 0.0

    x: np.ndarray = field(default_factory=_zero_vec3)
    y: np.ndarray = field(default_factory=_zero_vec3)
    z: np.ndarray = field(default_factory=_zero_vec3)

    dirty: bool = False

    attitude: np.ndarray = field(default_factory=lambda: np.identity(4))
    view: np.ndarray = field(default_factory=lambda: np.identity(4))

    def update_view(self) -> None:
        """Apply pending motion and rebuild the view matrix if anything changed."""
        if not self.dirty:
            return

        if self.speed:
            self.X += self.x[0] * self.speed
            self.Y += self.x[1] * self.speed
            self.Z += self.x[2] * self.speed

        self.X += self.vX
        self.Y += self.vY
        self.Z += self.vZ

        self.roll += self.vroll
        self.pitch += self.vpitch
        self.heading += self.vheading

        # Earth-centred frame -> local horizontal frame -> body frame.
        hl_orientation = quat_from_lon_lat(self.longitude, self.latitude)
        hl_to_body = quat_from_ypr(self.heading, self.pitch, self.roll)
        ec_to_body = quat_mul(hl_orientation, hl_to_body)
        view_orientation = quat_mul(ec_to_body, _SIM_TO_GL)

        rotation = quat_to_mat4(quat_inv(view_orientation))
        self.view = rotation @ _translation(-self.X, -self.Y, -self.Z)
        self.dirty = False

    def set_attitude(self, roll: float, pitch: float, heading: float) -> None:
        """Set roll, pitch and heading in degrees."""
        self.roll = roll
        self.pitch = pitch
        self.heading = heading
        self.dirty = True

    def set_position(self, lat: float, lon: float, alt: float) -> None:
        """Set the geodetic position (degrees, metres) and its ECEF counterpart."""
        self.latitude = lat
        self.longitude = lon
        self.alt = alt
        self.X, self.Y, self.Z = geod_to_cart(lat, lon, alt)
        self.dirty = True

    def update_position(self, lat: float, lon: float, alt: float, dt: float) -> None:
        """Move to a new position and derive the ECEF velocity over ``dt`` seconds."""
        if dt == 0:
            raise ValueError("time step must not be zero")
        old_x, old_y, old_z = self.X, self.Y, self.Z
        self.set_position(lat, lon, alt)
        if not math.isnan(old_x):
            self.vX = (self.X - old_x) / dt
            self.vY = (self.Y - old_y) / dt
            self.vZ = (self.Z - old_z) / dt

    def dump(self) -> None:
        """Print position, attitude and body vectors."""
        print(f"Plane position(X,Y,Z): {self.X:0.5f}, {self.Y:0.5f}, {self.Z:0.5f}")
        print(
            f"Plane attiude: roll:{self.roll:0.5f} pitch: {self.pitch:0.5f} "
            f"heading: {self.heading:0.5f}"
        )
        print("XYZ vectors:")
        for label, vec in (("x", self.x), ("y", self.y), ("z", self.z)):
            print(f"{label}: {vec[0]:f} {vec[1]:f} {vec[2]:f}")