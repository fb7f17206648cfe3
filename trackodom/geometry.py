"""Planar pose primitives shared by the odometers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Quaternion:
    """A rotation quaternion with components (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def yaw(self) -> float:
        """Return the rotation about the vertical axis, in radians."""
        siny = 2.0 * (self.w * self.z + self.x * self.y)
        cosy = 1.0 - 2.0 * (self.y * self.y + self.z * self.z)
        return math.atan2(siny, cosy)


def quaternion_from_yaw(yaw: float) -> Quaternion:
    """Build a quaternion that rotates by ``yaw`` radians about the z axis."""
    half = yaw / 2.0
    return Quaternion(0.0, 0.0, math.sin(half), math.cos(half))


@dataclass(frozen=True)
class Odometry:
    """A planar pose estimate with its velocities, in the world frame."""

    x: float
    y: float
    z: float = 0.0
    orientation: Quaternion = field(default_factory=Quaternion)
    linear_velocity: float = 0.0
    angular_velocity: float = 0.0
    stamp: float | None = None
    frame_id: str = "world"
    child_frame_id: str = "vehicle"