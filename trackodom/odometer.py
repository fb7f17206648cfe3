"""Dead-reckoning odometry from steering angle and speed."""

from __future__ import annotations

import logging
import math

from .geometry import Odometry, quaternion_from_yaw

logger = logging.getLogger(__name__)

_STRAIGHT_EPSILON = 1e-6


class BicycleOdometer:
    """Integrates a bicycle model driven by steering-wheel angle and speed.

    The pose starts at the origin facing along +y.
    """

    def __init__(
        self,
        wheelbase: float = 1.765,
        steering_factor: float = 32.0,
        rear_offset: float = 1.3,
        start_time: float = 0.0,
    ) -> None:
        self.wheelbase = wheelbase
        self.steering_factor = steering_factor
        self.rear_offset = rear_offset
        self.x = 0.0
        self.y = 0.0
        self.theta = math.pi / 2
        self._last_time = start_time

    def update(self, steer_deg: float, speed_kmh: float, stamp: float) -> Odometry:
        """Advance the pose to ``stamp`` (seconds) and return it."""
        logger.info("steer: %f, speed: %f", steer_deg, speed_kmh)
        v = speed_kmh / 3.6
        alpha = math.radians(steer_deg / self.steering_factor)
        dt = stamp - self._last_time
        self._last_time = stamp

        tan_alpha = math.tan(alpha)
        if tan_alpha == 0.0:
            omega = 0.0
        else:
            radius = self.wheelbase / tan_alpha + self.rear_offset
            omega = v / radius

        if abs(omega) < _STRAIGHT_EPSILON:
            theta_mid = self.theta + omega * dt / 2.0
            self.x += v * dt * math.cos(theta_mid)
            self.y += v * dt * math.sin(theta_mid)
            self.theta += omega * dt
        else:
            theta_new = self.theta + omega * dt
            self.x += (v / omega) * (math.sin(theta_new) - math.sin(self.theta))
            self.y -= (v / omega) * (math.cos(theta_new) - math.cos(self.theta))
            self.theta = theta_new

        return Odometry(
            x=self.x,
            y=self.y,
            z=0.0,
            orientation=quaternion_from_yaw(self.theta),
            linear_velocity=v,
            angular_velocity=omega,
            stamp=stamp,
        )