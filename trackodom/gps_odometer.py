"""Odometry from GPS fixes via a local east-north-up frame."""

from __future__ import annotations

import math

from .filters import OutlierFilter
from .geometry import Odometry, quaternion_from_yaw

WGS84_SEMI_MAJOR = 6378137.0
WGS84_SEMI_MINOR = 6356752.0


def geodetic_to_ecef(
    lat: float, lon: float, alt: float, semi_major_axis: float, semi_minor_axis: float
) -> tuple[float, float, float]:
    """Convert latitude and longitude (radians) and altitude to ECEF coordinates."""
    a, b = semi_major_axis, semi_minor_axis
    e_squared = 1.0 - (b * b) / (a * a)
    n = a / math.sqrt(1.0 - e_squared * math.sin(lat) ** 2)
    x = (n + alt) * math.cos(lat) * math.cos(lon)
    y = (n + alt) * math.cos(lat) * math.sin(lon)
    z = (n * (1.0 - e_squared) + alt) * math.sin(lat)
    return x, y, z


def ecef_to_enu(
    dx: float, dy: float, dz: float, ref_lat: float, ref_lon: float
) -> tuple[float, float, float]:
    """Rotate an ECEF offset into the east-north-up frame at a reference point."""
    sin_lat, cos_lat = math.sin(ref_lat), math.cos(ref_lat)
    sin_lon, cos_lon = math.sin(ref_lon), math.cos(ref_lon)
    east = -sin_lon * dx + cos_lon * dy
    north = -sin_lat * cos_lon * dx - sin_lat * sin_lon * dy + cos_lat * dz
    up = cos_lat * cos_lon * dx + cos_lat * sin_lon * dy + sin_lat * dz
    return east, north, up


class GpsOdometer:
    """Turns GPS fixes into planar odometry relative to the first fix."""

    def __init__(
        self,
        semi_major_axis: float = WGS84_SEMI_MAJOR,
        semi_minor_axis: float = WGS84_SEMI_MINOR,
        max_distance: float = 0.01,
        window_size: int = 15,
    ) -> None:
        self.semi_major_axis = semi_major_axis
        self.semi_minor_axis = semi_minor_axis
        self._filter = OutlierFilter(window_size, max_distance)
        self._reference: tuple[float, float, float, float, float] | None = None
        self._last: tuple[float, float] | None = None

    def update(self, latitude: float, longitude: float, altitude: float) -> Odometry:
        """Process one fix (degrees, metres) and return the resulting pose."""
        lat, lon = self._filter.filter(math.radians(latitude), math.radians(longitude))
        xp, yp, zp = geodetic_to_ecef(
            lat, lon, altitude, self.semi_major_axis, self.semi_minor_axis
        )
        if self._reference is None:
            self._reference = (xp, yp, zp, lat, lon)
        xr, yr, zr, ref_lat, ref_lon = self._reference
        x, y, _ = ecef_to_enu(xp - xr, yp - yr, zp - zr, ref_lat, ref_lon)

        yaw = 0.0
        if self._last is not None:
            dx, dy = x - self._last[0], y - self._last[1]
            if dx != 0 or dy != 0:
                yaw = math.atan2(dy, dx)
        self._last = (x, y)
        return Odometry(x=x, y=y, z=0.0, orientation=quaternion_from_yaw(yaw))