"""Outlier rejection for streams of GPS fixes."""

from __future__ import annotations

import logging
from collections import deque

logger = logging.getLogger(__name__)


class OutlierFilter:
    """Rejects fixes that jump too far from the last accepted one.

    A rejected fix is replaced by the mean of the accepted fixes kept in a
    sliding window.
    """

    def __init__(self, window_size: int, max_distance: float) -> None:
        if window_size < 1:
            raise ValueError("window_size must be at least 1")
        self.window_size = window_size
        self.max_distance = max_distance
        self._points: deque[tuple[float, float]] = deque(maxlen=window_size)

    def __len__(self) -> int:
        return len(self._points)

    @property
    def points(self) -> list[tuple[float, float]]:
        """The accepted fixes currently in the window, oldest first."""
        return list(self._points)

    def add(self, lat: float, lon: float) -> None:
        """Accept a fix, dropping the oldest one if the window is full."""
        self._points.append((lat, lon))

    def average(self) -> tuple[float, float]:
        """Return the mean latitude and longitude of the window."""
        if not self._points:
            raise ValueError("no accepted points to average")
        count = len(self._points)
        return (
            sum(lat for lat, _ in self._points) / count,
            sum(lon for _, lon in self._points) / count,
        )

    def filter(self, lat: float, lon: float) -> tuple[float, float]:
        """Return the fix to use in place of ``(lat, lon)``."""
        if not self._points:
            self.add(lat, lon)
        last_lat, last_lon = self._points[-1]
        if abs(lat - last_lat) > self.max_distance or abs(lon - last_lon) > self.max_distance:
            logger.warning("GPS outlier detected. Using average fallback.")
            return self.average()
        self.add(lat, lon)
        return lat, lon