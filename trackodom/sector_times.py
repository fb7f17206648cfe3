"""Lap sector timing from GPS fixes and speed readings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from .filters import OutlierFilter

logger = logging.getLogger(__name__)

DEFAULT_GATES: tuple[tuple[float, float], ...] = (
    (45.630106, 9.289490),
    (45.623570, 9.287297),
    (45.616042, 9.280767),
)


@dataclass(frozen=True)
class SectorReport:
    """The current sector, the time spent in it and the mean speed there."""

    sector: int
    time: float
    mean_speed: float


class SectorTimer:
    """Tracks which sector of a lap the vehicle is in.

    Passing gate ``i`` (1-based) while in sector ``i`` starts the next sector;
    the last gate leads back to sector 1.
    """

    def __init__(
        self,
        gates: Sequence[tuple[float, float]] = DEFAULT_GATES,
        tolerance: float = 0.0005,
        max_distance: float = 1.0,
        window_size: int = 5,
        start_time: float = 0.0,
    ) -> None:
        if not gates:
            raise ValueError("at least one gate is required")
        self.gates = tuple(gates)
        self.tolerance = tolerance
        self.current_sector = 1
        self.current_speed = 0.0
        self._filter = OutlierFilter(window_size, max_distance)
        self._sector_start = start_time
        self._mean_speed = 0.0
        self._count = 0

    def update_speed(self, speed: float) -> None:
        """Record the latest speed reading."""
        self.current_speed = speed

    def _gate_at(self, lat: float, lon: float) -> int | None:
        for index, (gate_lat, gate_lon) in enumerate(self.gates, start=1):
            if abs(lat - gate_lat) < self.tolerance and abs(lon - gate_lon) < self.tolerance:
                return index
        return None

    def update_gps(self, latitude: float, longitude: float, stamp: float) -> SectorReport:
        """Process one fix (degrees) at ``stamp`` seconds and report progress."""
        lat, lon = self._filter.filter(latitude, longitude)
        gate = self._gate_at(lat, lon)
        if gate is not None and gate == self.current_sector:
            self._sector_start = stamp
            self._mean_speed = 0.0
            self._count = 0
            self.current_sector = gate % len(self.gates) + 1
            logger.info("Entered sector %d", self.current_sector)

        self._count += 1
        self._mean_speed += (self.current_speed - self._mean_speed) / self._count
        return SectorReport(
            sector=self.current_sector,
            time=stamp - self._sector_start,
            mean_speed=self._mean_speed,
        )