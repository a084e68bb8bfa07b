"""
ClockSampler - Reads the wall clock once per frame
Provides the hour/minute/second reading that drives spawning and lighting
"""

from datetime import datetime
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class ClockReading:
    """One wall-clock sample"""
    hour: int
    minute: int
    second: int

    @property
    def time_of_day(self) -> float:
        """Fractional hours since midnight, in [0, 24)"""
        return self.hour + self.minute / 60 + self.second / 3600

    def as_string(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


class ClockSampler:
    """Samples the host clock; the time source is injectable for tests and replays"""

    def __init__(self, now: Optional[Callable[[], datetime]] = None):
        self._now = now or datetime.now

    def sample(self) -> ClockReading:
        """Read the current hour, minute and second"""
        now = self._now()
        return ClockReading(now.hour, now.minute, now.second)
