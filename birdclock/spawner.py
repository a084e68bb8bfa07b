"""
BirdSpawner - Turns clock ticks into bird spawns
Compares each reading with the last observed second and minute
"""

from typing import List

from .bird import BirdVariant
from .clock import ClockReading


class BirdSpawner:
    """Tracks the last observed second/minute and reports which birds to spawn"""

    def __init__(self, initial: ClockReading):
        # Seeded from the startup reading so the first frame does not spawn
        self.last_second = initial.second
        self.last_minute = initial.minute

    def observe(self, reading: ClockReading) -> List[BirdVariant]:
        """
        Record a reading and return the variants to spawn for it.

        Each field is compared only with its previous value, so a gap
        spanning several seconds still yields a single second bird.
        """
        spawns = []

        if reading.second != self.last_second:
            spawns.append(BirdVariant.SECOND)
            self.last_second = reading.second

        if reading.minute != self.last_minute:
            spawns.append(BirdVariant.MINUTE)
            self.last_minute = reading.minute

        return spawns
