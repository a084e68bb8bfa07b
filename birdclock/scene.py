"""
WindowScene - Owns all per-frame state of the animation
Clock sampling, tick detection, bird simulation and rendering in one step
"""

import random
import logging
from typing import List, Optional
from PIL import Image

from window_engine.config import SceneConfig

from .bird import Bird, BirdFlock, BirdVariant
from .clock import ClockReading, ClockSampler
from .spawner import BirdSpawner
from .renderer import WindowSceneRenderer


class WindowScene:
    """
    Scene context passed to the frame loop.

    Holds the live birds and the last observed second/minute. Both are
    initialised once from the clock and mutated only by update().
    """

    def __init__(self, config: Optional[SceneConfig] = None,
                 sampler: Optional[ClockSampler] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or SceneConfig()

        if self.config.canvas_width <= 0 or self.config.canvas_height <= 0:
            raise ValueError(
                f"Canvas size must be positive, got {self.config.canvas_width}x{self.config.canvas_height}"
            )

        # Validate configuration
        issues = self.config.validate()
        if issues:
            logging.warning(f"Scene configuration issues: {issues}")

        self.sampler = sampler or ClockSampler()
        self.flock = BirdFlock(self.config, rng)
        self.renderer = WindowSceneRenderer(self.config)

        self.last_reading = self.sampler.sample()
        self.spawner = BirdSpawner(self.last_reading)
        self.frame_count = 0

        logging.info(
            f"Window scene ready: {self.config.canvas_width}x{self.config.canvas_height}, "
            f"clock {self.last_reading.as_string()}"
        )

    def _advance(self, reading: ClockReading) -> List[Bird]:
        """Spawn birds for the reading, then move every bird one frame"""
        spawned = [self.flock.spawn(variant) for variant in self.spawner.observe(reading)]
        self.flock.advance()

        self.last_reading = reading
        self.frame_count += 1
        return spawned

    def update(self, reading: ClockReading) -> List[Bird]:
        """
        Advance the simulation by one frame without painting it.

        Birds spawned this frame are moved in the same frame, then every
        bird past the exit line is dropped. Returns the spawned birds.
        """
        spawned = self._advance(reading)
        self.flock.prune()
        return spawned

    def render(self) -> Image.Image:
        """Paint the current state"""
        return self.renderer.render(self.last_reading, self.flock.birds)

    def step(self) -> Image.Image:
        """
        Sample the clock and return the rendered frame.

        Birds are painted before pruning, so a bird is still drawn on the
        frame in which it crosses the exit line.
        """
        self._advance(self.sampler.sample())
        img = self.render()
        self.flock.prune()
        return img

    @property
    def birds(self) -> List[Bird]:
        return self.flock.birds

    def is_daytime(self) -> bool:
        return self.config.is_daytime(self.last_reading.hour)

    def get_status(self) -> dict:
        """Get current status information"""
        return {
            "frame_count": self.frame_count,
            "clock": self.last_reading.as_string(),
            "is_daytime": self.is_daytime(),
            "birds": len(self.flock),
            "second_birds": self.flock.count(BirdVariant.SECOND),
            "minute_birds": self.flock.count(BirdVariant.MINUTE),
            "last_second": self.spawner.last_second,
            "last_minute": self.spawner.last_minute
        }
