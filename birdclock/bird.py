"""
Bird - A single sprite crossing the window
BirdFlock - The live birds of the scene: spawning, per-frame motion and pruning
"""

import math
import random
import logging
from enum import Enum
from dataclasses import dataclass
from typing import List, Tuple

from window_engine.config import SceneConfig


class BirdVariant(Enum):
    """Which clock field a bird marks"""
    SECOND = "second"
    MINUTE = "minute"


@dataclass
class Bird:
    """Handles motion and wing animation for a single bird"""
    x: float
    y: float
    velocity: float
    variant: BirdVariant
    flap_phase: float = 0.0

    def advance(self, flap_step: float) -> None:
        """Move one frame to the right and advance the wing animation"""
        self.x += self.velocity
        self.flap_phase += flap_step

    def wing_offset(self, amplitude: float) -> float:
        """Vertical wing displacement for the current flap phase"""
        return math.sin(self.flap_phase) * amplitude

    def color(self, config: SceneConfig) -> Tuple[int, int, int]:
        if self.variant is BirdVariant.MINUTE:
            return config.minute_bird_color
        return config.second_bird_color


def speed_for(variant: BirdVariant, config: SceneConfig) -> float:
    """Second birds fly fast, minute birds slow"""
    if variant is BirdVariant.MINUTE:
        return config.minute_bird_speed
    return config.second_bird_speed


class BirdFlock:
    """Owns the live birds and applies the per-frame simulation to them"""

    def __init__(self, config: SceneConfig, rng: random.Random = None):
        self.config = config
        self.rng = rng or random.Random()
        self.birds: List[Bird] = []

        region = config.window_region()
        self.spawn_x = region.left - config.spawn_offset_x
        self.spawn_y_min = region.top + region.height * config.spawn_band_top
        self.spawn_y_max = region.top + region.height * config.spawn_band_bottom
        self.exit_x = config.exit_x()

    def spawn(self, variant: BirdVariant) -> Bird:
        """Create a bird just left of the window, at a random height in the middle band"""
        bird = Bird(
            x=self.spawn_x,
            y=self.rng.uniform(self.spawn_y_min, self.spawn_y_max),
            velocity=speed_for(variant, self.config),
            variant=variant
        )
        self.birds.append(bird)
        logging.debug(f"Spawned {variant.value} bird at y={bird.y:.1f}")
        return bird

    def advance(self) -> None:
        """Move every bird by its own velocity and step its flap phase"""
        for bird in self.birds:
            bird.advance(self.config.flap_step)

    def prune(self) -> int:
        """Drop birds that reached the exit line. Returns number removed."""
        before = len(self.birds)
        self.birds = [b for b in self.birds if b.x < self.exit_x]
        removed = before - len(self.birds)
        if removed:
            logging.debug(f"Pruned {removed} bird(s), {len(self.birds)} still flying")
        return removed

    def count(self, variant: BirdVariant = None) -> int:
        """Number of live birds, optionally of one variant"""
        if variant is None:
            return len(self.birds)
        return sum(1 for b in self.birds if b.variant is variant)

    def __len__(self) -> int:
        return len(self.birds)

    def __iter__(self):
        return iter(self.birds)
