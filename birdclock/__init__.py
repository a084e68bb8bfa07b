"""
Window Birds Scene
Birds cross a painted window on every clock second and minute
"""

from .clock import ClockReading, ClockSampler
from .bird import Bird, BirdFlock, BirdVariant
from .spawner import BirdSpawner
from .renderer import WindowSceneRenderer
from .scene import WindowScene

__all__ = [
    'ClockReading', 'ClockSampler', 'Bird', 'BirdFlock', 'BirdVariant',
    'BirdSpawner', 'WindowSceneRenderer', 'WindowScene'
]
