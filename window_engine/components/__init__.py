"""
Window Engine Components

Individual paint layers of the window scene, listed back to front.
"""

from .sky import SkyComponent
from .celestial import CelestialComponent, celestial_position
from .birds import BirdsComponent
from .window_frame import WindowFrameComponent
from .curtains import CurtainsComponent

__all__ = [
    'SkyComponent',
    'CelestialComponent',
    'celestial_position',
    'BirdsComponent',
    'WindowFrameComponent',
    'CurtainsComponent'
]
