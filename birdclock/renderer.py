"""
WindowSceneRenderer - Paints the complete window scene for one frame
Stacks sky, sun/moon, birds, window frame and curtains back to front
"""

from typing import Sequence, List
from PIL import Image

from window_engine.config import SceneConfig
from window_engine.layout import LayerStack, FrameState
from window_engine.components import (
    SkyComponent, CelestialComponent, BirdsComponent,
    WindowFrameComponent, CurtainsComponent
)

from .bird import Bird
from .clock import ClockReading


class WindowSceneRenderer:
    """Renders complete window scene frames"""

    def __init__(self, config: SceneConfig):
        self.config = config
        self.region = config.window_region()

        self.stack = LayerStack(config)
        self.stack.add_layer(SkyComponent())
        self.stack.add_layer(CelestialComponent())
        self.stack.add_layer(BirdsComponent())
        self.stack.add_layer(WindowFrameComponent())
        # Curtains last: nothing may be drawn in front of them
        self.stack.add_layer(CurtainsComponent())

    def render(self, reading: ClockReading, birds: Sequence[Bird] = ()) -> Image.Image:
        """Render one frame for a clock reading and the live birds"""
        return self.stack.render(FrameState(reading=reading, birds=list(birds)))

    def get_layer_order(self) -> List[str]:
        """Layer ids, back to front"""
        return self.stack.layer_ids()
