"""
Birds Component

Draws every live bird as a body and two flapping wing blocks.
"""

from typing import TYPE_CHECKING
from PIL import ImageDraw

from ..layout import SceneLayer, FrameState, rect_box
from ..config import SceneConfig, WindowRegion

if TYPE_CHECKING:
    from birdclock.bird import Bird


class BirdsComponent(SceneLayer):
    """Layer painting the flock in front of the sky"""

    def __init__(self, layer_id: str = "birds"):
        super().__init__(layer_id)

    def render(self, draw: ImageDraw.ImageDraw, region: WindowRegion,
               frame: FrameState, config: SceneConfig) -> None:
        for bird in frame.birds:
            self._draw_bird(draw, bird, config)

    def _draw_bird(self, draw: ImageDraw.ImageDraw, bird: 'Bird', config: SceneConfig) -> None:
        color = bird.color(config)
        flap = bird.wing_offset(config.wing_amplitude)

        # Offsets are relative to the bird's position
        parts = (
            (-10, -3, 20, 6),          # body
            (-4, -8 + flap, 6, 6),     # upper wing
            (-4, 2 - flap, 6, 6),      # lower wing
        )
        for dx, dy, w, h in parts:
            draw.rectangle(rect_box(bird.x + dx, bird.y + dy, w, h), fill=color)
