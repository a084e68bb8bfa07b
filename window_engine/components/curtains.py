"""
Curtains Component

Two opaque curtains hang just outside the window and run to the bottom of
the canvas. Painted last, so nothing ever appears in front of them.
"""

from PIL import ImageDraw

from ..layout import SceneLayer, FrameState, rect_box
from ..config import SceneConfig, WindowRegion


class CurtainsComponent(SceneLayer):
    """Layer painting the left and right curtains"""

    def __init__(self, layer_id: str = "curtains"):
        super().__init__(layer_id)

    def render(self, draw: ImageDraw.ImageDraw, region: WindowRegion,
               frame: FrameState, config: SceneConfig) -> None:
        curtain_width = region.width * config.curtain_width_ratio
        start_y = region.top - config.curtain_rise
        curtain_height = config.canvas_height - start_y

        draw.rectangle(
            rect_box(region.left - curtain_width, start_y, curtain_width, curtain_height),
            fill=config.curtain_color
        )
        draw.rectangle(
            rect_box(region.right, start_y, curtain_width, curtain_height),
            fill=config.curtain_color
        )
