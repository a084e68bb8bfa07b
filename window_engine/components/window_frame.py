"""
Window Frame Component

Outlines the window aperture and adds the sill below it.
"""

from PIL import ImageDraw

from ..layout import SceneLayer, FrameState, rect_box
from ..config import SceneConfig, WindowRegion


class WindowFrameComponent(SceneLayer):
    """Layer painting the frame outline and the sill"""

    def __init__(self, layer_id: str = "window_frame"):
        super().__init__(layer_id)

    def render(self, draw: ImageDraw.ImageDraw, region: WindowRegion,
               frame: FrameState, config: SceneConfig) -> None:
        draw.rectangle(
            rect_box(region.x, region.y, region.width, region.height),
            outline=config.frame_stroke_color,
            width=config.frame_stroke_width
        )

        draw.rectangle(rect_box(
            region.x - config.sill_overhang,
            region.bottom,
            region.width + 2 * config.sill_overhang,
            config.sill_height
        ), fill=config.sill_color)
