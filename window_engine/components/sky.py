"""
Sky Component

Fills the window aperture with the day or night sky color.
"""

from PIL import ImageDraw

from ..layout import SceneLayer, FrameState, rect_box
from ..config import SceneConfig, WindowRegion


class SkyComponent(SceneLayer):
    """Layer painting the sky behind the window"""

    def __init__(self, layer_id: str = "sky"):
        super().__init__(layer_id)

    def render(self, draw: ImageDraw.ImageDraw, region: WindowRegion,
               frame: FrameState, config: SceneConfig) -> None:
        color = config.sky_color(frame.reading.hour)
        draw.rectangle(rect_box(region.x, region.y, region.width, region.height), fill=color)
