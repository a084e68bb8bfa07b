"""
Celestial Component

Renders the sun by day and a crescent moon by night, sliding across the
window as the day progresses.
"""

from typing import Tuple, TYPE_CHECKING
from PIL import ImageDraw

from ..layout import SceneLayer, FrameState, circle_box
from ..config import SceneConfig, WindowRegion

if TYPE_CHECKING:
    from birdclock.clock import ClockReading


def celestial_position(reading: 'ClockReading', region: WindowRegion,
                       config: SceneConfig) -> Tuple[float, float]:
    """
    Center of the sun or moon for a clock reading.

    x maps the fractional time of day linearly from the window's left
    edge (00:00) to its right edge (24:00); y sits a fixed fraction below
    the window top.
    """
    x = region.left + (reading.time_of_day / 24.0) * region.width
    y = region.top + region.height * config.celestial_height_ratio
    return x, y


class CelestialComponent(SceneLayer):
    """Layer painting the sun or the moon"""

    def __init__(self, layer_id: str = "celestial"):
        super().__init__(layer_id)

    def render(self, draw: ImageDraw.ImageDraw, region: WindowRegion,
               frame: FrameState, config: SceneConfig) -> None:
        x, y = celestial_position(frame.reading, region, config)

        if config.is_daytime(frame.reading.hour):
            draw.ellipse(circle_box(x, y, config.sun_diameter), fill=config.sun_color)
            return

        # Crescent: a sky-colored disc drawn over the moon, offset up and right
        dx, dy = config.moon_shadow_offset
        draw.ellipse(circle_box(x, y, config.moon_diameter), fill=config.moon_color)
        draw.ellipse(circle_box(x + dx, y + dy, config.moon_diameter), fill=config.night_sky_color)
