"""
Layer Stack and Layer System

Core paint-order engine: layers are drawn strictly back to front into
a single Pillow image, one full repaint per frame.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple, TYPE_CHECKING
from dataclasses import dataclass, field
from PIL import Image, ImageDraw
import logging

from .config import SceneConfig, WindowRegion

if TYPE_CHECKING:
    from birdclock.clock import ClockReading
    from birdclock.bird import Bird


Box = Tuple[int, int, int, int]


def rect_box(x: float, y: float, width: float, height: float) -> Box:
    """
    Pixel box covering [x, x + width) x [y, y + height).

    PIL rectangles include their end coordinates, so the far edge is
    pulled in by one pixel.
    """
    x0, y0 = round(x), round(y)
    x1, y1 = round(x + width) - 1, round(y + height) - 1
    return x0, y0, max(x0, x1), max(y0, y1)


def circle_box(cx: float, cy: float, diameter: float) -> Box:
    """Bounding box of a circle centered on (cx, cy)"""
    return rect_box(cx - diameter / 2, cy - diameter / 2, diameter, diameter)


@dataclass
class FrameState:
    """Everything a layer may read while painting one frame"""
    reading: 'ClockReading'
    birds: Sequence['Bird'] = field(default_factory=list)


class SceneLayer(ABC):
    """
    Base class for all scene layers.

    Each layer paints itself given the window region and the frame state.
    """

    def __init__(self, layer_id: str = None):
        self.layer_id = layer_id or self.__class__.__name__

    @abstractmethod
    def render(self, draw: ImageDraw.ImageDraw, region: WindowRegion,
               frame: FrameState, config: SceneConfig) -> None:
        """
        Paint this layer.

        Args:
            draw: PIL ImageDraw context for the frame canvas
            region: Window aperture in canvas pixels
            frame: Clock reading and live birds for this frame
            config: Scene configuration
        """
        pass


class LayerStack:
    """
    Ordered collection of layers painted onto a fresh canvas each frame.

    The first layer added is painted first, so later layers cover it.
    """

    def __init__(self, config: SceneConfig):
        self.config = config
        self.region = config.window_region()
        self.layers: List[SceneLayer] = []

    def add_layer(self, layer: SceneLayer) -> None:
        """Append a layer on top of those already added"""
        self.layers.append(layer)
        logging.debug(f"Layer added: {layer.layer_id} (depth {len(self.layers) - 1})")

    def layer_ids(self) -> List[str]:
        return [layer.layer_id for layer in self.layers]

    def render(self, frame: FrameState) -> Image.Image:
        """Paint every layer back to front and return the frame image"""
        # Canvas background doubles as the full clear
        img = Image.new(
            'RGB',
            (self.config.canvas_width, self.config.canvas_height),
            self.config.background_color
        )
        draw = ImageDraw.Draw(img)

        for layer in self.layers:
            layer.render(draw, self.region, frame, self.config)

        return img
