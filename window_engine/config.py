"""
Window Scene Configuration

Centralized configuration for every constant used to lay out and paint
the window scene: canvas size, window proportions, colors, bird speeds.
"""

from typing import Tuple
from dataclasses import dataclass


@dataclass
class WindowRegion:
    """Pixel-space rectangle of the window aperture"""
    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class SceneConfig:
    """
    Comprehensive configuration for the window scene.

    Ratios are relative to the canvas (window size) or to the window
    region (sun height, spawn band, curtain width).
    """

    # Canvas settings
    canvas_width: int = 800
    canvas_height: int = 500
    background_color: Tuple[int, int, int] = (238, 236, 232)

    # Window region, centered in the canvas
    window_width_ratio: float = 0.6
    window_height_ratio: float = 0.55

    # Day / night
    day_start_hour: int = 6
    night_start_hour: int = 18
    day_sky_color: Tuple[int, int, int] = (180, 210, 255)
    night_sky_color: Tuple[int, int, int] = (40, 60, 100)

    # Sun and moon
    celestial_height_ratio: float = 0.10
    sun_color: Tuple[int, int, int] = (255, 230, 120)
    sun_diameter: int = 36
    moon_color: Tuple[int, int, int] = (240, 240, 240)
    moon_diameter: int = 26
    moon_shadow_offset: Tuple[int, int] = (6, -2)

    # Birds
    second_bird_speed: float = 2.4
    minute_bird_speed: float = 1.2
    second_bird_color: Tuple[int, int, int] = (255, 255, 255)
    minute_bird_color: Tuple[int, int, int] = (30, 30, 30)
    flap_step: float = 0.25
    wing_amplitude: float = 4.0
    spawn_offset_x: float = 50.0
    spawn_band_top: float = 0.30
    spawn_band_bottom: float = 0.65
    exit_margin: float = 100.0

    # Window frame and sill
    frame_stroke_width: int = 3
    frame_stroke_color: Tuple[int, int, int] = (60, 60, 60)
    sill_color: Tuple[int, int, int] = (200, 200, 200)
    sill_overhang: int = 10
    sill_height: int = 15

    # Curtains
    curtain_color: Tuple[int, int, int] = (255, 255, 255)
    curtain_width_ratio: float = 0.25
    curtain_rise: int = 10

    def window_region(self) -> WindowRegion:
        """Window aperture centered in the canvas"""
        width = self.canvas_width * self.window_width_ratio
        height = self.canvas_height * self.window_height_ratio
        return WindowRegion(
            x=(self.canvas_width - width) / 2,
            y=(self.canvas_height - height) / 2,
            width=width,
            height=height,
        )

    def is_daytime(self, hour: int) -> bool:
        """Day lasts from day_start_hour (inclusive) to night_start_hour (exclusive)"""
        return self.day_start_hour <= hour < self.night_start_hour

    def sky_color(self, hour: int) -> Tuple[int, int, int]:
        return self.day_sky_color if self.is_daytime(hour) else self.night_sky_color

    def exit_x(self) -> float:
        """Birds at or beyond this x are pruned"""
        return self.window_region().right + self.exit_margin

    def to_dict(self) -> dict:
        """Convert config to dictionary for serialization"""
        return {
            field.name: getattr(self, field.name)
            for field in self.__dataclass_fields__.values()
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'SceneConfig':
        """Create config from dictionary"""
        # Filter data to only include valid fields
        valid_fields = {field.name for field in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered_data)

    def copy(self) -> 'SceneConfig':
        """Create a copy of this configuration"""
        return SceneConfig(**self.to_dict())

    def validate(self) -> list:
        """Validate configuration and return list of issues"""
        issues = []

        if self.canvas_width <= 0 or self.canvas_height <= 0:
            issues.append(f"canvas size must be positive, got {self.canvas_width}x{self.canvas_height}")

        ratio_fields = [
            'window_width_ratio', 'window_height_ratio', 'celestial_height_ratio',
            'spawn_band_top', 'spawn_band_bottom', 'curtain_width_ratio'
        ]
        for field in ratio_fields:
            value = getattr(self, field)
            if not 0 <= value <= 1:
                issues.append(f"{field} must be between 0 and 1, got {value}")

        if self.spawn_band_top > self.spawn_band_bottom:
            issues.append(
                f"spawn band is inverted: top {self.spawn_band_top} > bottom {self.spawn_band_bottom}"
            )

        for field in ('day_start_hour', 'night_start_hour'):
            value = getattr(self, field)
            if not 0 <= value <= 24:
                issues.append(f"{field} must be between 0 and 24, got {value}")

        # Birds that never move right are never pruned
        for field in ('second_bird_speed', 'minute_bird_speed'):
            value = getattr(self, field)
            if value <= 0:
                issues.append(f"{field} must be positive, got {value}")

        color_fields = [
            'background_color', 'day_sky_color', 'night_sky_color', 'sun_color',
            'moon_color', 'second_bird_color', 'minute_bird_color',
            'frame_stroke_color', 'sill_color', 'curtain_color'
        ]
        for field in color_fields:
            color = getattr(self, field)
            if not (isinstance(color, tuple) and len(color) == 3 and
                    all(0 <= c <= 255 for c in color)):
                issues.append(f"{field} must be RGB tuple (0-255), got {color}")

        return issues


# Predefined configuration presets
class ConfigPresets:
    """Predefined configuration presets for different displays"""

    @staticmethod
    def default() -> SceneConfig:
        """Default 800x500 scene"""
        return SceneConfig()

    @staticmethod
    def for_canvas(width: int, height: int) -> SceneConfig:
        """Scene sized for a specific display; speeds and sprite sizes stay in pixels"""
        config = SceneConfig()
        config.canvas_width = width
        config.canvas_height = height
        return config
