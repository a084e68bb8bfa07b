"""
Window Engine - Layered Scene Painting

Configuration, paint-order engine and layers for the window scene.
"""

from .config import SceneConfig, ConfigPresets, WindowRegion
from .layout import LayerStack, SceneLayer, FrameState

__all__ = [
    'SceneConfig',
    'ConfigPresets',
    'WindowRegion',
    'LayerStack',
    'SceneLayer',
    'FrameState'
]
