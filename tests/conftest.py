"""Shared fixtures: a hand-driven clock, a seeded RNG, and a scene built on both."""

import random
from datetime import datetime

import pytest

from birdclock.clock import ClockSampler
from birdclock.scene import WindowScene
from window_engine.config import SceneConfig


class ManualClock:
    """Clock whose time only changes when a test sets it."""

    def __init__(self, hour: int = 12, minute: int = 5, second: int = 10):
        self.set(hour, minute, second)

    def set(self, hour: int, minute: int, second: int) -> None:
        self.current = datetime(2025, 10, 19, hour, minute, second)

    def __call__(self) -> datetime:
        return self.current


@pytest.fixture()
def config() -> SceneConfig:
    return SceneConfig()


@pytest.fixture()
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(12345)


@pytest.fixture()
def scene(config, clock, rng) -> WindowScene:
    return WindowScene(config, ClockSampler(clock), rng)


def make_fake_fb(tmp_path, width=16, height=8, bpp=16, device_bytes=None):
    """Framebuffer device and sysfs directory backed by regular files"""
    sysfs = tmp_path / "fb0"
    sysfs.mkdir()
    (sysfs / "virtual_size").write_text(f"{width},{height}\n")
    (sysfs / "bits_per_pixel").write_text(f"{bpp}\n")

    device = tmp_path / "fb_device"
    size = device_bytes if device_bytes is not None else width * height * bpp // 8
    device.write_bytes(b"\x00" * size)
    return device, sysfs


@pytest.fixture()
def fake_fb(tmp_path):
    """16x8, 16bpp framebuffer"""
    return make_fake_fb(tmp_path)
