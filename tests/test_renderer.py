"""
Tests for birdclock.renderer and the window_engine layers, checked pixel by pixel.

Default canvas 800x500: window at x 160..640, y 112.5..387.5.
"""
from types import SimpleNamespace

import pytest

from birdclock.bird import Bird, BirdVariant
from birdclock.clock import ClockReading
from birdclock.renderer import WindowSceneRenderer
from window_engine.components import celestial_position
from window_engine.layout import rect_box, circle_box

NOON = ClockReading(12, 0, 0)
LATE = ClockReading(22, 0, 0)


@pytest.fixture()
def renderer(config):
    return WindowSceneRenderer(config)


class TestBoxes:
    def test_rect_box_excludes_far_edge(self):
        assert rect_box(160, 112.5, 480, 275) == (160, 112, 639, 387)

    def test_circle_box(self):
        assert circle_box(400, 140, 36) == (382, 122, 417, 157)

    def test_degenerate_rect(self):
        x0, y0, x1, y1 = rect_box(10, 10, 0, 0)
        assert (x1, y1) == (x0, y0)


class TestLayers:
    def test_layer_order(self, renderer):
        assert renderer.get_layer_order() == ["sky", "celestial", "birds", "window_frame", "curtains"]

    def test_background_outside_window(self, renderer, config):
        img = renderer.render(NOON)
        assert img.getpixel((5, 5)) == config.background_color
        assert img.getpixel((400, 50)) == config.background_color

    def test_day_sky(self, renderer, config):
        assert renderer.render(NOON).getpixel((200, 300)) == config.day_sky_color

    def test_night_sky(self, renderer, config):
        assert renderer.render(LATE).getpixel((200, 300)) == config.night_sky_color

    def test_sun_at_noon_is_centered(self, renderer, config):
        img = renderer.render(NOON)
        assert img.getpixel((400, 140)) == config.sun_color
        assert img.getpixel((400, 170)) == config.day_sky_color

    def test_crescent_moon(self, renderer, config):
        img = renderer.render(LATE)
        # Lit edge on the left, shadow disc covering the center-right
        assert img.getpixel((590, 140)) == config.moon_color
        assert img.getpixel((606, 138)) == config.night_sky_color

    def test_frame_outline_and_sill(self, renderer, config):
        img = renderer.render(NOON)
        assert img.getpixel((161, 250)) == config.frame_stroke_color
        assert img.getpixel((400, 113)) == config.frame_stroke_color
        assert img.getpixel((400, 395)) == config.sill_color

    def test_curtains(self, renderer, config):
        img = renderer.render(NOON)
        assert img.getpixel((100, 450)) == config.curtain_color
        assert img.getpixel((700, 300)) == config.curtain_color
        assert img.getpixel((100, 90)) == config.background_color

    def test_bird_in_front_of_sky(self, renderer, config):
        bird = Bird(x=300.0, y=300.0, velocity=1.2, variant=BirdVariant.MINUTE)
        img = renderer.render(NOON, [bird])
        assert img.getpixel((300, 300)) == config.minute_bird_color
        # Upper wing block at rest phase
        assert img.getpixel((298, 293)) == config.minute_bird_color

    def test_second_bird_is_light(self, renderer, config):
        bird = Bird(x=300.0, y=300.0, velocity=2.4, variant=BirdVariant.SECOND)
        img = renderer.render(LATE, [bird])
        assert img.getpixel((300, 300)) == config.second_bird_color

    def test_bird_behind_curtain(self, renderer, config):
        bird = Bird(x=700.0, y=300.0, velocity=1.2, variant=BirdVariant.MINUTE)
        img = renderer.render(NOON, [bird])
        assert img.getpixel((700, 300)) == config.curtain_color


class TestCelestialPosition:
    def test_endpoints(self, config):
        region = config.window_region()
        x0, y0 = celestial_position(SimpleNamespace(time_of_day=0.0), region, config)
        x24, _ = celestial_position(SimpleNamespace(time_of_day=24.0), region, config)
        assert x0 == pytest.approx(region.left)
        assert x24 == pytest.approx(region.right)
        assert y0 == pytest.approx(region.top + 0.1 * region.height)

    def test_monotonic_over_the_day(self, config):
        region = config.window_region()
        xs = [
            celestial_position(ClockReading(h, m, 30), region, config)[0]
            for h in range(24) for m in range(0, 60, 15)
        ]
        assert all(a < b for a, b in zip(xs, xs[1:]))
