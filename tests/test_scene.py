"""
Tests for birdclock.scene
"""
import math

import pytest

from birdclock.bird import Bird, BirdVariant
from birdclock.clock import ClockSampler
from birdclock.scene import WindowScene
from window_engine.config import ConfigPresets, SceneConfig


class TestSpawning:
    def test_startup_reading_does_not_spawn(self, scene):
        scene.step()
        assert scene.birds == []

    def test_second_tick(self, scene, clock):
        clock.set(12, 5, 11)
        scene.step()
        assert scene.flock.count(BirdVariant.SECOND) == 1
        assert scene.flock.count(BirdVariant.MINUTE) == 0

    def test_minute_rollover(self, scene, clock):
        clock.set(12, 5, 59)
        scene.step()
        clock.set(12, 6, 0)
        spawned = scene.update(scene.sampler.sample())
        assert sorted(b.variant.value for b in spawned) == ["minute", "second"]

    def test_one_bird_per_second_over_a_minute(self, scene, clock):
        spawned = []
        # Ten frames per second for the rest of the minute
        for second in range(11, 60):
            clock.set(12, 5, second)
            for _ in range(10):
                spawned.extend(scene.update(scene.sampler.sample()))

        assert [b.variant for b in spawned] == [BirdVariant.SECOND] * 49
        assert scene.spawner.last_second == 59

    def test_new_bird_moves_on_its_spawn_frame(self, scene, clock, config):
        clock.set(12, 5, 11)
        scene.step()
        bird = scene.birds[0]
        assert bird.x == pytest.approx(config.window_region().left - 50 + 2.4)
        assert bird.flap_phase == pytest.approx(config.flap_step)


class TestMotion:
    def test_x_increases_by_velocity_each_frame(self, scene, clock):
        clock.set(12, 6, 11)
        scene.update(scene.sampler.sample())
        birds = list(scene.birds)
        assert len(birds) == 2

        reading = scene.last_reading
        for _ in range(50):
            before = [b.x for b in birds]
            scene.update(reading)
            for bird, x in zip(birds, before):
                assert bird.x == pytest.approx(x + bird.velocity)
                assert bird.x > x

    def test_second_bird_removed_after_expected_frames(self, scene, clock, config):
        region = config.window_region()
        expected = math.ceil((region.width + 150) / config.second_bird_speed)

        clock.set(12, 5, 11)
        reading = scene.sampler.sample()
        scene.update(reading)
        frames = 1
        while scene.birds:
            scene.update(reading)
            frames += 1

        assert frames == expected == 263

    def test_removed_birds_never_return(self, scene, clock):
        clock.set(12, 5, 11)
        reading = scene.sampler.sample()
        scene.update(reading)
        bird = scene.birds[0]

        for _ in range(400):
            scene.update(reading)
            assert bird not in scene.birds or bird.x < scene.flock.exit_x

    def test_bird_crossing_exit_line_is_painted_on_its_last_frame(self, clock):
        # Narrow canvas: the exit line sits to the right of the curtain
        config = ConfigPresets.for_canvas(400, 300)
        scene = WindowScene(config, ClockSampler(clock))
        scene.step()
        assert scene.flock.exit_x == 420

        scene.flock.birds.append(Bird(x=418.0, y=150.0, velocity=2.4, variant=BirdVariant.MINUTE))
        img = scene.step()

        assert img.getpixel((420, 150)) == config.minute_bird_color
        assert scene.birds == []


class TestSceneState:
    def test_status(self, scene, clock):
        clock.set(12, 6, 11)
        scene.step()
        status = scene.get_status()
        assert status["frame_count"] == 1
        assert status["clock"] == "12:06:11"
        assert status["is_daytime"] is True
        assert status["second_birds"] == 1
        assert status["minute_birds"] == 1
        assert status["last_minute"] == 6

    def test_step_returns_canvas_sized_frame(self, scene, config):
        img = scene.step()
        assert img.size == (config.canvas_width, config.canvas_height)
        assert img.mode == "RGB"

    def test_is_daytime_follows_clock(self, scene, clock):
        clock.set(22, 0, 0)
        scene.step()
        assert scene.is_daytime() is False

    def test_rejects_empty_canvas(self, clock):
        with pytest.raises(ValueError):
            WindowScene(SceneConfig(canvas_height=0), ClockSampler(clock))

    def test_invalid_config_is_logged(self, clock, caplog):
        WindowScene(SceneConfig(curtain_width_ratio=2.0), ClockSampler(clock))
        assert "curtain_width_ratio" in caplog.text
