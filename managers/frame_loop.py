"""
Frame Loop Manager

Background task that drives the window scene: one step per frame at a
best-effort cadence, each frame handed to every output sink.
"""
import asyncio
import logging
import time
from typing import List, Optional

from PIL import Image

from birdclock.scene import WindowScene
from config import FRAME_RATE, FRAME_ERROR_BACKOFF


class FrameLoopManager:
    """Runs the per-frame routine and fans frames out to sinks"""

    def __init__(self, scene: WindowScene, sinks: Optional[List] = None, fps: int = FRAME_RATE):
        self.scene = scene
        self.sinks = list(sinks or [])
        self.fps = fps
        self.frame_interval = 1.0 / fps if fps > 0 else 0.0

        # Current state
        self.is_running = False
        self.frames_rendered = 0
        self.frame_errors = 0
        self._task: Optional[asyncio.Task] = None

    def render_frame(self) -> Image.Image:
        """Step the scene once and present the frame to every sink"""
        img = self.scene.step()
        for sink in self.sinks:
            sink.present(img, self.scene.frame_count)
        self.frames_rendered += 1
        return img

    async def run_frames(self, count: int) -> Image.Image:
        """Render a fixed number of frames at the configured cadence; returns the last one"""
        img = None
        for _ in range(count):
            img = self.render_frame()
            await asyncio.sleep(self.frame_interval)
        return img

    async def _run(self) -> None:
        logging.info(f"Frame loop started ({self.fps} fps, {len(self.sinks)} sink(s))")

        while True:
            try:
                started = time.monotonic()
                self.render_frame()

                # Sleep off whatever is left of the frame budget
                elapsed = time.monotonic() - started
                await asyncio.sleep(max(0.0, self.frame_interval - elapsed))

            except asyncio.CancelledError:
                logging.info("Frame loop stopped")
                break
            except Exception as e:
                self.frame_errors += 1
                logging.error(f"Error rendering frame {self.scene.frame_count}: {e}")
                # Keep animating even if a single frame fails
                await asyncio.sleep(FRAME_ERROR_BACKOFF)

    async def start(self) -> bool:
        """Start the loop as a background task"""
        if self.is_running:
            return True

        self._task = asyncio.create_task(self._run())
        self.is_running = True
        return True

    async def stop(self) -> None:
        """Cancel the loop task and wait for it to finish"""
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        self.is_running = False

    def get_status(self) -> dict:
        """Get current status information"""
        return {
            "is_running": self.is_running,
            "fps": self.fps,
            "frames_rendered": self.frames_rendered,
            "frame_errors": self.frame_errors,
            "scene": self.scene.get_status()
        }
