"""
Window Birds Main Application

This is the entry point for the Window Birds animation.
It wires together the scene, the output sinks and the frame loop.
"""
import asyncio
import logging
import signal
from typing import Optional

from birdclock.scene import WindowScene
from window_engine.config import ConfigPresets
from managers.framebuffer_manager import FramebufferManager
from managers.snapshot_manager import SnapshotManager
from managers.frame_loop import FrameLoopManager

from config import FRAME_RATE, LOG_LEVEL, LOG_FORMAT

# Logging setup
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format=LOG_FORMAT
)


async def run() -> None:
    """Start the animation and keep it running until interrupted"""
    logging.info("Starting Window Birds...")

    framebuffer_manager = FramebufferManager()
    snapshot_manager = SnapshotManager()
    frame_loop = None

    try:
        sinks = []

        logging.info("Initializing framebuffer...")
        if framebuffer_manager.initialize():
            sinks.append(framebuffer_manager)

        if snapshot_manager.is_enabled:
            logging.info(f"Writing snapshots to {snapshot_manager.path} every {snapshot_manager.interval} frames")
            sinks.append(snapshot_manager)

        if not sinks:
            logging.warning("No output available - frames are rendered but not shown")

        # Scene uses the display's own resolution when a framebuffer is present
        if framebuffer_manager.is_available:
            scene_config = ConfigPresets.for_canvas(framebuffer_manager.fb_width, framebuffer_manager.fb_height)
        else:
            scene_config = ConfigPresets.default()

        scene = WindowScene(scene_config)
        frame_loop = FrameLoopManager(scene, sinks, fps=FRAME_RATE)
        await frame_loop.start()

        logging.info("Window Birds started successfully!")

        stop_event = asyncio.Event()
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            loop.add_signal_handler(sig, stop_event.set)
        await stop_event.wait()

    finally:
        await shutdown(frame_loop, framebuffer_manager, snapshot_manager)


async def shutdown(frame_loop: Optional[FrameLoopManager],
                   framebuffer_manager: FramebufferManager,
                   snapshot_manager: SnapshotManager) -> None:
    """Stop the loop, blank the display and release every sink"""
    logging.info("Shutting down Window Birds...")

    if frame_loop:
        await frame_loop.stop()
        logging.info(f"Final status: {frame_loop.get_status()}")

    # Leave a blank screen rather than the last frame
    framebuffer_manager.clear_screen()
    framebuffer_manager.cleanup()
    snapshot_manager.cleanup()

    logging.info("Window Birds shut down successfully!")


def main() -> None:
    asyncio.run(run())


if __name__ == "__main__":
    main()
