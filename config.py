"""
Window Birds Configuration

Central configuration for the host side: frame rate, output devices, logging.
Scene constants live in window_engine.config.SceneConfig.
"""
import os

# Frame loop
FRAME_RATE = int(os.getenv("WINDOW_BIRDS_FPS", "60"))
FRAME_ERROR_BACKOFF = 1.0  # seconds

# Framebuffer output
FB_DEVICE = os.getenv("WINDOW_BIRDS_FB_DEVICE", "/dev/fb0")
FB_SYSFS_DIR = "/sys/class/graphics/fb0"

# Snapshot output (disabled when no path is set)
SNAPSHOT_PATH = os.getenv("WINDOW_BIRDS_SNAPSHOT_PATH", "")
SNAPSHOT_INTERVAL = int(os.getenv("WINDOW_BIRDS_SNAPSHOT_INTERVAL", "60"))  # frames

# Logging
LOG_LEVEL = os.getenv("WINDOW_BIRDS_LOG_LEVEL", "INFO")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
