"""
Snapshot Manager

Periodically saves the current scene frame as a PNG so the animation can be
watched without a framebuffer (image viewers reload the file in place).
"""
import os
import logging
from pathlib import Path

from PIL import Image

from config import SNAPSHOT_PATH, SNAPSHOT_INTERVAL


class SnapshotManager:
    """Writes every Nth frame to a PNG file"""

    def __init__(self, path: str = SNAPSHOT_PATH, interval: int = SNAPSHOT_INTERVAL):
        self.path = Path(path) if path else None
        self.interval = max(1, interval)
        self.snapshots_written = 0

    @property
    def is_enabled(self) -> bool:
        return self.path is not None

    def present(self, img: Image.Image, frame_number: int) -> bool:
        """Frame sink entry point: save on every interval-th frame"""
        if not self.is_enabled or frame_number % self.interval != 0:
            return False
        return self.save(img)

    def save(self, img: Image.Image) -> bool:
        """Save a frame, replacing the previous snapshot atomically"""
        if not self.is_enabled:
            return False

        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # compress_level=1 (fastest) - snapshots are overwritten constantly
            img.save(str(tmp_path), format="PNG", compress_level=1)
            os.replace(tmp_path, self.path)
            self.snapshots_written += 1
            return True

        except OSError as e:
            logging.error(f"Failed to save snapshot {self.path}: {e}")
            return False

    def cleanup(self) -> None:
        logging.debug(f"Snapshot manager wrote {self.snapshots_written} snapshot(s)")

    def get_status(self) -> dict:
        return {
            "enabled": self.is_enabled,
            "path": str(self.path) if self.path else None,
            "interval": self.interval,
            "snapshots_written": self.snapshots_written
        }
