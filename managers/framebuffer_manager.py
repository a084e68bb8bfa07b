"""
Framebuffer Manager

Direct framebuffer output: pushes each rendered scene frame to a Linux
framebuffer device, letterboxed to the device resolution.
"""
import logging
import mmap
from typing import Tuple

import numpy as np
from PIL import Image

from config import FB_DEVICE, FB_SYSFS_DIR


def encode_frame(img: Image.Image, bpp: int) -> np.ndarray:
    """Convert an RGB image to framebuffer pixel words (RGB565 for 16bpp, XRGB8888 otherwise)"""
    img_array = np.array(img.convert('RGB'))

    if bpp == 16:
        # Convert RGB888 to RGB565 efficiently
        r = (img_array[:, :, 0] >> 3).astype(np.uint16)
        g = (img_array[:, :, 1] >> 2).astype(np.uint16)
        b = (img_array[:, :, 2] >> 3).astype(np.uint16)
        return (r << 11) | (g << 5) | b

    r = img_array[:, :, 0].astype(np.uint32)
    g = img_array[:, :, 1].astype(np.uint32)
    b = img_array[:, :, 2].astype(np.uint32)
    return (np.uint32(0xFF) << 24) | (r << 16) | (g << 8) | b


def letterbox(img: Image.Image, target_width: int, target_height: int) -> Image.Image:
    """Resize image to fill the target while preserving aspect, adding black borders only where needed"""
    orig_width, orig_height = img.size

    # If image already matches target resolution exactly, return as-is
    if orig_width == target_width and orig_height == target_height:
        return img

    target_aspect = target_width / target_height
    img_aspect = orig_width / orig_height

    if img_aspect > target_aspect:
        # Image is wider - fit to width, borders on top/bottom
        new_width = target_width
        new_height = int(target_width / img_aspect)
    else:
        # Image is taller - fit to height, borders on left/right
        new_height = target_height
        new_width = int(target_height * img_aspect)

    # Scene is flat-colored blocks; nearest keeps the edges crisp
    scaled_img = img.resize((new_width, new_height), Image.Resampling.NEAREST)

    if new_width == target_width and new_height == target_height:
        return scaled_img

    canvas = Image.new('RGB', (target_width, target_height), (0, 0, 0))
    x_offset = (target_width - new_width) // 2
    y_offset = (target_height - new_height) // 2
    canvas.paste(scaled_img, (x_offset, y_offset))

    return canvas


class FramebufferManager:
    """Direct framebuffer output for scene frames"""

    def __init__(self, fb_device: str = FB_DEVICE, sysfs_dir: str = FB_SYSFS_DIR):
        self.fb_device = fb_device
        self.sysfs_dir = sysfs_dir

        # Actual framebuffer parameters, updated by _get_fb_info
        self.fb_width = 640
        self.fb_height = 480
        self.fb_bpp = 16  # bits per pixel
        self.fb_bytes_per_pixel = self.fb_bpp // 8
        self.fb_size = self.fb_width * self.fb_height * self.fb_bytes_per_pixel

        # Memory management
        self.fb_file = None
        self.fb_mmap = None
        self.fb_array = None
        self.is_available = False
        self.frames_written = 0

    def initialize(self) -> bool:
        """Open and memory-map the framebuffer. Returns True if output is available."""
        try:
            self._get_fb_info()

            if self.fb_bpp not in (16, 32):
                logging.warning(f"Unsupported framebuffer depth {self.fb_bpp}bpp ({self.fb_device})")
                return False

            self.fb_file = open(self.fb_device, 'r+b')
            self.fb_mmap = mmap.mmap(self.fb_file.fileno(), self.fb_size)

            # Create numpy array view of framebuffer
            if self.fb_bpp == 16:
                self.fb_array = np.frombuffer(self.fb_mmap, dtype=np.uint16).reshape((self.fb_height, self.fb_width))
            else:
                self.fb_array = np.frombuffer(self.fb_mmap, dtype=np.uint32).reshape((self.fb_height, self.fb_width))

            self.is_available = True
            logging.info(f"Framebuffer initialized: {self.fb_width}x{self.fb_height}, {self.fb_bpp}bpp")

        except (OSError, ValueError) as e:
            # Missing device, short device file, or geometry that does not fit the map
            logging.warning(f"Framebuffer not available ({self.fb_device}): {e}")
            self.cleanup()

        return self.is_available

    def _get_fb_info(self) -> None:
        """Get framebuffer geometry from sysfs"""
        try:
            with open(f"{self.sysfs_dir}/virtual_size", 'r') as f:
                size_str = f.read().strip()
                self.fb_width, self.fb_height = map(int, size_str.split(','))

            with open(f"{self.sysfs_dir}/bits_per_pixel", 'r') as f:
                self.fb_bpp = int(f.read().strip())

        except (OSError, ValueError) as e:
            logging.warning(f"Could not read framebuffer info, using defaults: {e}")

        self.fb_bytes_per_pixel = self.fb_bpp // 8
        self.fb_size = self.fb_width * self.fb_height * self.fb_bytes_per_pixel

    def _rgb_to_rgb565(self, r: int, g: int, b: int) -> int:
        """Convert RGB888 to RGB565 format"""
        r5 = (r >> 3) & 0x1F  # 5 bits
        g6 = (g >> 2) & 0x3F  # 6 bits
        b5 = (b >> 3) & 0x1F  # 5 bits

        # Pack into 16-bit value: RRRRRGGGGGGBBBBB
        return (r5 << 11) | (g6 << 5) | b5

    def display_frame(self, img: Image.Image) -> bool:
        """Write one scene frame to the framebuffer"""
        if not self.is_available:
            return False

        try:
            fitted = letterbox(img, self.fb_width, self.fb_height)
            np.copyto(self.fb_array, encode_frame(fitted, self.fb_bpp))
            self.fb_mmap.flush()
            self.frames_written += 1
            return True

        except (OSError, ValueError) as e:
            logging.error(f"Failed to write frame to framebuffer: {e}")
            return False

    def present(self, img: Image.Image, frame_number: int) -> bool:
        """Frame sink entry point used by the frame loop"""
        return self.display_frame(img)

    def clear_screen(self, color: Tuple[int, int, int] = (0, 0, 0)) -> bool:
        """Clear framebuffer to solid color"""
        if not self.is_available:
            return False

        if self.fb_bpp == 16:
            color_value = self._rgb_to_rgb565(color[0], color[1], color[2])
        else:
            color_value = (0xFF << 24) | (color[0] << 16) | (color[1] << 8) | color[2]

        self.fb_array.fill(color_value)
        self.fb_mmap.flush()
        return True

    def cleanup(self) -> None:
        """Release the memory map and device handle"""
        # The array view must go before the mmap can close
        self.fb_array = None

        if self.fb_mmap is not None:
            try:
                self.fb_mmap.flush()
            except (OSError, ValueError) as flush_error:
                logging.warning(f"Failed to flush framebuffer: {flush_error}")
            self.fb_mmap.close()
            self.fb_mmap = None

        if self.fb_file is not None:
            self.fb_file.close()
            self.fb_file = None

        self.is_available = False
        logging.debug("Framebuffer resources cleaned up")

    def get_status(self) -> dict:
        return {
            "device": self.fb_device,
            "available": self.is_available,
            "resolution": f"{self.fb_width}x{self.fb_height}",
            "bpp": self.fb_bpp,
            "frames_written": self.frames_written
        }
