"""
Framebuffer Manager

Direct framebuffer output for the rendered clock frames.
"""
import logging
import mmap
import os
from typing import Optional, Tuple

import numpy as np
from PIL import Image, ImageOps

from config import FRAMEBUFFER_DEVICE, FRAMEBUFFER_INFO_DIR


def pack_frame(img_array: np.ndarray, bpp: int) -> np.ndarray:
    """Convert an RGB888 array (h, w, 3) to framebuffer pixels (RGB565 or XRGB8888)"""
    channels = img_array.astype(np.uint32)
    red, green, blue = channels[..., 0], channels[..., 1], channels[..., 2]

    if bpp == 16:
        return (((red >> 3) << 11) | ((green >> 2) << 5) | (blue >> 3)).astype(np.uint16)

    return np.uint32(0xFF000000) | (red << 16) | (green << 8) | blue


def fit_to_size(img: Image.Image, target_width: int, target_height: int) -> Image.Image:
    """Scale to the framebuffer keeping the aspect ratio, centred on black bars"""
    if img.size == (target_width, target_height):
        return img
    return ImageOps.pad(img, (target_width, target_height), method=Image.Resampling.LANCZOS,
                        color=(0, 0, 0))


class FramebufferManager:
    """Writes clock frames straight to a Linux framebuffer device"""

    def __init__(self, fb_device: str = FRAMEBUFFER_DEVICE, info_dir: str = FRAMEBUFFER_INFO_DIR):
        self.fb_device = fb_device
        self.info_dir = info_dir

        # Framebuffer parameters, updated by _get_fb_info
        self.fb_width = 640
        self.fb_height = 480
        self.fb_bpp = 16
        self.fb_size = self.fb_width * self.fb_height * (self.fb_bpp // 8)

        # Memory management
        self.fb_file = None
        self.fb_mmap: Optional[mmap.mmap] = None
        self.fb_array: Optional[np.ndarray] = None
        self.is_available = False

    def initialize(self) -> bool:
        """Open and map the framebuffer. Returns False if it is not usable."""
        try:
            self._get_fb_info()

            self.fb_file = open(self.fb_device, 'r+b')
            self.fb_mmap = mmap.mmap(self.fb_file.fileno(), self.fb_size)

            dtype = np.uint16 if self.fb_bpp == 16 else np.uint32
            self.fb_array = np.frombuffer(self.fb_mmap, dtype=dtype).reshape((self.fb_height, self.fb_width))

            self.is_available = True
            logging.info(f"Framebuffer initialized: {self.fb_width}x{self.fb_height}, {self.fb_bpp}bpp")

        except (OSError, ValueError) as e:
            logging.warning(f"Framebuffer not available: {e}")
            self.cleanup()

        return self.is_available

    def _get_fb_info(self) -> None:
        """Get framebuffer geometry from sysfs"""
        try:
            with open(os.path.join(self.info_dir, 'virtual_size'), 'r') as f:
                self.fb_width, self.fb_height = map(int, f.read().strip().split(','))

            with open(os.path.join(self.info_dir, 'bits_per_pixel'), 'r') as f:
                self.fb_bpp = int(f.read().strip())

        except (OSError, ValueError) as e:
            logging.warning(f"Could not read framebuffer info, using defaults: {e}")

        self.fb_size = self.fb_width * self.fb_height * (self.fb_bpp // 8)

    def display_frame(self, img: Image.Image) -> bool:
        """Write one frame to the framebuffer"""
        if not self.is_available:
            return False

        if img.mode != 'RGB':
            img = img.convert('RGB')

        fitted = fit_to_size(img, self.fb_width, self.fb_height)
        np.copyto(self.fb_array, pack_frame(np.asarray(fitted), self.fb_bpp))
        return True

    def clear_screen(self, color: Tuple[int, int, int] = (0, 0, 0)) -> bool:
        """Clear framebuffer to solid color"""
        if not self.is_available:
            return False

        pixel = np.array([[color]], dtype=np.uint8)
        self.fb_array.fill(pack_frame(pixel, self.fb_bpp)[0, 0])
        self.fb_mmap.flush()
        return True

    def cleanup(self) -> None:
        """Release the memory map and device handle"""
        # The numpy view must go before the mmap can close
        self.fb_array = None

        if self.fb_mmap is not None:
            try:
                self.fb_mmap.flush()
            except (OSError, ValueError) as e:
                logging.warning(f"Failed to flush framebuffer: {e}")
            self.fb_mmap.close()
            self.fb_mmap = None

        if self.fb_file is not None:
            self.fb_file.close()
            self.fb_file = None

        self.is_available = False
