"""
Font loading helpers.

Caches TrueType fonts by path and pixel size and falls back to Pillow's
built-in scalable font when a font file is missing.
"""
import logging
from functools import lru_cache
from typing import Set

from PIL import ImageFont

_missing_fonts: Set[str] = set()


@lru_cache(maxsize=64)
def load_font(path: str, size: int) -> ImageFont.FreeTypeFont:
    """
    Load a TrueType font at the given pixel size.

    Args:
        path: Font file path
        size: Pixel size (clamped to at least 1)

    Returns:
        The loaded font, or Pillow's default font at the same size
    """
    size = max(1, int(size))
    try:
        return ImageFont.truetype(path, size)
    except OSError as e:
        if path not in _missing_fonts:
            _missing_fonts.add(path)
            logging.warning(f"Could not load font {path} ({e}), using default font")
        return ImageFont.load_default(size)
