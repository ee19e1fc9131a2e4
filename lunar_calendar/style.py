"""
PaintStyle - Palette plus the current page opacity
Threaded through every page drawing routine so a page fades as one unit
"""

from dataclasses import dataclass, field
from typing import Sequence

from .canvas import RGBA, rgba
from .config import CalendarStyle


@dataclass(frozen=True)
class PaintStyle:
    """Immutable paint settings for one page draw"""
    style: CalendarStyle = field(default_factory=CalendarStyle)
    alpha: float = 255.0

    def rgba(self, color: Sequence[int], opacity: float = 1.0) -> RGBA:
        """Color with the page alpha (times an element opacity) in its opacity channel"""
        return rgba(color, self.alpha * opacity)

    @property
    def primary(self) -> RGBA:
        return self.rgba(self.style.primary_color)

    @property
    def gold(self) -> RGBA:
        return self.rgba(self.style.gold_color)

    @property
    def ink(self) -> RGBA:
        return self.rgba(self.style.ink_color)

    @property
    def label(self) -> RGBA:
        return self.rgba(self.style.label_color)
