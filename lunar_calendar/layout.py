"""
Page Layout and Component System

Fixed layout constants for the 400x600 calendar page and the base class
every page component derives from.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from config import CANVAS_WIDTH, CANVAS_HEIGHT

from .canvas import Canvas
from .clock import TimeSnapshot
from .style import PaintStyle

# Paper sheet, in page coordinates
PAPER_MARGIN = 30
PAPER_TOP = 27
PAPER_RADIUS = 8
PAPER_BORDER = 3

# Content origin is translated by (CONTENT_MARGIN, CONTENT_MARGIN)
CONTENT_MARGIN = 30
CONTENT_WIDTH = CANVAS_WIDTH - 2 * CONTENT_MARGIN


@dataclass(frozen=True)
class PageContext:
    """Everything a component needs to draw its part of one page"""
    minute: int
    snapshot: TimeSnapshot
    angle: float
    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT

    @property
    def content_width(self) -> int:
        return self.width - 2 * CONTENT_MARGIN

    @property
    def content_center_x(self) -> float:
        return self.content_width / 2


class PageComponent(ABC):
    """
    Base class for all calendar page components.

    Components draw themselves in content coordinates (origin at the top-left
    of the paper margin) unless they declare otherwise.
    """

    # Paper-level components draw before the content translation
    page_level = False

    def __init__(self, component_id: str = None):
        self.component_id = component_id or self.__class__.__name__

    @abstractmethod
    def render(self, canvas: Canvas, page: PageContext, paint: PaintStyle) -> None:
        """
        Render this component.

        Args:
            canvas: Drawing surface with the page transform applied
            page: Minute, time snapshot and decorative angle for this page
            paint: Palette and page opacity
        """
        pass
