"""
LunarCalendarRenderer - Drives one frame of the lunar calendar clock
Samples the clock, advances the snake angle, handles page flips and draws the page(s)
"""

from dataclasses import dataclass
from typing import List, Optional

from PIL import Image

from config import CANVAS_WIDTH, CANVAS_HEIGHT

from .canvas import Canvas
from .clock import TimeSnapshot, sample_time
from .config import CalendarStyle
from .layout import PageContext
from .page import CalendarPage
from .style import PaintStyle
from .transition import FULL_ALPHA, TransitionController, page_alpha, page_scale


@dataclass(frozen=True)
class PageLayer:
    """One page to draw this frame"""
    minute: int
    alpha: float
    scale: float
    outgoing: bool = False


class LunarCalendarRenderer:
    """Owns the animation state and renders complete frames"""

    def __init__(self, style: Optional[CalendarStyle] = None,
                 width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT):
        self.width = width
        self.height = height
        self.style = style or CalendarStyle()
        self.page = CalendarPage()

        # Animation state
        self.transitions = TransitionController(self.style.flip_duration)
        self.angle = 0.0
        self.frame_count = 0
        self.last_snapshot: Optional[TimeSnapshot] = None

        # Cache for the static backdrop
        self._backdrop_template: Optional[Image.Image] = None

    def set_style(self, style: CalendarStyle) -> None:
        """Swap the style; the flip state carries over"""
        self.style = style
        self.transitions.flip_duration = style.flip_duration
        self.clear_cache()

    def plan_frame(self, snapshot: TimeSnapshot) -> List[PageLayer]:
        """Advance animation state by one frame and decide which pages to draw"""
        self.angle += self.style.angle_step
        self.frame_count += 1
        self.last_snapshot = snapshot

        state = self.transitions.update(snapshot.minute)

        if not state.is_flipping:
            return [PageLayer(snapshot.minute, FULL_ALPHA, 1.0)]

        progress = self.transitions.progress
        layers = [
            PageLayer(state.outgoing_minute, page_alpha(progress, True), page_scale(progress, True), outgoing=True),
            PageLayer(snapshot.minute, page_alpha(progress, False), page_scale(progress, False)),
        ]
        # Flip frames are counted only while two pages are drawn
        self.transitions.advance()
        return layers

    def _create_backdrop(self) -> Image.Image:
        """Create the red vertical gradient behind the paper"""
        if self._backdrop_template is not None:
            return self._backdrop_template.copy()

        img = Image.new('RGB', (self.width, self.height))
        canvas = Canvas(img)
        base = self.style.backdrop_color
        last_row = max(self.height - 1, 1)
        for y in range(self.height):
            factor = 1.0 - (1.0 - self.style.backdrop_fade) * (y / last_row)
            color = (int(base[0] * factor), int(base[1] * factor), int(base[2] * factor), 255)
            canvas.line(0, y, self.width, y, color)

        self._backdrop_template = img
        return img.copy()

    def draw_layers(self, layers: List[PageLayer], snapshot: TimeSnapshot) -> Image.Image:
        """Draw the planned page layers over the backdrop"""
        img = self._create_backdrop()
        canvas = Canvas(img)

        for layer in layers:
            page = PageContext(minute=layer.minute, snapshot=snapshot, angle=self.angle,
                               width=self.width, height=self.height)
            paint = PaintStyle(style=self.style, alpha=layer.alpha)
            self.page.render(canvas, page, paint, scale=layer.scale)

        return img

    def render_frame(self, snapshot: Optional[TimeSnapshot] = None) -> Image.Image:
        """Render one complete frame, sampling the clock once if no snapshot is given"""
        if snapshot is None:
            snapshot = sample_time()
        layers = self.plan_frame(snapshot)
        return self.draw_layers(layers, snapshot)

    def is_animating(self) -> bool:
        """Check if a page flip is in progress"""
        return self.transitions.state.is_flipping

    def get_status(self) -> dict:
        return {
            "frame_count": self.frame_count,
            "angle": self.angle,
            "transition": self.transitions.state.to_dict(),
            "snapshot": self.last_snapshot.to_dict() if self.last_snapshot else None,
        }

    def clear_cache(self) -> None:
        """Clear the cached backdrop (call after a style change)"""
        self._backdrop_template = None
