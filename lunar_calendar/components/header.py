"""
Header Component

Renders the red header bar with binding holes, the year/month/weekday line,
the gold separator and the decorative dot rows.
"""

from ..canvas import Canvas
from ..layout import PageComponent, PageContext
from ..style import PaintStyle

BAR_HEIGHT = 25
BAR_RADIUS = 8
HOLE_DIAMETER = 6
HEADER_TEXT_SIZE = 11
SEPARATOR_Y = 70

DOT_COUNT = 5
DOT_DIAMETER = 3
DOT_OPACITY = 0.6
DOT_BANDS = (75, 265)


class HeaderComponent(PageComponent):
    """Component for rendering the calendar header"""

    def __init__(self, component_id: str = "header"):
        super().__init__(component_id)

    def render(self, canvas: Canvas, page: PageContext, paint: PaintStyle) -> None:
        width = page.content_width
        center_y = BAR_HEIGHT // 2

        # Bar rounded on the top corners only
        canvas.rect(0, 0, width, BAR_HEIGHT, fill=paint.primary,
                    radius=BAR_RADIUS, corners=(True, True, False, False))

        # Binding holes
        canvas.circle(40, center_y, HOLE_DIAMETER, fill=paint.gold)
        canvas.circle(page.width - 100, center_y, HOLE_DIAMETER, fill=paint.gold)

        canvas.text(page.snapshot.header_text(), width / 2, center_y, HEADER_TEXT_SIZE,
                    paint.label, paint.style.sans_font_path)

        canvas.line(20, SEPARATOR_Y, page.width - 80, SEPARATOR_Y, paint.gold, width=2)

        self._draw_dots(canvas, page, paint)

    def _draw_dots(self, canvas: Canvas, page: PageContext, paint: PaintStyle) -> None:
        """Draw the evenly spaced dot rows above and below the minute"""
        spacing = (page.width - 120) / (DOT_COUNT - 1)
        color = paint.rgba(paint.style.gold_color, DOT_OPACITY)
        for i in range(DOT_COUNT):
            for band_y in DOT_BANDS:
                canvas.circle(30 + i * spacing, band_y, DOT_DIAMETER, fill=color)
