"""
Footer Component

Renders the blessing line and the two corner labels.
"""

from ..canvas import Canvas
from ..layout import PageComponent, PageContext
from ..style import PaintStyle

FOOTER_SIZE = 12
CORNER_SIZE = 8
CORNER_OPACITY = 0.7


class FooterComponent(PageComponent):
    """Component for rendering the calendar footer"""

    def __init__(self, component_id: str = "footer"):
        super().__init__(component_id)

    def render(self, canvas: Canvas, page: PageContext, paint: PaintStyle) -> None:
        style = paint.style

        canvas.text(style.footer_text, page.content_center_x, page.height - 80, FOOTER_SIZE,
                    paint.ink, style.symbol_font_path)

        corner = paint.rgba(style.gold_color, CORNER_OPACITY)
        canvas.text(style.corner_left_text, 15, page.height - 50, CORNER_SIZE,
                    corner, style.sans_bold_font_path)
        canvas.text(style.corner_right_text, page.width - 75, page.height - 50, CORNER_SIZE,
                    corner, style.sans_bold_font_path)
