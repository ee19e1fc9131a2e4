"""
Main Content Component

Renders the zodiac hour symbol, the large minute numerals with the small
snake behind them, and the separator under the minute.
"""

from ..canvas import Canvas
from ..clock import hour_symbol
from ..layout import PageComponent, PageContext
from ..spiral import draw_accent_spiral
from ..style import PaintStyle

HOUR_Y = 50
HOUR_SIZE = 20
MINUTE_Y = 180
MINUTE_SIZE = 180
SNAKE_Y = 170
SEPARATOR_Y = 270


def format_minute(minute: int) -> str:
    return f"{minute:02d}"


class MainContentComponent(PageComponent):
    """Component for rendering the hour symbol and minute numerals"""

    def __init__(self, component_id: str = "main_content"):
        super().__init__(component_id)

    def render(self, canvas: Canvas, page: PageContext, paint: PaintStyle) -> None:
        center_x = page.content_center_x

        canvas.text(hour_symbol(page.snapshot.hour12), center_x, HOUR_Y, HOUR_SIZE,
                    paint.ink, paint.style.symbol_font_path)

        draw_accent_spiral(canvas, (center_x, SNAKE_Y), page.angle, paint.alpha, paint.style)

        canvas.text(format_minute(page.minute), center_x, MINUTE_Y, MINUTE_SIZE,
                    paint.primary, paint.style.numeral_font_path)

        canvas.line(20, SEPARATOR_Y, page.width - 80, SEPARATOR_Y,
                    paint.rgba(paint.style.separator_color), width=2)
