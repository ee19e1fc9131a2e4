"""
Paper Component

Renders the warm paper sheet with its gold border and the large translucent
background snake.
"""

from ..canvas import Canvas
from ..layout import PAPER_BORDER, PAPER_MARGIN, PAPER_RADIUS, PAPER_TOP, PageComponent, PageContext
from ..spiral import draw_background_ornament
from ..style import PaintStyle


class PaperComponent(PageComponent):
    """Component for rendering the paper background"""

    page_level = True

    def __init__(self, component_id: str = "paper"):
        super().__init__(component_id)

    def render(self, canvas: Canvas, page: PageContext, paint: PaintStyle) -> None:
        canvas.rect(
            PAPER_MARGIN, PAPER_TOP,
            page.width - 2 * PAPER_MARGIN, page.height - 2 * PAPER_MARGIN,
            fill=paint.rgba(paint.style.paper_color),
            outline=paint.gold,
            width=PAPER_BORDER,
            radius=PAPER_RADIUS,
        )

        draw_background_ornament(canvas, (page.width / 2, page.height / 2), page.angle,
                                 paint.alpha, paint.style)
