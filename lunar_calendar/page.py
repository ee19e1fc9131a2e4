"""
CalendarPage - Composes the page components into one calendar page
Applies the flip scale around the canvas center before drawing
"""

from typing import List, Optional

from .canvas import Canvas
from .components import (
    FooterComponent,
    HeaderComponent,
    MainContentComponent,
    PaperComponent,
    SecondsGridComponent,
)
from .layout import CONTENT_MARGIN, PageComponent, PageContext
from .style import PaintStyle


def default_components() -> List[PageComponent]:
    """Components in draw order"""
    return [
        PaperComponent(),
        HeaderComponent(),
        MainContentComponent(),
        SecondsGridComponent(),
        FooterComponent(),
    ]


class CalendarPage:
    """Draws one complete calendar page at a given opacity and scale"""

    def __init__(self, components: Optional[List[PageComponent]] = None):
        self.components = components if components is not None else default_components()

    def render(self, canvas: Canvas, page: PageContext, paint: PaintStyle, scale: float = 1.0) -> None:
        with canvas.saved():
            canvas.translate(page.width / 2, page.height / 2)
            canvas.scale(scale)
            canvas.translate(-page.width / 2, -page.height / 2)

            for component in self.components:
                if component.page_level:
                    component.render(canvas, page, paint)

            with canvas.saved():
                canvas.translate(CONTENT_MARGIN, CONTENT_MARGIN)
                for component in self.components:
                    if not component.page_level:
                        component.render(canvas, page, paint)
