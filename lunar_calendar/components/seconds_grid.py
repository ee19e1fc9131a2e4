"""
Seconds Grid Component

Renders the 10x6 "days of the month" grid showing elapsed, current and
future seconds.
"""

from ..canvas import RGBA, Canvas
from ..grid import CELL_HEIGHT, GRID_COLUMNS, GRID_TOP, CellState, GridCell, seconds_grid_cells
from ..layout import PageComponent, PageContext
from ..style import PaintStyle

LABEL_SIZE = 8


class SecondsGridComponent(PageComponent):
    """Component for rendering the seconds grid"""

    def __init__(self, component_id: str = "seconds_grid"):
        super().__init__(component_id)

    def _fill(self, cell: GridCell, paint: PaintStyle):
        if not cell.is_filled:
            return None
        if cell.state is CellState.CURRENT:
            return paint.gold
        return paint.primary

    def _label_color(self, cell: GridCell, paint: PaintStyle) -> RGBA:
        # Light on elapsed cells, dark everywhere else
        if cell.state is CellState.ELAPSED:
            return paint.label
        return paint.ink

    def render(self, canvas: Canvas, page: PageContext, paint: PaintStyle) -> None:
        cell_width = page.content_width / GRID_COLUMNS

        for cell in seconds_grid_cells(page.snapshot.second):
            x = cell.column * cell_width
            y = cell.row * CELL_HEIGHT + GRID_TOP

            canvas.rect(x, y, cell_width, CELL_HEIGHT,
                        fill=self._fill(cell, paint), outline=paint.ink, width=1)
            canvas.text(cell.label, x + cell_width / 2, y + CELL_HEIGHT / 2, LABEL_SIZE,
                        self._label_color(cell, paint), paint.style.sans_font_path)
