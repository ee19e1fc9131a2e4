"""
Seconds grid model
Lays out 60 calendar-style cells and classifies each against the current second
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

GRID_COLUMNS = 10
GRID_ROWS = 6
CELL_COUNT = GRID_COLUMNS * GRID_ROWS
CELL_HEIGHT = 30
GRID_TOP = 300


class CellState(Enum):
    ELAPSED = "elapsed"
    CURRENT = "current"
    FUTURE = "future"


@dataclass(frozen=True)
class GridCell:
    index: int
    column: int
    row: int
    state: CellState

    @property
    def label(self) -> str:
        # 1-based like days of a month
        return str(self.index + 1)

    @property
    def is_filled(self) -> bool:
        return self.state is not CellState.FUTURE


def cell_state(index: int, second: int) -> CellState:
    if index < second:
        return CellState.ELAPSED
    if index == second:
        return CellState.CURRENT
    return CellState.FUTURE


def seconds_grid_cells(second: int) -> List[GridCell]:
    """All 60 cells in index order, column = i mod 10, row = i // 10"""
    return [
        GridCell(index=i, column=i % GRID_COLUMNS, row=i // GRID_COLUMNS, state=cell_state(i, second))
        for i in range(CELL_COUNT)
    ]
