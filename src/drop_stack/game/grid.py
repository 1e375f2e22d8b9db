from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

import numpy as np

from .shapes import GRID_HEIGHT, GRID_WIDTH, Placement, Shape


logger = logging.getLogger(__name__)


@dataclass
class PlacementResult:
    placement: Placement
    lines_cleared: int
    height: int


class Grid:
    """Tall, narrow board that shapes are dropped into.

    Occupancy is a boolean matrix indexed ``[row, col]`` with row 0 at the
    floor. ``first_blank`` is the lowest row that is guaranteed empty; every
    row at or above it is empty, and it doubles as the stack height.
    """

    def __init__(self, width: int = GRID_WIDTH, rows: int = GRID_HEIGHT) -> None:
        self.width = int(width)
        self.rows = int(rows)
        self.cells = np.zeros((self.rows, self.width), dtype=np.bool_)
        self.first_blank = 0

    def reset(self) -> None:
        self.cells.fill(False)
        self.first_blank = 0

    def height(self) -> int:
        return self.first_blank

    def cells_at(self, shape: Shape, x: int, y: int) -> Placement:
        return shape.cells_at(x, y, self.width, self.rows)

    def can_place(self, placement: Placement) -> bool:
        return not any(self.cells[y, x] for x, y in placement)

    def is_row_full(self, row: int) -> bool:
        return bool(np.all(self.cells[row]))

    def resting_placement(self, shape: Shape, column: int) -> Placement:
        """Lowest placement reachable by dropping ``shape`` into ``column``.

        Raises OutOfBounds when the shape does not fit at the first blank row.
        """
        placement = self.cells_at(shape, column, self.first_blank)
        # Falling stops at the first blocked row; holes below it are unreachable.
        for row in range(self.first_blank - 1, -1, -1):
            candidate = self.cells_at(shape, column, row)
            if not self.can_place(candidate):
                break
            placement = candidate
        return placement

    def place(self, shape: Shape, column: int) -> PlacementResult:
        """Drop ``shape`` into ``column``, lock it and clear completed rows."""
        placement = self.resting_placement(shape, column)
        for x, y in placement:
            self.cells[y, x] = True

        top = placement.top
        self.first_blank = max(self.first_blank, top + 1)
        logger.debug("%s at column %d rests with top row %d", shape.name, column, top)

        lines = self._clear_full_rows(top, shape.height)
        return PlacementResult(placement=placement, lines_cleared=lines, height=self.first_blank)

    def _clear_full_rows(self, top: int, span: int) -> int:
        # Only the rows the shape touched can have been completed.
        lowest = max(0, top - (span - 1))
        full_rows = [y for y in range(top, lowest - 1, -1) if self.is_row_full(y)]
        if not full_rows:
            return 0
        num = len(full_rows)
        # Remove full rows and add empty rows at the top
        remaining = np.delete(self.cells, full_rows, axis=0)
        new_rows = np.zeros((num, self.width), dtype=np.bool_)
        self.cells = np.vstack((remaining, new_rows))
        self.first_blank -= num
        logger.debug("cleared rows %s, height now %d", full_rows, self.first_blank)
        return num

    def column_heights(self) -> List[int]:
        heights: List[int] = []
        for x in range(self.width):
            filled = np.flatnonzero(self.cells[: self.first_blank, x])
            heights.append(int(filled[-1]) + 1 if filled.size else 0)
        return heights

    def count_holes(self) -> int:
        """Empty cells lying below the top filled cell of their column."""
        holes = 0
        for x, column_height in enumerate(self.column_heights()):
            holes += int(column_height - np.count_nonzero(self.cells[:column_height, x]))
        return holes

    def clone_state(self) -> np.ndarray:
        return self.cells.copy()

    def copy(self) -> "Grid":
        new_grid = Grid(self.width, self.rows)
        new_grid.cells = self.cells.copy()
        new_grid.first_blank = self.first_blank
        return new_grid

    def to_text(self, filled: str = "█", empty: str = "·") -> str:
        """Occupied part of the board as text, top row first."""
        lines = []
        for y in range(self.first_blank - 1, -1, -1):
            lines.append("".join(filled if cell else empty for cell in self.cells[y]))
        return "\n".join(lines)
