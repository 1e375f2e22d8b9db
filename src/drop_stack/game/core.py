from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .grid import Grid, PlacementResult
from .notation import Move, parse_line
from .shapes import GRID_HEIGHT, GRID_WIDTH, ShapeType, get_shape


@dataclass
class GameConfig:
    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT


class DropStackGame:
    """One puzzle: a grid plus the placements applied to it so far."""

    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.grid = Grid(self.config.width, self.config.height)
        self.history: List[Move] = []
        self.lines_cleared_total = 0

    def reset(self) -> None:
        self.grid.reset()
        self.history = []
        self.lines_cleared_total = 0

    @property
    def height(self) -> int:
        return self.grid.height()

    @property
    def pieces_placed(self) -> int:
        return len(self.history)

    def place(self, kind: ShapeType | str, column: int) -> PlacementResult:
        shape = get_shape(kind)
        result = self.grid.place(shape, column)
        self.history.append((shape.kind, column))
        self.lines_cleared_total += result.lines_cleared
        return result

    def play(self, moves: Iterable[Move]) -> int:
        """Apply moves in order, stopping at the first error. Returns the height."""
        for kind, column in moves:
            self.place(kind, column)
        return self.height


def solve(line: str, config: Optional[GameConfig] = None) -> int:
    """Height of the stack after playing a line of placement codes on a fresh grid."""
    return DropStackGame(config).play(parse_line(line))
