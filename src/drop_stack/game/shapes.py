from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Iterator, Tuple

from .errors import InvalidToken, OutOfBounds


GRID_WIDTH = 10
GRID_HEIGHT = 100

Coordinate = Tuple[int, int]


class ShapeType(IntEnum):
    Q = 0
    Z = 1
    S = 2
    T = 3
    I = 4
    L = 5
    J = 6

    @classmethod
    def from_letter(cls, letter: str) -> "ShapeType":
        try:
            return cls[letter]
        except KeyError:
            raise InvalidToken(letter, "unknown shape") from None


@dataclass(frozen=True)
class Placement:
    """Four absolute cells; the last one is always the topmost."""

    cells: Tuple[Coordinate, Coordinate, Coordinate, Coordinate]

    @property
    def top(self) -> int:
        return self.cells[3][1]

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self.cells)


@dataclass(frozen=True)
class Shape:
    kind: ShapeType
    width: int
    height: int
    # (dx, dy) offsets from the anchor, ordered so the last one has the max dy
    offsets: Tuple[Coordinate, Coordinate, Coordinate, Coordinate]

    @property
    def name(self) -> str:
        return self.kind.name

    def cells_at(
        self,
        x: int,
        y: int,
        grid_width: int = GRID_WIDTH,
        grid_height: int = GRID_HEIGHT,
    ) -> Placement:
        """Absolute cells with the bounding box's bottom-left corner at (x, y)."""
        if x < 0 or y < 0 or x > grid_width - self.width or y > grid_height - self.height:
            raise OutOfBounds(self.name, x, y)
        cells = tuple((x + dx, y + dy) for dx, dy in self.offsets)
        return Placement(cells)  # type: ignore[arg-type]


# Layouts, top row first:
#
#   Q: 3 4   Z: 3 4     S:   3 4   T: 2 3 4   I: 1 2 3 4   L: 4     J:   4
#      1 2        1 2      1 2          1                     3          3
#                                                             1 2      1 2
SHAPES: Dict[ShapeType, Shape] = {
    ShapeType.Q: Shape(ShapeType.Q, 2, 2, ((0, 0), (1, 0), (0, 1), (1, 1))),
    ShapeType.Z: Shape(ShapeType.Z, 3, 2, ((1, 0), (2, 0), (0, 1), (1, 1))),
    ShapeType.S: Shape(ShapeType.S, 3, 2, ((0, 0), (1, 0), (1, 1), (2, 1))),
    ShapeType.T: Shape(ShapeType.T, 3, 2, ((1, 0), (0, 1), (1, 1), (2, 1))),
    ShapeType.I: Shape(ShapeType.I, 4, 1, ((0, 0), (1, 0), (2, 0), (3, 0))),
    ShapeType.L: Shape(ShapeType.L, 2, 3, ((0, 0), (1, 0), (0, 1), (0, 2))),
    ShapeType.J: Shape(ShapeType.J, 2, 3, ((0, 0), (1, 0), (1, 1), (1, 2))),
}

MAX_SHAPE_HEIGHT = max(shape.height for shape in SHAPES.values())


def get_shape(kind: ShapeType | str) -> Shape:
    if isinstance(kind, str):
        kind = ShapeType.from_letter(kind)
    return SHAPES[ShapeType(kind)]
