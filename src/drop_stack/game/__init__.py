"""Game module for Drop Stack.

Exports the placement engine and supporting classes:
- ShapeType / Shape / SHAPES: the seven fixed tetromino shapes
- Placement: four absolute cells with the topmost one last
- Grid: occupancy, drop resolution and row clearing
- DropStackGame / GameConfig / solve: a puzzle session over one grid
- parse_line / parse_token: placement code parsing
"""

from .errors import GameError, InvalidToken, OutOfBounds
from .shapes import SHAPES, Placement, Shape, ShapeType, get_shape
from .grid import Grid, PlacementResult
from .notation import format_placements, parse_line, parse_token
from .core import DropStackGame, GameConfig, solve

__all__ = [
    "GameError",
    "InvalidToken",
    "OutOfBounds",
    "SHAPES",
    "Placement",
    "Shape",
    "ShapeType",
    "get_shape",
    "Grid",
    "PlacementResult",
    "format_placements",
    "parse_line",
    "parse_token",
    "DropStackGame",
    "GameConfig",
    "solve",
]
