from __future__ import annotations

from typing import Optional


class GameError(Exception):
    """Base class for errors raised while applying placements."""


class OutOfBounds(GameError):
    """A shape's bounding box would leave the grid at the requested anchor."""

    def __init__(self, shape: str, x: int, y: int) -> None:
        super().__init__(f"shape {shape} out of bounds at ({x}, {y})")
        self.shape = shape
        self.x = x
        self.y = y


class InvalidToken(GameError):
    """Malformed placement code such as ``X3``, ``Q`` or ``Qa``."""

    def __init__(self, token: str, reason: Optional[str] = None) -> None:
        message = f"invalid placement token {token!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.token = token
        self.reason = reason
