from __future__ import annotations

from typing import Tuple

import numpy as np
import pygame


EMPTY_COLOR = (20, 20, 26)
FILLED_COLOR = (0, 240, 240)
BACKGROUND = (10, 10, 14)


class Renderer:
    """Draws a window of `visible_rows` board rows, floor side at the bottom.

    The window starts at `bottom_row`; use `window_for(height)` to keep the
    top of a stack in view once it grows taller than the window.
    """

    def __init__(self, cell_size: int = 30, margin: int = 20, visible_rows: int = 20) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.visible_rows = visible_rows

    def screen_size(self, width: int) -> Tuple[int, int]:
        return (
            width * self.cell_size + 2 * self.margin,
            self.visible_rows * self.cell_size + 2 * self.margin,
        )

    def window_for(self, height: int) -> int:
        return max(0, height - self.visible_rows)

    def board_surface(self, state: np.ndarray, bottom_row: int = 0) -> pygame.Surface:
        rows = max(0, min(self.visible_rows, state.shape[0] - bottom_row))
        w = state.shape[1]
        surf = pygame.Surface((w * self.cell_size, self.visible_rows * self.cell_size))
        surf.fill((30, 30, 36))
        for offset in range(rows):
            row = bottom_row + offset
            # the window's lowest row is drawn on the last screen line
            py = (self.visible_rows - 1 - offset) * self.cell_size
            for x in range(w):
                color = FILLED_COLOR if state[row, x] else EMPTY_COLOR
                rect = pygame.Rect(x * self.cell_size, py, self.cell_size - 1, self.cell_size - 1)
                pygame.draw.rect(surf, color, rect)
        return surf

    def draw(self, screen: pygame.Surface, state: np.ndarray, bottom_row: int = 0) -> None:
        board = self.board_surface(state, bottom_row)
        screen.fill(BACKGROUND)
        screen.blit(board, (self.margin, self.margin))
        pygame.display.flip()
