from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from drop_stack.game import SHAPES, DropStackGame, GameConfig, OutOfBounds, ShapeType, format_placements
from drop_stack.game.shapes import MAX_SHAPE_HEIGHT


def _compute_action_mask(game: DropStackGame) -> np.ndarray:
    """Boolean (shape, column) mask of placements that stay inside the board."""
    grid = game.grid
    mask = np.zeros((len(ShapeType), grid.width), dtype=np.bool_)
    for kind, shape in SHAPES.items():
        if grid.first_blank > grid.rows - shape.height:
            continue
        mask[int(kind), : grid.width - shape.width + 1] = True
    return mask


class DropStackEnv(gym.Env):
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 reward_weights: Optional[Dict[str, float]] = None,
                 invalid_action_penalty: float = -1.0,
                 step_penalty: float = 0.0,
                 max_episode_steps: int = 1000) -> None:
        super().__init__()
        self.game = DropStackGame(config)
        self.render_mode = render_mode

        self.invalid_action_penalty = float(invalid_action_penalty)
        self.step_penalty = float(step_penalty)
        self.max_episode_steps = int(max_episode_steps)
        self.reward_weights: Dict[str, float] = {
            "lines": 1.0,    # reward per row cleared
            "height": 0.1,   # penalize stack height increase
            "holes": 0.05,   # penalize unreachable gaps created
        }
        if reward_weights:
            self.reward_weights.update({k: float(v) for k, v in reward_weights.items()})

        rows = self.game.config.height
        width = self.game.config.width

        self.observation_space = spaces.Box(low=0, high=1, shape=(rows, width), dtype=np.int8)
        # Action: (shape index, column)
        self.action_space = spaces.MultiDiscrete((len(ShapeType), width))

        self._steps = 0
        self._renderer = None
        self._screen = None

    def _get_obs(self) -> np.ndarray:
        return self.game.grid.cells.astype(np.int8)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "action_mask": _compute_action_mask(self.game),
            "height": self.game.height,
            "lines_cleared_total": self.game.lines_cleared_total,
            "pieces_placed": self.game.pieces_placed,
            "history": format_placements(self.game.history),
        }

    def _is_topped_out(self) -> bool:
        return self.game.height > self.game.grid.rows - MAX_SHAPE_HEIGHT

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        self.game.reset()
        self._steps = 0
        return self._get_obs(), self._get_info()

    def step(self, action: np.ndarray | Tuple[int, int]):
        kind, column = map(int, action)

        height_before = self.game.height
        holes_before = self.game.grid.count_holes()

        reward_components: Dict[str, float] = {}
        try:
            result = self.game.place(ShapeType(kind), column)
        except OutOfBounds:
            reward_components["invalid"] = self.invalid_action_penalty
        else:
            height_gain = max(0, result.height - height_before)
            new_holes = max(0, self.game.grid.count_holes() - holes_before)
            reward_components["lines"] = self.reward_weights["lines"] * float(result.lines_cleared)
            reward_components["height"] = -self.reward_weights["height"] * float(height_gain)
            reward_components["holes"] = -self.reward_weights["holes"] * float(new_holes)

        reward_components["step"] = self.step_penalty
        self._steps += 1
        terminated = self._is_topped_out()
        truncated = self._steps >= self.max_episode_steps

        reward = float(sum(reward_components.values()))
        info = self._get_info()
        info["reward_components"] = reward_components
        if self.render_mode == "human":
            self.render()
        return self._get_obs(), reward, terminated, truncated, info

    def render(self) -> Optional[np.ndarray]:
        grid = self.game.grid
        if self.render_mode == "rgb_array":
            cell = 12
            img = np.zeros((grid.rows * cell, grid.width * cell, 3), dtype=np.uint8)
            # Floor at the bottom of the image
            for y, row in enumerate(grid.cells[::-1]):
                for x, filled in enumerate(row):
                    color = (70, 200, 120) if filled else (30, 30, 36)
                    img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
            return img
        if self.render_mode == "human":
            import pygame

            from drop_stack.visualization.renderer import Renderer

            if self._renderer is None:
                pygame.init()
                self._renderer = Renderer(cell_size=24, margin=20, visible_rows=24)
                self._screen = pygame.display.set_mode(self._renderer.screen_size(grid.width))
                pygame.display.set_caption("Drop Stack")
            self._renderer.draw(self._screen, grid.cells, self._renderer.window_for(grid.height()))
        return None

    def close(self) -> None:
        if self._renderer is not None:
            import pygame

            pygame.quit()
            self._renderer = None
            self._screen = None
