"""Gymnasium environments for Drop Stack."""

from __future__ import annotations

from gymnasium.envs.registration import register

# One action = (shape index, column) on the 10x100 board
register(
    id="DropStack-10x100-v0",
    entry_point="drop_stack.env.drop_stack_env:DropStackEnv",
)

__all__ = ["DropStack-10x100-v0"]
