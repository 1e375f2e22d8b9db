from __future__ import annotations

import argparse
from typing import Optional

import gymnasium as gym
import numpy as np

import drop_stack.env  # noqa: F401  ensure registration


def run_random(steps: int = 200, seed: Optional[int] = None) -> float:
    env = gym.make("DropStack-10x100-v0")
    rng = np.random.default_rng(seed)
    obs, info = env.reset(seed=seed)
    total_reward = 0.0
    try:
        for _ in range(steps):
            # Prefer placements that fit on the board
            valid = np.argwhere(info["action_mask"])
            if valid.size:
                action = valid[rng.integers(len(valid))]
            else:
                action = env.action_space.sample()
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += float(reward)
            if terminated or truncated:
                obs, info = env.reset()
    finally:
        env.close()
    return total_reward


def main() -> None:
    p = argparse.ArgumentParser()
    p.add_argument("--steps", type=int, default=200)
    p.add_argument("--seed", type=int, default=None)
    args = p.parse_args()
    total_reward = run_random(args.steps, args.seed)
    print(f"Random agent total reward: {total_reward:.2f}")


if __name__ == "__main__":  # pragma: no cover
    main()
