from __future__ import annotations

import argparse
import logging

import gymnasium as gym

import puyo_chain.env  # noqa: F401  ensure registration

logger = logging.getLogger(__name__)


def run_random(steps: int = 500, seed: int | None = None) -> float:
    env = gym.make("PuyoChain-12x6-v0")
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)
    total_reward = 0.0
    episodes = 0
    for _ in range(steps):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        if terminated or truncated:
            episodes += 1
            logger.info("episode %d finished with score %d", episodes, info["score"])
            obs, info = env.reset()
    env.close()
    return total_reward


def main() -> None:  # pragma: no cover
    p = argparse.ArgumentParser()
    p.add_argument("--steps", type=int, default=500)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    total = run_random(args.steps, args.seed)
    print(f"Random agent total reward: {total:.2f}")


if __name__ == "__main__":  # pragma: no cover
    main()
