"""
Evaluation script for Diamond Bandit policies
Runs scripted baselines (random, greedy) over seeded episodes
"""

import argparse
import logging
from typing import Optional

import numpy as np

from game.bandit import DiamondBanditEnv
from game.bandit.entities import SteeringMode
from game.bandit.utils import normalize
from rl.configs.bandit_config import ENV_CONFIG, EVAL_CONFIG, REWARD_CONFIGS


def _axis_action(v: float, threshold: float = 0.3) -> int:
    # 0 none, 1 negative, 2 positive
    if v < -threshold:
        return 1
    if v > threshold:
        return 2
    return 0


def greedy_action(env: DiamondBanditEnv, danger_radius: float = EVAL_CONFIG["danger_radius"]):
    """
    Head for the diamond, but flee the closest enemy once it gets near.

    Seeking enemies count as dangerous at twice the radius.
    """
    s = env.state
    px, py = s.player.center
    dx, dy = normalize(s.goal.x - px, s.goal.y - py, fallback=(0.0, 0.0))

    for e in s.enemies:
        ex, ey = e.center
        away_x, away_y = px - ex, py - ey
        dist = float(np.hypot(away_x, away_y))
        radius = danger_radius * (2.0 if e.mode is SteeringMode.SEEK else 1.0)
        if dist < radius:
            fx, fy = normalize(away_x, away_y, fallback=(0.0, -1.0))
            weight = 2.0 * (1.0 - dist / radius)
            dx += fx * weight
            dy += fy * weight

    dx, dy = normalize(dx, dy, fallback=(0.0, 0.0))
    return np.array([_axis_action(dx), _axis_action(dy)], dtype=np.int64)


def evaluate_policy(
    policy: str = "greedy",
    n_episodes: int = 10,
    seed: Optional[int] = None,
    reward_config: str = "baseline",
    render: bool = False,
):
    """
    Evaluate a scripted policy

    Args:
        policy: 'random' or 'greedy'
        n_episodes: Number of episodes to evaluate
        seed: Base random seed; episode i uses seed + i
        reward_config: Name of a reward preset from REWARD_CONFIGS
        render: Whether to open a window
    """
    if policy not in ("random", "greedy"):
        raise ValueError(f"Unknown policy: {policy}")

    env = DiamondBanditEnv(
        render_mode="human" if render else None,
        reward_config=REWARD_CONFIGS[reward_config],
        **ENV_CONFIG,
    )
    if seed is not None:
        env.action_space.seed(seed)

    episode_rewards = []
    episode_lengths = []
    max_levels = []
    wins = 0

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0
        steps = 0

        while not (terminated or truncated):
            if policy == "random":
                action = env.action_space.sample()
            else:
                action = greedy_action(env)
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            steps += 1

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        max_levels.append(info["max_level"])
        wins += int(info["won"])

        print(f"Episode {episode + 1}/{n_episodes}: "
              f"Reward = {total_reward:.2f}, Length = {steps}, "
              f"Max level = {info['max_level']}, Hits = {info['hits']}, Won = {info['won']}")

    env.close()

    mean_reward = np.mean(episode_rewards)
    std_reward = np.std(episode_rewards)
    mean_length = np.mean(episode_lengths)

    print("\n" + "="*50)
    print(f"{policy.capitalize()} Policy Results ({n_episodes} episodes):")
    print(f"Mean Reward: {mean_reward:.2f} ± {std_reward:.2f}")
    print(f"Mean Episode Length: {mean_length:.1f}")
    print(f"Mean Max Level: {np.mean(max_levels):.2f}")
    print(f"Victories: {wins}/{n_episodes}")
    print("="*50)

    return {
        "mean_reward": mean_reward,
        "std_reward": std_reward,
        "mean_length": mean_length,
        "win_rate": wins / max(1, n_episodes),
        "episode_rewards": episode_rewards,
        "episode_lengths": episode_lengths,
        "max_levels": max_levels,
    }


def main():
    parser = argparse.ArgumentParser(description="Evaluate scripted Diamond Bandit policies")
    parser.add_argument(
        "--policy",
        type=str,
        default="greedy",
        choices=EVAL_CONFIG["policies"],
        help="Policy to evaluate (default: greedy)",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=EVAL_CONFIG["n_episodes"],
        help="Number of evaluation episodes (default: 10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EVAL_CONFIG["seeds"][0],
        help="Random seed (default: 42)",
    )
    parser.add_argument(
        "--reward-config",
        type=str,
        default="baseline",
        choices=list(REWARD_CONFIGS),
        help="Reward shaping preset (default: baseline)",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Open a window while evaluating",
    )
    parser.add_argument(
        "--compare-random",
        action="store_true",
        help="Also evaluate random policy for comparison",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )

    args = parser.parse_args()
    logging.basicConfig(level=args.log_level, format="%(name)s %(levelname)s: %(message)s")

    results = evaluate_policy(
        policy=args.policy,
        n_episodes=args.n_episodes,
        seed=args.seed,
        reward_config=args.reward_config,
        render=args.render,
    )

    if args.compare_random and args.policy != "random":
        print("\n")
        random_results = evaluate_policy(
            policy="random",
            n_episodes=args.n_episodes,
            seed=args.seed,
            reward_config=args.reward_config,
        )

        improvement = results["mean_reward"] - random_results["mean_reward"]
        print(f"\nImprovement over random: {improvement:.2f}")


if __name__ == "__main__":
    main()
