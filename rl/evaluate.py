"""
Baseline evaluation for the asteroids environment
Runs scripted policies (random, spin-and-fire) and reports episode statistics.
"""

import argparse
from typing import Callable, Dict, Optional

import numpy as np

from game.asteroids import AsteroidsEnv
from rl.configs.asteroids_config import make_env_kwargs


def random_policy(env: AsteroidsEnv, obs: np.ndarray) -> np.ndarray:
    return env.action_space.sample()


def spin_and_fire_policy(env: AsteroidsEnv, obs: np.ndarray) -> np.ndarray:
    """Turn right forever and fire whenever the gun is ready"""
    return np.array([2, 0, 1], dtype=np.int64)


POLICIES: Dict[str, Callable] = {
    "random": random_policy,
    "spin": spin_and_fire_policy,
}


def evaluate_policy(
    policy: str = "random",
    n_episodes: int = 10,
    render: bool = False,
    seed: Optional[int] = None,
    max_steps: Optional[int] = None,
):
    """
    Evaluate a scripted policy

    Args:
        policy: Name of the policy ('random' or 'spin')
        n_episodes: Number of episodes to evaluate
        render: Whether to render the environment
        seed: Base random seed; episode i uses seed + i
        max_steps: Override the episode step limit
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy: {policy}")
    act = POLICIES[policy]

    overrides = {} if max_steps is None else {"max_steps": max_steps}
    env = AsteroidsEnv(**make_env_kwargs(render_mode="human" if render else None, **overrides))
    if seed is not None:
        env.action_space.seed(seed)

    episode_rewards = []
    episode_lengths = []
    episode_scores = []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0
        steps = 0

        while not (terminated or truncated):
            action = act(env, obs)
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            steps += 1

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_scores.append(info["score"])

        print(f"Episode {episode + 1}/{n_episodes}: "
              f"Reward = {total_reward:.2f}, Score = {info['score']}, Length = {steps}")

    env.close()

    mean_reward = float(np.mean(episode_rewards))
    std_reward = float(np.std(episode_rewards))
    mean_length = float(np.mean(episode_lengths))
    mean_score = float(np.mean(episode_scores))

    print("\n" + "=" * 50)
    print(f"{policy} policy ({n_episodes} episodes):")
    print(f"Mean Reward: {mean_reward:.2f} ± {std_reward:.2f}")
    print(f"Mean Score: {mean_score:.1f}")
    print(f"Mean Episode Length: {mean_length:.1f}")
    print("=" * 50)

    return {
        "mean_reward": mean_reward,
        "std_reward": std_reward,
        "mean_length": mean_length,
        "mean_score": mean_score,
        "episode_rewards": episode_rewards,
        "episode_lengths": episode_lengths,
        "episode_scores": episode_scores,
    }


def main():
    parser = argparse.ArgumentParser(description="Evaluate scripted asteroids policies")
    parser.add_argument(
        "--policy",
        type=str,
        default="random",
        choices=sorted(POLICIES),
        help="Policy to evaluate (default: random)",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=10,
        help="Number of evaluation episodes (default: 10)",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Show the episodes in an arcade window",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed (default: 42)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Override the episode step limit",
    )
    parser.add_argument(
        "--compare-random",
        action="store_true",
        help="Also evaluate the random policy for comparison",
    )

    args = parser.parse_args()

    results = evaluate_policy(
        policy=args.policy,
        n_episodes=args.n_episodes,
        render=args.render,
        seed=args.seed,
        max_steps=args.max_steps,
    )

    if args.compare_random and args.policy != "random":
        print("\n")
        random_results = evaluate_policy(
            policy="random",
            n_episodes=args.n_episodes,
            seed=args.seed,
            max_steps=args.max_steps,
        )

        improvement = results["mean_reward"] - random_results["mean_reward"]
        print(f"\nImprovement over random: {improvement:.2f}")


if __name__ == "__main__":
    main()
