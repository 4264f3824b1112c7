"""
Evaluation script for trained agents and scripted baselines
"""

import time
import argparse
from typing import Callable, Dict, Optional

import numpy as np

from creeper_chase import ChaseEnv, greedy_action
from creeper_chase.chase_env import ACTIONS
from rl.configs.chase_config import get_env_kwargs


def run_policy(
    policy: Callable[[np.ndarray], int],
    n_episodes: int = 10,
    render: bool = False,
    seed: Optional[int] = None,
    name: str = "policy",
    **env_overrides,
) -> Dict[str, float]:
    """Roll out ``policy`` (observation -> action) and report outcome statistics"""
    env = ChaseEnv(render_mode="human" if render else None, **get_env_kwargs(**env_overrides))

    episode_rewards = []
    episode_lengths = []
    outcomes = []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0
        steps = 0

        while not (terminated or truncated):
            action = policy(obs)
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            steps += 1
            if render:
                time.sleep(1 / env.metadata["render_fps"])

        outcome = info["outcome"] if terminated else "timeout"
        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        outcomes.append(outcome)

        print(f"[{name}] Episode {episode + 1}/{n_episodes}: "
              f"Reward = {total_reward:.2f}, Length = {steps}, Outcome = {outcome}")

    env.close()

    results = {
        "mean_reward": float(np.mean(episode_rewards)),
        "std_reward": float(np.std(episode_rewards)),
        "mean_length": float(np.mean(episode_lengths)),
        "win_rate": outcomes.count("win") / n_episodes,
        "loss_rate": outcomes.count("loss") / n_episodes,
        "timeout_rate": outcomes.count("timeout") / n_episodes,
    }

    print("\n" + "="*50)
    print(f"{name} results ({n_episodes} episodes):")
    print(f"Mean Reward: {results['mean_reward']:.2f} ± {results['std_reward']:.2f}")
    print(f"Mean Episode Length: {results['mean_length']:.1f}")
    print(f"Win / Loss / Timeout: {results['win_rate']:.2f} / "
          f"{results['loss_rate']:.2f} / {results['timeout_rate']:.2f}")
    print("="*50)

    return results


def random_policy(seed: Optional[int] = None) -> Callable[[np.ndarray], int]:
    rng = np.random.default_rng(seed)
    n_actions = len(ACTIONS)
    return lambda obs: int(rng.integers(n_actions))


def load_model_policy(model_path: str, algo: str = "ppo") -> Callable[[np.ndarray], int]:
    """Wrap a saved Stable-Baselines3 model as a deterministic policy"""
    if algo not in ("ppo", "dqn"):
        raise ValueError(f"Unknown algorithm: {algo}")

    from stable_baselines3 import PPO, DQN

    model = PPO.load(model_path) if algo == "ppo" else DQN.load(model_path)

    def _policy(obs):
        action, _ = model.predict(obs, deterministic=True)
        return int(action)
    return _policy


def main():
    parser = argparse.ArgumentParser(description="Evaluate a policy on the chase environment")
    parser.add_argument(
        "model_path",
        type=str,
        nargs="?",
        default=None,
        help="Path to a trained model (omit to evaluate the baselines only)",
    )
    parser.add_argument(
        "--algo",
        type=str,
        default="ppo",
        choices=["ppo", "dqn"],
        help="Algorithm used to train the model (default: ppo)",
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
        help="Watch the episodes in an arcade window",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed (default: 42)",
    )
    parser.add_argument(
        "--compare-baselines",
        action="store_true",
        help="Also evaluate the random and greedy baselines",
    )

    args = parser.parse_args()

    results = None
    if args.model_path:
        results = run_policy(
            load_model_policy(args.model_path, args.algo),
            n_episodes=args.n_episodes,
            render=args.render,
            seed=args.seed,
            name=args.algo,
        )

    if args.compare_baselines or results is None:
        print("\n")
        baselines = {
            "random": run_policy(random_policy(args.seed), args.n_episodes, seed=args.seed, name="random"),
            "greedy": run_policy(greedy_action, args.n_episodes, seed=args.seed, name="greedy"),
        }
        if results is not None:
            for name, base in baselines.items():
                improvement = results["mean_reward"] - base["mean_reward"]
                print(f"Improvement over {name}: {improvement:.2f}")


if __name__ == "__main__":
    main()
