"""
Custom callback for tracking chase outcomes during training.
Records: episode reward, length, and whether it ended in a win, a loss or a timeout.
"""

import os
import csv
from typing import Dict, List, Any, Optional

import numpy as np
from stable_baselines3.common.callbacks import BaseCallback


class MetricsCallback(BaseCallback):
    """
    Callback to track and log outcome metrics per episode.
    Saves to CSV for easy plotting and mirrors rates to the SB3 logger.
    """

    def __init__(
        self,
        log_dir: str,
        algo_name: str,
        verbose: int = 1,
    ):
        super().__init__(verbose)
        self.log_dir = log_dir
        self.algo_name = algo_name

        self.episode_rewards: List[float] = []
        self.episode_lengths: List[int] = []
        self.episode_outcomes: List[str] = []

        self.csv_path: Optional[str] = None
        self.csv_file = None
        self.csv_writer = None

    def _on_training_start(self) -> None:
        """Initialize CSV file for logging."""
        os.makedirs(self.log_dir, exist_ok=True)
        self.csv_path = os.path.join(self.log_dir, f"{self.algo_name}_metrics.csv")

        self.csv_file = open(self.csv_path, "w", newline="")
        self.csv_writer = csv.writer(self.csv_file)
        self.csv_writer.writerow(["timestep", "episode", "reward", "length", "outcome"])
        self.csv_file.flush()

        if self.verbose > 0:
            print(f"[MetricsCallback] Logging to {self.csv_path}")

    def _on_step(self) -> bool:
        infos = self.locals.get("infos", [])
        dones = self.locals.get("dones", [])

        for info, done in zip(infos, dones):
            # Monitor wrapper adds episode info on the final step
            if done and "episode" in info:
                self.record_episode(
                    info["episode"]["r"], info["episode"]["l"], info.get("outcome", "none")
                )

        return True

    def record_episode(self, reward: float, length: int, outcome: str):
        # An episode that ends without a win or loss was truncated
        if outcome == "none":
            outcome = "timeout"

        self.episode_rewards.append(float(reward))
        self.episode_lengths.append(int(length))
        self.episode_outcomes.append(outcome)

        if self.csv_writer:
            self.csv_writer.writerow([
                self.num_timesteps, len(self.episode_rewards), reward, length, outcome
            ])
            self.csv_file.flush()

        # No model (and so no logger) until the callback is attached to training
        if getattr(self, "model", None) is not None:
            self.logger.record("custom/episode_reward", reward)
            self.logger.record("custom/episode_length", length)
            self.logger.record("custom/win_rate", self._rate("win", last=100))

        if self.verbose > 0 and len(self.episode_rewards) % 10 == 0:
            avg_reward = sum(self.episode_rewards[-10:]) / 10
            print(f"[{self.algo_name}] Episode {len(self.episode_rewards)}, "
                  f"Timestep {self.num_timesteps}, "
                  f"Avg Reward (10 ep): {avg_reward:.2f}, "
                  f"Win rate (100 ep): {self._rate('win', last=100):.2f}")

    def _rate(self, outcome: str, last: Optional[int] = None) -> float:
        outcomes = self.episode_outcomes[-last:] if last else self.episode_outcomes
        if not outcomes:
            return 0.0
        return outcomes.count(outcome) / len(outcomes)

    def _on_training_end(self) -> None:
        """Cleanup CSV file."""
        if self.csv_file:
            self.csv_file.close()
            self.csv_file = None
            self.csv_writer = None
            if self.verbose > 0:
                print(f"[MetricsCallback] Saved {len(self.episode_rewards)} episodes to {self.csv_path}")

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics."""
        if not self.episode_rewards:
            return {}

        return {
            "mean_reward": np.mean(self.episode_rewards),
            "std_reward": np.std(self.episode_rewards),
            "mean_length": np.mean(self.episode_lengths),
            "total_episodes": len(self.episode_rewards),
            "win_rate": self._rate("win"),
            "loss_rate": self._rate("loss"),
            "timeout_rate": self._rate("timeout"),
        }
