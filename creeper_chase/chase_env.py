"""
ChaseEnv - gymnasium wrapper around the chase game
---------------------------------------------------
- Same tick as the interactive game (ChaseGame)
- Discrete(9) action space: stay, 4 straight moves, 4 diagonals
- Vector observation: player position + creeper/safe house offsets and distances
- Episode ends on win or loss; truncated at max_steps

Quick test:
    python -m creeper_chase.chase_env
"""

from __future__ import annotations

import math
import time
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .entities import Entity, Outcome, FIELD_SIZE, PLAYER_START, CREEPER_START, SAFE_HOUSE_POS
from .game import ChaseGame
from .input import Direction
from .utils import clamp

# Index -> player moves for one tick
ACTIONS: List[Tuple[Direction, ...]] = [
    (),
    (Direction.UP,),
    (Direction.DOWN,),
    (Direction.LEFT,),
    (Direction.RIGHT,),
    (Direction.UP, Direction.LEFT),
    (Direction.UP, Direction.RIGHT),
    (Direction.DOWN, Direction.LEFT),
    (Direction.DOWN, Direction.RIGHT),
]

BACKGROUND_C = (0xE8, 0xF5, 0xE9)
BORDER_C = (0x2E, 0x7D, 0x32)


class ChaseEnv(gym.Env):
    """Evade the creeper and reach the safe house"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        field_size: float = FIELD_SIZE,
        max_steps: int = 1200,
        player_speed: float = 20.0,
        creeper_speed: float = 1.5,
        player_size: float = 20.0,
        creeper_size: float = 20.0,
        safe_house_size: float = 40.0,
        r_win: float = 1.0,
        r_loss: float = 1.0,
        r_time: float = 0.001,
        r_progress: float = 0.5,
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Unsupported render_mode: {render_mode}"
        self.render_mode = render_mode

        self.field_size = float(field_size)
        self.max_steps = max_steps
        self.player_speed = player_speed
        self.creeper_speed = creeper_speed
        self.player_size = player_size
        self.creeper_size = creeper_size
        self.safe_house_size = safe_house_size

        # Reward shaping
        self.r_win = r_win
        self.r_loss = r_loss
        self.r_time = r_time
        self.r_progress = r_progress

        self.action_space = spaces.Discrete(len(ACTIONS))

        # Player pos(2), creeper offset(2), safe house offset(2), distances(2)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(8,), dtype=np.float32
        )

        self.game = self._make_game()
        self._step_count = 0
        self._last_goal_dist = self.game.goal_distance()
        self._last_outcome = Outcome.NONE

        # Arcade rendering state
        self._window = None

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        self.game = self._make_game()
        self._step_count = 0
        self._last_goal_dist = self.game.goal_distance()
        self._last_outcome = Outcome.NONE

        obs = self._get_obs()
        info = self._get_info()
        return obs, info

    def _make_game(self) -> ChaseGame:
        # Start positions scale with the field size
        scale = self.field_size / FIELD_SIZE
        return ChaseGame(
            field_size=self.field_size,
            player=Entity(PLAYER_START[0] * scale, PLAYER_START[1] * scale,
                          self.player_size, self.player_speed, (0x42, 0xA5, 0xF5)),
            creeper=Entity(CREEPER_START[0] * scale, CREEPER_START[1] * scale,
                           self.creeper_size, self.creeper_speed, (0x66, 0xBB, 0x6A)),
            safe_house=Entity(SAFE_HOUSE_POS[0] * scale, SAFE_HOUSE_POS[1] * scale,
                              self.safe_house_size, 0.0, (0x8D, 0x6E, 0x63)),
            reset_on_outcome=False,
        )

    def step(self, action):
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action {action!r} for {self.action_space}")

        outcome = self.game.step(ACTIONS[int(action)])
        self._last_outcome = outcome

        reward = self._compute_reward(outcome)
        self._last_goal_dist = self.game.goal_distance()

        terminated = outcome is not Outcome.NONE
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        s = self.field_size
        diag = s * math.sqrt(2)
        p, c, g = self.game.player, self.game.creeper, self.game.safe_house

        obs_parts = [
            p.x / s * 2 - 1, p.y / s * 2 - 1,
            clamp((c.x - p.x) / s, -1, 1), clamp((c.y - p.y) / s, -1, 1),
            (g.x - p.x) / s, (g.y - p.y) / s,
            clamp(self.game.creeper_distance() / diag * 2 - 1, -1, 1),
            self.game.goal_distance() / diag * 2 - 1,
        ]
        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, outcome: Outcome) -> float:
        reward = -self.r_time
        reward += self.r_progress * (self._last_goal_dist - self.game.goal_distance()) / self.field_size

        if outcome is Outcome.LOSS:
            reward -= self.r_loss
        elif outcome is Outcome.WIN:
            reward += self.r_win

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "outcome": self._last_outcome.name.lower(),
            "creeper_distance": self.game.creeper_distance(),
            "goal_distance": self.game.goal_distance(),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self.render_mode == "rgb_array":
            return self._render_rgb_array()

        if self._window is None:
            # Imported here so headless use never needs a display
            from .window import ChaseWindow
            self._window = ChaseWindow(self.game, interactive=False)

        # reset() builds a fresh game
        self._window.game = self.game
        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def _render_rgb_array(self) -> np.ndarray:
        """Rasterize entities as filled squares, y pointing down"""
        n = int(round(self.field_size))
        frame = np.empty((n, n, 3), dtype=np.uint8)
        frame[:] = BACKGROUND_C

        border = 5
        frame[:border, :] = BORDER_C
        frame[-border:, :] = BORDER_C
        frame[:, :border] = BORDER_C
        frame[:, -border:] = BORDER_C

        for e in (self.game.safe_house, self.game.player, self.game.creeper):
            x0 = int(clamp(round(e.x - e.half), 0, n))
            x1 = int(clamp(round(e.x + e.half), 0, n))
            y0 = int(clamp(round(e.y - e.half), 0, n))
            y1 = int(clamp(round(e.y + e.half), 0, n))
            frame[y0:y1, x0:x1] = e.color

        return frame

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


def greedy_action(obs: np.ndarray) -> int:
    """Baseline policy: head straight for the safe house, ignore the creeper"""
    gx, gy = float(obs[4]), float(obs[5])
    eps = 1e-3

    vertical = Direction.DOWN if gy > eps else Direction.UP if gy < -eps else None
    horizontal = Direction.RIGHT if gx > eps else Direction.LEFT if gx < -eps else None
    moves = tuple(d for d in (vertical, horizontal) if d is not None)
    return ACTIONS.index(moves)


# ----------------------------
# Quick sanity test
# ----------------------------

def run_episode(policy: str = "greedy", render: bool = True, seed: Optional[int] = 42) -> float:
    """Run one episode with the random or greedy policy"""
    if policy not in ("random", "greedy"):
        raise ValueError(f"Unknown policy: {policy}")

    env = ChaseEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    print(f"Running {policy} episode... close the window to stop early.")

    while not (terminated or truncated):
        if policy == "random":
            action = env.action_space.sample()
        else:
            action = greedy_action(obs)
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

        if render:
            time.sleep(1 / env.metadata["render_fps"])

    print(f"{policy.capitalize()} episode return: {total:.3f} "
          f"(outcome: {info['outcome']}, steps: {info['step']})")

    env.close()
    return total


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Run a scripted chase episode")
    parser.add_argument("--policy", choices=["random", "greedy"], default="greedy")
    parser.add_argument("--no-render", action="store_true", help="Disable rendering")
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    run_episode(policy=args.policy, render=not args.no_render, seed=args.seed)
