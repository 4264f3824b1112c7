"""
ChaseGame - the per-tick simulation core
----------------------------------------
- Player moves a fixed distance per held direction (diagonals not normalized)
- Player is clamped to the field; the creeper is not
- Creeper steers greedily toward the player's current position
- Loss is checked before win, and each terminal event resets both movers

No rendering or window state lives here, so ticks are deterministic and
can be driven from tests, the arcade window or the gymnasium env.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .entities import (
    Entity, Decoration, Outcome, FIELD_SIZE,
    make_player, make_creeper, make_safe_house, default_decorations,
)
from .input import Direction, InputState
from .utils import clamp, normalize, distance, touching


@dataclass(frozen=True)
class EntityView:
    """Read-only copy of an entity handed to collaborators"""
    x: float
    y: float
    size: float
    color: Tuple[int, int, int]


class ChaseGame:
    """Player, creeper and safe house on a square field"""

    def __init__(
        self,
        field_size: float = FIELD_SIZE,
        player: Optional[Entity] = None,
        creeper: Optional[Entity] = None,
        safe_house: Optional[Entity] = None,
        decorations: Optional[List[Decoration]] = None,
        reset_on_outcome: bool = True,
    ):
        if field_size <= 0:
            raise ValueError(f"field_size must be positive, got {field_size}")

        self.field_size = float(field_size)
        self.player = player if player is not None else make_player()
        self.creeper = creeper if creeper is not None else make_creeper()
        self.safe_house = safe_house if safe_house is not None else make_safe_house()
        self.decorations = decorations if decorations is not None else default_decorations()
        self.reset_on_outcome = reset_on_outcome

        if self.player.size > self.field_size:
            raise ValueError("player does not fit inside the field")

        # Initial coordinates restored on every terminal event
        self.player_start = (self.player.x, self.player.y)
        self.creeper_start = (self.creeper.x, self.creeper.y)

        self.ticks = 0

    # ----------------------------
    # Tick
    # ----------------------------

    def tick(self, inputs: InputState) -> Outcome:
        """Sample input, move, clamp, steer the creeper and check collisions"""
        moves = inputs.held() + inputs.drain_swipes()
        return self.step(moves)

    def step(self, moves: Iterable[Direction]) -> Outcome:
        """Same as tick() with an explicit list of player moves"""
        self.move_player(moves)
        self.clamp_player()
        self.move_creeper()
        self.ticks += 1
        return self.check_collisions()

    def reset(self):
        self.player.move_to(self.player_start)
        self.creeper.move_to(self.creeper_start)

    # ----------------------------
    # Core mechanics
    # ----------------------------

    def move_player(self, moves: Iterable[Direction]):
        speed = self.player.speed
        for d in moves:
            self.player.x += d.dx * speed
            self.player.y += d.dy * speed

    def clamp_player(self):
        half = self.player.half
        self.player.x = clamp(self.player.x, half, self.field_size - half)
        self.player.y = clamp(self.player.y, half, self.field_size - half)

    def move_creeper(self):
        nx, ny = normalize(self.player.x - self.creeper.x, self.player.y - self.creeper.y)
        self.creeper.x += nx * self.creeper.speed
        self.creeper.y += ny * self.creeper.speed

    def check_collisions(self) -> Outcome:
        # Both checks always run; loss is evaluated first and wins ties
        outcome = Outcome.NONE

        if touching(self.player, self.creeper):
            outcome = Outcome.LOSS
            if self.reset_on_outcome:
                self.reset()

        if touching(self.player, self.safe_house):
            if outcome is Outcome.NONE:
                outcome = Outcome.WIN
            if self.reset_on_outcome:
                self.reset()

        return outcome

    # ----------------------------
    # State access
    # ----------------------------

    def creeper_distance(self) -> float:
        return distance(self.player, self.creeper)

    def goal_distance(self) -> float:
        return distance(self.player, self.safe_house)

    def snapshot(self) -> Dict[str, EntityView]:
        return {
            name: EntityView(e.x, e.y, e.size, e.color)
            for name, e in (
                ("player", self.player),
                ("creeper", self.creeper),
                ("safe_house", self.safe_house),
            )
        }
