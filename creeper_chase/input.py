"""
Input sampling: held arrow keys plus discrete swipe gestures
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple

MIN_SWIPE_DISTANCE = 30.0


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


# Key identifiers as delivered by the host event system
KEY_DIRECTIONS: Dict[str, Direction] = {
    "ArrowUp": Direction.UP,
    "ArrowDown": Direction.DOWN,
    "ArrowLeft": Direction.LEFT,
    "ArrowRight": Direction.RIGHT,
}


def classify_swipe(dx: float, dy: float,
                   min_distance: float = MIN_SWIPE_DISTANCE) -> Optional[Direction]:
    """
    Map a gesture displacement to a direction.

    Returns None for gestures shorter than ``min_distance`` on both axes.
    The dominant axis wins; equal deltas count as vertical. Screen
    coordinates are assumed, so a positive dy is a downward swipe.
    """
    abs_dx, abs_dy = abs(dx), abs(dy)
    if max(abs_dx, abs_dy) < min_distance:
        return None

    if abs_dx > abs_dy:
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


class InputState:
    """
    Directional intent written by host callbacks and read once per tick.

    Key transitions update the held flags; a completed swipe queues a
    single move which the next tick consumes.
    """

    def __init__(self, min_swipe_distance: float = MIN_SWIPE_DISTANCE):
        self.min_swipe_distance = min_swipe_distance
        self.keys: Dict[Direction, bool] = {d: False for d in Direction}
        self._touch_start: Optional[Tuple[float, float]] = None
        self._pending: List[Direction] = []

    # Keyboard

    def press(self, key: str):
        direction = KEY_DIRECTIONS.get(key)
        if direction is not None:
            self.keys[direction] = True

    def release(self, key: str):
        direction = KEY_DIRECTIONS.get(key)
        if direction is not None:
            self.keys[direction] = False

    def held(self) -> List[Direction]:
        return [d for d in Direction if self.keys[d]]

    # Swipes

    def touch_start(self, x: float, y: float):
        self._touch_start = (x, y)

    def touch_end(self, x: float, y: float) -> Optional[Direction]:
        if self._touch_start is None:
            return None

        sx, sy = self._touch_start
        self._touch_start = None

        direction = classify_swipe(x - sx, y - sy, self.min_swipe_distance)
        if direction is not None:
            self._pending.append(direction)
        return direction

    def drain_swipes(self) -> List[Direction]:
        pending, self._pending = self._pending, []
        return pending

    def clear(self):
        for d in self.keys:
            self.keys[d] = False
        self._touch_start = None
        self._pending = []
