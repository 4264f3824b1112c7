"""
Game entity dataclasses and the default field layout
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

Color = Tuple[int, int, int]

FIELD_SIZE = 400

PLAYER_START = (FIELD_SIZE / 2, FIELD_SIZE / 2)
CREEPER_START = (60.0, 60.0)
SAFE_HOUSE_POS = (FIELD_SIZE - 70.0, FIELD_SIZE - 70.0)

LOSS_MESSAGE = "BOOM! The Creeper got you!"
WIN_MESSAGE = "You reached the Safe House! You win!"


class Outcome(Enum):
    """Result of a single tick"""
    NONE = 0
    LOSS = 1
    WIN = 2

    @property
    def message(self) -> str:
        if self is Outcome.LOSS:
            return LOSS_MESSAGE
        if self is Outcome.WIN:
            return WIN_MESSAGE
        return ""


@dataclass
class Entity:
    """Square game object centred on (x, y)"""
    x: float
    y: float
    size: float
    speed: float = 0.0  # units per tick
    color: Color = (255, 255, 255)

    def move_to(self, pos: Tuple[float, float]):
        self.x, self.y = float(pos[0]), float(pos[1])

    @property
    def half(self) -> float:
        return self.size / 2


@dataclass
class Decoration:
    """Static scenery, drawn only"""
    x: float
    y: float
    kind: str  # "tree", "stone" or "grass"


def make_player() -> Entity:
    return Entity(x=PLAYER_START[0], y=PLAYER_START[1], size=20.0, speed=20.0,
                  color=(0x42, 0xA5, 0xF5))


def make_creeper() -> Entity:
    return Entity(x=CREEPER_START[0], y=CREEPER_START[1], size=20.0, speed=1.5,
                  color=(0x66, 0xBB, 0x6A))


def make_safe_house() -> Entity:
    return Entity(x=SAFE_HOUSE_POS[0], y=SAFE_HOUSE_POS[1], size=40.0,
                  color=(0x8D, 0x6E, 0x63))


def default_decorations() -> List[Decoration]:
    trees = [(80, 80), (40, 300), (300, 60), (260, 220)]
    stones = [(150, 50), (330, 150), (100, 220)]
    grass = [(40 + i * 70, 180) for i in range(5)]

    decorations = [Decoration(x, y, "tree") for x, y in trees]
    decorations += [Decoration(x, y, "stone") for x, y in stones]
    decorations += [Decoration(x, y, "grass") for x, y in grass]
    return decorations
