"""
Play the chase interactively.

    python -m creeper_chase.play
    python -m creeper_chase.play --creeper-speed 3

Arrow keys move the player; a mouse drag acts as a swipe.
"""

import argparse

import arcade

from .entities import make_player, make_creeper
from .game import ChaseGame
from .input import InputState
from .window import ChaseWindow


def main():
    parser = argparse.ArgumentParser(description="Evade the creeper and reach the safe house")
    parser.add_argument(
        "--player-speed",
        type=float,
        default=None,
        help="Player speed in units per tick (default: 20)",
    )
    parser.add_argument(
        "--creeper-speed",
        type=float,
        default=None,
        help="Creeper speed in units per tick (default: 1.5)",
    )
    parser.add_argument(
        "--min-swipe",
        type=float,
        default=30.0,
        help="Minimum drag distance recognized as a swipe (default: 30)",
    )
    parser.add_argument(
        "--fps",
        type=float,
        default=60.0,
        help="Ticks per second (default: 60)",
    )
    args = parser.parse_args()

    player = make_player()
    creeper = make_creeper()
    if args.player_speed is not None:
        player.speed = args.player_speed
    if args.creeper_speed is not None:
        creeper.speed = args.creeper_speed

    game = ChaseGame(player=player, creeper=creeper)
    window = ChaseWindow(game, inputs=InputState(min_swipe_distance=args.min_swipe))
    window.set_update_rate(1 / args.fps)

    print("Arrow keys or mouse drag to move. Reach the safe house, avoid the creeper!")
    arcade.run()


if __name__ == "__main__":
    main()
