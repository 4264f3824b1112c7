import math
import random

import pytest

from creeper_chase import ChaseGame, Direction, Entity, InputState, Outcome
from creeper_chase.entities import LOSS_MESSAGE, WIN_MESSAGE, default_decorations


def test_default_layout(game: ChaseGame) -> None:
    snap = game.snapshot()
    assert (snap["player"].x, snap["player"].y) == (200.0, 200.0)
    assert (snap["creeper"].x, snap["creeper"].y) == (60.0, 60.0)
    assert (snap["safe_house"].x, snap["safe_house"].y) == (330.0, 330.0)
    assert snap["safe_house"].size == 40.0
    assert len(default_decorations()) == 12


def test_held_keys_move_player_by_speed(game: ChaseGame, inputs: InputState) -> None:
    inputs.press("ArrowLeft")
    game.tick(inputs)
    assert (game.player.x, game.player.y) == (180.0, 200.0)


def test_diagonal_is_not_normalized(game: ChaseGame, inputs: InputState) -> None:
    inputs.press("ArrowUp")
    inputs.press("ArrowRight")
    game.tick(inputs)
    assert (game.player.x, game.player.y) == (220.0, 180.0)
    assert math.hypot(20, 20) == pytest.approx(game.player.speed * math.sqrt(2))


def test_opposing_keys_cancel(game: ChaseGame, inputs: InputState) -> None:
    inputs.press("ArrowUp")
    inputs.press("ArrowDown")
    game.tick(inputs)
    assert (game.player.x, game.player.y) == (200.0, 200.0)


def test_player_is_clamped_to_field(inputs: InputState) -> None:
    # Parked creeper, away from the path to the corner
    game = ChaseGame(creeper=Entity(x=390.0, y=390.0, size=20.0, speed=0.0))
    inputs.press("ArrowLeft")
    inputs.press("ArrowUp")
    outcomes = [game.tick(inputs) for _ in range(20)]
    assert set(outcomes) == {Outcome.NONE}
    assert (game.player.x, game.player.y) == (10.0, 10.0)


def test_clamp_holds_for_random_input_sequences(game: ChaseGame, inputs: InputState) -> None:
    rng = random.Random(7)
    keys = ["ArrowUp", "ArrowDown", "ArrowLeft", "ArrowRight"]
    lo, hi = game.player.half, game.field_size - game.player.half

    for _ in range(2000):
        key = rng.choice(keys)
        if rng.random() < 0.5:
            inputs.press(key)
        else:
            inputs.release(key)
        if rng.random() < 0.1:
            inputs.touch_start(0, 0)
            inputs.touch_end(rng.uniform(-100, 100), rng.uniform(-100, 100))

        game.tick(inputs)
        assert lo <= game.player.x <= hi
        assert lo <= game.player.y <= hi


def test_creeper_step_closes_distance_by_speed(game: ChaseGame) -> None:
    before = game.creeper_distance()
    px, py = game.player.x, game.player.y
    cx, cy = game.creeper.x, game.creeper.y

    game.move_creeper()

    assert game.creeper_distance() == pytest.approx(before - game.creeper.speed)
    # Still on the line from the old creeper position to the player
    cross = (game.creeper.x - cx) * (py - cy) - (game.creeper.y - cy) * (px - cx)
    assert cross == pytest.approx(0.0, abs=1e-9)


def test_creeper_does_not_move_at_zero_distance(game: ChaseGame) -> None:
    game.creeper.move_to((game.player.x, game.player.y))
    game.move_creeper()
    assert (game.creeper.x, game.creeper.y) == (game.player.x, game.player.y)


def test_creeper_is_never_clamped() -> None:
    game = ChaseGame(creeper=Entity(x=600.0, y=600.0, size=20.0, speed=1.5))
    game.move_creeper()
    assert game.creeper.x > game.field_size
    assert game.creeper.y > game.field_size


def test_creeper_targets_post_clamp_position(game: ChaseGame, inputs: InputState) -> None:
    game.player.move_to((390.0, 60.0))
    inputs.press("ArrowRight")
    game.tick(inputs)
    # Player was clamped back to 390 before the creeper steered
    assert game.player.x == 390.0
    assert game.creeper.y == pytest.approx(60.0)
    assert game.creeper.x == pytest.approx(61.5)


def test_stationary_player_is_caught_on_tick_119(game: ChaseGame, inputs: InputState) -> None:
    for tick in range(1, 119):
        assert game.tick(inputs) is Outcome.NONE, f"caught early on tick {tick}"
    assert game.creeper_distance() >= 20

    assert game.tick(inputs) is Outcome.LOSS
    assert (game.player.x, game.player.y) == (200.0, 200.0)
    assert (game.creeper.x, game.creeper.y) == (60.0, 60.0)


@pytest.mark.parametrize("offset, expected", [(29.0, Outcome.WIN), (31.0, Outcome.NONE)])
def test_win_threshold(game: ChaseGame, offset: float, expected: Outcome) -> None:
    game.player.move_to((330.0 - offset, 330.0))
    assert game.check_collisions() is expected


def test_win_resets_movers_but_not_goal(game: ChaseGame, inputs: InputState) -> None:
    game.player.move_to((305.0, 330.0))
    game.creeper.move_to((100.0, 300.0))

    assert game.tick(inputs) is Outcome.WIN

    assert (game.player.x, game.player.y) == (200.0, 200.0)
    assert (game.creeper.x, game.creeper.y) == (60.0, 60.0)
    assert (game.safe_house.x, game.safe_house.y) == (330.0, 330.0)


def test_swipe_moves_exactly_once(game: ChaseGame, inputs: InputState) -> None:
    inputs.touch_start(100, 100)
    inputs.touch_end(150, 105)

    game.tick(inputs)
    assert (game.player.x, game.player.y) == (220.0, 200.0)

    game.tick(inputs)
    assert (game.player.x, game.player.y) == (220.0, 200.0)


def test_short_swipe_does_not_move(game: ChaseGame, inputs: InputState) -> None:
    inputs.touch_start(100, 100)
    inputs.touch_end(110, 105)
    game.tick(inputs)
    assert (game.player.x, game.player.y) == (200.0, 200.0)


def test_simultaneous_overlap_is_a_loss(game: ChaseGame) -> None:
    game.player.move_to((330.0, 330.0))
    game.creeper.move_to((335.0, 330.0))

    assert game.check_collisions() is Outcome.LOSS
    assert (game.player.x, game.player.y) == (200.0, 200.0)
    assert (game.creeper.x, game.creeper.y) == (60.0, 60.0)


def test_simultaneous_overlap_without_reset() -> None:
    game = ChaseGame(reset_on_outcome=False)
    game.player.move_to((330.0, 330.0))
    game.creeper.move_to((335.0, 330.0))

    assert game.check_collisions() is Outcome.LOSS
    assert (game.player.x, game.player.y) == (330.0, 330.0)

    game.reset()
    assert (game.player.x, game.player.y) == (200.0, 200.0)
    assert (game.creeper.x, game.creeper.y) == (60.0, 60.0)


def test_step_takes_explicit_moves(game: ChaseGame) -> None:
    game.step([Direction.DOWN, Direction.DOWN])
    assert (game.player.x, game.player.y) == (200.0, 240.0)
    assert game.ticks == 1


def test_outcome_messages() -> None:
    assert Outcome.LOSS.message == LOSS_MESSAGE
    assert Outcome.WIN.message == WIN_MESSAGE
    assert Outcome.NONE.message == ""


@pytest.mark.parametrize("size", [0, -10])
def test_rejects_bad_field_size(size: float) -> None:
    with pytest.raises(ValueError):
        ChaseGame(field_size=size)


def test_rejects_player_larger_than_field() -> None:
    with pytest.raises(ValueError):
        ChaseGame(field_size=10, player=Entity(x=5.0, y=5.0, size=20.0, speed=1.0))


def test_swipe_and_held_key_clamp_together(game: ChaseGame, inputs: InputState) -> None:
    game.player.move_to((380.0, 200.0))
    inputs.press("ArrowRight")
    inputs.touch_start(0, 0)
    inputs.touch_end(60, 0)

    assert game.tick(inputs) is Outcome.NONE
    assert (game.player.x, game.player.y) == (390.0, 200.0)
