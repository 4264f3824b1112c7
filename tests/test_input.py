import pytest

from creeper_chase import Direction, InputState, classify_swipe


def test_press_and_release_toggle_held_flags(inputs: InputState) -> None:
    inputs.press("ArrowUp")
    inputs.press("ArrowRight")
    assert inputs.held() == [Direction.UP, Direction.RIGHT]

    inputs.release("ArrowUp")
    assert inputs.held() == [Direction.RIGHT]


def test_unrecognized_keys_are_ignored(inputs: InputState) -> None:
    inputs.press("w")
    inputs.press("Enter")
    inputs.release("ArrowDown")
    assert inputs.held() == []


def test_held_order_is_fixed(inputs: InputState) -> None:
    for key in ("ArrowRight", "ArrowLeft", "ArrowDown", "ArrowUp"):
        inputs.press(key)
    assert inputs.held() == [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]


@pytest.mark.parametrize(
    "dx, dy, expected",
    [
        (10, 5, None),
        (-29, 29, None),
        (50, 5, Direction.RIGHT),
        (-50, 5, Direction.LEFT),
        (5, 50, Direction.DOWN),
        (5, -50, Direction.UP),
        (30, 0, Direction.RIGHT),
        (40, -40, Direction.UP),
        (-40, 40, Direction.DOWN),
    ],
)
def test_classify_swipe(dx: float, dy: float, expected) -> None:
    assert classify_swipe(dx, dy) is expected


def test_swipe_queues_a_single_move(inputs: InputState) -> None:
    inputs.touch_start(100, 100)
    assert inputs.touch_end(150, 105) is Direction.RIGHT

    assert inputs.drain_swipes() == [Direction.RIGHT]
    assert inputs.drain_swipes() == []
    assert inputs.held() == []


def test_short_swipe_queues_nothing(inputs: InputState) -> None:
    inputs.touch_start(100, 100)
    assert inputs.touch_end(110, 105) is None
    assert inputs.drain_swipes() == []


def test_touch_end_without_start_is_ignored(inputs: InputState) -> None:
    assert inputs.touch_end(300, 300) is None

    inputs.touch_start(0, 0)
    inputs.touch_end(0, 100)
    # Start point is consumed by the first end
    assert inputs.touch_end(0, 200) is None
    assert inputs.drain_swipes() == [Direction.DOWN]


def test_custom_swipe_threshold() -> None:
    inputs = InputState(min_swipe_distance=5)
    inputs.touch_start(0, 0)
    assert inputs.touch_end(-10, 0) is Direction.LEFT


def test_clear_drops_everything(inputs: InputState) -> None:
    inputs.press("ArrowLeft")
    inputs.touch_start(0, 0)
    inputs.touch_end(0, -60)
    inputs.touch_start(5, 5)

    inputs.clear()

    assert inputs.held() == []
    assert inputs.drain_swipes() == []
    assert inputs.touch_end(100, 100) is None
