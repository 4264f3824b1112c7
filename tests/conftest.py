import pytest

from creeper_chase import ChaseGame, InputState


@pytest.fixture
def game() -> ChaseGame:
    return ChaseGame()


@pytest.fixture
def inputs() -> InputState:
    return InputState()
