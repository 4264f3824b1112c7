import pytest

from rl.evaluate import load_model_policy, random_policy, run_policy
from creeper_chase import greedy_action


def test_greedy_baseline_always_wins() -> None:
    results = run_policy(greedy_action, n_episodes=3, seed=0, name="greedy")
    assert results["win_rate"] == 1.0
    assert results["mean_length"] == 6.0


def test_slow_player_loses_to_creeper() -> None:
    # A crawling player cannot outrun the creeper before it closes in
    results = run_policy(greedy_action, n_episodes=2, seed=0, player_speed=0.5, creeper_speed=3.0)
    assert results["loss_rate"] == 1.0


def test_random_baseline_rates_sum_to_one() -> None:
    results = run_policy(random_policy(0), n_episodes=4, seed=0, max_steps=50)
    total = results["win_rate"] + results["loss_rate"] + results["timeout_rate"]
    assert total == pytest.approx(1.0)


def test_unknown_algorithm() -> None:
    with pytest.raises(ValueError):
        load_model_policy("model.zip", algo="sac")
