import pytest

from squirrelrun.domain.config import GameConfig
from squirrelrun.domain.difficulty import Difficulty


def test_initial_values(config):
    d = Difficulty(config=config)
    assert (d.score, d.passed_count, d.speed_multiplier) == (0, 0, 1.0)
    assert d.spawn_interval == 1400.0


def test_single_pass_scores_and_nudges_speed(config):
    d = Difficulty(config=config)
    d.on_obstacle_passed()
    assert d.score == 100
    assert d.passed_count == 1
    assert d.speed_multiplier == pytest.approx(1.01)


def test_every_tenth_pass_is_a_bigger_step(config):
    d = Difficulty(config=config)
    for _ in range(10):
        d.on_obstacle_passed()
    assert d.score == 1000
    assert d.speed_multiplier == pytest.approx(1.0 + 9 * 0.01 + 0.12)

    for _ in range(10):
        d.on_obstacle_passed()
    assert d.speed_multiplier == pytest.approx(1.0 + 18 * 0.01 + 2 * 0.12)


def test_spawn_interval_decays_to_floor(config):
    d = Difficulty(config=config)
    d.decay_spawn_interval()
    assert d.spawn_interval == pytest.approx(1372.0)

    previous = d.spawn_interval
    for _ in range(200):
        d.decay_spawn_interval()
        assert d.spawn_interval <= previous
        assert d.spawn_interval >= 600.0
        previous = d.spawn_interval
    assert d.spawn_interval == 600.0


def test_floor_never_raises_interval():
    cfg = GameConfig(initial_spawn_interval=500.0)
    d = Difficulty(config=cfg)
    d.decay_spawn_interval()
    assert d.spawn_interval == 500.0


def test_alternate_floor_reproduces_legacy_curve():
    d = Difficulty(config=GameConfig(spawn_interval_floor=700.0))
    for _ in range(100):
        d.decay_spawn_interval()
    assert d.spawn_interval == 700.0


def test_passing_does_not_touch_spawn_interval(config):
    d = Difficulty(config=config)
    d.decay_spawn_interval()
    before = d.spawn_interval
    d.on_obstacle_passed()
    assert d.spawn_interval == before


def test_effective_speed(config):
    d = Difficulty(config=config)
    assert d.effective_speed(4.0) == 4.0
    d.on_obstacle_passed()
    assert d.effective_speed(4.0) == pytest.approx(4.04)


def test_spawn_interval_always_starts_from_config():
    d = Difficulty(config=GameConfig(initial_spawn_interval=900.0))
    assert d.spawn_interval == 900.0
    with pytest.raises(TypeError):
        Difficulty(config=GameConfig(), spawn_interval=0.0)
