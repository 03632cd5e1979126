from __future__ import annotations

import random

import pytest

from squirrelrun.domain.config import GameConfig
from squirrelrun.domain.entities import Obstacle
from squirrelrun.domain.game import Game


class ScriptedRandom:
    """Replays fixed values in [0, 1), cycling when exhausted."""

    def __init__(self, values: list[float]) -> None:
        self._values = list(values)
        self._i = 0

    def random(self) -> float:
        v = self._values[self._i % len(self._values)]
        self._i += 1
        return v


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def quiet_config() -> GameConfig:
    # Nothing spawns on its own; tests place obstacles by hand.
    return GameConfig(initial_spawn_interval=1e12)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def quiet_game(quiet_config: GameConfig) -> Game:
    game = Game(quiet_config, random.Random(0))
    game.start()
    return game


def overhead(x: float, w: float = 10.0) -> Obstacle:
    """An obstacle floating well above the actor: it scores but never collides."""
    return Obstacle(x=x, y=0.0, w=w, h=10.0)


def blocking(config: GameConfig, x: float, w: float = 20.0, h: float = 24.0) -> Obstacle:
    return Obstacle(x=x, y=config.ground_y - h, w=w, h=h)


@pytest.fixture(name="overhead")
def overhead_fixture():
    return overhead


@pytest.fixture(name="blocking")
def blocking_fixture(quiet_config: GameConfig):
    return lambda x, w=20.0, h=24.0: blocking(quiet_config, x, w, h)
