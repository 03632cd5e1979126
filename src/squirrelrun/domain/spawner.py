from __future__ import annotations

from squirrelrun.domain.config import GameConfig
from squirrelrun.domain.entities import Obstacle
from squirrelrun.domain.rng import RandomSource


class ObstacleSpawner:
    """
    Builds obstacles of random size resting on the ground line, just off the right edge.
    Holds no state besides the random source; cadence is decided by the caller.
    """

    def __init__(self, config: GameConfig, rng: RandomSource) -> None:
        self._config = config
        self._rng = rng

    def spawn(self) -> Obstacle:
        cfg = self._config
        h = _draw(self._rng, cfg.obstacle_height_range)
        w = _draw(self._rng, cfg.obstacle_width_range)
        return Obstacle(x=cfg.spawn_x, y=cfg.ground_y - h, w=w, h=h)


def _draw(rng: RandomSource, bounds: tuple[float, float]) -> float:
    lo, hi = bounds
    return lo + rng.random() * (hi - lo)
