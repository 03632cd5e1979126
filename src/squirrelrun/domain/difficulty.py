from __future__ import annotations

import logging
from dataclasses import dataclass, field

from squirrelrun.domain.config import GameConfig

logger = logging.getLogger(__name__)


@dataclass
class Difficulty:
    """
    Score and pacing for one run. Only ever moves towards harder:
    the multiplier never drops and the spawn interval never grows.
    """
    config: GameConfig
    score: int = 0
    passed_count: int = 0
    speed_multiplier: float = 1.0
    spawn_interval: float = field(init=False)

    def __post_init__(self) -> None:
        self.spawn_interval = self.config.initial_spawn_interval

    def on_obstacle_passed(self) -> None:
        cfg = self.config
        self.passed_count += 1
        self.score += cfg.points_per_obstacle

        if self.passed_count % cfg.milestone_every == 0:
            self.speed_multiplier += cfg.milestone_speed_step
            logger.info("milestone: %d passed, speed x%.2f", self.passed_count, self.speed_multiplier)
        else:
            self.speed_multiplier += cfg.speed_step

    def decay_spawn_interval(self) -> None:
        decayed = max(self.config.spawn_interval_floor, self.spawn_interval * self.config.spawn_interval_decay)
        # The floor is a clamp only; an interval already below it stays put.
        self.spawn_interval = min(self.spawn_interval, decayed)

    def effective_speed(self, base_speed: float) -> float:
        return base_speed * self.speed_multiplier
