from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from squirrelrun.domain.config import GameConfig
from squirrelrun.domain.difficulty import Difficulty
from squirrelrun.domain.entities import Actor, Obstacle
from squirrelrun.domain.geometry import Rect


class RunPhase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class RunContext:
    """Everything that changes during a run. One per game, never shared."""
    config: GameConfig
    actor: Actor
    difficulty: Difficulty
    obstacles: list[Obstacle] = field(default_factory=list)
    spawn_timer: float = 0.0
    phase: RunPhase = RunPhase.IDLE

    @classmethod
    def fresh(cls, config: GameConfig) -> RunContext:
        actor = Actor(x=config.actor_x, y=config.actor_rest_y, w=config.actor_width, h=config.actor_height)
        return cls(config=config, actor=actor, difficulty=Difficulty(config=config))

    def clear(self) -> None:
        # The actor instance is kept and reseated; everything else starts over.
        self.actor.rest(self.config.ground_y)
        self.difficulty = Difficulty(config=self.config)
        self.obstacles.clear()
        self.spawn_timer = 0.0


@dataclass(frozen=True)
class RunStats:
    score: int
    passed_count: int
    speed_multiplier: float
    spawn_interval: float
    phase: RunPhase


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view handed to renderers and HUDs."""
    stats: RunStats
    actor: Rect
    actor_on_ground: bool
    obstacles: tuple[Rect, ...]
    ground_y: float

    @property
    def phase(self) -> RunPhase:
        return self.stats.phase


@dataclass(frozen=True)
class GameOverEvent:
    score: int
    passed_count: int


def take_snapshot(ctx: RunContext) -> GameSnapshot:
    d = ctx.difficulty
    return GameSnapshot(
        stats=RunStats(
            score=d.score,
            passed_count=d.passed_count,
            speed_multiplier=d.speed_multiplier,
            spawn_interval=d.spawn_interval,
            phase=ctx.phase,
        ),
        actor=ctx.actor.box(),
        actor_on_ground=ctx.actor.on_ground,
        obstacles=tuple(o.box() for o in ctx.obstacles),
        ground_y=ctx.config.ground_y,
    )
