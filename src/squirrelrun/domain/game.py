from __future__ import annotations

import logging
from collections.abc import Callable

from squirrelrun.domain.config import GameConfig
from squirrelrun.domain.exceptions import ActorCollided
from squirrelrun.domain.game_state import GameOverEvent, GameSnapshot, RunContext, RunPhase, take_snapshot
from squirrelrun.domain.rng import RandomSource
from squirrelrun.domain.spawner import ObstacleSpawner
from squirrelrun.domain.world import World

logger = logging.getLogger(__name__)

GameOverListener = Callable[[GameOverEvent], None]


class Game:
    """
    Lifecycle of a run: IDLE -> RUNNING -> GAME_OVER, and back to IDLE only via reset().

    Everything the presentation layer needs goes through this class: tick(), request_jump(),
    start(), reset(), snapshot() and the game-over listeners.
    """

    def __init__(self, config: GameConfig, rng: RandomSource) -> None:
        self.config = config
        self._world = World(ObstacleSpawner(config, rng))
        self._ctx = RunContext.fresh(config)
        self._listeners: list[GameOverListener] = []

    @property
    def phase(self) -> RunPhase:
        return self._ctx.phase

    @property
    def context(self) -> RunContext:
        return self._ctx

    # ---------- Lifecycle ----------

    def start(self) -> bool:
        if self._ctx.phase is not RunPhase.IDLE:
            logger.debug("start() ignored in phase %s", self._ctx.phase.value)
            return False
        self._ctx.clear()
        self._ctx.phase = RunPhase.RUNNING
        logger.info("run started")
        return True

    def reset(self) -> None:
        if self._ctx.phase is RunPhase.RUNNING:
            logger.info("run aborted at score %d", self._ctx.difficulty.score)
        self._ctx.clear()
        self._ctx.phase = RunPhase.IDLE

    # ---------- Per-frame ----------

    def tick(self, dt: float) -> None:
        if self._ctx.phase is not RunPhase.RUNNING:
            return
        try:
            self._world.step(self._ctx, max(0.0, dt))
        except ActorCollided as hit:
            self._end_run(hit)

    def request_jump(self) -> bool:
        if self._ctx.phase is not RunPhase.RUNNING:
            return False
        return self._ctx.actor.jump(self.config.jump_velocity)

    def snapshot(self) -> GameSnapshot:
        return take_snapshot(self._ctx)

    # ---------- Game over ----------

    def add_game_over_listener(self, cb: GameOverListener) -> None:
        self._listeners.append(cb)

    def remove_game_over_listener(self, cb: GameOverListener) -> None:
        if cb in self._listeners:
            self._listeners.remove(cb)

    def _end_run(self, hit: ActorCollided) -> None:
        # Entities stay exactly where the impact happened.
        self._ctx.phase = RunPhase.GAME_OVER
        d = self._ctx.difficulty
        event = GameOverEvent(score=d.score, passed_count=d.passed_count)
        logger.info("game over: %s; passed=%d score=%d", hit, event.passed_count, event.score)
        for cb in list(self._listeners):
            cb(event)
