from __future__ import annotations

import logging
from collections.abc import Callable

from squirrelrun.domain.game import Game
from squirrelrun.domain.game_state import GameSnapshot, RunPhase

logger = logging.getLogger(__name__)

JumpPolicy = Callable[[GameSnapshot], bool]

FRAME_MS = 1000.0 / 60.0


def run_headless(
    game: Game,
    *,
    frames: int,
    dt_ms: float = FRAME_MS,
    policy: JumpPolicy | None = None,
) -> GameSnapshot:
    """
    Drive a game without any window. Starts it if idle, then ticks up to `frames` times,
    asking `policy` before each tick whether to jump. Stops early on game over.
    """
    if game.phase is RunPhase.IDLE:
        game.start()

    for frame in range(frames):
        if game.phase is not RunPhase.RUNNING:
            break
        if policy is not None and policy(game.snapshot()):
            game.request_jump()
        game.tick(dt_ms)
    else:
        frame = frames

    snap = game.snapshot()
    logger.debug("headless run stopped after %d frames in phase %s", frame, snap.phase.value)
    return snap


def lookahead_policy(distance: float) -> JumpPolicy:
    """Jump when the nearest obstacle still ahead of the actor is within `distance` pixels."""

    def policy(snap: GameSnapshot) -> bool:
        if not snap.actor_on_ground:
            return False
        front = snap.actor.right
        gaps = [o.x - front for o in snap.obstacles if o.x >= front]
        return bool(gaps) and min(gaps) <= distance

    return policy
