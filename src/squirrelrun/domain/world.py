from __future__ import annotations

import logging

from squirrelrun.domain.entities import Actor, Obstacle
from squirrelrun.domain.exceptions import ActorCollided
from squirrelrun.domain.game_state import RunContext
from squirrelrun.domain.geometry import intersects
from squirrelrun.domain.spawner import ObstacleSpawner

logger = logging.getLogger(__name__)


class World:
    def __init__(self, spawner: ObstacleSpawner) -> None:
        self._spawner = spawner

    def step(self, ctx: RunContext, dt: float) -> None:
        """
        Advance one frame. dt is the elapsed time in ms and only drives spawn timing;
        motion is per frame. Raises ActorCollided after scoring if the actor is hit.
        """
        cfg = ctx.config
        actor = ctx.actor

        # ----- Actor -----
        actor.apply_gravity(cfg.gravity)
        actor.integrate_position()
        actor.clamp_to_ground(cfg.ground_y)

        # ----- Spawn -----
        ctx.spawn_timer += dt
        if ctx.spawn_timer > ctx.difficulty.spawn_interval:
            ctx.spawn_timer = 0.0
            ob = self._spawner.spawn()
            ctx.obstacles.append(ob)
            ctx.difficulty.decay_spawn_interval()
            logger.debug(
                "spawned %.0fx%.0f obstacle, next interval %.0fms",
                ob.w, ob.h, ctx.difficulty.spawn_interval,
            )

        # ----- Scroll, score, despawn -----
        speed = ctx.difficulty.effective_speed(cfg.base_speed)
        live: list[Obstacle] = []
        for ob in ctx.obstacles:
            ob.x -= speed
            if not ob.passed and ob.right < actor.x:
                ob.mark_passed()
                ctx.difficulty.on_obstacle_passed()
            if ob.right >= -cfg.despawn_margin:
                live.append(ob)
        ctx.obstacles[:] = live

        # ----- Collision -----
        hit = self._first_hit(actor, ctx.obstacles)
        if hit is not None:
            raise ActorCollided(hit)

    def _first_hit(self, actor: Actor, obstacles: list[Obstacle]) -> Obstacle | None:
        box = actor.box()
        for ob in obstacles:
            if intersects(box, ob.box()):
                return ob
        return None
