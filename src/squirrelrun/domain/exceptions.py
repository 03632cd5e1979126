from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from squirrelrun.domain.entities import Obstacle


class ActorCollided(Exception):
    """Raised by the update step when the actor touches an obstacle."""

    def __init__(self, obstacle: Obstacle) -> None:
        super().__init__(f"actor collided with obstacle at x={obstacle.x:.1f}")
        self.obstacle = obstacle


class ConfigError(ValueError):
    """Raised when tuning values or environment settings are invalid."""
