from __future__ import annotations

from dataclasses import dataclass, replace

from squirrelrun.domain.exceptions import ConfigError


@dataclass(frozen=True)
class GameConfig:
    """
    Tuning constants for one run.
    Distances are pixels, velocities are pixels per frame, times are milliseconds.
    """

    # Visible field
    field_width: float = 800.0
    field_height: float = 300.0
    ground_height: float = 60.0

    # Actor
    actor_x: float = 120.0
    actor_width: float = 48.0
    actor_height: float = 36.0
    gravity: float = 0.6
    jump_velocity: float = -12.5

    # Scrolling
    base_speed: float = 4.0

    # Spawning
    initial_spawn_interval: float = 1400.0
    spawn_interval_decay: float = 0.98
    spawn_interval_floor: float = 600.0  # 700.0 reproduces the browser version's curve
    obstacle_height_range: tuple[float, float] = (24.0, 60.0)
    obstacle_width_range: tuple[float, float] = (18.0, 48.0)
    spawn_offset: float = 10.0      # how far past the right edge new obstacles appear
    despawn_margin: float = 50.0    # how far past the left edge obstacles are dropped

    # Scoring / difficulty
    points_per_obstacle: int = 100
    speed_step: float = 0.01
    milestone_every: int = 10
    milestone_speed_step: float = 0.12

    def __post_init__(self) -> None:
        for name in ("field_width", "field_height", "actor_width", "actor_height", "base_speed"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be > 0")
        if not 0 <= self.ground_height < self.field_height:
            raise ConfigError("ground_height must be within the field height")
        if self.actor_height > self.ground_y:
            raise ConfigError("actor does not fit above the ground line")
        if self.gravity <= 0:
            raise ConfigError("gravity must be > 0")
        if self.jump_velocity >= 0:
            raise ConfigError("jump_velocity must point upwards (< 0)")
        if not 0 < self.spawn_interval_decay <= 1:
            raise ConfigError("spawn_interval_decay must be in (0, 1]")
        if self.spawn_interval_floor <= 0:
            raise ConfigError("spawn_interval_floor must be > 0")
        if self.initial_spawn_interval <= 0:
            raise ConfigError("initial_spawn_interval must be > 0")
        for name in ("obstacle_height_range", "obstacle_width_range"):
            lo, hi = getattr(self, name)
            if not 0 < lo < hi:
                raise ConfigError(f"{name} must satisfy 0 < lo < hi")
        if self.obstacle_height_range[1] > self.ground_y:
            raise ConfigError("tallest obstacle does not fit above the ground line")
        if self.milestone_every <= 0:
            raise ConfigError("milestone_every must be > 0")
        if self.points_per_obstacle < 0 or self.speed_step < 0 or self.milestone_speed_step < 0:
            raise ConfigError("scoring steps must be non-negative")

    @property
    def ground_y(self) -> float:
        return self.field_height - self.ground_height

    @property
    def actor_rest_y(self) -> float:
        return self.ground_y - self.actor_height

    @property
    def spawn_x(self) -> float:
        return self.field_width + self.spawn_offset

    def with_viewport(self, width: float, height: float) -> GameConfig:
        return replace(self, field_width=float(width), field_height=float(height))
