from __future__ import annotations

from dataclasses import dataclass

from squirrelrun.domain.geometry import Rect


@dataclass
class Actor:
    """
    The player's squirrel. x never changes; y grows downwards like canvas coordinates.
    """
    x: float
    y: float
    w: float
    h: float
    vy: float = 0.0
    on_ground: bool = True

    def rest(self, ground_y: float) -> None:
        self.y = ground_y - self.h
        self.vy = 0.0
        self.on_ground = True

    def apply_gravity(self, g: float) -> None:
        self.vy += g

    def integrate_position(self) -> None:
        self.y += self.vy

    def clamp_to_ground(self, ground_y: float) -> None:
        floor_y = ground_y - self.h
        if self.y >= floor_y:
            self.y = floor_y
            self.vy = 0.0
            self.on_ground = True

    def jump(self, impulse: float) -> bool:
        # No double jumps and no queueing: airborne requests are dropped.
        if not self.on_ground:
            return False
        self.vy = impulse
        self.on_ground = False
        return True

    def box(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)


@dataclass
class Obstacle:
    x: float
    y: float
    w: float
    h: float
    passed: bool = False  # set once when it scrolls behind the actor

    @property
    def right(self) -> float:
        return self.x + self.w

    def mark_passed(self) -> None:
        self.passed = True

    def box(self) -> Rect:
        return Rect(self.x, self.y, self.w, self.h)
