from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h


def intersects(a: Rect, b: Rect) -> bool:
    # Edges that merely touch do not count as overlap.
    return a.x < b.right and a.right > b.x and a.y < b.bottom and a.bottom > b.y
