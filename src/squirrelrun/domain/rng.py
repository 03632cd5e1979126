from __future__ import annotations
from typing import Protocol


class RandomSource(Protocol):
    """Where obstacle sizes come from. random.Random satisfies it; tests pass scripted fakes."""

    def random(self) -> float:  # uniform in [0.0, 1.0)
        ...
