"""
Random source for maze generation.

A maze is a pure function of its dimensions and the draw sequence, so the
generator consumes draws in a fixed order:

1. One chance() per cell, x outermost, then y, then z.
2. Per connector pass, a coord() for the interior cell (x, y, z) and then
   one choice() for the direction.
3. A coord() for start, then a coord() for every end candidate.

Every helper draws through random() or randint(), so overriding those two
is enough to script a generation run.
"""

import random
from typing import Optional, Sequence, TypeVar

from ..domain.types import Coord

T = TypeVar("T")


class SeededRNG:
    """Seedable source of uniform draws for the maze generator."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)
        self._seed = seed

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def random(self) -> float:
        """Uniform float in [0.0, 1.0)."""
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        """Uniform integer in [a, b], both ends inclusive."""
        return self._rng.randint(a, b)

    def chance(self, probability: float) -> bool:
        """One draw that comes up True with the given probability."""
        return self.random() < probability

    def coord(self, low: Coord, high: Coord) -> Coord:
        """Uniform cell in the inclusive box low..high, drawing x, y, z in that order."""
        x = self.randint(low[0], high[0])
        y = self.randint(low[1], high[1])
        z = self.randint(low[2], high[2])
        return (x, y, z)

    def choice(self, options: Sequence[T]) -> T:
        """Pick one option with a single randint draw."""
        return options[self.randint(0, len(options) - 1)]


# Used when callers pass neither rng nor seed
default_rng = SeededRNG()
