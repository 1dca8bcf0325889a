"""Seeded random state shared by prime generation and witness selection."""
import random
import time
from typing import Optional


class RandomState:
    """
    Explicit pseudorandom generator passed to every randomized routine.

    One instance is created per run from a seed; reusing the same seed
    reproduces the same primes and keys.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize the generator.

        Args:
            seed: Integer seed. Defaults to the current Unix time.
        """
        if seed is None:
            seed = int(time.time())
        self.seed = seed
        self._random = random.Random(seed)

    def below(self, bound: int) -> int:
        """Returns a uniform integer in [0, bound)."""
        if bound <= 0:
            raise ValueError(f"Bound must be positive, got {bound}")
        return self._random.randrange(bound)

    def bits(self, count: int) -> int:
        """Returns a uniform integer made of `count` random bits."""
        if count < 0:
            raise ValueError(f"Bit count must not be negative, got {count}")
        if count == 0:
            return 0
        return self._random.getrandbits(count)

    def between(self, low: int, high: int) -> int:
        """Returns a uniform integer in [low, high)."""
        return low + self.below(high - low)

    def __repr__(self) -> str:
        return f"RandomState(seed={self.seed})"
