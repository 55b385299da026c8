"""Random draws for synthesized resume content.

Every random choice the assembler makes goes through a RandomSource. Each
pipeline run creates its own instance, so concurrent requests never share
generator state. Pass a seed only in tests or debugging; production runs are
intentionally not reproducible.
"""

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


class RandomSource:
    """Thin wrapper over random.Random exposing only the draws the engine needs."""

    def __init__(self, seed: int | None = None, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random(seed)

    def pick(self, items: Sequence[T]) -> T:
        """One element chosen uniformly. `items` must be non-empty."""
        return self._rng.choice(items)

    def sample(self, items: Sequence[T], count: int) -> list[T]:
        """Up to `count` distinct positions, without replacement, in random order."""
        return self._rng.sample(list(items), min(count, len(items)))

    def randint(self, low: int, high: int) -> int:
        """Integer in the closed range [low, high]."""
        return self._rng.randint(low, high)

    def randint_in(self, bounds: tuple[int, int]) -> int:
        return self.randint(*bounds)
