"""Reproducible pseudo-random stream shared by one build run."""

from __future__ import annotations

import random

from .errors import ConfigurationError

DEFAULT_SEED = 11010


class RandomStream:
    """Seeded integer stream. The same seed always yields the same sequence."""

    def __init__(self, seed: int = DEFAULT_SEED):
        self._random = random.Random()
        self.seed = seed
        self.set_seed(seed)

    def set_seed(self, seed: int) -> None:
        """Reset the stream to the start of the sequence for ``seed``."""
        self.seed = seed
        self._random.seed(seed)

    def next_int(self, bound: int) -> int:
        """Draw an integer uniformly from ``[0, bound)``."""
        if bound <= 0:
            raise ConfigurationError(f"Random bound must be positive, got {bound}")
        return self._random.randrange(bound)
