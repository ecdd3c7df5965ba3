#!/usr/bin/env python3
"""
Random Sources
==============
Uniform random numbers for the sampling engines.

Engines never reach for a hidden global generator: they are handed a source
at construction. Anything with a ``randrange(stop)`` method returning an int
uniformly distributed over ``[0, stop)`` will do, including
``random.Random``. RandomSource is the default implementation:

- unseeded, it draws from secrets.SystemRandom (os.urandom backed)
- seeded, it draws from a private random.Random, so runs are reproducible

Usage:
    from stateengines.entropy import RandomSource

    rng = RandomSource(seed=42)
    engine = MarkovChainStateEngine(rng=rng)
"""

import random
import secrets
from typing import Optional


class RandomSource:
    """Uniform random number source, optionally seeded."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        if seed is None:
            self._rng = secrets.SystemRandom()
        else:
            self._rng = random.Random(seed)

    @property
    def seeded(self) -> bool:
        return self.seed is not None

    def randrange(self, stop: int) -> int:
        """Return random integer N such that 0 <= N < stop."""
        if stop <= 0:
            raise ValueError(f"randrange() needs a positive stop, got {stop}")
        return self._rng.randrange(stop)

    def __repr__(self) -> str:
        if self.seeded:
            return f"RandomSource(seed={self.seed})"
        return "RandomSource()"


# Global instance
_default_source = RandomSource()


def get_rng(seed: Optional[int] = None) -> RandomSource:
    """
    Get a random source.

    Without a seed this is the shared system-entropy source; with a seed a
    fresh reproducible source is returned.
    """
    if seed is None:
        return _default_source
    return RandomSource(seed)


__all__ = [
    'RandomSource',
    'get_rng',
]
