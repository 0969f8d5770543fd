"""Seeded random number generator for reproducible map generation.

Wraps Python's random.Random so that a fixed seed reproduces every draw of
a generation pass: start-room picks, walk steps and room-type buckets all
come out of the same stream in the same order.  Callers that need an
independent stream should take a *forked* one.
"""

from __future__ import annotations

import hashlib
import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class GameRNG:
    """Deterministic RNG that can be forked into independent sub-streams.

    Parameters
    ----------
    seed:
        Integer seed for the underlying Mersenne Twister.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int:
        """Return the seed this RNG was initialised with."""
        return self._seed

    # -- core random methods -------------------------------------------------

    def random_int(self, low: int, high: int) -> int:
        """Return a random integer *N* such that ``low <= N <= high``."""
        return self._rng.randint(low, high)

    def random_below(self, n: int) -> int:
        """Return a random integer *N* such that ``0 <= N < n``."""
        return self._rng.randrange(n)

    def random_choice(self, seq: Sequence[T]) -> T:
        """Return a random element from a non-empty sequence."""
        return self._rng.choice(seq)

    # -- forking -------------------------------------------------------------

    def fork(self, name: str) -> GameRNG:
        """Create a child RNG seeded from this RNG's seed and *name*.

        Forking with the same *name* always yields the same child seed,
        regardless of how many values the parent has already produced.
        """
        digest = hashlib.sha256(f"{self._seed}:{name}".encode()).digest()
        return GameRNG(int.from_bytes(digest[:8], "big"))

    def __repr__(self) -> str:
        return f"GameRNG(seed={self._seed})"
