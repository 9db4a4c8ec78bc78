"""Seeded 16-bit pseudo-random source for food placement."""

from __future__ import annotations

import logging
import secrets
import time

logger = logging.getLogger(__name__)

_MASK = 0xFFFF


def entropy_seed() -> tuple[int, int]:
    """Draw a two-word seed from the host entropy source."""
    return secrets.randbits(16), secrets.randbits(16)


def time_seed() -> tuple[int, int]:
    """Derive a two-word seed from the wall clock.

    Used where no entropy source is available. Coarse, but distinct
    across runs started more than a nanosecond apart.
    """
    ns = time.time_ns()
    seconds, subsec = divmod(ns, 1_000_000_000)
    return seconds & _MASK, subsec & _MASK


class Prng16:
    """16-bit xorshift generator with a 32-bit state (triplet 5, 3, 1).

    The state is held as two 16-bit words ``(x, y)``. Output is fully
    determined by the seed, and the sequence never terminates.
    """

    __slots__ = ("_x", "_y")

    def __init__(self, seed: tuple[int, int]) -> None:
        if len(seed) != 2:
            raise ValueError("Seed must be a pair of 16-bit words.")
        x, y = seed[0] & _MASK, seed[1] & _MASK
        # (0, 0) is a fixed point of xorshift.
        if x == 0 and y == 0:
            x = 1
        self._x = x
        self._y = y

    @classmethod
    def from_entropy(cls) -> Prng16:
        """Seed from host entropy, falling back to the clock."""
        try:
            seed = entropy_seed()
        except NotImplementedError:
            logger.warning("No entropy source available; seeding from time.")
            seed = time_seed()
        return cls(seed)

    @property
    def state(self) -> tuple[int, int]:
        """Return the current two-word state."""
        return self._x, self._y

    def next(self) -> int:
        """Advance the generator and return an unsigned 16-bit value."""
        t = (self._x ^ (self._x << 5)) & _MASK
        self._x = self._y
        self._y = (self._y ^ (self._y >> 1)) ^ (t ^ (t >> 3))
        return self._y

    def __iter__(self) -> Prng16:
        return self

    def __next__(self) -> int:
        return self.next()
