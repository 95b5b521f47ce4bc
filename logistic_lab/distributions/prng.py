"""Mulberry32 pseudo-random generator.

A 32-bit counter-based generator: the state advances by a fixed increment on
every draw and the output is a xorshift-multiply hash of the state. It is not
suitable for cryptography, but it is cheap, seedable and bit-reproducible,
and because the state after ``k`` draws is ``seed + k * INCREMENT`` a block of
draws can be produced in one vectorised numpy pass.
"""

from __future__ import annotations

import numpy as np

MASK32 = 0xFFFFFFFF
INCREMENT = 0x6D2B79F5
_TWO_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    return (a * b) & MASK32


class Mulberry32:
    """Seeded uniform generator producing floats in [0, 1)."""

    def __init__(self, seed: int = 0) -> None:
        self._state = 0
        self.seed(seed)

    def seed(self, value: int) -> None:
        """Reset the generator; no state from earlier draws survives."""
        self._state = int(value) & MASK32

    @property
    def state(self) -> int:
        return self._state

    def random(self) -> float:
        self._state = (self._state + INCREMENT) & MASK32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK32
        return ((t ^ (t >> 14)) & MASK32) / _TWO_32

    def random_array(self, size: int) -> np.ndarray:
        """Draw ``size`` uniforms, identical to ``size`` calls of :meth:`random`."""
        if size < 0:
            raise ValueError("size must be non-negative")
        steps = np.arange(1, size + 1, dtype=np.uint64)
        states = (np.uint64(self._state) + steps * np.uint64(INCREMENT)) & np.uint64(MASK32)
        self._state = (self._state + size * INCREMENT) & MASK32

        t = states.astype(np.uint32)
        t = (t ^ (t >> np.uint32(15))) * (t | np.uint32(1))
        t ^= t + (t ^ (t >> np.uint32(7))) * (t | np.uint32(61))
        return (t ^ (t >> np.uint32(14))).astype(np.float64) / _TWO_32


__all__ = ["Mulberry32", "INCREMENT", "MASK32"]
