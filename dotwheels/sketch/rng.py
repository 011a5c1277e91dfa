#!/usr/bin/env python3
"""
Seed Controller for the Dot Wheel Sketches

Wraps a seedable random stream and a seeded value-noise table behind one
context object. A given seed reproduces every draw in call order, so the
orchestrator can rebuild an identical scene after a resize.
"""

import math
import random
from typing import Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")

NOISE_SIZE = 256


def _fade(t: float) -> float:
    return t * t * (3.0 - 2.0 * t)


class SeedController:
    """Random and noise sources reset together by ``seed``."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random()
        self.current_seed: Optional[int] = None
        self.seed(seed)

    def seed(self, value: Optional[int]) -> None:
        """Reset the random stream and the noise table to a deterministic state."""
        self.current_seed = value
        self._random.seed(value)
        noise_rng = np.random.default_rng(value)
        perm = noise_rng.permutation(NOISE_SIZE)
        self._perm = np.concatenate([perm, perm])
        self._lattice = noise_rng.random(NOISE_SIZE)

    # ------------------------------------------------------------------
    # random stream
    # ------------------------------------------------------------------

    def random(self) -> float:
        return self._random.random()

    def uniform(self, lo: float, hi: float) -> float:
        return self._random.uniform(lo, hi)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[int(self._random.random() * len(seq))]

    def angle(self) -> float:
        """Uniform angle in radians, [0, 2*pi)."""
        return self._random.random() * math.tau

    # ------------------------------------------------------------------
    # noise
    # ------------------------------------------------------------------

    def _corner(self, ix: int, iy: int) -> float:
        return float(self._lattice[self._perm[self._perm[ix] + iy]])

    def noise(self, x: float, y: float = 0.0) -> float:
        """Smooth 2D value noise in [0, 1]."""
        x0 = math.floor(x)
        y0 = math.floor(y)
        xf = x - x0
        yf = y - y0
        ix = x0 & (NOISE_SIZE - 1)
        iy = y0 & (NOISE_SIZE - 1)
        ix1 = (ix + 1) & (NOISE_SIZE - 1)
        iy1 = (iy + 1) & (NOISE_SIZE - 1)

        u = _fade(xf)
        v = _fade(yf)
        top = self._corner(ix, iy) + (self._corner(ix1, iy) - self._corner(ix, iy)) * u
        bottom = self._corner(ix, iy1) + (self._corner(ix1, iy1) - self._corner(ix, iy1)) * u
        return top + (bottom - top) * v
