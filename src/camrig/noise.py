"""Coherent noise sources for camera shake.

Shake reads a noise field along a moving time coordinate, so neighbouring
frames get neighbouring values and the camera wobbles instead of jittering.
The field is a pure function of its inputs; the time accumulator lives in
the ShakeManager.

Any object with a ``sample(x, y) -> float`` method returning values in
[-1, 1] can stand in for CoherentNoise (useful for deterministic tests).
"""

from __future__ import annotations

from typing import Protocol

from arcade.math import clamp
from opensimplex import OpenSimplex


class NoiseSource(Protocol):
    """Deterministic 2D noise sampler."""

    def sample(self, x: float, y: float) -> float:
        """Return the noise value at (x, y), in [-1, 1]."""
        ...


class CoherentNoise:
    """OpenSimplex noise field.

    Attributes:
        seed: Seed the field was built with. The same seed always yields the
            same field.
    """

    def __init__(self, seed: int = 0) -> None:
        """Build the noise field.

        Args:
            seed: Seed for the OpenSimplex permutation table.
        """
        self.seed = int(seed)
        self._simplex = OpenSimplex(seed=self.seed)

    def sample(self, x: float, y: float) -> float:
        """Sample the field, clamped to [-1, 1]."""
        return clamp(float(self._simplex.noise2(x, y)), -1.0, 1.0)
