# core/sampling.py
import random
from typing import Optional

import numpy as np

from raytrace.core.vector import Color, Vector3


def fresh_entropy() -> int:
    """
    Draws a new root seed from the operating system.
    """
    return int(np.random.SeedSequence().entropy)


class Sampler:
    """
    Source of uniform random numbers and the vector samples derived from them.

    Each instance owns an independent generator, so samplers can be handed to
    parallel workers without sharing state. Rendering uses one sampler per
    image row, derived from the root seed and the row index with for_row().
    """
    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    @classmethod
    def for_row(cls, seed: int, row: int) -> "Sampler":
        """
        Returns the sampler for a given row of a render seeded with seed.
        The stream depends only on (seed, row), not on which worker runs it.
        """
        sequence = np.random.SeedSequence(seed, spawn_key=(row,))
        high, low = sequence.generate_state(2, dtype=np.uint64)
        return cls((int(high) << 64) | int(low))

    def uniform(self) -> float:
        """Returns a float in [0, 1)."""
        return self._rng.random()

    def uniform_between(self, lo: float, hi: float) -> float:
        """Returns a float in [lo, hi)."""
        return lo + (hi - lo) * self._rng.random()

    def in_unit_sphere(self) -> Vector3:
        """
        Returns a random point strictly inside the unit sphere.
        """
        while True:
            p = Vector3(self.uniform_between(-1.0, 1.0),
                        self.uniform_between(-1.0, 1.0),
                        self.uniform_between(-1.0, 1.0))
            if p.length_squared() < 1.0:
                return p

    def unit_vector(self) -> Vector3:
        """
        Returns a random unit vector (uniformly distributed over the sphere).
        """
        return self.in_unit_sphere().unit()

    def in_hemisphere(self, normal: Vector3) -> Vector3:
        """
        Returns a random point of the unit ball on the same side as normal.
        """
        v = self.in_unit_sphere()
        if v.dot(normal) > 0.0:
            return v
        return -v

    def in_unit_disk(self) -> Vector3:
        """
        Returns a random point (x, y, 0) inside the unit disk.
        """
        while True:
            p = Vector3(self.uniform_between(-1.0, 1.0),
                        self.uniform_between(-1.0, 1.0),
                        0.0)
            if p.length_squared() < 1.0:
                return p

    def random_color(self) -> Color:
        return Color(self.uniform(), self.uniform(), self.uniform())

    def random_color_between(self, lo: float, hi: float) -> Color:
        return Color(self.uniform_between(lo, hi),
                     self.uniform_between(lo, hi),
                     self.uniform_between(lo, hi))
