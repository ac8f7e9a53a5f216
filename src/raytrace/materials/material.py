# materials/material.py
from typing import NamedTuple, Optional

from raytrace.core.ray import Ray
from raytrace.core.sampling import Sampler
from raytrace.core.vector import Color
from raytrace.geometry.hittable import HitRecord


class Scattered(NamedTuple):
    """
    The outcome of a scatter that was not absorbed.
    """
    attenuation: Color
    ray: Ray


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, sampler: Sampler) -> Optional[Scattered]:
        """
        Computes the scattered ray and attenuation.
        Returns Scattered(attenuation, ray), or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
