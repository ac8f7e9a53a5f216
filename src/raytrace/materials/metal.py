# materials/metal.py
from typing import Optional

from raytrace.core.ray import Ray
from raytrace.core.sampling import Sampler
from raytrace.core.utils import reflect
from raytrace.core.vector import Color
from raytrace.geometry.hittable import HitRecord
from raytrace.materials.material import Material, Scattered


class Metal(Material):
    """
    Metal material with reflective properties.
    fuzz is capped at 1; 0 is a perfect mirror.
    """
    def __init__(self, albedo: Color, fuzz: float = 0.0):
        if fuzz < 0:
            raise ValueError(f"Metal fuzz must be non-negative, got {fuzz}")
        self.albedo = albedo
        self.fuzz = min(float(fuzz), 1.0)

    def scatter(self, ray_in: Ray, rec: HitRecord, sampler: Sampler) -> Optional[Scattered]:
        reflected = reflect(ray_in.direction.unit(), rec.normal)
        direction = reflected + sampler.in_unit_sphere() * self.fuzz

        # Fuzz can push the reflection below the surface; the surface absorbs it.
        if direction.dot(rec.normal) > 0:
            return Scattered(self.albedo, Ray(rec.p, direction))
        return None

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
