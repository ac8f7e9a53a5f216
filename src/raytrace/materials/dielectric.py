# materials/dielectric.py
import math

from raytrace.core.ray import Ray
from raytrace.core.sampling import Sampler
from raytrace.core.utils import reflect, reflectance, refract
from raytrace.core.vector import Color
from raytrace.geometry.hittable import HitRecord
from raytrace.materials.material import Material, Scattered


class Dielectric(Material):
    """
    Transparent material that refracts, like glass or water.
    The surrounding medium is assumed to have an index of 1.
    """
    def __init__(self, refractive_index: float):
        if not refractive_index > 0:
            raise ValueError(f"Refractive index must be positive, got {refractive_index}")
        self.refractive_index = float(refractive_index)

    def scatter(self, ray_in: Ray, rec: HitRecord, sampler: Sampler) -> Scattered:
        attenuation = Color(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Determine if we're entering or exiting the material
        ratio = 1.0 / self.refractive_index if rec.front_face else self.refractive_index

        unit_direction = ray_in.direction.unit()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))

        if ratio * sin_theta > 1.0:
            # Total internal reflection
            direction = reflect(unit_direction, rec.normal)
        elif sampler.uniform() < reflectance(cos_theta, ratio):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ratio)

        return Scattered(attenuation, Ray(rec.p, direction))

    def __repr__(self) -> str:
        return f"Dielectric({self.refractive_index})"
