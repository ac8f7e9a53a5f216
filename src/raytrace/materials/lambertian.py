# materials/lambertian.py
from raytrace.core.ray import Ray
from raytrace.core.sampling import Sampler
from raytrace.core.vector import Color
from raytrace.geometry.hittable import HitRecord
from raytrace.materials.material import Material, Scattered


class Lambertian(Material):
    """
    Lambertian diffuse material, like matte paint.
    """

    def __init__(self, albedo: Color):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, sampler: Sampler) -> Scattered:
        """
        Scatter a ray according to a Lambertian reflection model.
        Diffuse surfaces never absorb, so this always returns a ray.
        """
        # Pick a random scatter direction by adding a random vector to the normal.
        scatter_direction = rec.normal + sampler.unit_vector()

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return Scattered(self.albedo, Ray(rec.p, scatter_direction))

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"
