# geometry/sphere.py
import math
from typing import Optional

from raytrace.core.ray import Ray
from raytrace.core.vector import Point3
from raytrace.geometry.hittable import HitRecord, Hittable
from raytrace.materials.material import Material


class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    The sphere owns its material.
    """
    def __init__(self, center: Point3, radius: float, material: Material):
        if not radius > 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = float(radius)
        self.material = material

    def intersect(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root <= t_min or root >= t_max:
            root = (-half_b + sqrt_disc) / a
            if root <= t_min or root >= t_max:
                return None

        rec = HitRecord(root, ray.at(root), self.material)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        return rec

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius}, {self.material!r})"
