# geometry/hittable.py
from typing import TYPE_CHECKING, Optional

from raytrace.core.ray import Ray
from raytrace.core.vector import Point3, Vector3

if TYPE_CHECKING:
    from raytrace.materials.material import Material


class HitRecord:
    """
    Records details of a ray-object intersection.
    Built by an intersection test and consumed right away by scattering.
    """
    def __init__(self, t: float, p: Point3, material: "Material",
                 normal: Vector3 = None, front_face: bool = True):
        self.t = t                    # Ray parameter at intersection
        self.p = p                    # Intersection point
        self.material = material
        self.normal = normal          # Always points against the ray
        self.front_face = front_face  # Whether the ray struck the outside

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, "
                f"front_face={self.front_face})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def intersect(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """
        Returns the hit with t in the open interval (t_min, t_max), or None.
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")
