# camera/camera.py
import math

from raytrace.core.ray import Ray
from raytrace.core.sampling import Sampler
from raytrace.core.vector import Point3, Vector3


class Camera:
    """
    A look-at camera with a thin lens for depth of field.

    The viewport is placed at focus_dist along the view direction, so objects
    at that distance stay sharp for any aperture. An aperture of 0 makes an
    ideal pinhole camera.
    """
    def __init__(self, look_from: Point3, look_at: Point3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0):
        if not 0 < vfov < 180:
            raise ValueError(f"Vertical field of view must be in (0, 180) degrees, got {vfov}")
        if not aspect_ratio > 0:
            raise ValueError(f"Aspect ratio must be positive, got {aspect_ratio}")
        if aperture < 0:
            raise ValueError(f"Aperture must be non-negative, got {aperture}")
        if not focus_dist > 0:
            raise ValueError(f"Focus distance must be positive, got {focus_dist}")

        view = look_at - look_from
        if view.near_zero():
            raise ValueError("look_from and look_at must be distinct points")
        right = view.cross(vup)
        if right.near_zero():
            raise ValueError("vup must not be parallel to the view direction")

        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.lens_radius = aperture / 2.0

        # Compute viewport dimensions based on fov
        viewport_height = 2.0 * math.tan(math.radians(vfov) / 2.0) * focus_dist
        viewport_width = aspect_ratio * viewport_height

        # Orthonormal basis: forward into the scene, right and up across the viewport
        self.origin = look_from
        self.forward = view.unit()
        self.right = self.forward.cross(vup).unit()
        self.up = self.right.cross(self.forward)

        self.horizontal = self.right * viewport_width
        self.vertical = self.up * viewport_height

        self.lower_left_corner = (self.origin +
                                  self.forward * focus_dist -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5)

    def get_ray(self, u: float, v: float, sampler: Sampler) -> Ray:
        """
        Generates the ray through viewport coordinates (u, v), both in [0, 1],
        starting from a random point on the lens.
        """
        target = self.lower_left_corner + self.horizontal * u + self.vertical * v
        if self.lens_radius <= 0:
            return Ray(self.origin, target - self.origin)

        rd = sampler.in_unit_disk() * self.lens_radius
        offset = self.right * rd.x + self.up * rd.y

        ray_origin = self.origin + offset
        return Ray(ray_origin, target - ray_origin)

    def __repr__(self) -> str:
        return (f"Camera(origin={self.origin!r}, forward={self.forward!r}, "
                f"vfov={self.vfov}, aperture={self.aperture}, focus_dist={self.focus_dist})")
