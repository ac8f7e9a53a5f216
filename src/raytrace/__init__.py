"""Monte Carlo path tracer for scenes of spheres.

Subpackages:
    core: Vector, point and color algebra, rays, random sampling
    geometry: Hittable interface, spheres and the world container
    materials: Lambertian, metal and dielectric scattering
    camera: Look-at camera with thin-lens depth of field
    renderer: Recursive tracing, parallel row rendering, quantization, PNG export
"""

from raytrace.camera.camera import Camera
from raytrace.config import ExecutorKind, RenderConfig, RowOrder
from raytrace.core.ray import Ray
from raytrace.core.sampling import Sampler
from raytrace.core.vector import Color, Point3, Vector3
from raytrace.geometry.sphere import Sphere
from raytrace.geometry.world import World
from raytrace.materials.dielectric import Dielectric
from raytrace.materials.lambertian import Lambertian
from raytrace.materials.metal import Metal
from raytrace.renderer.raytracer import Renderer, trace

__version__ = "0.1.0"

__all__ = [
    "Camera",
    "Color",
    "Dielectric",
    "ExecutorKind",
    "Lambertian",
    "Metal",
    "Point3",
    "Ray",
    "RenderConfig",
    "Renderer",
    "RowOrder",
    "Sampler",
    "Sphere",
    "Vector3",
    "World",
    "trace",
]
