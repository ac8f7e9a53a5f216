# scenes.py
import logging
from typing import Callable, Dict, NamedTuple

from raytrace.camera.camera import Camera
from raytrace.core.sampling import Sampler
from raytrace.core.vector import Color, Point3, Vector3
from raytrace.geometry.sphere import Sphere
from raytrace.geometry.world import World
from raytrace.materials.dielectric import Dielectric
from raytrace.materials.lambertian import Lambertian
from raytrace.materials.metal import Metal
from raytrace.materials.presets import ColorPresets, DielectricPresets, MetalPresets

logger = logging.getLogger(__name__)

UP = Vector3(0, 1, 0)


def simple_scene() -> World:
    """
    A red matte ball resting on a large gray ground sphere.
    """
    world = World()
    world.add(Sphere(Point3(0, -100.5, -1), 100, ColorPresets.matte(ColorPresets.GRAY)))
    world.add(Sphere(Point3(0, 0, -1), 0.5, ColorPresets.matte(ColorPresets.RED)))
    return world


def simple_camera(aspect_ratio: float) -> Camera:
    return Camera(
        look_from=Point3(0, 0, 0),
        look_at=Point3(0, 0, -1),
        vup=UP,
        vfov=90.0,
        aspect_ratio=aspect_ratio,
    )


def random_scene(sampler: Sampler) -> World:
    """
    Three large spheres (glass, matte, mirror) on a ground sphere,
    surrounded by a grid of small spheres with random materials.
    """
    world = World()

    world.add(Sphere(Point3(0, -1000, 0), 1000, ColorPresets.matte(ColorPresets.GRAY)))

    big_centers = [Point3(0, 1, 0), Point3(-4, 1, 0), Point3(4, 1, 0)]
    world.add(Sphere(big_centers[0], 1.0, DielectricPresets.glass()))
    world.add(Sphere(big_centers[1], 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    world.add(Sphere(big_centers[2], 1.0, MetalPresets.mirror()))

    for a in range(-11, 11):
        for b in range(-11, 11):
            center = Point3(a + 0.9 * sampler.uniform(), 0.2, b + 0.9 * sampler.uniform())

            # Do not collide with the big spheres
            if any((center - big).length() <= 1.2 for big in big_centers):
                continue

            choose_material = sampler.uniform()
            if choose_material < 0.8:
                material = Lambertian(sampler.random_color() * sampler.random_color())
            elif choose_material < 0.95:
                albedo = sampler.random_color_between(0.5, 1.0)
                material = Metal(albedo, sampler.uniform_between(0.0, 0.5))
            else:
                material = Dielectric(1.5)
            world.add(Sphere(center, 0.2, material))

    logger.info("Built random scene with %d spheres", len(world))
    return world


def random_camera(aspect_ratio: float) -> Camera:
    return Camera(
        look_from=Point3(13, 2, 3),
        look_at=Point3(0, 0, 0),
        vup=UP,
        vfov=20.0,
        aspect_ratio=aspect_ratio,
        aperture=0.1,
        focus_dist=10.0,
    )


class SceneSpec(NamedTuple):
    build_world: Callable[[Sampler], World]
    build_camera: Callable[[float], Camera]


SCENES: Dict[str, SceneSpec] = {
    "simple": SceneSpec(lambda sampler: simple_scene(), simple_camera),
    "random": SceneSpec(random_scene, random_camera),
}


def build_scene(name: str, aspect_ratio: float, seed=None):
    """
    Returns (world, camera) for a named scene.
    Scene randomness is drawn from its own sampler seeded with seed.
    """
    if name not in SCENES:
        raise ValueError(f"Unknown scene {name!r}; expected one of {sorted(SCENES)}")
    spec = SCENES[name]
    return spec.build_world(Sampler(seed)), spec.build_camera(aspect_ratio)
