"""Unit tests for the World container.

Tests cover:
- Nearest hit wins regardless of insertion order
- Empty world and misses
- Heterogeneous Hittable objects
"""

import math

import pytest

from raytrace.core.ray import Ray
from raytrace.core.vector import Color, Point3, Vector3
from raytrace.geometry.hittable import HitRecord, Hittable
from raytrace.geometry.sphere import Sphere
from raytrace.geometry.world import World
from raytrace.materials.lambertian import Lambertian
from raytrace.materials.metal import Metal


class GroundPlane(Hittable):
    """Infinite plane y = height, used to check World accepts any Hittable."""

    def __init__(self, height, material):
        self.height = height
        self.material = material

    def intersect(self, ray, t_min, t_max):
        if ray.direction.y == 0:
            return None
        t = (self.height - ray.origin.y) / ray.direction.y
        if t <= t_min or t >= t_max:
            return None
        rec = HitRecord(t, ray.at(t), self.material)
        rec.set_face_normal(ray, Vector3(0, 1, 0))
        return rec


class TestWorldIntersection:
    """Tests for closest-hit queries."""

    def test_nearest_hit_wins_over_insertion_order(self):
        far = Sphere(Point3(0, 0, -5), 1.0, Lambertian(Color(1, 0, 0)))
        near = Sphere(Point3(0, 0, -2), 0.5, Metal(Color(0, 1, 0)))
        world = World()
        world.add(far)
        world.add(near)

        rec = world.intersect(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), 0.001, math.inf)
        assert rec is not None
        assert math.isclose(rec.t, 1.5)
        assert rec.material is near.material

    def test_order_does_not_matter(self):
        a = Sphere(Point3(0, 0, -5), 1.0, Lambertian(Color(1, 0, 0)))
        b = Sphere(Point3(0, 0, -2), 0.5, Lambertian(Color(0, 1, 0)))
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        first = World([a, b]).intersect(ray, 0.001, math.inf)
        second = World([b, a]).intersect(ray, 0.001, math.inf)
        assert first.t == second.t
        assert first.material is second.material

    def test_empty_world_misses(self):
        world = World()
        assert world.intersect(Ray(Point3(0, 0, 0), Vector3(0, 0, -1)), 0.001, math.inf) is None

    def test_ray_missing_all_objects(self, simple_world):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 1, 0))
        assert simple_world.intersect(ray, 0.001, math.inf) is None

    def test_mixed_object_types(self):
        ground = GroundPlane(-1.0, Lambertian(Color(0.5, 0.5, 0.5)))
        ball = Sphere(Point3(0, -0.5, -3), 0.5, Lambertian(Color(1, 0, 0)))
        world = World([ground, ball])
        rec = world.intersect(Ray(Point3(0, 0, 0), Vector3(0, -1, 0)), 0.001, math.inf)
        assert math.isclose(rec.t, 1.0)
        assert rec.material is ground.material


class TestWorldContainer:
    """Tests for the collection interface."""

    def test_add_len_iter_clear(self, simple_world):
        assert len(simple_world) == 2
        assert all(isinstance(obj, Sphere) for obj in simple_world)
        simple_world.clear()
        assert len(simple_world) == 0

    def test_rejects_non_hittable(self):
        with pytest.raises(TypeError):
            World().add("not a sphere")
