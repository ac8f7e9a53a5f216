"""Unit tests for the random sampling utility.

Tests cover:
- Uniform draws and their ranges
- Rejection-sampled points in the unit sphere and unit disk
- Unit vectors and hemisphere samples
- Per-row stream derivation and reproducibility
"""

import math

from raytrace.core.sampling import Sampler, fresh_entropy
from raytrace.core.vector import Vector3

TRIALS = 2000


class TestUniform:
    """Tests for scalar draws."""

    def test_uniform_range(self, sampler):
        for _ in range(TRIALS):
            x = sampler.uniform()
            assert 0.0 <= x < 1.0

    def test_uniform_between_range(self, sampler):
        for _ in range(TRIALS):
            x = sampler.uniform_between(-3.0, 5.0)
            assert -3.0 <= x < 5.0

    def test_seeded_samplers_repeat(self):
        a = Sampler(99)
        b = Sampler(99)
        assert [a.uniform() for _ in range(10)] == [b.uniform() for _ in range(10)]


class TestVectorSamples:
    """Tests for vector-valued samples."""

    def test_in_unit_sphere_is_inside(self, sampler):
        for _ in range(TRIALS):
            assert sampler.in_unit_sphere().length_squared() < 1.0

    def test_in_unit_sphere_covers_all_octants(self, sampler):
        """Samples are not biased toward one side of the ball."""
        signs = set()
        for _ in range(TRIALS):
            p = sampler.in_unit_sphere()
            signs.add((p.x > 0, p.y > 0, p.z > 0))
        assert len(signs) == 8

    def test_unit_vector_has_unit_length(self, sampler):
        for _ in range(TRIALS):
            assert math.isclose(sampler.unit_vector().length(), 1.0, rel_tol=1e-9)

    def test_in_hemisphere_faces_normal(self, sampler):
        normal = Vector3(0, 0, 1)
        for _ in range(TRIALS):
            assert sampler.in_hemisphere(normal).dot(normal) >= 0.0

    def test_in_unit_disk_is_planar(self, sampler):
        for _ in range(TRIALS):
            p = sampler.in_unit_disk()
            assert p.z == 0.0
            assert p.x * p.x + p.y * p.y < 1.0

    def test_random_colors_in_range(self, sampler):
        for _ in range(200):
            c = sampler.random_color()
            assert all(0.0 <= channel < 1.0 for channel in c)
            c = sampler.random_color_between(0.5, 1.0)
            assert all(0.5 <= channel < 1.0 for channel in c)


class TestRowStreams:
    """Tests for per-row sampler derivation."""

    def test_same_row_same_stream(self):
        a = Sampler.for_row(7, 3)
        b = Sampler.for_row(7, 3)
        assert [a.uniform() for _ in range(20)] == [b.uniform() for _ in range(20)]

    def test_rows_are_independent(self):
        a = Sampler.for_row(7, 0)
        b = Sampler.for_row(7, 1)
        assert [a.uniform() for _ in range(20)] != [b.uniform() for _ in range(20)]

    def test_seeds_are_independent(self):
        a = Sampler.for_row(7, 0)
        b = Sampler.for_row(8, 0)
        assert [a.uniform() for _ in range(20)] != [b.uniform() for _ in range(20)]

    def test_fresh_entropy_is_usable_seed(self):
        seed = fresh_entropy()
        assert seed >= 0
        Sampler.for_row(seed, 0).uniform()
