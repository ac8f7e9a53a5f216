"""Pytest configuration for raytracer tests.

Shared fixtures: seeded samplers, the two-sphere scene and its camera.
"""

import pytest

from raytrace.core.sampling import Sampler
from raytrace.scenes import simple_camera, simple_scene


@pytest.fixture
def sampler():
    """A sampler with a fixed seed so random tests are reproducible."""
    return Sampler(1234)


@pytest.fixture
def simple_world():
    """Ground sphere plus a red matte sphere at (0, 0, -1)."""
    return simple_scene()


@pytest.fixture
def wide_camera():
    """Pinhole camera at the origin looking down -z with a 2:1 viewport."""
    return simple_camera(2.0)
