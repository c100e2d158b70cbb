"""Pytest configuration and shared fixtures."""

import pytest

from pathtracer.camera.camera import Camera
from pathtracer.config import RenderSettings
from pathtracer.core.rng import make_rng
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian


@pytest.fixture
def rng():
    """A seeded generator so draws are repeatable."""
    return make_rng(1234)


@pytest.fixture
def grey_sphere_world():
    """One unit sphere of 50% grey at the origin."""
    return HittableList([Sphere(Vector3(0.0, 0.0, 0.0), 1.0, Lambertian(Vector3(0.5, 0.5, 0.5)))])


@pytest.fixture
def front_camera():
    """Pinhole camera three units in front of the origin, square image."""
    return Camera(Vector3(0.0, 0.0, 3.0), Vector3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0),
                  vfov=40.0, aspect_ratio=1.0)


@pytest.fixture
def tiny_settings():
    """Settings small enough for a render to finish in well under a second."""
    return RenderSettings(width=8, height=6, samples_per_pixel=2, max_depth=3,
                          tile_width=3, tile_height=3, workers=2, seed=7)


@pytest.fixture
def white_sphere_world():
    """One unit sphere of constant white at the origin."""
    return HittableList([Sphere(Vector3(0.0, 0.0, 0.0), 1.0, Lambertian(Vector3(1.0, 1.0, 1.0)))])
