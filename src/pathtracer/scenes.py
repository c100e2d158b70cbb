"""Preset scenes with their default cameras."""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from pathtracer.camera.camera import Camera
from pathtracer.core.rng import make_rng
from pathtracer.core.vector import Vector3
from pathtracer.errors import ConfigurationError
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.perlin import Perlin
from pathtracer.materials.presets import (ColorPresets, DielectricPresets, DiffusePresets,
                                         MetalPresets, TexturePresets)

logger = logging.getLogger(__name__)

UP = Vector3(0.0, 1.0, 0.0)


@dataclass
class Scene:
    """A world plus where to look at it from."""
    name: str
    world: HittableList
    look_from: Vector3
    look_at: Vector3
    vfov: float = 20.0
    aperture: float = 0.0
    focus_dist: float = 10.0
    time0: float = 0.0
    time1: float = 0.0

    def camera(self, aspect_ratio: float) -> Camera:
        return Camera(self.look_from, self.look_at, UP, self.vfov, aspect_ratio,
                      self.aperture, self.focus_dist, self.time0, self.time1)


def _small_spheres(world: HittableList, rng, moving: bool, time0: float, time1: float):
    """A 22x22 grid of jittered small spheres: 80% diffuse, 15% metal, 5% glass."""
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Vector3(4.0, 0.2, 0.0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = DiffusePresets.random_albedo(rng)
                if moving:
                    end = center + Vector3(0.0, 0.5 * rng.random(), 0.0)
                    world.add(MovingSphere(center, end, time0, time1, 0.2, Lambertian(albedo)))
                else:
                    world.add(Sphere(center, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                world.add(Sphere(center, 0.2, MetalPresets.random(rng)))
            else:
                world.add(Sphere(center, 0.2, DielectricPresets.glass()))


def _feature_spheres(world: HittableList):
    world.add(Sphere(Vector3(0.0, 1.0, 0.0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-4.0, 1.0, 0.0), 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    world.add(Sphere(Vector3(4.0, 1.0, 0.0), 1.0, MetalPresets.mirror()))


def random_spheres(rng) -> Scene:
    world = HittableList()
    world.add(Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, Lambertian(ColorPresets.GRAY)))
    _small_spheres(world, rng, moving=False, time0=0.0, time1=0.0)
    _feature_spheres(world)
    return Scene("random_spheres", world, Vector3(13.0, 2.0, 3.0), Vector3(0.0, 0.0, 0.0),
                 vfov=20.0, aperture=0.1, focus_dist=10.0)


def moving_spheres(rng) -> Scene:
    world = HittableList()
    world.add(Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0,
                     Lambertian(TexturePresets.checkerboard())))
    _small_spheres(world, rng, moving=True, time0=0.0, time1=1.0)
    _feature_spheres(world)
    return Scene("moving_spheres", world, Vector3(13.0, 2.0, 3.0), Vector3(0.0, 0.0, 0.0),
                 vfov=20.0, aperture=0.0, focus_dist=10.0, time0=0.0, time1=1.0)


def two_perlin_spheres(rng) -> Scene:
    marble = TexturePresets.marble(scale=4.0, noise=Perlin(rng))
    world = HittableList([
        Sphere(Vector3(0.0, -1000.0, 0.0), 1000.0, Lambertian(marble)),
        Sphere(Vector3(0.0, 2.0, 0.0), 2.0, Lambertian(marble)),
    ])
    return Scene("two_perlin_spheres", world, Vector3(13.0, 2.0, 3.0), Vector3(0.0, 0.0, 0.0))


def two_checker_spheres(rng) -> Scene:
    checker = TexturePresets.checkerboard()
    world = HittableList([
        Sphere(Vector3(0.0, -10.0, 0.0), 10.0, Lambertian(checker)),
        Sphere(Vector3(0.0, 10.0, 0.0), 10.0, Lambertian(checker)),
    ])
    return Scene("two_checker_spheres", world, Vector3(13.0, 2.0, 3.0), Vector3(0.0, 0.0, 0.0))


SCENES: Dict[str, Callable[..., Scene]] = {
    "random_spheres": random_spheres,
    "moving_spheres": moving_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "two_checker_spheres": two_checker_spheres,
}


def build_scene(name: str, seed: Optional[int] = None) -> Scene:
    """
    Construct a preset scene and wrap its primitives in a BVH built over
    the scene's shutter interval.
    """
    try:
        builder = SCENES[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown scene {name!r}; expected one of {sorted(SCENES)}"
        ) from None
    rng = make_rng(seed)
    scene = builder(rng)
    logger.info("Scene %s: %d primitives", scene.name, len(scene.world))
    scene.world.build_bvh(scene.time0, scene.time1, rng)
    return scene
