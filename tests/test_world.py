import math

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.sphere import Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian

MATTE = Lambertian(Vector3(0.5, 0.5, 0.5))


def test_linear_scan_returns_closest():
    near = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, MATTE)
    far = Sphere(Vector3(0.0, 0.0, 10.0), 1.0, MATTE)
    world = HittableList([far, near])
    rec = world.hit(Ray(Vector3(0.0, 0.0, -5.0), Vector3(0.0, 0.0, 1.0)), 0.001, math.inf)
    assert rec.t == pytest.approx(4.0)


def test_empty_world_misses_and_has_no_box():
    world = HittableList()
    assert world.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0)), 0.001, math.inf) is None
    assert world.bounding_box(0.0, 0.0) is None
    assert world.build_bvh(0.0, 0.0, None) is None


def test_bounding_box_is_union_of_members():
    world = HittableList([
        Sphere(Vector3(0.0, 0.0, 0.0), 1.0, MATTE),
        Sphere(Vector3(5.0, 0.0, 0.0), 2.0, MATTE),
    ])
    box = world.bounding_box(0.0, 0.0)
    assert box.minimum == Vector3(-1.0, -2.0, -2.0)
    assert box.maximum == Vector3(7.0, 2.0, 2.0)


def test_build_bvh_routes_queries_through_tree(rng):
    world = HittableList([Sphere(Vector3(float(i), 0.0, 0.0), 0.3, MATTE) for i in range(10)])
    root = world.build_bvh(0.0, 0.0, rng)
    assert world.bvh_root is root
    ray = Ray(Vector3(4.0, 0.0, -5.0), Vector3(0.0, 0.0, 1.0))
    assert world.hit(ray, 0.001, math.inf).t == pytest.approx(4.7)


def test_add_discards_stale_tree(rng):
    world = HittableList([Sphere(Vector3(0.0, 0.0, 0.0), 1.0, MATTE)])
    world.build_bvh(0.0, 0.0, rng)
    world.add(Sphere(Vector3(0.0, 0.0, 3.0), 1.0, MATTE))
    assert world.bvh_root is None
    assert len(world) == 2
