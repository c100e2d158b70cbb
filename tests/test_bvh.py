import math

import pytest

from pathtracer.core.ray import Ray
from pathtracer.core.rng import make_rng
from pathtracer.core.vector import Vector3
from pathtracer.errors import SceneConstructionError
from pathtracer.geometry.bvh import BVHNode, build_bvh
from pathtracer.geometry.hittable import Hittable
from pathtracer.geometry.sphere import MovingSphere, Sphere
from pathtracer.geometry.world import HittableList
from pathtracer.materials.lambertian import Lambertian

MATTE = Lambertian(Vector3(0.5, 0.5, 0.5))


class Unbounded(Hittable):
    def hit(self, ray, t_min, t_max):
        return None

    def bounding_box(self, time0, time1):
        return None


def random_spheres(rng, count):
    return [
        Sphere(Vector3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10)),
               rng.uniform(0.1, 1.5), MATTE)
        for _ in range(count)
    ]


def random_ray(rng):
    origin = Vector3(rng.uniform(-15, 15), rng.uniform(-15, 15), rng.uniform(-15, 15))
    target = Vector3(rng.uniform(-10, 10), rng.uniform(-10, 10), rng.uniform(-10, 10))
    return Ray(origin, target - origin)


@pytest.mark.parametrize("count", [1, 2, 3, 7, 64, 500])
def test_bvh_matches_linear_scan(count):
    rng = make_rng(count)
    world = HittableList(random_spheres(rng, count))
    tree = BVHNode(world.objects, 0.0, 0.0, rng)

    hits = 0
    for _ in range(200):
        ray = random_ray(rng)
        expected = world.hit_linear(ray, 0.001, math.inf)
        actual = tree.hit(ray, 0.001, math.inf)
        if expected is None:
            assert actual is None
        else:
            hits += 1
            assert actual is not None
            assert actual.t == pytest.approx(expected.t)
    if count >= 64:
        assert hits > 0


def test_bvh_matches_linear_scan_with_moving_spheres():
    rng = make_rng(99)
    objects = [
        MovingSphere(s.center, s.center + Vector3(0.0, rng.uniform(0, 3), 0.0), 0.0, 1.0,
                     s.radius, MATTE)
        for s in random_spheres(rng, 50)
    ]
    world = HittableList(objects)
    tree = BVHNode(objects, 0.0, 1.0, rng)
    for _ in range(200):
        ray = random_ray(rng)
        ray.time = rng.random()
        expected = world.hit_linear(ray, 0.001, math.inf)
        actual = tree.hit(ray, 0.001, math.inf)
        assert (expected is None) == (actual is None)
        if expected is not None:
            assert actual.t == pytest.approx(expected.t)


def test_node_box_contains_every_primitive(rng):
    objects = random_spheres(rng, 40)
    tree = BVHNode(objects, 0.0, 0.0, rng)
    for obj in objects:
        assert tree.box.contains(obj.bounding_box(0.0, 0.0))


def test_single_primitive_aliases_both_children(rng):
    sphere = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, MATTE)
    node = BVHNode([sphere], 0.0, 0.0, rng)
    assert node.left is sphere
    assert node.right is sphere
    assert node.leaves() == [sphere]


def test_every_primitive_is_a_leaf_once(rng):
    objects = random_spheres(rng, 33)
    tree = build_bvh(objects, 0.0, 0.0, rng)
    leaves = tree.leaves()
    assert len(leaves) == len(objects)
    assert {id(o) for o in leaves} == {id(o) for o in objects}


def test_tree_depth_is_logarithmic(rng):
    tree = BVHNode(random_spheres(rng, 256), 0.0, 0.0, rng)
    assert tree.depth() == 8


def test_input_list_is_not_reordered(rng):
    objects = random_spheres(rng, 10)
    before = list(objects)
    BVHNode(objects, 0.0, 0.0, rng)
    assert objects == before


def test_empty_set_raises(rng):
    with pytest.raises(SceneConstructionError):
        BVHNode([], 0.0, 0.0, rng)


def test_unbounded_primitive_raises(rng):
    objects = random_spheres(rng, 4) + [Unbounded()]
    with pytest.raises(SceneConstructionError):
        BVHNode(objects, 0.0, 0.0, rng)
