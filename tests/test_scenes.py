import pytest

from pathtracer.errors import ConfigurationError
from pathtracer.geometry.sphere import MovingSphere
from pathtracer.scenes import SCENES, build_scene


@pytest.mark.parametrize("name", sorted(SCENES))
def test_scene_builds_with_tree(name):
    scene = build_scene(name, seed=1)
    assert scene.name == name
    assert len(scene.world) > 0
    assert scene.world.bvh_root is not None
    camera = scene.camera(16 / 9)
    assert camera.time0 == scene.time0
    assert camera.time1 == scene.time1


def test_random_spheres_layout_follows_seed():
    a = build_scene("random_spheres", seed=5)
    b = build_scene("random_spheres", seed=5)
    c = build_scene("random_spheres", seed=6)
    assert [o.center for o in a.world.objects] == [o.center for o in b.world.objects]
    assert [o.center for o in a.world.objects] != [o.center for o in c.world.objects]


def test_random_spheres_has_ground_and_feature_spheres():
    scene = build_scene("random_spheres", seed=2)
    radii = [o.radius for o in scene.world.objects]
    assert radii[0] == 1000.0
    assert radii[-3:] == [1.0, 1.0, 1.0]
    assert len(scene.world) <= 1 + 22 * 22 + 3


def test_moving_spheres_move_over_open_shutter():
    scene = build_scene("moving_spheres", seed=3)
    assert (scene.time0, scene.time1) == (0.0, 1.0)
    movers = [o for o in scene.world.objects if isinstance(o, MovingSphere)]
    assert movers
    for sphere in movers:
        assert sphere.center1.y >= sphere.center0.y


def test_unknown_scene_raises():
    with pytest.raises(ConfigurationError):
        build_scene("cornell_box")
