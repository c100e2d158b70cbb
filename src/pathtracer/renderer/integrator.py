# renderer/integrator.py
import math

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3

# Minimum hit distance; avoids re-hitting the surface a ray just left.
EPSILON = 0.001

BLACK = Vector3(0.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)


def sky_color(ray: Ray) -> Vector3:
    """Vertical white-to-blue gradient seen by rays that escape the scene."""
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t


def ray_color(ray: Ray, world, max_depth: int, rng, depth: int = 0) -> Vector3:
    """
    Radiance carried back along `ray`.

    Each bounce multiplies the running attenuation by the material's; a ray
    that is absorbed, or still bouncing once `depth` reaches `max_depth`,
    contributes black. Escaping rays pick up the sky.
    """
    throughput = WHITE
    while True:
        rec = world.hit(ray, EPSILON, math.inf)
        if rec is None:
            return throughput * sky_color(ray)
        if depth >= max_depth:
            return BLACK
        scattered = rec.material.scatter(ray, rec, rng)
        if scattered is None:
            return BLACK
        attenuation, ray = scattered
        throughput = throughput * attenuation
        depth += 1


def sample_pixel(camera, world, i: int, j: int, width: int, height: int,
                 samples_per_pixel: int, max_depth: int, rng) -> Vector3:
    """
    Average linear color of pixel column `i`, row `j` (row 0 is the top of
    the image) over `samples_per_pixel` jittered primary rays.
    """
    r = g = b = 0.0
    for _ in range(samples_per_pixel):
        s = (i + rng.random()) / width
        t = (height - 1 - j + rng.random()) / height
        color = ray_color(camera.get_ray(s, t, rng), world, max_depth, rng)
        r += color.x
        g += color.y
        b += color.z
    return Vector3(r / samples_per_pixel, g / samples_per_pixel, b / samples_per_pixel)
