# camera/camera.py
import logging
import math

from pathtracer.core.ray import Ray
from pathtracer.core.utils import random_in_unit_disk
from pathtracer.core.vector import Vector3

logger = logging.getLogger(__name__)


class Camera:
    """
    Thin-lens camera with a shutter interval.

    `vfov` is the vertical field of view in degrees. Rays originate on a
    lens of radius `aperture / 2` and converge on the plane at
    `focus_dist`; each ray carries a time drawn from [time0, time1].
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 1.0, time0: float = 0.0, time1: float = 0.0):
        self.origin = look_from
        self.lens_radius = aperture / 2.0
        self.time0 = time0
        self.time1 = time1

        theta = math.radians(vfov)
        half_height = math.tan(theta / 2)
        half_width = aspect_ratio * half_height

        # Orthonormal basis: w points backwards, u right, v up.
        self.w = (look_from - look_at).normalize()
        self.u = vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Scale by focus distance
        self.horizontal = self.u * (2.0 * half_width * focus_dist)
        self.vertical = self.v * (2.0 * half_height * focus_dist)
        self.lower_left_corner = (self.origin
                                  - (self.u * half_width + self.v * half_height + self.w) * focus_dist)

        logger.debug("Camera basis u=%r v=%r w=%r lower_left=%r",
                     self.u, self.v, self.w, self.lower_left_corner)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """Generates a ray through image-plane coordinates (s, t) in [0, 1]."""
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y
        time = self.time0 + rng.random() * (self.time1 - self.time0)
        ray_origin = self.origin + offset
        direction = (self.lower_left_corner
                     + self.horizontal * s
                     + self.vertical * t
                     - ray_origin)
        return Ray(ray_origin, direction, time)
