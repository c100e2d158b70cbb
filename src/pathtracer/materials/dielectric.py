# materials/dielectric.py
from typing import Tuple

from pathtracer.core.ray import Ray
from pathtracer.core.utils import reflect, refract, schlick
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hittable import HitRecord
from pathtracer.materials.material import Material


class Dielectric(Material):
    """
    Clear refractive material (glass, water, ...). Each scatter picks either
    the reflected or the refracted ray, with Schlick's reflectance as the
    probability of reflecting, so the Fresnel mix emerges over many samples.
    """
    def __init__(self, ref_idx: float):
        self.ref_idx = ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Tuple[Vector3, Ray]:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light
        direction = ray_in.direction
        reflected = reflect(direction, rec.normal)

        # The stored normal points outward; its sign against the ray tells
        # whether we are leaving the medium or entering it.
        d_dot_n = direction.dot(rec.normal)
        if d_dot_n > 0:
            outward_normal = -rec.normal
            ni_over_nt = self.ref_idx
            cosine = self.ref_idx * d_dot_n / direction.length()
        else:
            outward_normal = rec.normal
            ni_over_nt = 1.0 / self.ref_idx
            cosine = -d_dot_n / direction.length()

        refracted = refract(direction, outward_normal, ni_over_nt)
        if refracted is None:
            # Total internal reflection
            return attenuation, Ray(rec.p, reflected, ray_in.time)

        if rng.random() < schlick(cosine, self.ref_idx):
            return attenuation, Ray(rec.p, reflected, ray_in.time)
        return attenuation, Ray(rec.p, refracted, ray_in.time)
