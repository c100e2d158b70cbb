from typing import Optional

from pathtracer.core.aabb import AABB
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("t", "p", "normal", "material", "u", "v")

    def __init__(self, t: float, p: Vector3, normal: Vector3, material,
                 u: float = 0.0, v: float = 0.0):
        self.t = t              # Ray parameter at intersection
        self.p = p              # Intersection point
        self.normal = normal    # Unit outward surface normal
        self.material = material
        self.u = u              # Surface texture coordinates
        self.v = v

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r})"


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

    def bounding_box(self, time0: float, time1: float) -> Optional[AABB]:
        """
        Box enclosing the object for every time in [time0, time1], or None
        when the object is unbounded.
        """
        raise NotImplementedError("bounding_box() must be implemented by subclasses.")
