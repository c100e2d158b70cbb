# core/aabb.py
from pathtracer.core.vector import Vector3


class AABB:
    """Axis-aligned bounding box. `minimum <= maximum` componentwise; an axis may have zero extent."""

    __slots__ = ("minimum", "maximum")

    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        # A zero-thickness axis collapses the window to a single t, so a flat
        # box accepts a zero-width window on every axis.
        flat = any(self.minimum[a] == self.maximum[a] for a in range(3))
        for a in range(3):
            d = ray.direction[a]
            o = ray.origin[a]
            lo = self.minimum[a]
            hi = self.maximum[a]
            if d == 0.0:
                # Parallel to this slab: it only constrains the origin.
                if o < lo or o > hi:
                    return False
                continue
            invD = 1.0 / d
            t0 = (lo - o) * invD
            t1 = (hi - o) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if flat:
                if t_max < t_min:
                    return False
            elif t_max <= t_min:
                return False
        return True

    def contains(self, other: "AABB") -> bool:
        return all(
            self.minimum[a] <= other.minimum[a] and other.maximum[a] <= self.maximum[a]
            for a in range(3)
        )

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
