# materials/perlin.py
import math
import threading
from typing import List, Optional

from pathtracer.core.rng import make_rng
from pathtracer.core.vector import Vector3

POINT_COUNT = 256


class Perlin:
    """
    Gradient noise over a 256-cell repeating lattice.

    The tables (unit gradient vectors and one permutation per axis) are
    generated once from `rng` and never change, so every texture sharing a
    Perlin instance sees the same noise field.
    """

    _shared: Optional["Perlin"] = None
    _shared_lock = threading.Lock()

    def __init__(self, rng):
        self.ranvec: List[Vector3] = [
            Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(-1, 1)).normalize()
            for _ in range(POINT_COUNT)
        ]
        self.perm_x = self._generate_perm(rng)
        self.perm_y = self._generate_perm(rng)
        self.perm_z = self._generate_perm(rng)

    @classmethod
    def shared(cls) -> "Perlin":
        """Process-wide tables, built lazily on first use."""
        with cls._shared_lock:
            if cls._shared is None:
                cls._shared = cls(make_rng())
            return cls._shared

    @staticmethod
    def _generate_perm(rng) -> List[int]:
        perm = list(range(POINT_COUNT))
        rng.shuffle(perm)
        return perm

    def noise(self, p: Vector3) -> float:
        i = math.floor(p.x)
        j = math.floor(p.y)
        k = math.floor(p.z)
        u = p.x - i
        v = p.y - j
        w = p.z - k

        c = [[[self.ranvec[self.perm_x[(i + di) & 255]
                           ^ self.perm_y[(j + dj) & 255]
                           ^ self.perm_z[(k + dk) & 255]]
               for dk in range(2)]
              for dj in range(2)]
             for di in range(2)]
        return self._interpolate(c, u, v, w)

    @staticmethod
    def _interpolate(c, u: float, v: float, w: float) -> float:
        # Hermite smoothing of the cell offsets
        uu = u * u * (3 - 2 * u)
        vv = v * v * (3 - 2 * v)
        ww = w * w * (3 - 2 * w)
        accum = 0.0
        for i in range(2):
            for j in range(2):
                for k in range(2):
                    weight = Vector3(u - i, v - j, w - k)
                    accum += ((i * uu + (1 - i) * (1 - uu))
                              * (j * vv + (1 - j) * (1 - vv))
                              * (k * ww + (1 - k) * (1 - ww))
                              * c[i][j][k].dot(weight))
        return accum

    def turbulence(self, p: Vector3, depth: int = 7) -> float:
        accum = 0.0
        temp_p = p
        weight = 1.0
        for _ in range(depth):
            accum += weight * self.noise(temp_p)
            weight *= 0.5
            temp_p = temp_p * 2
        return abs(accum)
