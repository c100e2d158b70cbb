# materials/presets.py
from typing import Optional

from pathtracer.core.vector import Vector3
from pathtracer.materials.dielectric import Dielectric
from pathtracer.materials.lambertian import Lambertian
from pathtracer.materials.metal import Metal
from pathtracer.materials.perlin import Perlin
from pathtracer.materials.textures import CheckerTexture, NoiseTexture


class ColorPresets:
    """Colors shared by the preset scenes."""

    GREEN = Vector3(0.2, 0.3, 0.1)
    BROWN = Vector3(0.4, 0.2, 0.1)
    WHITE = Vector3(0.9, 0.9, 0.9)
    GRAY = Vector3(0.5, 0.5, 0.5)

    @staticmethod
    def matte(color: Vector3) -> Lambertian:
        return Lambertian(color)


class MetalPresets:
    @staticmethod
    def mirror() -> Metal:
        """Warm polished metal used for the large feature sphere."""
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def random(rng) -> Metal:
        """Bright albedo in [0.5, 1) per channel, fuzz in [0, 0.5)."""
        albedo = Vector3(0.5 * (1 + rng.random()),
                         0.5 * (1 + rng.random()),
                         0.5 * (1 + rng.random()))
        return Metal(albedo, 0.5 * rng.random())


class DielectricPresets:
    GLASS_INDEX = 1.5

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(DielectricPresets.GLASS_INDEX)


class DiffusePresets:
    @staticmethod
    def random_albedo(rng) -> Vector3:
        # Product of two uniforms skews toward darker colors
        return Vector3(rng.random() * rng.random(),
                       rng.random() * rng.random(),
                       rng.random() * rng.random())


class TexturePresets:
    @staticmethod
    def checkerboard(odd: Optional[Vector3] = None, even: Optional[Vector3] = None) -> CheckerTexture:
        """Green-and-white 3D checkerboard unless colors are given."""
        if odd is None:
            odd = ColorPresets.GREEN
        if even is None:
            even = ColorPresets.WHITE
        return CheckerTexture(odd, even)

    @staticmethod
    def marble(scale: float = 4.0, noise: Optional[Perlin] = None) -> NoiseTexture:
        return NoiseTexture(scale, noise)
