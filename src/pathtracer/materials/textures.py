# materials/textures.py
import math
from typing import Optional, Union

from pathtracer.core.vector import Vector3
from pathtracer.materials.perlin import Perlin


class Texture:
    """Base class for all textures: a pure function of (u, v, point)."""
    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        raise NotImplementedError("value() must be implemented by texture subclasses.")


def as_texture(albedo: Union[Vector3, Texture]) -> Texture:
    """Wrap a plain color in a ConstantTexture; pass textures through."""
    if isinstance(albedo, Vector3):
        return ConstantTexture(albedo)
    return albedo


class ConstantTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Vector3):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        return self.color


class CheckerTexture(Texture):
    """
    A 3D checker pattern: the sign of sin(10x)·sin(10y)·sin(10z) picks
    between two child textures, independently of the surface UV mapping.
    """
    def __init__(self, odd: Union[Vector3, Texture], even: Union[Vector3, Texture]):
        self.odd = as_texture(odd)
        self.even = as_texture(even)

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        sines = math.sin(10 * p.x) * math.sin(10 * p.y) * math.sin(10 * p.z)
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)


class NoiseTexture(Texture):
    """A marbled grey pattern driven by Perlin turbulence."""
    def __init__(self, scale: float = 1.0, noise: Optional[Perlin] = None):
        self.scale = scale
        self.noise = noise if noise is not None else Perlin.shared()

    def value(self, u: float, v: float, p: Vector3) -> Vector3:
        level = 0.5 * (1 + math.sin(self.scale * p.z + 50 * self.noise.turbulence(p, 7)))
        return Vector3(1, 1, 1) * level
