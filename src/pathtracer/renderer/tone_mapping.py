"""Tone curve, 8-bit quantization and 24-bit RGB packing."""
import math
from typing import Tuple

import numpy as np

from pathtracer.core.vector import Vector3


def gamma_correct(color: Vector3) -> Vector3:
    """Square-root tone curve (gamma 2) applied per channel."""
    return Vector3(math.sqrt(max(color.x, 0.0)),
                   math.sqrt(max(color.y, 0.0)),
                   math.sqrt(max(color.z, 0.0)))


def quantize(color: Vector3) -> Tuple[int, int, int]:
    """Map [0, 1] channels to 0..255."""
    return tuple(min(255, max(0, int(255.99 * c))) for c in (color.x, color.y, color.z))


def pack_rgb(r: int, g: int, b: int) -> int:
    return (r << 16) | (g << 8) | b


def unpack_rgb(packed: int) -> Tuple[int, int, int]:
    return (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF


def to_packed(color: Vector3) -> int:
    """Linear averaged pixel color to the packed value stored in the framebuffer."""
    return pack_rgb(*quantize(gamma_correct(color)))


def unpack_buffer(packed: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Expand a row-major buffer of packed pixels into a (height, width, 3)
    uint8 array.
    """
    packed = packed.reshape(height, width)
    rgb = np.empty((height, width, 3), dtype=np.uint8)
    rgb[:, :, 0] = (packed >> 16) & 0xFF
    rgb[:, :, 1] = (packed >> 8) & 0xFF
    rgb[:, :, 2] = packed & 0xFF
    return rgb
