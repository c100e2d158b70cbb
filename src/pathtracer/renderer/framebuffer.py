# renderer/framebuffer.py
import threading
from typing import Tuple

import numpy as np

from pathtracer.renderer.tone_mapping import unpack_buffer, unpack_rgb


class Framebuffer:
    """
    The render's single shared mutable resource: `width * height` packed
    24-bit RGB values in row-major order, row 0 at the top.

    Writers hold the lock for one pixel at a time; readers take a copy under
    the same lock, so a pixel is never observed half-written. Pixels that
    have not been rendered yet read as zero (black).
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = np.zeros(width * height, dtype=np.uint32)
        self.write_counts = np.zeros(width * height, dtype=np.uint16)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return self.width * self.height

    def index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} framebuffer")
        return x + y * self.width

    def write(self, x: int, y: int, packed: int):
        i = self.index(x, y)
        with self._lock:
            self.pixels[i] = packed
            self.write_counts[i] += 1

    def get(self, x: int, y: int) -> Tuple[int, int, int]:
        i = self.index(x, y)
        with self._lock:
            packed = int(self.pixels[i])
        return unpack_rgb(packed)

    def snapshot(self) -> np.ndarray:
        """Copy of the packed buffer."""
        with self._lock:
            return self.pixels.copy()

    def to_rgb_array(self) -> np.ndarray:
        """(height, width, 3) uint8 copy suitable for display or export."""
        return unpack_buffer(self.snapshot(), self.width, self.height)

    def coverage(self) -> float:
        """Fraction of pixels written at least once."""
        with self._lock:
            return float(np.count_nonzero(self.write_counts)) / len(self)
