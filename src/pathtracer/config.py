"""Render configuration: environment defaults, quality presets and settings."""

import os
from dataclasses import dataclass, replace
from typing import Optional

from pathtracer.errors import ConfigurationError


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


# Image settings
WIDTH = int(os.getenv("PATHTRACER_WIDTH", "800"))
HEIGHT = int(os.getenv("PATHTRACER_HEIGHT", "600"))

# Sampling settings
SAMPLES_PER_PIXEL = int(os.getenv("PATHTRACER_SAMPLES", "100"))
MAX_DEPTH = int(os.getenv("PATHTRACER_MAX_DEPTH", "50"))
SEED = _optional_int(os.getenv("PATHTRACER_SEED"))

# Scheduling settings
TILE_SIZE = int(os.getenv("PATHTRACER_TILE_SIZE", "50"))
WORKERS = int(os.getenv("PATHTRACER_WORKERS", "10"))

# Preview settings
PREVIEW_REFRESH_MS = int(os.getenv("PATHTRACER_PREVIEW_REFRESH_MS", "100"))

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

QUALITY_PRESETS = {
    "preview": {"samples": 4, "max_depth": 8},
    "balanced": {"samples": 32, "max_depth": 25},
    "final": {"samples": 100, "max_depth": 50},
}


@dataclass(frozen=True)
class RenderSettings:
    """Everything the renderer needs besides the scene and the camera."""

    width: int = WIDTH
    height: int = HEIGHT
    samples_per_pixel: int = SAMPLES_PER_PIXEL
    max_depth: int = MAX_DEPTH
    tile_width: int = TILE_SIZE
    tile_height: int = TILE_SIZE
    workers: int = WORKERS
    seed: Optional[int] = SEED

    @classmethod
    def from_env(cls) -> "RenderSettings":
        """Read settings from the environment at call time."""
        tile = int(os.getenv("PATHTRACER_TILE_SIZE", str(TILE_SIZE)))
        return cls(
            width=int(os.getenv("PATHTRACER_WIDTH", str(WIDTH))),
            height=int(os.getenv("PATHTRACER_HEIGHT", str(HEIGHT))),
            samples_per_pixel=int(os.getenv("PATHTRACER_SAMPLES", str(SAMPLES_PER_PIXEL))),
            max_depth=int(os.getenv("PATHTRACER_MAX_DEPTH", str(MAX_DEPTH))),
            tile_width=tile,
            tile_height=tile,
            workers=int(os.getenv("PATHTRACER_WORKERS", str(WORKERS))),
            seed=_optional_int(os.getenv("PATHTRACER_SEED")),
        )

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def with_quality(self, name: str) -> "RenderSettings":
        try:
            preset = QUALITY_PRESETS[name]
        except KeyError:
            raise ConfigurationError(
                f"Unknown quality preset {name!r}; expected one of {sorted(QUALITY_PRESETS)}"
            ) from None
        return replace(self, samples_per_pixel=preset["samples"], max_depth=preset["max_depth"])

    def validate(self) -> "RenderSettings":
        for field_name in ("width", "height", "samples_per_pixel", "tile_width",
                           "tile_height", "workers"):
            value = getattr(self, field_name)
            if value <= 0:
                raise ConfigurationError(f"{field_name} must be positive, got {value}")
        if self.max_depth < 0:
            raise ConfigurationError(f"max_depth must not be negative, got {self.max_depth}")
        return self
