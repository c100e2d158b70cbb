# renderer/image_io.py
import logging
from pathlib import Path
from typing import Union

from PIL import Image

from pathtracer.renderer.framebuffer import Framebuffer

logger = logging.getLogger(__name__)


def framebuffer_to_image(framebuffer: Framebuffer) -> Image.Image:
    """Copy the framebuffer into an RGB Pillow image (row 0 at the top)."""
    return Image.fromarray(framebuffer.to_rgb_array())


def save_image(framebuffer: Framebuffer, path: Union[str, Path]) -> Path:
    """
    Save the framebuffer to `path`; the format follows the file extension.

    Raises:
        ValueError: Raised by Pillow when the extension is not a format it can write
    """
    path = Path(path)
    if path.parent != Path(""):
        path.parent.mkdir(parents=True, exist_ok=True)
    framebuffer_to_image(framebuffer).save(path)
    logger.info("Image saved to %s", path)
    return path
