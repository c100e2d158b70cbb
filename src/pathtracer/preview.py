"""Live preview window for a render in progress."""
import logging
from pathlib import Path
from typing import Optional

import pygame

from pathtracer.config import PREVIEW_REFRESH_MS
from pathtracer.renderer.framebuffer import Framebuffer
from pathtracer.renderer.image_io import save_image
from pathtracer.renderer.raytracer import RenderJob

logger = logging.getLogger(__name__)


class PreviewWindow:
    """
    Shows the framebuffer of a running render, refreshing on an interval.

    The window only reads the framebuffer. Once the render is complete it
    keeps showing the image until it is closed or Escape is pressed; `S`
    saves the current image to `save_path`.
    """
    def __init__(self, width: int, height: int, caption: str = "Path Tracer",
                 refresh_ms: int = PREVIEW_REFRESH_MS, save_path: Optional[Path] = None):
        self.width = width
        self.height = height
        self.refresh_ms = refresh_ms
        self.save_path = Path(save_path) if save_path is not None else Path("image.png")
        self._running = True

        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(caption)
        self.clock = pygame.time.Clock()

    def draw(self, framebuffer: Framebuffer):
        # surfarray expects (width, height, 3)
        surface = pygame.surfarray.make_surface(framebuffer.to_rgb_array().swapaxes(0, 1))
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def handle_events(self, framebuffer: Framebuffer):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._running = False
                elif event.key == pygame.K_s:
                    save_image(framebuffer, self.save_path)

    def run(self, job: RenderJob) -> bool:
        """
        Refresh until the window is closed. Returns True if the render had
        finished by then. Closing the window early does not stop the workers.
        """
        finished = False
        while self._running:
            self.handle_events(job.framebuffer)
            for tile in job.poll_completed():
                logger.debug("tile %d ready (%.0f%%)", tile.index, 100 * job.progress)
            self.draw(job.framebuffer)
            if not finished and job.done():
                finished = True
                pygame.display.set_caption("Path Tracer - done")
                logger.info("Render complete; close the window or press Escape to exit")
            self.clock.tick(1000 / self.refresh_ms)
        return finished

    def close(self):
        pygame.quit()
