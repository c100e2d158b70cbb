# renderer/raytracer.py
import logging
import queue
import time
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from typing import Callable, Dict, List, Optional

from pathtracer.config import RenderSettings
from pathtracer.core.rng import spawn_rngs
from pathtracer.errors import RenderError
from pathtracer.renderer.framebuffer import Framebuffer
from pathtracer.renderer.integrator import sample_pixel
from pathtracer.renderer.tiles import Tile, make_tiles
from pathtracer.renderer.tone_mapping import to_packed

logger = logging.getLogger(__name__)

TileCallback = Callable[[Tile], None]


class RenderJob:
    """
    A render in flight.

    Tiles run on the renderer's worker pool and write straight into
    `framebuffer`. Finished tiles are announced on an internal queue that
    callers may drain with `poll_completed()`; doing so is optional and has
    no effect on the image.
    """
    def __init__(self, framebuffer: Framebuffer, tiles: List[Tile], executor: ThreadPoolExecutor):
        self.framebuffer = framebuffer
        self.tiles = tiles
        self._executor = executor
        self._futures: Dict[Future, Tile] = {}
        self._completed: "queue.Queue[Tile]" = queue.Queue()
        self._started = time.perf_counter()
        self.elapsed: Optional[float] = None

    def _track(self, future: Future, tile: Tile):
        self._futures[future] = tile
        future.add_done_callback(self._on_done)

    def _on_done(self, future: Future):
        if future.cancelled() or future.exception() is not None:
            return
        self._completed.put(self._futures[future])

    @property
    def progress(self) -> float:
        if not self.tiles:
            return 1.0
        finished = sum(1 for future in self._futures
                       if future.done() and not future.cancelled() and future.exception() is None)
        return finished / len(self.tiles)

    def done(self) -> bool:
        return all(future.done() for future in self._futures)

    def poll_completed(self) -> List[Tile]:
        """Tiles finished since the last call, without blocking."""
        finished = []
        while True:
            try:
                finished.append(self._completed.get_nowait())
            except queue.Empty:
                return finished

    def wait(self, on_tile_done: Optional[TileCallback] = None) -> Framebuffer:
        """
        Block until every tile has been rendered and return the framebuffer.

        Raises RenderError if any tile failed; tiles that had not started yet
        are cancelled.
        """
        try:
            for future in as_completed(list(self._futures)):
                tile = self._futures[future]
                exc = future.exception()
                if exc is not None:
                    logger.error("Tile %d at (%d, %d) failed", tile.index, tile.x0, tile.y0,
                                 exc_info=exc)
                    self._executor.shutdown(wait=True, cancel_futures=True)
                    raise RenderError(f"Rendering tile {tile.index} failed: {exc}") from exc
                if on_tile_done is not None:
                    on_tile_done(tile)
        finally:
            self._executor.shutdown(wait=True)

        if self.elapsed is None:
            self.elapsed = time.perf_counter() - self._started
            logger.info("Rendered %d tiles in %.2fs", len(self.tiles), self.elapsed)
        return self.framebuffer


class Renderer:
    """
    Parallel tiled path tracer.

    The image is cut into fixed-size tiles that are submitted once to a pool
    of `settings.workers` threads. Every tile gets its own random generator,
    derived from `settings.seed` and the tile index, so a seeded render is
    reproducible regardless of worker count or completion order.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings.validate()
        self.width = settings.width
        self.height = settings.height
        self.samples_per_pixel = settings.samples_per_pixel
        self.max_depth = settings.max_depth

    def start(self, world, camera) -> RenderJob:
        """Submit every tile and return immediately."""
        settings = self.settings
        framebuffer = Framebuffer(self.width, self.height)
        tiles = make_tiles(self.width, self.height, settings.tile_width, settings.tile_height)
        rngs = spawn_rngs(settings.seed, len(tiles))

        logger.info(
            "Rendering %dx%d: %d tiles on %d workers, %d samples/pixel, max depth %d",
            self.width, self.height, len(tiles), settings.workers,
            self.samples_per_pixel, self.max_depth,
        )

        executor = ThreadPoolExecutor(max_workers=settings.workers,
                                      thread_name_prefix="tile-worker")
        job = RenderJob(framebuffer, tiles, executor)
        for tile, rng in zip(tiles, rngs):
            future = executor.submit(self.render_tile, tile, world, camera, framebuffer, rng)
            job._track(future, tile)
        return job

    def render(self, world, camera, on_tile_done: Optional[TileCallback] = None) -> Framebuffer:
        """Render the whole image and block until it is complete."""
        return self.start(world, camera).wait(on_tile_done)

    def render_tile(self, tile: Tile, world, camera, framebuffer: Framebuffer, rng):
        logger.debug("begin tile %d (%d, %d)", tile.index, tile.x0, tile.y0)
        for x, y in tile.pixels():
            color = sample_pixel(camera, world, x, y, self.width, self.height,
                                 self.samples_per_pixel, self.max_depth, rng)
            framebuffer.write(x, y, to_packed(color))
        logger.debug("end tile %d (%d, %d)", tile.index, tile.x0, tile.y0)
