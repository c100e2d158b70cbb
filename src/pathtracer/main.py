# main.py
import logging
import sys
from dataclasses import replace

import click

from pathtracer.config import QUALITY_PRESETS, RenderSettings
from pathtracer.errors import PathTracerError
from pathtracer.logging_config import setup_logging
from pathtracer.renderer.image_io import save_image
from pathtracer.renderer.raytracer import Renderer
from pathtracer.scenes import SCENES, build_scene

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def resolve_settings(width=None, height=None, samples=None, max_depth=None,
                     tile_size=None, workers=None, seed=None, quality=None) -> RenderSettings:
    """Environment defaults, then the quality preset, then explicit options."""
    settings = RenderSettings.from_env()
    if quality is not None:
        settings = settings.with_quality(quality)
    overrides = {
        "width": width,
        "height": height,
        "samples_per_pixel": samples,
        "max_depth": max_depth,
        "tile_width": tile_size,
        "tile_height": tile_size,
        "workers": workers,
        "seed": seed,
    }
    settings = replace(settings, **{k: v for k, v in overrides.items() if v is not None})
    return settings.validate()


@click.command()
@click.option('--scene', default='random_spheres', show_default=True,
              type=click.Choice(sorted(SCENES)), help="Preset scene to render")
@click.option('--width', type=int, default=None, help="Image width in pixels")
@click.option('--height', type=int, default=None, help="Image height in pixels")
@click.option('--samples', type=int, default=None, help="Samples per pixel")
@click.option('--max-depth', type=int, default=None, help="Maximum bounces per path")
@click.option('--tile-size', type=int, default=None, help="Tile edge length in pixels")
@click.option('--workers', type=int, default=None, help="Worker threads")
@click.option('--seed', type=int, default=None,
              help="Seed for scene layout and sampling; omit for a fresh render each run")
@click.option('--quality', type=click.Choice(sorted(QUALITY_PRESETS)), default=None,
              help="Samples/depth bundle; --samples and --max-depth still win")
@click.option('--output', '-o', type=click.Path(dir_okay=False), default=None,
              help="Write the finished image here (format from extension)")
@click.option('--preview/--no-preview', default=True, show_default=True,
              help="Show a live window while rendering")
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default=None, help="Overrides LOG_LEVEL")
def main(scene, width, height, samples, max_depth, tile_size, workers, seed,
         quality, output, preview, log_level):
    """Render a preset scene with the tiled path tracer."""
    setup_logging(log_level)

    try:
        settings = resolve_settings(width, height, samples, max_depth,
                                    tile_size, workers, seed, quality)
        chosen = build_scene(scene, settings.seed)
        camera = chosen.camera(settings.aspect_ratio)

        renderer = Renderer(settings)
        job = renderer.start(chosen.world, camera)

        if preview:
            # imported here so headless runs never touch pygame
            from pathtracer.preview import PreviewWindow
            window = PreviewWindow(settings.width, settings.height,
                                   caption=f"Path Tracer - {scene}", save_path=output)
            try:
                window.run(job)
            finally:
                window.close()

        framebuffer = job.wait()
        if output is not None:
            save_image(framebuffer, output)
    except PathTracerError as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == '__main__':
    main()
