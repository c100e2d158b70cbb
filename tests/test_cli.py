import logging

import pytest
from click.testing import CliRunner
from PIL import Image

from pathtracer.main import main, resolve_settings


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("pathtracer")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


def test_headless_render_writes_image(tmp_path):
    output = tmp_path / "frame.png"
    result = CliRunner().invoke(main, [
        "--scene", "two_checker_spheres", "--width", "8", "--height", "6",
        "--samples", "1", "--max-depth", "2", "--tile-size", "4", "--workers", "2",
        "--seed", "1", "--output", str(output), "--no-preview", "--log-level", "warning",
    ])
    assert result.exit_code == 0, result.output
    with Image.open(output) as image:
        assert image.size == (8, 6)


def test_unknown_scene_is_a_usage_error():
    result = CliRunner().invoke(main, ["--scene", "nope", "--no-preview"])
    assert result.exit_code == 2


def test_invalid_size_exits_with_error():
    result = CliRunner().invoke(main, ["--scene", "two_checker_spheres", "--width", "0",
                                       "--no-preview"])
    assert result.exit_code == 1


def test_explicit_options_beat_quality_preset(monkeypatch):
    monkeypatch.delenv("PATHTRACER_SAMPLES", raising=False)
    settings = resolve_settings(samples=3, quality="final")
    assert settings.samples_per_pixel == 3
    assert settings.max_depth == 50


def test_quality_preset_beats_environment(monkeypatch):
    monkeypatch.setenv("PATHTRACER_SAMPLES", "500")
    settings = resolve_settings(quality="preview")
    assert settings.samples_per_pixel == 4


def test_tile_size_sets_both_dimensions():
    settings = resolve_settings(tile_size=7)
    assert (settings.tile_width, settings.tile_height) == (7, 7)
