import numpy as np
import pytest

from pathtracer.core.vector import Vector3
from pathtracer.renderer.framebuffer import Framebuffer
from pathtracer.renderer.tone_mapping import (gamma_correct, pack_rgb, quantize, to_packed,
                                              unpack_buffer, unpack_rgb)


def test_quantize_endpoints():
    assert quantize(Vector3(0.0, 0.0, 0.0)) == (0, 0, 0)
    assert quantize(Vector3(1.0, 1.0, 1.0)) == (255, 255, 255)


def test_quantize_clamps_out_of_range():
    assert quantize(Vector3(1.7, -0.2, 0.5)) == (255, 0, 127)


def test_gamma_is_square_root():
    assert gamma_correct(Vector3(0.25, 0.0, 1.0)) == Vector3(0.5, 0.0, 1.0)


def test_packing_layout():
    assert pack_rgb(0x12, 0x34, 0x56) == 0x123456
    assert unpack_rgb(0x123456) == (0x12, 0x34, 0x56)


def test_to_packed_applies_tone_curve():
    assert to_packed(Vector3(1.0, 1.0, 1.0)) == 0xFFFFFF
    assert to_packed(Vector3(0.25, 0.0, 0.0)) == 127 << 16


def test_unpack_buffer_shape_and_order():
    packed = np.array([0xFF0000, 0x00FF00, 0x0000FF, 0x010203], dtype=np.uint32)
    rgb = unpack_buffer(packed, 2, 2)
    assert rgb.shape == (2, 2, 3)
    assert rgb.dtype == np.uint8
    assert tuple(rgb[0, 1]) == (0, 255, 0)
    assert tuple(rgb[1, 1]) == (1, 2, 3)


def test_new_framebuffer_is_black_and_unwritten():
    fb = Framebuffer(4, 3)
    assert len(fb) == 12
    assert fb.get(3, 2) == (0, 0, 0)
    assert fb.coverage() == 0.0


def test_write_is_row_major():
    fb = Framebuffer(4, 3)
    fb.write(1, 2, 0xABCDEF)
    assert fb.pixels[2 * 4 + 1] == 0xABCDEF
    assert fb.get(1, 2) == (0xAB, 0xCD, 0xEF)
    assert fb.write_counts[9] == 1


def test_out_of_range_pixel_raises():
    fb = Framebuffer(4, 3)
    with pytest.raises(IndexError):
        fb.write(4, 0, 0)
    with pytest.raises(IndexError):
        fb.get(0, -1)


def test_snapshot_is_a_copy():
    fb = Framebuffer(2, 2)
    snap = fb.snapshot()
    fb.write(0, 0, 0xFFFFFF)
    assert snap[0] == 0


def test_rgb_array_has_row_zero_on_top():
    fb = Framebuffer(2, 2)
    fb.write(0, 0, 0xFF0000)
    rgb = fb.to_rgb_array()
    assert tuple(rgb[0, 0]) == (255, 0, 0)
    assert tuple(rgb[1, 0]) == (0, 0, 0)


def test_coverage_counts_written_pixels():
    fb = Framebuffer(2, 2)
    fb.write(0, 0, 1)
    fb.write(1, 1, 1)
    assert fb.coverage() == 0.5
