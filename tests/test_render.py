import numpy as np
import pytest

from mandelscope.render import (
    block_max,
    color_pixels,
    downscale,
    grayscale_pixels,
    pre_render,
    render_ascii,
)


def test_pre_render_maps_shades_to_characters():
    chars = pre_render(np.array([0, 1, 43, 86, 129, 172, 255], dtype=np.uint8))
    assert "".join(chars) == ".,:oO@#"


def test_pre_render_keeps_shape():
    data = np.zeros((3, 4), dtype=np.uint8)
    assert pre_render(data).shape == (3, 4)


def test_block_max_finds_largest_in_block():
    data = np.arange(16, dtype=np.uint8).reshape(4, 4)
    assert block_max(data, 0, 0, 2, 2) == 5
    assert block_max(data, 2, 2, 2, 2) == 15


def test_block_max_of_empty_block_is_zero():
    data = np.full((4, 4), 9, dtype=np.uint8)
    assert block_max(data, 0, 0, 0, 0) == 0


def test_downscale_takes_block_maxima():
    data = np.arange(16, dtype=np.uint8).reshape(4, 4)
    result = downscale(data, 2)
    assert result.shape == (2, 2)
    for row in range(2):
        for col in range(2):
            assert result[row, col] == block_max(data, col * 2, row * 2, 2, 2)


def test_downscale_rejects_oversized_scale():
    with pytest.raises(ValueError):
        downscale(np.zeros((4, 4), dtype=np.uint8), 8)


def test_render_ascii_dimensions():
    data = np.zeros((64, 96), dtype=np.uint8)
    lines = render_ascii(data, 32).split("\n")
    assert len(lines) == 2
    assert all(line == "..." for line in lines)


def test_grayscale_pixels_packs_channels():
    pixels = grayscale_pixels(np.array([0, 0x12, 0xFF], dtype=np.uint8))
    assert pixels.tolist() == [0xFF000000, 0xFF121212, 0xFFFFFFFF]


def test_color_pixels_in_set_is_opaque_black():
    pixels = color_pixels(np.array([0], dtype=np.uint8), 100)
    assert pixels.tolist() == [0xFF000000]


def test_color_pixels_alpha_always_opaque():
    data = np.arange(1, 101, dtype=np.uint8)
    pixels = color_pixels(data, 100)
    assert np.all((pixels >> 24) == 0xFF)
    assert pixels.shape == data.shape