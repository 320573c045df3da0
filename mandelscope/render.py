"""Text and window output for shade images."""

from __future__ import annotations

import numpy as np

ASCII_SCALE = 32
_SHADE_CHARS = np.array(list(",:oO@#"))
_OPAQUE = np.uint32(0xFF000000)


def pre_render(data):
    """Map shades to characters: 0 becomes '.', others one of ``,:oO@#``."""
    values = np.asarray(data, dtype=np.uint8)
    return np.where(values == 0, ".", _SHADE_CHARS[values // 43])


def block_max(data, block_x, block_y, block_width, block_height):
    """Largest shade inside a rectangular block, or 0 for an empty block."""
    values = np.asarray(data)
    block = values[block_y:block_y + block_height, block_x:block_x + block_width]
    return int(block.max(initial=0))


def downscale(data, scale):
    """Shrink an image by ``scale``, keeping the maximum of each block."""
    values = np.asarray(data, dtype=np.uint8)
    height, width = values.shape
    new_width = width // scale
    new_height = height // scale
    if new_width < 1 or new_height < 1:
        raise ValueError(f"scale {scale} is too large for a {width}x{height} image")
    block_width = width // new_width
    block_height = height // new_height
    cropped = values[: new_height * block_height, : new_width * block_width]
    blocks = cropped.reshape(new_height, block_height, new_width, block_width)
    return blocks.max(axis=(1, 3)).astype(np.uint8)


def render_ascii(data, scale=ASCII_SCALE):
    """Downscale an image and draw it as lines of characters."""
    chars = pre_render(downscale(data, scale))
    return "\n".join("".join(row) for row in chars)


def color_pixels(data, max_iter):
    """Colour shades into packed ``0xAABBGGRR`` values with a smooth palette."""
    values = np.asarray(data, dtype=np.uint8)
    x = (values / float(max_iter)).astype(np.float32)
    one_minus = np.float32(1.0) - x

    def channel(expr):
        return np.clip(expr, 0, 255).astype(np.uint32)

    r = channel(np.float32(9) * one_minus * x * x * x * np.float32(255))
    g = channel(np.float32(15) * one_minus * one_minus * x * x * np.float32(255))
    b = channel(np.float32(8.5) * one_minus * one_minus * one_minus * x * np.float32(255))
    in_set = values == 0
    r[in_set] = 0
    g[in_set] = 0
    b[in_set] = 0
    return _OPAQUE | (b << 16) | (g << 8) | r


def grayscale_pixels(data):
    """Pack shades into opaque grey ``0xAARRGGBB`` values."""
    v = np.asarray(data, dtype=np.uint8).astype(np.uint32)
    return _OPAQUE | (v << 16) | (v << 8) | v


def show(data):
    """Display the image in grey in a window until it is closed."""
    import pygame

    values = np.asarray(data, dtype=np.uint8)
    height, width = values.shape
    rgb = np.repeat(values[:, :, np.newaxis], 3, axis=2).transpose(1, 0, 2)
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("window")
        surface = pygame.surfarray.make_surface(rgb)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()