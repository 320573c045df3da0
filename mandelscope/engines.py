"""Escape-time Mandelbrot engines over the region [-2, 1] x [-1.75, 1.75].

Every engine returns a ``(height, width)`` array of ``uint8`` shades, where 0
marks a point that is taken to belong to the set.  The engines differ in how
they lay out the sample grid and how they count iterations.
"""

from __future__ import annotations

from fractions import Fraction
from itertools import accumulate, repeat

import numpy as np

MIN_X = -2.0
MAX_X = 1.0
MIN_Y = -1.75
MAX_Y = 1.75
ESCAPE_RADIUS_SQUARED = 4.0
MAX_SHADE = 255.0


def map_range(x, in_min, in_max, out_min, out_max):
    """Linearly map ``x`` from ``[in_min, in_max]`` onto ``[out_min, out_max]``."""
    return out_min + (x - in_min) * (out_max - out_min) / (in_max - in_min)


def _validate(width: int, height: int, max_iter: int) -> None:
    if width < 1 or height < 1:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    if max_iter < 1:
        raise ValueError(f"max_iter must be at least 1, got {max_iter}")


def _stepped(start: float, step: float, count: int) -> np.ndarray:
    """Coordinates reached by repeatedly adding ``step`` to ``start``."""
    values = accumulate(repeat(step, count - 1), initial=start)
    return np.fromiter(values, dtype=np.float64, count=count)


def _fused_multiply_add(a: float, b: float, c: float) -> float:
    """``a * b + c`` with a single rounding."""
    return float(Fraction(a) * Fraction(b) + Fraction(c))


def _escape_iterations(xs: np.ndarray, ys: np.ndarray, iterations: int) -> np.ndarray:
    """1-based iteration at which each grid point escapes, or 0 if it never does."""
    grid_r, grid_i = np.meshgrid(xs, ys)
    cr = grid_r.ravel().copy()
    ci = grid_i.ravel().copy()
    result = np.zeros(cr.size, dtype=np.int64)
    active = np.arange(cr.size)
    r = cr.copy()
    i = ci.copy()
    for n in range(1, iterations + 1):
        if active.size == 0:
            break
        a = r * r - i * i + cr
        i = 2.0 * r * i + ci
        r = a
        escaped = r * r + i * i > ESCAPE_RADIUS_SQUARED
        result[active[escaped]] = n
        keep = ~escaped
        active, r, i, cr, ci = active[keep], r[keep], i[keep], cr[keep], ci[keep]
    return result.reshape(len(ys), len(xs))


def _mapped_axes(width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
    xs = map_range(np.arange(width, dtype=np.float64), 0.0, float(width), MIN_X, MAX_X)
    ys = map_range(np.arange(height, dtype=np.float64), 0.0, float(height), MIN_Y, MAX_Y)
    return xs, ys


def _stepped_axes(width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
    dx0 = abs(MIN_X - MAX_X) / width
    dy0 = abs(MIN_Y - MAX_Y) / height
    return _stepped(MIN_X, dx0, width), _stepped(MIN_Y, dy0, height)


def _shade_one_based(counts: np.ndarray, max_iter: int, scale) -> np.ndarray:
    """Shade escape counts that start at 1; in-set and last-iteration points become 0."""
    shades = scale(counts.astype(np.float64))
    shades[(counts == 0) | (counts == max_iter)] = 0.0
    return shades.astype(np.uint8)


def _shade_zero_based(counts: np.ndarray, max_iter: int) -> np.ndarray:
    """Shade counts of completed iterations before escape; ``max_iter`` means in-set."""
    completed = np.where(counts > 0, counts - 1, max_iter)
    ratio = MAX_SHADE / max_iter
    shades = np.where(completed == max_iter, 0.0, completed * ratio)
    return shades.astype(np.uint8)


def compute_basic(width, height, max_iter):
    """Reference engine: grid and shades computed through ``map_range``."""
    _validate(width, height, max_iter)
    xs, ys = _mapped_axes(width, height)
    counts = _escape_iterations(xs, ys, max_iter)
    return _shade_one_based(
        counts, max_iter, lambda c: map_range(c, 0.0, float(max_iter), 0.0, MAX_SHADE)
    )


def compute_simple_optimised(width, height, max_iter):
    """Same sampling as the reference engine with the simplified square step."""
    _validate(width, height, max_iter)
    xs, ys = _mapped_axes(width, height)
    counts = _escape_iterations(xs, ys, max_iter)
    return _shade_one_based(
        counts, max_iter, lambda c: map_range(c, 0.0, float(max_iter), 0.0, MAX_SHADE)
    )


def compute_advanced_optimised(width, height, max_iter):
    """Grid and shades computed from precalculated ratios."""
    _validate(width, height, max_iter)
    shade_ratio = MAX_SHADE / max_iter
    xs = MIN_X + np.arange(width, dtype=np.float64) * (3.0 / width)
    ys = MIN_Y + np.arange(height, dtype=np.float64) * (3.5 / height)
    counts = _escape_iterations(xs, ys, max_iter)
    return _shade_one_based(counts, max_iter, lambda c: c * shade_ratio)


def compute_advanced_optimised2(width, height, max_iter):
    """Rows advance by a fixed step; each column reuses the previous column's x.

    The first two columns both sample ``x = -2``, so the image is shifted by one
    column relative to the other engines.
    """
    _validate(width, height, max_iter)
    shade_ratio = MAX_SHADE / max_iter
    dx0 = abs(MIN_X - MAX_X) / width
    dy0 = abs(MIN_Y - MAX_Y) / height
    columns = [MIN_X, *(_fused_multiply_add(float(jx), dx0, MIN_X) for jx in range(width - 1))]
    xs = np.array(columns, dtype=np.float64)
    ys = _stepped(MIN_Y, dy0, height)
    counts = _escape_iterations(xs, ys, max_iter)
    return _shade_one_based(counts, max_iter, lambda c: c * shade_ratio)


def compute_advanced_optimised3(width, height, max_iter):
    """Stepped grid; shade counts the iterations completed before escape."""
    _validate(width, height, max_iter)
    xs, ys = _stepped_axes(width, height)
    counts = _escape_iterations(xs, ys, max_iter)
    return _shade_zero_based(counts, max_iter)


def compute_advanced_optimised4(width, height, max_iter):
    """Stepped grid; iterates until escape or ``max_iter`` completed iterations."""
    _validate(width, height, max_iter)
    xs, ys = _stepped_axes(width, height)
    counts = _escape_iterations(xs, ys, max_iter + 1)
    return _shade_zero_based(counts, max_iter)