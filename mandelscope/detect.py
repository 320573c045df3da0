"""Engines that stop early on points judged to converge."""

from __future__ import annotations

import numpy as np

from mandelscope.engines import (
    ESCAPE_RADIUS_SQUARED,
    MAX_SHADE,
    MAX_X,
    MAX_Y,
    MIN_X,
    MIN_Y,
    _stepped,
    _validate,
)

CONVERGENCE_THRESHOLD = 0.05
STORE_LIMIT = 20
PRECISION = 10


def _axes(width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
    dx0 = abs(MIN_X - MAX_X) / width
    dy0 = abs(MIN_Y - MAX_Y) / height
    return _stepped(MIN_X, dx0, width), _stepped(MIN_Y, dy0, height)


def compute_convergence_detect(width, height, max_iter):
    """Escape-time engine that treats points whose steps keep shrinking as in-set.

    A counter goes up when the distance between consecutive orbit points shrinks
    and down when it grows; once it passes ``max_iter * 0.05`` the point is shaded 0.
    """
    _validate(width, height, max_iter)
    xs, ys = _axes(width, height)
    grid_r, grid_i = np.meshgrid(xs, ys)
    cr = grid_r.ravel().copy()
    ci = grid_i.ravel().copy()
    threshold = max_iter * CONVERGENCE_THRESHOLD

    counts = np.zeros(cr.size, dtype=np.int64)
    active = np.arange(cr.size)
    r = cr.copy()
    i = ci.copy()
    old_r = r.copy()
    old_i = i.copy()
    old_dist = np.zeros(cr.size)
    shrinking = np.zeros(cr.size, dtype=np.int64)

    for c in range(max_iter + 1):
        if active.size == 0:
            break
        a = r * r - i * i + cr
        i = 2.0 * r * i + ci
        r = a
        dist = (r - old_r) * (r - old_r) + (i - old_i) * (i - old_i)
        shrinking += (dist < old_dist).astype(np.int64) - (dist > old_dist).astype(np.int64)
        stop = (r * r + i * i > ESCAPE_RADIUS_SQUARED) | (shrinking > threshold) | (c == max_iter)
        counts[active[stop]] = np.where(shrinking[stop] < threshold, c, 0)
        keep = ~stop
        active, cr, ci = active[keep], cr[keep], ci[keep]
        r, i, shrinking = r[keep], i[keep], shrinking[keep]
        old_r, old_i, old_dist = r.copy(), i.copy(), dist[keep]

    ratio = MAX_SHADE / max_iter
    shades = np.where(counts == max_iter, 0.0, counts * ratio)
    return shades.astype(np.uint8).reshape(height, width)


def compute_cycle_detect(width, height, max_iter):
    """Escape-time engine that reuses orbits of earlier points found to converge.

    Pixels are visited in raster order.  When a point runs out of iterations or
    lands on a cell recorded by an earlier converging orbit, the first orbit
    points are recorded on a grid ten times finer than the image.  Points that
    hit a recorded cell get shade ``1 * 255 / max_iter``, points that run out of
    iterations get ``2 * 255 / max_iter``.
    """
    _validate(width, height, max_iter)
    xs, ys = _axes(width, height)
    ratio = MAX_SHADE / max_iter
    store_limit = min(STORE_LIMIT, max_iter)
    fine_cols = width * PRECISION
    fine_rows = height * PRECISION
    span_x = MAX_X - MIN_X
    span_y = MAX_Y - MIN_Y

    orbit = [(0.0, 0.0)] * (max_iter + 1)
    recorded: set[int] = set()
    out = np.zeros((height, width), dtype=np.uint8)

    for row, y0 in enumerate(ys.tolist()):
        for col, x0 in enumerate(xs.tolist()):
            r, i = x0, y0
            c = 0
            converged = False
            while True:
                r, i = r * r - i * i + x0, 2.0 * r * i + y0
                orbit[c] = (r, i)
                ix = int((r - MIN_X) / span_x * width * PRECISION)
                iy = int((i - MIN_Y) / span_y * height * PRECISION)
                if 0 <= ix < fine_cols and 0 <= iy < fine_rows and iy * fine_cols + ix in recorded:
                    converged, c = True, 1
                    break
                if r * r + i * i > ESCAPE_RADIUS_SQUARED:
                    break
                if c == max_iter:
                    converged, c = True, 2
                    break
                c += 1

            out[row, col] = int(c * ratio)
            if converged:
                for orbit_r, orbit_i in orbit[:store_limit]:
                    cell_x = int(int(orbit_r - MIN_X) / span_x * width * PRECISION)
                    cell_y = int(int(orbit_i - MIN_Y) / span_y * height * PRECISION)
                    recorded.add(cell_y * fine_cols + cell_x)
    return out