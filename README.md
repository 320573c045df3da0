# mandelscope

Computes escape-time images of the Mandelbrot set over the region
x in [-2, 1], y in [-1.75, 1.75]. Each image is a `height × width` numpy
array of `uint8`. A point that never escaped within the iteration limit gets
0. Otherwise it gets its escape iteration scaled into 0–255.

The package has several engines that compute the same image in different
ways. There is the plain escape-time loop and several arithmetic variants of
it. There are also two heuristic engines that stop early on points that
appear to converge or to cycle. A comparison tool reports how far one engine
drifts from another.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Command line

```
mandelscope [ITERATIONS] [MODE] [COUNT] [VIEW]
```

The command computes a 1920×1080 image with the cycle-detecting engine
(`compute_cycle_detect`). After each computation it prints how long it took,
in microseconds. All arguments are positional and optional.

- **ITERATIONS** sets the iteration limit. With no arguments the limit is
  100.
  - If the argument starts with an integer, that integer is the limit. For
    example, `500` and `500x` both give 500.
  - If it starts with `r`, or does not start with an integer, the limit is
    1000.
  - If it starts with `B`, the command runs in benchmark mode. It computes
    the image once with a limit of 1000 and prints no timing. It then runs
    `compare_algorithms` on the basic engine and the cycle-detecting engine
    at 1920×1080 with 100 iterations, and prints the report. In benchmark
    mode the other arguments are ignored.
  - A limit below 1 makes the command print an error and exit with status 2.
- **MODE** and **COUNT**: when MODE starts with `a`, the image is computed
  COUNT times and each run is timed.
- The result is drawn in one of two ways:
  - An ASCII picture, downscaled by 32, is printed when VIEW starts with `r`.
    It is also printed when MODE starts with `r` and neither MODE nor VIEW
    has `v` as its second letter.
  - Otherwise, if MODE or VIEW has `v` as its second letter, a window opens
    and shows the image in grey until it is closed.

Examples:

```
mandelscope 200 r        # limit 200, ASCII picture
mandelscope 200 a 5 r    # compute five times, then ASCII picture
mandelscope 200 rv       # limit 200, grey window
mandelscope B            # benchmark and comparison report
```

The command can also be run as `python -m mandelscope.cli`.

## Library use

```python
from mandelscope.engines import compute_basic
from mandelscope.detect import compute_cycle_detect
from mandelscope.render import render_ascii
from mandelscope.utils import compare_algorithms

image = compute_basic(320, 180, 100)
print(render_ascii(image, 8))

comparison = compare_algorithms(compute_basic, compute_cycle_detect, 320, 180, 100)
print(comparison.report())
```

### Engines

Every engine takes `(width, height, max_iter)` and returns a
`height × width` array of `uint8`. It raises `ValueError` if the size or the
limit is below 1.

`mandelscope.engines` contains these functions:

- `compute_basic`: the reference engine. The grid and the shades are both
  computed through `map_range(x, in_min, in_max, out_min, out_max)`.
- `compute_simple_optimised`: the same sampling as `compute_basic`.
- `compute_advanced_optimised`: the grid and shades come from precalculated
  ratios.
- `compute_advanced_optimised2`: the grid advances in fixed steps. The first
  two columns both sample x = -2, so the image is shifted by one column.
- `compute_advanced_optimised3` and `compute_advanced_optimised4`: the grid
  advances in fixed steps, and the shade counts the iterations completed
  before escape.

`mandelscope.detect` contains these functions:

- `compute_convergence_detect`: a point is shaded 0 once the distance
  between consecutive orbit points has shrunk often enough, on balance. The
  threshold is `max_iter * 0.05`.
- `compute_cycle_detect`: visits pixels in raster order. The first orbit
  points of each converging point are recorded on a grid ten times finer
  than the image. Later points that land on a recorded cell stop early.

### Rendering

`mandelscope.render` contains these functions:

- `block_max(data, block_x, block_y, block_width, block_height)` returns the
  largest value in a block.
- `downscale(data, scale)` shrinks an image by taking the maximum of each
  block. It raises `ValueError` if `scale` is larger than the image.
- `pre_render(data)` maps 0 to `.` and other values to one of `, : o O @ #`,
  in steps of 43.
- `render_ascii(data, scale=32)` combines the two and returns the picture as
  text.
- `grayscale_pixels(data)` packs values into opaque grey `0xAARRGGBB`
  integers.
- `color_pixels(data, max_iter)` packs values into `0xAABBGGRR` integers
  using a smooth palette.
- `show(data)` opens a pygame window that shows the image in grey until the
  window is closed.

### Utilities

`mandelscope.utils` contains these functions:

- `format_memory(data, amount)` writes the first `amount` values as decimal
  digits with no separator.
- `scramble(width, height, seed=None)` returns an image of random values.
- `compare_algorithms(base, compare, width=1920, height=1080, max_iter=100)`
  runs two engines and returns a `Comparison`. A `Comparison` counts the
  pixels that differ by more than 4. It also sums their offsets and records
  the largest overestimate and the largest underestimate. `report()` formats
  these results as text, and lists each differing pixel when there are fewer
  than 1000.

## Limitations

- The region [-2, 1] × [-1.75, 1.75] is fixed. There is no zoom and no
  panning.
- The command always computes 1920×1080 images with the cycle-detecting
  engine. Choosing another engine is possible only through the library.
- The window shows the image in grey only. `color_pixels` produces coloured
  pixel data, but nothing displays it.
- Images cannot be saved to files.