"""Command line entry point: time an engine, optionally benchmark and draw."""

from __future__ import annotations

import enum
import re
import sys
import time
from dataclasses import dataclass

from mandelscope.detect import compute_cycle_detect
from mandelscope.engines import compute_basic
from mandelscope.render import render_ascii, show
from mandelscope.utils import compare_algorithms

WIDTH = 1920
HEIGHT = 1080
DEFAULT_MAX_ITER = 100
FALLBACK_MAX_ITER = 1000
BENCHMARK_MAX_ITER = 10000

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1


class RenderMode(enum.Enum):
    ASCII = "ascii"
    WINDOW = "window"


@dataclass
class Options:
    """What one run of the program does."""

    max_iter: int = DEFAULT_MAX_ITER
    benchmark: bool = False
    render_count: int = 1
    render_mode: RenderMode | None = None
    width: int = WIDTH
    height: int = HEIGHT


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if not match:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {value}")
    return value


def _char(args: list[str], index: int, position: int) -> str:
    if index < len(args) and position < len(args[index]):
        return args[index][position]
    return ""


def parse_args(argv):
    """Read options from positional arguments (program name excluded)."""
    args = list(argv)
    options = Options()
    if not args:
        return options

    options.benchmark = _char(args, 0, 0) == "B"
    if options.benchmark:
        options.max_iter = BENCHMARK_MAX_ITER
    if _char(args, 0, 0) != "r" and not options.benchmark:
        try:
            options.max_iter = _leading_int(args[0])
        except ValueError:
            options.max_iter = FALLBACK_MAX_ITER
    else:
        options.max_iter = FALLBACK_MAX_ITER

    if len(args) >= 2 and not options.benchmark:
        if _char(args, 1, 0) == "a" and len(args) >= 3:
            try:
                options.render_count = _leading_int(args[2])
            except ValueError:
                pass
        if _char(args, 3, 0) == "r" or (
            _char(args, 1, 0) == "r" and _char(args, 3, 1) != "v" and _char(args, 1, 1) != "v"
        ):
            options.render_mode = RenderMode.ASCII
        elif _char(args, 3, 1) == "v" or _char(args, 1, 1) == "v":
            options.render_mode = RenderMode.WINDOW
    return options


def main(argv=None):
    """Run the program; returns the exit status."""
    options = parse_args(sys.argv[1:] if argv is None else argv)
    image = None
    try:
        for _ in range(options.render_count):
            start = time.perf_counter_ns()
            image = compute_cycle_detect(options.width, options.height, options.max_iter)
            elapsed = (time.perf_counter_ns() - start) // 1000
            if not options.benchmark:
                print(elapsed)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 2

    if options.benchmark:
        print(compare_algorithms(compute_basic, compute_cycle_detect).report())

    if image is not None and options.render_mode is RenderMode.ASCII:
        print(render_ascii(image))
    elif image is not None and options.render_mode is RenderMode.WINDOW:
        show(image)
    return 0


if __name__ == "__main__":
    sys.exit(main())