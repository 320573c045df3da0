"""Helpers for inspecting and comparing engine output."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

TOLERANCE = 4
DETAIL_LIMIT = 1000


def format_memory(data, amount):
    """The first ``amount`` values written as decimals with no separator."""
    values = np.asarray(data).ravel()[:amount]
    return "".join(str(int(v)) for v in values)


@dataclass
class Comparison:
    """Differences between a reference image and an estimate of it."""

    total_pixels: int
    diff_pixels: int
    total_offset: int = 0
    max_overestimate: int = 0
    max_overestimate_actual: int = 0
    max_underestimate: int = 0
    max_underestimate_actual: int = 0
    diffs: list[tuple[int, int]] = field(default_factory=list)

    @property
    def percent(self) -> float:
        return self.diff_pixels * 100.0 / self.total_pixels

    @property
    def average_offset(self) -> float:
        return self.total_offset / self.diff_pixels if self.diff_pixels else 0.0

    def report(self):
        """The comparison as printable lines joined by newlines."""
        lines = [
            f"{self.diff_pixels}/{self.total_pixels} pixels diff: {self.percent:g} % "
        ]
        if self.diff_pixels:
            if self.diff_pixels < DETAIL_LIMIT:
                lines.extend(f"diff: av: {actual} est: {estimate}" for actual, estimate in self.diffs)
            lines.append(f"total offset : {self.total_offset}")
            lines.append(
                f"max overestimate: {self.max_overestimate} "
                f"actuall value: {self.max_overestimate_actual}"
            )
            lines.append(
                f"max underestimate: {self.max_underestimate}"
                f"actuall Value: {self.max_underestimate_actual}"
            )
            lines.append(f"avg. offset  : {self.average_offset:g}")
        return "\n".join(lines)


def compare_algorithms(base, compare, width=1920, height=1080, max_iter=100):
    """Run two engines on the same image and measure where they disagree."""
    reference = np.asarray(base(width, height, max_iter), dtype=np.int32).ravel()
    estimate = np.asarray(compare(width, height, max_iter), dtype=np.int32).ravel()
    differs = np.abs(reference - estimate) > TOLERANCE
    result = Comparison(total_pixels=width * height, diff_pixels=int(differs.sum()))

    for actual, est in zip(reference[differs].tolist(), estimate[differs].tolist()):
        offset = est - actual
        result.total_offset += abs(offset)
        if offset > result.max_overestimate:
            result.max_overestimate = offset
            result.max_overestimate_actual = actual
        elif -offset > result.max_underestimate:
            result.max_underestimate = -offset
            result.max_underestimate_actual = est
        result.diffs.append((actual, est))
    return result


def scramble(width, height, seed=None):
    """A ``(height, width)`` image of random shades."""
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=(height, width), dtype=np.uint8)