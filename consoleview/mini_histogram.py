"""A compact bar chart of a latency histogram, with labels for its extremes."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from consoleview.timefmt import format_duration_debug

NINE_LEVELS: tuple[str, ...] = (" ", "▁", "▂", "▃", "▄", "▅", "▆", "▇", "█")
"""Bar symbols from empty to full, in eighths."""

# The digits of the tallest bucket's count are unknown until the buckets are
# built, so three columns are assumed for the y-axis label.
_ASSUMED_LABEL_WIDTH = 3


@dataclass(frozen=True)
class HistogramMetadata:
    """Figures about a histogram that are shown around the chart."""

    max_value: int = 0
    min_value: int = 0
    max_bucket: int = 0
    high_outliers: int = 0
    highest_outlier: int | None = None


def bar_heights(data: Sequence[int], height: int, max_value: int) -> list[int]:
    """Bar heights in eighths of a row for an area `height` rows tall.

    Any non-zero value gets at least one eighth, however small it is.
    """
    if max_value == 0:
        return [0 for _ in data]
    heights = []
    for value in data:
        scaled = value * height * 8 // max_value
        heights.append(1 if value > 0 and scaled == 0 else scaled)
    return heights


def _chart_data(
    values: Sequence[int],
    width: int,
    high_outliers: int,
    highest_outlier: int | None,
) -> tuple[list[int], HistogramMetadata]:
    if any(value < 0 for value in values):
        raise ValueError("durations cannot be negative")
    high = max(values, default=0)
    low = min(values, default=0)
    step = math.ceil((high - low) / max(width, 1)) + 1

    data: list[int] = []
    if values:
        counts = Counter(value // step for value in values)
        buckets = [counts.get(bucket, 0) for bucket in range(high // step + 1)]
        # Leading empty buckets carry no information.
        first = next(pos for pos, count in enumerate(buckets) if count)
        data = buckets[first:]

    metadata = HistogramMetadata(
        max_value=high,
        min_value=low,
        max_bucket=max(data, default=0),
        high_outliers=high_outliers,
        highest_outlier=highest_outlier,
    )
    return data, metadata


class _Grid:
    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.cells = [[" "] * width for _ in range(height)]

    def put(self, x: int, y: int, text: str) -> None:
        if not 0 <= y < self.height:
            return
        for offset, char in enumerate(text):
            column = x + offset
            if 0 <= column < self.width:
                self.cells[y][column] = char

    def rows(self) -> list[str]:
        return ["".join(row) for row in self.cells]


@dataclass
class MiniHistogram:
    """A small histogram chart of duration samples given in nanoseconds.

    Unlike a plain sparkline, values that are tiny relative to the largest
    bucket are still drawn with the smallest bar.
    """

    values: Sequence[int] | None = None
    high_outliers: int = 0
    highest_outlier: int | None = None
    max: int | None = None
    bar_set: tuple[str, ...] = NINE_LEVELS
    duration_precision: int = 4

    def render(self, width: int, height: int) -> list[str]:
        """The chart as `height` rows of `width` characters; empty if there is nothing to draw."""
        if height < 1 or self.values is None:
            return []
        if self.high_outliers > 0 and self.highest_outlier is None:
            raise ValueError("if there are outliers, the highest should be set")

        data, metadata = _chart_data(
            self.values,
            max(width - _ASSUMED_LABEL_WIDTH, 0),
            self.high_outliers,
            self.highest_outlier,
        )
        max_qty_label = str(metadata.max_bucket)
        max_record_label = format_duration_debug(metadata.max_value, self.duration_precision)
        min_record_label = format_duration_debug(metadata.min_value, self.duration_precision)

        grid = _Grid(width, height)
        self._render_legend(grid, metadata, max_record_label, min_record_label, max_qty_label)

        legend_height = 2 if metadata.high_outliers > 0 else 1
        label_width = len(max_qty_label)
        self._render_bars(
            grid,
            left=label_width,
            bars_width=max(width - label_width, 0),
            bars_height=max(height - legend_height, 0),
            data=data,
        )
        return grid.rows()

    def _render_legend(
        self,
        grid: _Grid,
        metadata: HistogramMetadata,
        max_record_label: str,
        min_record_label: str,
        max_qty_label: str,
    ) -> None:
        labels_row = grid.height - 1
        if metadata.high_outliers > 0:
            outliers = (
                f"{metadata.high_outliers} outliers "
                f"(highest: {format_duration_debug(metadata.highest_outlier)})"
            )
            grid.put(grid.width - len(outliers), grid.height - 1, outliers)
            labels_row = grid.height - 2

        grid.put(0, 0, max_qty_label)
        grid.put(len(max_qty_label), labels_row, min_record_label)
        grid.put(grid.width - len(max_record_label), labels_row, max_record_label)

    def _render_bars(
        self, grid: _Grid, left: int, bars_width: int, bars_height: int, data: list[int]
    ) -> None:
        top = self.max if self.max is not None else max(data, default=1)
        heights = bar_heights(data[:bars_width], bars_height, top)
        for row in reversed(range(bars_height)):
            for column, remaining in enumerate(heights):
                grid.put(left + column, row, self.bar_set[min(remaining, 8)])
                heights[column] = remaining - 8 if remaining > 8 else 0