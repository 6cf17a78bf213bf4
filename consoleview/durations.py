"""Duration percentiles and the layout of the percentiles/histogram pair."""

from __future__ import annotations

import math
from typing import Sequence

from consoleview.styles import Styles
from consoleview.text import Line, bold

# Wide enough for a legend such as "0647.17µs  909.31µs" plus borders.
MIN_HISTOGRAM_BLOCK_WIDTH = 22

# Long enough for a single line such as "p99: 544.77µs".
_MIN_PERCENTILES_WIDTH = 13
_BORDER_WIDTH = 2

_DUR_LIST_PRECISION = 2

PERCENTILES: tuple[int, ...] = (10, 25, 50, 75, 90, 95, 99)


def split_durations_area(
    width: int,
    styles: Styles,
    percentiles_title: str = "Percentiles",
    percentiles_width: int = 0,
) -> tuple[int, int | None]:
    """Widths of the percentiles block and of the histogram block, if one fits.

    The histogram needs UTF-8 and at least MIN_HISTOGRAM_BLOCK_WIDTH columns
    beside the percentiles. A percentiles width of 0 sizes it to the title.
    """
    if not styles.utf8:
        return width, None
    if percentiles_width <= 0:
        percentiles_width = (
            max(len(percentiles_title), _MIN_PERCENTILES_WIDTH) + _BORDER_WIDTH
        )
    if width < percentiles_width + MIN_HISTOGRAM_BLOCK_WIDTH:
        return width, None
    return percentiles_width, width - percentiles_width


def _value_at_percentile(ordered: Sequence[int], percentile: int) -> int:
    if not ordered:
        return 0
    rank = max(math.ceil(percentile / 100 * len(ordered)), 1)
    return ordered[rank - 1]


def percentile_lines(values: Sequence[int] | None, styles: Styles) -> list[Line]:
    """One line per standard percentile of the samples (nanoseconds), e.g. `p50: 1.20ms`."""
    if values is None:
        return []
    ordered = sorted(values)
    return [
        Line(
            [
                bold(f"p{percentile:>2}: "),
                styles.time_units(
                    _value_at_percentile(ordered, percentile), _DUR_LIST_PRECISION
                ),
            ]
        )
        for percentile in PERCENTILES
    ]