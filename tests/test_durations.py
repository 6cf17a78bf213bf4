import pytest

from consoleview.durations import (
    MIN_HISTOGRAM_BLOCK_WIDTH,
    PERCENTILES,
    percentile_lines,
    split_durations_area,
)
from consoleview.styles import Styles
from consoleview.text import Modifier


def test_no_histogram_without_utf8():
    assert split_durations_area(200, Styles(utf8=False)) == (200, None)


def test_fixed_percentiles_width_is_used():
    assert split_durations_area(100, Styles(utf8=True), "Poll", 25) == (25, 75)


@pytest.mark.parametrize("width", [60, 100, 250])
def test_split_fills_width(width):
    first, second = split_durations_area(width, Styles(utf8=True))
    assert first + second == width
    assert second >= MIN_HISTOGRAM_BLOCK_WIDTH


def test_long_title_widens_percentiles():
    title = "Sched Times Percentiles"
    first, _ = split_durations_area(100, Styles(utf8=True), title)
    assert first == len(title) + 2


def test_too_narrow_drops_histogram():
    assert split_durations_area(20, Styles(utf8=True)) == (20, None)


def test_percentile_lines_none_is_empty():
    assert percentile_lines(None, Styles()) == []


def test_percentile_lines_headings_in_order():
    lines = percentile_lines(list(range(1, 101)), Styles())
    assert len(lines) == len(PERCENTILES)
    assert [line.spans[0].content for line in lines] == [
        f"p{p}: " for p in PERCENTILES
    ]
    assert all(Modifier.BOLD in line.spans[0].style.add_modifiers for line in lines)


def test_percentile_values_nearest_rank():
    styles = Styles()
    lines = percentile_lines(list(range(1, 101)), styles)
    for percentile, line in zip(PERCENTILES, lines):
        assert line.spans[1] == styles.time_units(percentile, 2)


def test_percentile_median_text():
    lines = percentile_lines([50] * 4, Styles())
    assert lines[2].plain() == "p50: 50.00ns"


def test_empty_samples_are_zero():
    styles = Styles()
    lines = percentile_lines([], styles)
    assert all(line.spans[1] == styles.time_units(0, 2) for line in lines)


def test_unsorted_input_gives_same_result():
    styles = Styles()
    ordered = percentile_lines([5, 10, 15, 20], styles)
    shuffled = percentile_lines([20, 5, 15, 10], styles)
    assert [line.plain() for line in ordered] == [line.plain() for line in shuffled]