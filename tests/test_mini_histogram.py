import pytest

from consoleview.mini_histogram import NINE_LEVELS, MiniHistogram, bar_heights
from consoleview.timefmt import format_duration_debug


def test_bar_heights_scale_to_eighths():
    assert bar_heights([0, 4, 8], 1, 8) == [0, 4, 8]


def test_bar_heights_small_values_get_one_eighth():
    assert bar_heights([1, 100], 1, 100) == [1, 8]


def test_bar_heights_zero_max_is_all_empty():
    assert bar_heights([5, 7], 4, 0) == [0, 0]


def test_bar_heights_never_exceed_area():
    data = [3, 9, 27, 81]
    heights = bar_heights(data, 5, max(data))
    assert max(heights) == 5 * 8
    assert all(h >= 1 for h in heights)


def test_render_without_samples_is_empty():
    assert MiniHistogram().render(30, 5) == []


def test_render_with_no_height_is_empty():
    assert MiniHistogram(values=[1, 2, 3]).render(30, 0) == []


def test_render_has_requested_shape():
    rows = MiniHistogram(values=[10, 20, 30, 40]).render(25, 6)
    assert len(rows) == 6
    assert all(len(row) == 25 for row in rows)


def test_render_labels_and_bars_for_single_bucket():
    rows = MiniHistogram(values=[1000, 1000, 1000]).render(20, 4)
    assert rows[0][0] == "3"
    label = format_duration_debug(1000, 4)
    assert rows[-1].endswith(label)
    assert rows[-1][1:1 + len(label)] == label
    for row in rows[:-1]:
        assert row[1] == NINE_LEVELS[8]
        assert row[2] == " "


def test_render_duration_precision_applies_to_labels():
    rows = MiniHistogram(values=[2500, 7500], duration_precision=1).render(30, 4)
    assert rows[-1].endswith(format_duration_debug(7500, 1))


def test_render_outliers_note():
    chart = MiniHistogram(values=[1, 2, 3], high_outliers=2, highest_outlier=5_000_000)
    rows = chart.render(40, 5)
    assert rows[-1].endswith("2 outliers (highest: " + format_duration_debug(5_000_000) + ")")
    assert rows[-2].endswith(format_duration_debug(3, 4))


def test_render_outliers_without_highest_raises():
    with pytest.raises(ValueError):
        MiniHistogram(values=[1], high_outliers=1).render(40, 5)


def test_negative_samples_rejected():
    with pytest.raises(ValueError):
        MiniHistogram(values=[-1, 5]).render(30, 4)


def test_explicit_max_lowers_bars():
    full = MiniHistogram(values=[1000, 1000]).render(20, 4)
    capped = MiniHistogram(values=[1000, 1000], max=8).render(20, 4)
    assert full[0][1] == NINE_LEVELS[8]
    assert capped[0][1] == " "
    assert capped[2][1] != " "