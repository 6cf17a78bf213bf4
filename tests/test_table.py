import pytest

from consoleview.table import TableListState, table_view_controls
from consoleview.styles import Styles

HEADER = ("ID", "Name", "Total")


class Row:
    def __init__(self, name):
        self.name = name


def sort_for(column):
    return None if column == 1 else column


def make_state():
    return TableListState(HEADER, sort_for, 0)


def test_empty_scroll_clears_selection():
    state = make_state()
    state.scroll_next()
    assert state.selected is None
    assert len(state) == 0


def test_scroll_wraps():
    rows = [Row(n) for n in "abc"]
    state = make_state()
    state.extend(rows)
    state.scroll_prev()
    assert state.selected == 2
    state.scroll_next()
    assert state.selected == 0
    state.scroll_to_last()
    assert state.selected == 2


def test_gg_scrolls_to_first():
    rows = [Row(n) for n in "abc"]
    state = make_state()
    state.extend(rows)
    state.key_input("G")
    assert state.selected == 2
    state.key_input("g")
    assert state.selected == 2
    state.key_input("g")
    assert state.selected == 0


def test_column_selection_wraps_and_updates_sort():
    state = make_state()
    state.key_input("left")
    assert state.selected_column == len(HEADER) - 1
    assert state.sort_by == len(HEADER) - 1
    state.key_input("l")
    assert state.selected_column == 0
    state.key_input("l")
    assert state.selected_column == 1
    assert state.sort_by == 0  # column 1 is not sortable


def test_invert_sort():
    state = make_state()
    state.key_input("i")
    assert state.sort_descending is True
    state.key_input("i")
    assert state.sort_descending is False


def test_selected_item_respects_order():
    rows = [Row(n) for n in "abc"]
    state = make_state()
    state.extend(rows)
    state.scroll_to_first()
    assert state.selected_item() is rows[2]
    state.sort_descending = True
    assert state.selected_item() is rows[0]


def test_dead_rows_are_dropped():
    rows = [Row(n) for n in "abc"]
    state = make_state()
    state.extend(rows)
    del rows[1]
    state.retain_alive()
    assert len(state) == 2
    assert [ref().name for ref in state.sorted_items] == ["a", "c"]


def test_bad_default_column():
    with pytest.raises(ValueError):
        TableListState(HEADER, sort_for, 5)


def test_view_controls():
    controls = table_view_controls()
    assert [c.action for c in controls][-1] == "scroll to bottom"
    assert controls[2].to_line(Styles(utf8=True), 0).plain() == "view details = \u21B5"