"""Selection, sorting and scrolling state shared by the table views."""

from __future__ import annotations

import weakref
from typing import Any, Callable, Generic, Iterable, Sequence, TypeVar

from consoleview.controls import ControlDisplay, KeyDisplay

T = TypeVar("T")

LEFT = "left"
RIGHT = "right"
UP = "up"
DOWN = "down"


class TableListState(Generic[T]):
    """The state of a sortable, scrollable list of weakly held rows.

    `sort_for_column` maps a column index to a sort order, or returns None
    when that column cannot be sorted by. Keys passed to `key_input` are
    either one of "left", "right", "up", "down" or a single character.
    """

    def __init__(
        self,
        header: Sequence[str],
        sort_for_column: Callable[[int], Any],
        default_column: int = 0,
    ) -> None:
        if not header:
            raise ValueError("a table needs at least one column")
        if not 0 <= default_column < len(header):
            raise ValueError(f"column out of range: {default_column}")
        self.header = tuple(header)
        self._sort_for_column = sort_for_column
        self.sort_by = sort_for_column(default_column)
        self.selected_column = default_column
        self.sort_descending = False
        self.selected: int | None = None
        self.sorted_items: list[weakref.ref[T]] = []
        self._last_key: str | None = None

    def __len__(self) -> int:
        return len(self.sorted_items)

    def extend(self, items: Iterable[T]) -> None:
        """Add rows; they are held weakly."""
        self.sorted_items.extend(weakref.ref(item) for item in items)

    def retain_alive(self) -> None:
        """Forget rows whose objects no longer exist."""
        self.sorted_items = [ref for ref in self.sorted_items if ref() is not None]

    def key_input(self, key: str) -> None:
        columns = len(self.header)
        if key in (LEFT, "h"):
            self.selected_column = (self.selected_column - 1) % columns
        elif key in (RIGHT, "l"):
            self.selected_column = (self.selected_column + 1) % columns
        elif key == "i":
            self.sort_descending = not self.sort_descending
        elif key in (DOWN, "j"):
            self.scroll_next()
        elif key in (UP, "k"):
            self.scroll_prev()
        elif key == "G":
            self.scroll_to_last()
        elif key == "g" and self._last_key == "g":
            self.scroll_to_first()

        sort_by = self._sort_for_column(self.selected_column)
        if sort_by is not None:
            self.sort_by = sort_by
        self._last_key = key

    def _scroll_with(self, choose: Callable[[int, int], int]) -> None:
        if not self.sorted_items:
            self.selected = None
            return
        current = self.selected if self.selected is not None else 0
        self.selected = choose(len(self.sorted_items), current)

    def scroll_next(self) -> None:
        self._scroll_with(lambda count, i: 0 if i >= count - 1 else i + 1)

    def scroll_prev(self) -> None:
        self._scroll_with(lambda count, i: count - 1 if i == 0 else i - 1)

    def scroll_to_last(self) -> None:
        self._scroll_with(lambda count, _: count - 1)

    def scroll_to_first(self) -> None:
        self._scroll_with(lambda _count, _i: 0)

    def selected_item(self) -> T | None:
        """The row under the cursor, accounting for the display order."""
        if self.selected is None:
            return None
        count = len(self.sorted_items)
        if self.sort_descending:
            index = self.selected
        else:
            index = count - (self.selected + 1)
        if not 0 <= index < count:
            return None
        return self.sorted_items[index]()


def table_view_controls() -> tuple[ControlDisplay, ...]:
    """Controls available in every table view."""
    return (
        ControlDisplay(
            "select column (sort)",
            (KeyDisplay("left, right", "\u2190\u2192"), KeyDisplay("h, l")),
        ),
        ControlDisplay(
            "scroll",
            (KeyDisplay("up, down", "\u2191\u2193"), KeyDisplay("k, j")),
        ),
        ControlDisplay("view details", (KeyDisplay("enter", "\u21B5"),)),
        ControlDisplay("invert sort (highest/lowest)", (KeyDisplay("i"),)),
        ControlDisplay("scroll to top", (KeyDisplay("gg"),)),
        ControlDisplay("scroll to bottom", (KeyDisplay("G"),)),
    )