"""Column widths that grow to fit their content."""

from __future__ import annotations

from typing import TypeVar

_MAX_WIDTH = 100

S = TypeVar("S", bound=str)


class Width:
    """A column width that only grows, capped at 100 characters."""

    def __init__(self, curr: int) -> None:
        self._curr = curr

    def update_str(self, s: S) -> S:
        """Grow to fit the UTF-8 length of `s` and return `s` unchanged."""
        self.update_len(len(s.encode("utf-8")))
        return s

    def update_len(self, length: int) -> None:
        self._curr = min(max(self._curr, length), _MAX_WIDTH)

    def chars(self) -> int:
        return self._curr

    def __repr__(self) -> str:
        return f"Width({self._curr})"