"""Keyboard control hints shown at the top of each view and in the help popup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from consoleview.styles import Styles
from consoleview.text import Line, Span, bold

_SEPARATOR = ", "


@dataclass(frozen=True)
class KeyDisplay:
    """A key shown to the user.

    `base` is ASCII only; `utf8` is an optional richer rendering used when
    the terminal supports UTF-8.
    """

    base: str
    utf8: str | None = None


@dataclass(frozen=True)
class ControlDisplay:
    """An action and the keys that trigger it."""

    action: str
    keys: tuple[KeyDisplay, ...]

    def to_line(self, styles: Styles, indent: int = 0) -> Line:
        """Render as `<indent><action> = <key> or <key> ...` with bold keys."""
        line = Line([Span(" " * indent), Span(self.action), Span(" = ")])
        for position, key in enumerate(self.keys):
            if position > 0:
                line.push_span(Span(" or "))
            text = key.base if key.utf8 is None else styles.if_utf8(key.utf8, key.base)
            line.push_span(bold(text))
        return line


UNIVERSAL_CONTROLS: tuple[ControlDisplay, ...] = (
    ControlDisplay("toggle pause", (KeyDisplay("space"),)),
    ControlDisplay("quit", (KeyDisplay("q"),)),
)


class Controls:
    """The controls available in a view, wrapped to fit a given width."""

    def __init__(
        self, view_controls: Iterable[ControlDisplay], width: int, styles: Styles
    ) -> None:
        items = [control.to_line(styles, 0) for control in view_controls]
        items.extend(control.to_line(styles, 0) for control in UNIVERSAL_CONTROLS)

        separator = Span(_SEPARATOR)
        lines = [Line([Span("controls: ")])]
        current = lines[-1]
        for position, item in enumerate(items):
            # The first item always goes on the current line, even if it
            # overflows; nothing better can be done with it.
            if position == 0 or current.width() == 0:
                current.spans.extend(item.spans)
                continue

            total = current.width() + separator.width() + item.width()
            current.push_span(separator)
            if total <= width:
                current.spans.extend(item.spans)
            else:
                lines.append(item)
                current = item

        self.lines: list[Line] = lines

    def height(self) -> int:
        """Number of rows the controls occupy."""
        return len(self.lines)


def controls_lines(view_controls: Sequence[ControlDisplay], styles: Styles) -> list[Line]:
    """The help-popup listing: a heading, then one indented line per control."""
    lines = [Line([Span("controls:")])]
    lines.extend(control.to_line(styles, 2) for control in view_controls)
    lines.extend(control.to_line(styles, 2) for control in UNIVERSAL_CONTROLS)
    return lines