"""Colour palettes and the styling of durations and table decorations."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from consoleview.text import Color, Modifier, Span, Style
from consoleview.timefmt import NANOS_PER_SEC, format_duration_debug

_MINUTE = 60
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR


class Palette(enum.Enum):
    """How many colours the terminal can show."""

    NO_COLORS = "off"
    ANSI8 = "8"
    ANSI16 = "16"
    ANSI256 = "256"
    ALL = "all"

    @classmethod
    def parse(cls, text: str) -> Palette:
        value = text.strip()
        if value == "0" or value.lower() == "off":
            return cls.NO_COLORS
        if value.lower() == "all":
            return cls.ALL
        for palette in (cls.ANSI8, cls.ANSI16, cls.ANSI256):
            if value == palette.value:
                return palette
        raise ValueError("invalid color palette")


class DurationKind(enum.Enum):
    """Which units a formatted duration uses."""

    DAYS = enum.auto()
    DAYS_HOURS = enum.auto()
    HOURS_MINUTES = enum.auto()
    MINUTES_SECONDS = enum.auto()
    DEBUG = enum.auto()


@dataclass(frozen=True)
class FormattedDuration:
    kind: DurationKind
    text: str


@dataclass(frozen=True)
class ColorToggles:
    """Which elements are coloured."""

    color_durations: bool = True
    color_terminated: bool = True


_ANSI_KIND_COLORS = {
    DurationKind.DAYS: Color.BLUE,
    DurationKind.DAYS_HOURS: Color.BLUE,
    DurationKind.HOURS_MINUTES: Color.CYAN,
    DurationKind.MINUTES_SECONDS: Color.GREEN,
}
_ANSI_SUFFIX_COLORS = (
    ("ps", Color.GRAY),
    ("ns", Color.GRAY),
    ("µs", Color.MAGENTA),
    ("us", Color.MAGENTA),
    ("ms", Color.RED),
    ("s", Color.YELLOW),
)
_INDEXED_KIND_COLORS = {
    DurationKind.DAYS: Color.indexed(33),
    DurationKind.DAYS_HOURS: Color.indexed(33),
    DurationKind.HOURS_MINUTES: Color.indexed(39),
    DurationKind.MINUTES_SECONDS: Color.indexed(45),
}
_INDEXED_SUFFIX_COLORS = (
    ("ps", Color.indexed(40)),
    ("ns", Color.indexed(41)),
    ("µs", Color.indexed(42)),
    ("us", Color.indexed(42)),
    ("ms", Color.indexed(43)),
    ("s", Color.indexed(44)),
)
_ANSI8_FALLBACK = {
    Color.LIGHT_RED: Color.RED,
    Color.LIGHT_GREEN: Color.GREEN,
    Color.LIGHT_YELLOW: Color.YELLOW,
    Color.LIGHT_BLUE: Color.BLUE,
    Color.LIGHT_MAGENTA: Color.MAGENTA,
}


def _duration_style(formatted: FormattedDuration, kind_colors, suffix_colors) -> Style:
    if formatted.kind is DurationKind.DEBUG:
        for suffix, color in suffix_colors:
            if formatted.text.endswith(suffix):
                return Style().fg(color)
        return Style()
    return Style().fg(kind_colors[formatted.kind])


@dataclass
class Styles:
    """Styling decisions for the current palette, toggles and UTF-8 support."""

    palette: Palette = Palette.NO_COLORS
    toggles: ColorToggles = field(default_factory=ColorToggles)
    utf8: bool = False

    def if_utf8(self, utf8: str, ascii: str) -> str:
        return utf8 if self.utf8 else ascii

    def time_units(self, nanos: int, prec: int, width: int | None = None) -> Span:
        """A span holding the duration, coloured by its unit when enabled.

        A width of None or 0 adds no padding; otherwise the text is
        right-aligned to that width.
        """
        formatted = self.duration_text(nanos, width or 0, prec)
        if not self.toggles.color_durations or self.palette is Palette.NO_COLORS:
            return Span(formatted.text)
        if self.palette in (Palette.ANSI8, Palette.ANSI16):
            style = _duration_style(formatted, _ANSI_KIND_COLORS, _ANSI_SUFFIX_COLORS)
        else:
            style = _duration_style(formatted, _INDEXED_KIND_COLORS, _INDEXED_SUFFIX_COLORS)
        return Span(formatted.text, style)

    def duration_text(self, nanos: int, width: int, prec: int) -> FormattedDuration:
        secs = nanos // NANOS_PER_SEC
        leading = max(width - 4, 0)
        if secs >= _DAY * 100:
            return FormattedDuration(DurationKind.DAYS, f"{str(secs // _DAY).rjust(width)}d")
        if secs >= _DAY:
            hours = secs // _HOUR
            return FormattedDuration(
                DurationKind.DAYS_HOURS,
                f"{str(hours // 24).rjust(leading)}d{hours % 24:02d}h",
            )
        if secs >= _HOUR:
            mins = secs // _MINUTE
            return FormattedDuration(
                DurationKind.HOURS_MINUTES,
                f"{str(mins // 60).rjust(leading)}h{mins % 60:02d}m",
            )
        if secs >= _MINUTE:
            return FormattedDuration(
                DurationKind.MINUTES_SECONDS,
                f"{str(secs // 60).rjust(leading)}m{secs % 60:02d}s",
            )
        text = format_duration_debug(nanos, prec, width)
        if not self.utf8:
            offset = text.find("µs")
            if offset >= 0:
                text = text[:offset] + "us"
        return FormattedDuration(DurationKind.DEBUG, text)

    def terminated(self) -> Style:
        if not self.toggles.color_terminated:
            return Style()
        return Style().add_modifier(Modifier.DIM)

    def fg(self, color: Color) -> Style:
        available = self.color(color)
        return Style().fg(available) if available is not None else Style()

    def warning_wide(self) -> Span:
        return Span(
            self.if_utf8("\u26A0 ", "/!\\ "),
            self.fg(Color.LIGHT_YELLOW).add_modifier(Modifier.BOLD),
        )

    def warning_narrow(self) -> Span:
        return Span(
            self.if_utf8("\u26A0 ", "! "),
            self.fg(Color.LIGHT_YELLOW).add_modifier(Modifier.BOLD),
        )

    def selected(self, value: str) -> Span:
        cyan = self.color(Color.CYAN)
        if cyan is not None:
            style = Style().fg(cyan)
        else:
            style = Style().remove_modifier(Modifier.REVERSED)
        return Span(value, style)

    def ascending(self, value: str) -> Span:
        return self.selected(value + self.if_utf8("▵", "+"))

    def descending(self, value: str) -> Span:
        return self.selected(value + self.if_utf8("▿", "-"))

    def color(self, color: Color) -> Color | None:
        """The colour to use under this palette, or None if it is unavailable."""
        palette = self.palette
        if palette is Palette.NO_COLORS:
            return None
        if palette is Palette.ALL:
            return color
        if palette is Palette.ANSI256:
            return None if color.kind == "rgb" else color
        if color.kind == "rgb" or (palette is Palette.ANSI16 and color.kind == "indexed"):
            return None
        if palette is Palette.ANSI16:
            return color
        return _ANSI8_FALLBACK.get(color, color)