"""Styled text primitives: colours, modifiers, styles, spans and lines."""

from __future__ import annotations

import enum
import unicodedata
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Color:
    """A terminal colour: a named ANSI colour, a 256-colour index or an RGB triple."""

    kind: str
    index: int | None = None
    rgb_value: tuple[int, int, int] | None = None

    @classmethod
    def indexed(cls, index: int) -> Color:
        """A colour from the 256-colour palette."""
        if not 0 <= index <= 255:
            raise ValueError(f"colour index out of range: {index}")
        return cls("indexed", index=index)

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> Color:
        """A true-colour RGB value."""
        for component in (red, green, blue):
            if not 0 <= component <= 255:
                raise ValueError(f"RGB component out of range: {component}")
        return cls("rgb", rgb_value=(red, green, blue))


Color.RESET = Color("reset")
Color.BLACK = Color("black")
Color.RED = Color("red")
Color.GREEN = Color("green")
Color.YELLOW = Color("yellow")
Color.BLUE = Color("blue")
Color.MAGENTA = Color("magenta")
Color.CYAN = Color("cyan")
Color.GRAY = Color("gray")
Color.DARK_GRAY = Color("dark_gray")
Color.LIGHT_RED = Color("light_red")
Color.LIGHT_GREEN = Color("light_green")
Color.LIGHT_YELLOW = Color("light_yellow")
Color.LIGHT_BLUE = Color("light_blue")
Color.LIGHT_MAGENTA = Color("light_magenta")
Color.LIGHT_CYAN = Color("light_cyan")
Color.WHITE = Color("white")


class Modifier(enum.Flag):
    """Text attributes that can be switched on or off."""

    BOLD = enum.auto()
    DIM = enum.auto()
    ITALIC = enum.auto()
    UNDERLINED = enum.auto()
    SLOW_BLINK = enum.auto()
    RAPID_BLINK = enum.auto()
    REVERSED = enum.auto()
    HIDDEN = enum.auto()
    CROSSED_OUT = enum.auto()


_NO_MODIFIERS = Modifier(0)


@dataclass(frozen=True)
class Style:
    """Colours plus modifiers to add and modifiers to remove."""

    foreground: Color | None = None
    background: Color | None = None
    add_modifiers: Modifier = _NO_MODIFIERS
    sub_modifiers: Modifier = _NO_MODIFIERS

    def fg(self, color: Color) -> Style:
        return replace(self, foreground=color)

    def add_modifier(self, modifier: Modifier) -> Style:
        return replace(
            self,
            add_modifiers=self.add_modifiers | modifier,
            sub_modifiers=self.sub_modifiers & ~modifier,
        )

    def remove_modifier(self, modifier: Modifier) -> Style:
        return replace(
            self,
            add_modifiers=self.add_modifiers & ~modifier,
            sub_modifiers=self.sub_modifiers | modifier,
        )


def _char_width(char: str) -> int:
    if unicodedata.combining(char) or unicodedata.category(char) == "Cc":
        return 0
    return 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1


@dataclass(frozen=True)
class Span:
    """A piece of text with a single style."""

    content: str
    style: Style = field(default_factory=Style)

    def width(self) -> int:
        """Display width in terminal cells."""
        return sum(_char_width(char) for char in self.content)


@dataclass
class Line:
    """A sequence of spans shown on one row."""

    spans: list[Span] = field(default_factory=list)

    def width(self) -> int:
        return sum(span.width() for span in self.spans)

    def push_span(self, span: Span) -> None:
        self.spans.append(span)

    def plain(self) -> str:
        """The line's text without styling."""
        return "".join(span.content for span in self.spans)


def bold(text: str) -> Span:
    """A span rendered in bold."""
    return Span(text, Style().add_modifier(Modifier.BOLD))