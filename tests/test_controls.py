from consoleview.controls import (
    UNIVERSAL_CONTROLS,
    ControlDisplay,
    Controls,
    KeyDisplay,
    controls_lines,
)
from consoleview.styles import Styles
from consoleview.text import Modifier

SCROLL = ControlDisplay("scroll", (KeyDisplay("up, down", "\u2191\u2193"), KeyDisplay("k, j")))


def test_to_line_ascii():
    line = SCROLL.to_line(Styles(utf8=False), 2)
    assert line.plain() == "  scroll = up, down or k, j"


def test_to_line_utf8_uses_rich_key():
    line = SCROLL.to_line(Styles(utf8=True), 0)
    assert line.plain() == "scroll = \u2191\u2193 or k, j"


def test_keys_are_bold():
    line = SCROLL.to_line(Styles(), 0)
    key_spans = [s for s in line.spans if s.content in ("up, down", "k, j")]
    assert len(key_spans) == 2
    assert all(Modifier.BOLD in s.style.add_modifiers for s in key_spans)


def test_controls_single_line_when_wide():
    controls = Controls([], 200, Styles())
    assert controls.height() == 1
    assert controls.lines[0].plain() == "controls: toggle pause = space, quit = q"


def test_controls_wrap_preserves_text():
    styles = Styles()
    wide = Controls([SCROLL], 500, styles)
    narrow = Controls([SCROLL], 20, styles)
    assert wide.height() == 1
    assert narrow.height() > 1
    assert "".join(l.plain() for l in narrow.lines) == wide.lines[0].plain()


def test_wrapped_lines_start_with_action():
    narrow = Controls([SCROLL], 10, Styles())
    assert narrow.lines[1].plain().startswith("toggle pause")
    assert narrow.lines[0].plain().endswith(", ")


def test_controls_lines_help_listing():
    lines = controls_lines([SCROLL], Styles())
    assert len(lines) == 1 + 1 + len(UNIVERSAL_CONTROLS)
    assert lines[0].plain() == "controls:"
    assert lines[-1].plain() == "  quit = q"