"""Text building blocks for an async task console: styles, tables, controls, warnings and histograms."""

__version__ = "0.1.0"

__all__ = [
    "controls",
    "docs_images",
    "durations",
    "mini_histogram",
    "styles",
    "table",
    "text",
    "timefmt",
    "warnings",
    "widths",
]