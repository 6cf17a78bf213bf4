# consoleview

Building blocks for a terminal console that monitors asynchronous tasks and
resources. Everything works in plain text and styled spans, so the pieces can
sit under any terminal drawing layer.

## Modules

- `consoleview.text`: `Color` (named colours such as `Color.CYAN`, plus
  `Color.indexed()` and `Color.rgb()`), `Modifier`, `Style`, `Span` and
  `Line`, and `bold()` for bold spans.
- `consoleview.timefmt`: `format_duration_debug(nanos, precision, width)`
  writes a duration given in nanoseconds in the largest fitting unit of `s`,
  `ms`, `µs` and `ns`, rounded to the given precision and right-aligned to
  the given width.
- `consoleview.styles`: `Palette` (`Palette.parse()` accepts `"0"`, `"off"`,
  `"8"`, `"16"`, `"256"` and `"all"`), `ColorToggles` and `Styles`.
  `Styles.time_units()` formats a duration as days, days and hours, hours and
  minutes, minutes and seconds, or sub-minute units, and colours it by unit
  when the palette and toggles allow. `Styles.color()` maps a colour down to
  what the palette can show, or returns `None`. `Styles` also provides the
  warning glyphs, the selected-column and sort-direction decorations, and the
  dimmed style for terminated rows, each in a UTF-8 or ASCII form.
- `consoleview.widths`: `Width` tracks how wide a column must be; it only
  grows and is capped at 100 characters.
- `consoleview.controls`: `KeyDisplay`, `ControlDisplay`, `Controls` (wraps
  the key bindings of a view plus the universal "toggle pause" and "quit"
  bindings to a given width; `height()` gives the number of rows) and
  `controls_lines()` for a help listing.
- `consoleview.table`: `TableListState` holds weakly referenced rows and
  handles column selection (`left`/`right`, `h`/`l`), inverting the sort
  (`i`), scrolling (`up`/`down`, `k`/`j`, `gg`, `G`) and finding the selected
  row in display order. `table_view_controls()` lists these bindings.
- `consoleview.warnings`: the task checks `SelfWakePercent`, `LostWaker`,
  `NeverYielded`, `AutoBoxedFuture` and `LargeFuture`. Each returns a
  `Verdict` (`OK`, `WARN` or `RECHECK`). `Linter` wraps a check; a warning
  `Lint` it returns keeps `Linter.count()` raised for as long as it is held.
- `consoleview.mini_histogram`: `MiniHistogram(values=...).render(width,
  height)` draws duration samples as rows of bar characters with the largest
  bucket count, the minimum and maximum durations and an outlier note.
  `bar_heights()` computes bar heights in eighths of a row.
- `consoleview.durations`: `split_durations_area()` decides whether a
  histogram fits beside the percentile list, and `percentile_lines()` formats
  the p10 to p99 percentiles of a set of samples.
- `consoleview.docs_images`: checks that images linked from a README exist.

## Example

```python
from consoleview.styles import Palette, Styles

styles = Styles(palette=Palette.parse("256"), utf8=True)
span = styles.time_units(1_500_000, 2, None)
print(span.content)   # 1.50ms
```

## Checking documentation images

The package installs one command, `consoleview-dev`. Run it from the
repository root:

```
consoleview-dev check-docs-images
consoleview-dev check-docs-images --base-dir path/to/repo
```

It reads `tokio-console/README.md` under the base directory, collects the
`assets/...png` paths of the images the README links to, and checks that
each exists under the base directory. It exits with status 1 when the README
links to no images, when any image is missing, or when the README cannot be
read.

## What this package does not do

It does not connect to a running application, collect task or resource
data, or draw an interactive terminal screen. It has no event loop and no
full task, resource or async-op views; it supplies the formatting, layout
decisions, table state and warning checks that such views are built from.

## Tests

```
pip install -e ".[test]"
pytest
```