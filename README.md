# ezatheme

Building blocks for colourful file listings in a terminal.

## What is in it

- **`ezatheme.style`**: immutable `Style` values with a foreground and
  background colour (`Colour`, `Fixed` for the 256-colour palette, `Rgb` for
  true colour) and attributes set by `bold()`, `dimmed()`, `italic()`,
  `underline()`, `blink()`, `reverse()`, `hidden()` and `strikethrough()`.
  `fg()` and `on()` set the colours, and `paint(text)` wraps text in the ANSI
  escape codes for the style.
- **`ezatheme.lsc`**: `LSColors(text).pairs()` splits a colon-separated
  colour definition into `Pair`s, skipping malformed entries, and
  `Pair.to_style()` turns SGR codes such as `01;38;5;149` into a `Style`.
  Unknown codes are ignored.
- **`ezatheme.ui_styles`**: `UiStyles` holds one style per part of the
  interface, grouped into `FileKinds`, `Permissions`, `Size`, `Users`,
  `Links`, `Git`, `GitRepo`, `SecurityContext` (with `SELinuxContext`) and
  `FileType`, plus per-name and per-extension `FileNameStyle` overrides.
  `UiStyles.plain()` gives a set with no colour at all.
- **`ezatheme.default_theme`**: `default_ui_styles()` is the built-in
  colourful set; `default_theme(fixed)` is the same with size colours from
  `colourful_size(fixed)`, all green when `fixed` is true and graded by
  magnitude otherwise.
- **`ezatheme.codes`**: `set_ls(styles, pair)` and `set_exa(styles, pair)`
  apply a two-letter code (such as `di`, `ex`, `ur`, `da` or `Sn`) to a
  `UiStyles` and return whether the key was a known code.
- **`ezatheme.definitions`**: `Definitions(ls=..., exa=...)` holds the raw
  `LS_COLORS` and `EZA_COLORS` values. `parse_color_vars(colours)` applies
  their UI codes to a `UiStyles`, collects the remaining keys as glob
  patterns into `ExtensionMappings`, and reports whether default file type
  styles should still be used (not when `EZA_COLORS` starts with `reset`).
  `ExtensionMappings.get_style(name)` returns the style of the last matching
  pattern.
- **`ezatheme.theme`**: `ThemeOptions.to_theme(isatty)` builds a `Theme`,
  plain when colours are `UseColours.NEVER`, or `AUTOMATIC` and not a
  terminal. A `Theme` answers `colour_file(name)`, `broken_filename()`,
  `broken_control_char()`, `size_style(prefix)`, `unit_style(prefix)` and
  `style_override(name, ext)`. `apply_overlay(base, overlay)` amends one
  style with another.
- **`ezatheme.tree`**: `TreeTrunk.new_row(params)` returns the `TreePart`s
  (`├──`, `│  `, `└──`, blank) for each row of a tree view, and
  `TreeDepth.iterate_over(items)` pairs each item with `TreeParams` marking
  whether it is the last.
- **`ezatheme.time`**: `TimeFormat` renders a `datetime` in the default,
  ISO, long ISO, full ISO and relative styles; `CustomFormat` takes strftime
  patterns, optionally a separate one for dates in the current year.
  `format_relative(seconds)` describes a duration such as `3 days`.
- **`ezatheme.table`**: `Columns.collect()` chooses the table's `Column`s in
  display order, each with a `header()` and an `alignment()`; `TableWidths`
  tracks the widest cell of each column; `render_row(columns, widths, cells)`
  pads and aligns each cell, ignoring escape codes when measuring width.

## Installation

```
pip install ezatheme
```

## Example

```python
from ezatheme.lsc import LSColors
from ezatheme.tree import TreeDepth, TreeParams, TreeTrunk

for pair in LSColors("di=01;34:*.txt=31").pairs():
    print(pair.key, pair.to_style().paint(pair.key))

trunk = TreeTrunk()
for depth, last in [(0, True), (1, False), (2, True), (1, True)]:
    parts = trunk.new_row(TreeParams(TreeDepth(depth), last))
    print("".join(part.ascii_art() for part in parts))
```

## What it does not do

This is a library with no command to run. It does not read directories,
stat files, look up users or groups, or query Git; callers supply file
names, cell text and timestamps themselves. It has no built-in table of
file types: `ThemeOptions.file_type_of` takes a function that maps a file
name to a `FileType` field name such as `"image"`, and without one no file
type styles are applied. Theme configuration files are not read;
`ThemeOptions.theme_config` takes a ready-made `UiStyles`.

## Running the tests

```
pip install -e ".[test]"
pytest
```