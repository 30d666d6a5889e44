# scedit

scedit is the editing core of a small terminal text editor for C sources.
It has no third-party dependencies and draws nothing on the screen. It
provides the parts that an editor front end builds on:

- **`scedit.config`**: the `EditorConfig` settings, plus reading and
  writing the plain `key=value` settings file (`config_file_path`,
  `load_config`, `parse_config`, `render_config`, `save_config`) and the
  value parsers `trim`, `parse_boolean` and `parse_integer`.
- **`scedit.options`**: the rows of the settings screen (`config_options`,
  `ConfigOption`, `OptionType`). `OptionEditor` handles selection and
  in-place editing of those rows. `apply_options` turns the edited rows
  back into a configuration. `color_to_rgb` expands a 0–255 RGB332 colour
  code into 0–1000 terminal levels, and `color_slots` lists the terminal
  colour numbers to redefine for a configuration.
- **`scedit.declarations`**: `DeclarationScanner`. You feed it C source
  one line at a time, and it records declared variables, `#define` names
  and `typedef` aliases as `Identifier` entries. Multi-line `typedef`
  blocks are followed across lines.
- **`scedit.buffer`**: `TextBuffer`. It holds the lines and the caret,
  a bounded undo history (`UndoState`), search and replace, word-wise
  caret movement and saved cursors (`Cursor`).
- **`scedit.editing`**: `Editor`, which applies the editing keys to a
  buffer: delete, backspace, newline with carried-over indentation (an
  empty indented block is opened between `{` and `}`), arrow movement and
  jumps to the start or end of a line. `Editor.autosave_due` becomes true
  every 100 editing keystrokes.
- **`scedit.display`**: pure layout helpers. They compute the first line
  of the viewport, the horizontal scroll offset, the status bar text, the
  git label and its column, and the text of the help, info and file-menu
  pages.

## Configuration

```python
from scedit.config import load_config, render_config, save_config

config = load_config("settings.conf")   # defaults when the file cannot be opened
config.tab_size = 8
save_config(config, "settings.conf")
print(render_config(config))
```

When no path is given, `config_file_path()` is used. It returns
`$HOME/.sceconfig/.sceconfig`, or `./.sceconfig` when `HOME` is not set.
`save_config` does not create the directory.

The file is line-based. Lines that start with `#` are comments, and each
setting is written as `name=value`. Booleans accept `true`, `yes`, `on` and
`1`, in any case; anything else is false. An integer that cannot be parsed
falls back to its default. The key `autocomplete` sets both the
parenthesis and the quotation auto-completion at once.

## Editing a buffer

```python
from scedit.buffer import TextBuffer
from scedit.declarations import DeclarationScanner
from scedit.editing import Editor

buffer = TextBuffer(["int main() {}", ""], 512, 50)
scanner = DeclarationScanner(["int", "char"], ["int", "char", "return"])
editor = Editor(buffer, scanner)

editor.line_end()
editor.move_left()
editor.newline()                    # splits "{}" into an indented block

matches = buffer.search("main")     # indices of the lines that contain it
buffer.undo()                       # back to the state before the newline
```

Before it does anything, each editing key saves an undo state. So does a
replacement that finds a match. `replace_all` saves a single state for
the whole operation. The history keeps at most `max_undo` entries and drops
the oldest when it is full. Lines are cut to `max_cols - 1` characters.

## Laying out the screen

```python
from scedit.display import display_name, is_c_source, status_text, viewport_start

is_c_source("src/main.c")           # True
display_name("src/main.c")          # "main.c"
status_text(9, 3)                   # "Line: 10, Column: 4"
viewport_start(200, 150, 40)        # 131
```

## What it does not do

scedit has no command, no terminal screen and no key loop. It does not
open or save the files being edited, and it does not query git. A front
end has to read keys, call the `Editor` and `TextBuffer` methods, and draw
the results from the `scedit.display` helpers.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.