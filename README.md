# tvfinder

Pieces of a terminal fuzzy finder, usable on their own:

- `tvfinder.input`: an editable single-line input buffer with a cursor.
  Edits go to `Input.handle`. A request is a member of the `InputRequest`
  enum (cursor moves and deletions such as `GO_TO_PREV_WORD` or
  `DELETE_PREV_WORD`), a `SetCursor(position)` or an `InsertChar(char)`.
  Each call returns a `StateChanged(value, cursor)` describing what changed,
  or `None` when nothing did. `Input.value` and `Input.cursor` are
  properties. `visual_cursor()` and `visual_scroll(width)` count wide
  characters by their display width.
- `tvfinder.indices`: `truncate_highlighted_string` fits a string into a
  display width. It truncates from the end, the start or both sides so that
  highlighted ranges stay visible, and shifts the ranges to match.
- `tvfinder.cache`: `RingSet`, a bounded set (default capacity 20) that
  ignores duplicates and evicts its oldest entry when full.
  `back_to_front()` yields entries from newest to oldest.
- `tvfinder.shell`: the `Shell` enum, detection with `Shell.from_name` and
  `Shell.from_env` (reads `$SHELL`), and `ctrl_keybinding` for Ctrl key
  notation in bash, zsh, fish and nu. Unsupported shells raise
  `UnsupportedShellError`.
- `tvfinder.command`: `shell_command(command, interactive, envs)` builds a
  `ShellCommand` that runs a string through the user's shell. Start it with
  `run(**kwargs)` or `popen(**kwargs)`, which pass their arguments on to
  `subprocess`.
- `tvfinder.files`: `read_into_lines_capped` returns a `ReadResult` with
  `lines`, `bytes_read` and `partial`. The module also checks known text
  and image extensions (`is_known_text_extension`,
  `is_accepted_image_extension`) and looks up file sizes (`get_file_size`).
- `tvfinder.clipboard`: `Clipboard`, with async `get()` and `set(content)`.
  It tries the platform clipboard tools (pbcopy/pbpaste, wl-copy, xclip,
  xsel and others) and falls back to the last value set. On non-Windows
  systems `set` also writes the OSC 52 escape sequence to stderr, and
  `osc52_sequence` builds that sequence.
- `tvfinder.paths` (`expand_tilde`), `tvfinder.hashmaps` (`invert_mapping`),
  `tvfinder.metadata` (`AppMetadata`), `tvfinder.threads`
  (`default_num_threads`, at most 32) and `tvfinder.stdin`
  (`is_readable_stdin`): small helpers.

## Installation

```
pip install tvfinder
```

## Examples

### Editing an input buffer

```python
from tvfinder.input import Input, InputRequest, InsertChar

field = Input("hello")
field.handle(InsertChar("!"))
print(field.value, field.cursor)  # hello! 6

field.handle(InputRequest.DELETE_PREV_WORD)
print(repr(field.value))  # ''
```

### Truncating a highlighted string

```python
from tvfinder.indices import truncate_highlighted_string

text, ranges = truncate_highlighted_string("hello world", [(0, 2), (4, 8), (10, 11)], 6)
print(text, ranges)  # …world [(1, 3), (5, 6)]
```

### Keeping a bounded set of recent keys

```python
from tvfinder.cache import RingSet

recent = RingSet(3)
for key in (1, 2, 3):
    recent.push(key)
print(recent.push(4))  # 1
print(list(recent.back_to_front()))  # [4, 3, 2]
```

### Shell key bindings and commands

```python
from tvfinder.command import shell_command
from tvfinder.shell import Shell, ctrl_keybinding

print(ctrl_keybinding(Shell.ZSH, "t"))  # ^t

result = shell_command("echo $GREETING", False, {"GREETING": "hi"}).run(
    capture_output=True, text=True
)
print(result.stdout)
```

## What this package does not do

There is no `tv` command and no terminal interface here: no results list,
no preview panel, no channels and no fuzzy matcher. The package holds the
supporting pieces listed above. Drawing, event handling and matching are
left to the application that uses them.

## Running the tests

```
pip install -e ".[test]"
pytest
```