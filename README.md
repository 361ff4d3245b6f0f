# clappie

The core of a small terminal personal-assistant framework. It is a library. It
stores records as plain text files, tracks chores that need a human decision,
and provides a display model that keeps a stack of text screens.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## File store (`clappie.filestore`)

Each record is a `.txt` file. The file holds a free-form body, then a `---`
line, then one or more `[tag]` blocks of `key: value` fields:

```
Draft a reply.

---
[chore-meta]
title: Reply to mail
status: pending
```

`clappie.filestore.meta` parses and formats this layout:

- `parse_file(content)` returns `(body, blocks)`.
- `format_file(body, blocks)` turns them back into text.
- `get_meta(blocks, tag)`, `get_meta_field(blocks, tag, field)` and
  `set_meta_field(blocks, tag, field, value)` look up and change blocks. A
  missing block is appended.

`clappie.filestore.store` treats a directory as a table of such files:

```python
from clappie.filestore.meta import MetaBlock, set_meta_field
from clappie.filestore.store import list_entries, read_and_parse, write_with_meta

blocks = [MetaBlock(tag="chore-meta", fields={"title": "Reply to mail", "status": "pending"})]
write_with_meta("chores/humans/reply.txt", "Draft a reply.", blocks)  # creates directories

body, blocks = read_and_parse("chores/humans/reply.txt")
set_meta_field(blocks, "chore-meta", "status", "approved")
write_with_meta("chores/humans/reply.txt", body, blocks)

for entry in list_entries("chores/humans"):   # .txt files only, newest first
    print(entry.name, entry.path, entry.mod_time)
```

The module also provides:

- `read_file` and `write_file`.
- `delete_file`. A missing file is not an error.
- `exists`.
- `file_path(directory, name)`, which adds `.txt` if it is missing.
- `count(directory)`.

`list_entries` returns an empty list for a missing directory.

`clappie.filestore.paths` builds locations under a project root. These are
`log_path`, `chore_log_path`, `heartbeat_log_path`, `sidekick_log_path` and
`notification_log_path` (all under `recall/logs/`), and `settings_path` (under
`recall/settings/`). `timestamped_name(name)` prefixes a name with the local
time, for example `2025-01-31-142501-name`.

`clappie.filestore.lock.FileLock` gives an exclusive lock on `<path>.lock`. It
works across threads and processes, using `flock` on POSIX and `msvcrt` on
Windows:

```python
from clappie.filestore.lock import FileLock, LockTimeout

lock = FileLock("recall/settings/state.txt")
with lock:                       # blocks until held
    ...
with lock.with_timeout(2.0):     # raises LockTimeout after 2 seconds
    ...
if lock.try_lock():
    try:
        ...
    finally:
        lock.unlock()            # also removes the lock file
```

## Chores (`clappie.chores`)

A chore is a file in a chores directory. It has a `[chore-meta]` block that
holds its title, summary, icon, context, status and creation time.
`ChoreStatus` lists the states: `pending`, `approved`, `completed`,
`rejected` and `shelved`.

```python
from clappie import chores

chores.create("chores/humans", chores.Chore(name="reply", title="Reply to mail", body="Draft a reply."))
pending = chores.get_pending("chores/humans")       # list of Chore, newest first
chores.approve("chores/humans", "reply")
chores.complete("chores/humans", "recall/logs/chores", "reply")  # moved to a timestamped log file
```

`get_all`, `reject` and `shelve` are also available. A chore without a title
takes its file name as its title.

## Background apps (`clappie.background`)

`discover(clapps_dir)` returns an `App` for each subdirectory that contains a
`.background` marker file. The results are sorted by name.

## Data flags (`clappie.data_flags`)

`parse_data(flags)` turns `-d`-style values into JSON text:

```python
from clappie.data_flags import parse_data

parse_data(["title=Pick one", "body=@notes.txt"])  # file content, stripped, becomes the value
parse_data(['{"a": 1}'])                            # a single JSON object passes through unchanged
parse_data([])                                      # None
```

A malformed flag or an unreadable file raises `DataFlagError`.

## Display engine (`clappie.engine`)

- `ansi` measures terminal text while ignoring ANSI escapes. It provides
  `visual_width`, `strip_ansi`, `truncate_to_width`, `pad_right`,
  `pad_center` and `repeat_to_width`. East Asian ambiguous-width characters
  count as two cells under MSYS2/MinTTY. Set `GO_CLAPPIE_EAST_ASIAN_WIDTH` to
  `1` or `0` to force the choice.
- `theme.Theme` holds the dark (default) and light palettes. `color(name)`
  returns an `RGB`; an unknown name gives grey. `init_from_root(root)` reads
  two files under `recall/settings/theme/`. `mode.txt` sets the mode.
  `colors.txt` holds lines of the form `name=#rrggbb`. After that,
  `set_mode` saves the mode back to that directory.
- `styles.Styles` builds `Style` presets from a theme. `Style.render(text)`
  wraps each line in ANSI colour and weight codes.
- `messages` defines the message types (`KeyMsg`, `MouseMsg`,
  `WindowSizeMsg`, `PushViewMsg`, `ToastMsg` and others) and the command
  helpers (`push_view_cmd`, `pop_view_cmd`, `toast_cmd` and others). A
  command is one of four things:
  - `None`.
  - A no-argument callable that returns a message.
  - A `Delayed(delay, message)`.
  - A tuple of commands.
- `screen.Screen` is the base class for views. `screen.ViewModule` registers
  a view factory together with its layout.
- `app.AppModel` keeps the view stack, the toast, and the header and footer.

```python
from clappie.displays.registry import build_registry
from clappie.engine.app import AppConfig, AppModel
from clappie.engine.messages import Action, Command, Delayed, KeyMsg, WindowSizeMsg

app = AppModel(AppConfig(
    registry=build_registry(),
    submit_to_claude=lambda pane, text: print("submit:", text),
))
app.update(WindowSizeMsg(80, 24))
app.push_view("utility/confirm", {"message": "Deploy now?"})
print(app.view())

def run(cmd):
    """Run a command to completion, ignoring delayed ones."""
    if cmd is None or isinstance(cmd, Delayed):
        return
    if isinstance(cmd, tuple):
        for part in cmd:
            run(part)
        return
    run(app.update(cmd()))

run(app.update(KeyMsg("y")))   # prints "submit: [go-clappie] Confirm → yes" and pops the view

reply, cmd = app.handle_command(Command(action=Action.PING))  # Response(ok=True, message="pong")
```

`handle_command` accepts the actions in `Action`:

- `ping`
- `list-views`, which returns JSON in `data`
- `push-view`
- `pop-view`
- `toast`, whose duration is in milliseconds
- `close` and `kill`
- `get-theme` and `set-theme`

Ctrl+C, a `close` or `kill` command, or Esc on the last view sets
`app.quitting`.

## Built-in screens (`clappie.displays`)

`build_registry()` returns the built-in views:

- `utility/list`: options from `data["options"]`. Enter submits the selected
  option.
- `utility/confirm`: Y or N submits the answer.
- `utility/editor`: a multi-line editor. Ctrl+S submits the text.
- `utility/viewer`: scrolls `data["content"]` or the file at `data["path"]`.
- `parties/status`: shows `data["game"]`.
- `example-demo-screens/hello-world`: a demo view.

`register(name, module)` adds a view to the shared `REGISTRY`.
`list_registered()` returns its names in sorted order.

## What this package does not do

- There is no command-line program.
- There is no socket server. `AppModel.handle_command` must be called by your
  own code.
- There is no event loop or terminal driver. The commands that `update`
  returns, including `Delayed` ticks and toast expiry, must be run by the
  caller. Text is not sent to another terminal pane unless you pass
  `submit_to_claude`, `send_to_claude` and `pane_exists` hooks in
  `AppConfig`.
- The registry has only the views listed above. There are no heartbeat,
  chores, notifications, sidekicks, background, OAuth, projects or
  party-index screens.
- Background apps can be found but cannot be started or stopped.