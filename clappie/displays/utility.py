"""General-purpose views: pick from a list, confirm, edit text and page through text."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from clappie.engine.ansi import pad_right, truncate_to_width
from clappie.engine.messages import (
    Cmd,
    KeyMsg,
    MouseMsg,
    WindowSizeMsg,
    pop_view_cmd,
    submit_to_claude_cmd,
)
from clappie.engine.screen import Screen, ShortcutHint
from clappie.engine.styles import Style, Styles
from clappie.filestore.store import read_file

_BOLD = Style(bold=True)
_FAINT = Style(faint=True)
_SELECTED_PREFIX = "▸ "
_PLAIN_PREFIX = "  "


def _string_field(data: Mapping[str, Any] | None, key: str) -> str | None:
    if not data:
        return None
    value = data.get(key)
    return value if isinstance(value, str) else None


class UtilityListScreen(Screen):
    """A list of options; Enter sends the chosen one to the assistant and closes."""

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        styles: Styles | None = None,
        claude_pane: str = "",
    ) -> None:
        self.title = _string_field(data, "title") or "Select"
        if _string_field(data, "title") == "":
            self.title = ""
        options = data.get("options") if data else None
        self.options: list[str] = (
            [item for item in options if isinstance(item, str)]
            if isinstance(options, list)
            else []
        )
        self.selected = 0
        self.styles = styles

    def update(self, msg: Any) -> Cmd:
        """Move the selection, or submit it on Enter."""
        if not isinstance(msg, KeyMsg):
            return None
        if msg.key in ("up", "k"):
            if self.selected > 0:
                self.selected -= 1
        elif msg.key in ("down", "j"):
            if self.selected < len(self.options) - 1:
                self.selected += 1
        elif msg.key == "enter" and self.selected < len(self.options):
            choice = self.options[self.selected]
            return (
                submit_to_claude_cmd(f"[go-clappie] List → {choice}"),
                pop_view_cmd(),
            )
        return None

    def view(self) -> str:
        """Render the options with the selected one marked."""
        lines = [""]
        for i, option in enumerate(self.options):
            if i == self.selected:
                lines.append(_BOLD.render(f"{_SELECTED_PREFIX}{option}"))
            else:
                lines.append(f"{_PLAIN_PREFIX}{option}")
        return "\n".join(lines)

    def name(self) -> str:
        return self.title

    def layout(self) -> tuple[str, int]:
        return ("centered", 50)

    def shortcuts(self) -> list[ShortcutHint]:
        return []


class UtilityConfirmScreen(Screen):
    """A yes/no question whose answer goes to the assistant."""

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        styles: Styles | None = None,
        claude_pane: str = "",
    ) -> None:
        message = _string_field(data, "message")
        self.message = "Are you sure?" if message is None else message
        self.styles = styles

    def update(self, msg: Any) -> Cmd:
        """Answer on Y or N and close the view."""
        if not isinstance(msg, KeyMsg):
            return None
        if msg.key in ("y", "Y"):
            answer = "yes"
        elif msg.key in ("n", "N"):
            answer = "no"
        else:
            return None
        return (
            submit_to_claude_cmd(f"[go-clappie] Confirm → {answer}"),
            pop_view_cmd(),
        )

    def view(self) -> str:
        """Render the question and the two choices."""
        return "\n".join(["", f"  {self.message}", "", "  [Y] Yes    [N] No"])

    def name(self) -> str:
        return "Confirm"

    def layout(self) -> tuple[str, int]:
        return ("centered", 50)

    def shortcuts(self) -> list[ShortcutHint]:
        return [ShortcutHint("Y", "Yes"), ShortcutHint("N", "No")]


class UtilityEditorScreen(Screen):
    """A multi-line text editor; Ctrl+S sends the text to the assistant."""

    placeholder = "Type here..."
    width = 60
    height = 20
    _prompt = "┃ "

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        styles: Styles | None = None,
        claude_pane: str = "",
    ) -> None:
        self.value = _string_field(data, "value") or ""
        self.cursor = len(self.value)
        self.styles = styles

    def _insert(self, text: str) -> None:
        self.value = self.value[: self.cursor] + text + self.value[self.cursor:]
        self.cursor += len(text)

    def _line_start(self) -> int:
        return self.value.rfind("\n", 0, self.cursor) + 1

    def _line_end(self) -> int:
        end = self.value.find("\n", self.cursor)
        return len(self.value) if end < 0 else end

    def update(self, msg: Any) -> Cmd:
        """Edit the text, or submit it on Ctrl+S."""
        if not isinstance(msg, KeyMsg):
            return None
        key = msg.key
        if key == "ctrl+s":
            return (
                submit_to_claude_cmd("[go-clappie] Editor → " + self.value),
                pop_view_cmd(),
            )
        if key == "enter":
            self._insert("\n")
        elif key == "space":
            self._insert(" ")
        elif key == "backspace":
            if self.cursor > 0:
                self.value = self.value[: self.cursor - 1] + self.value[self.cursor:]
                self.cursor -= 1
        elif key == "delete":
            self.value = self.value[: self.cursor] + self.value[self.cursor + 1:]
        elif key == "left":
            self.cursor = max(0, self.cursor - 1)
        elif key == "right":
            self.cursor = min(len(self.value), self.cursor + 1)
        elif key == "home":
            self.cursor = self._line_start()
        elif key == "end":
            self.cursor = self._line_end()
        elif len(key) == 1 and key.isprintable():
            self._insert(key)
        return None

    def _render_area(self) -> list[str]:
        inner = self.width - len(self._prompt)
        if not self.value:
            rows = [_FAINT.render(self.placeholder)]
        else:
            lines = self.value.split("\n")
            cursor_row = self.value.count("\n", 0, self.cursor)
            start = max(0, cursor_row - self.height + 1)
            rows = [
                pad_right(truncate_to_width(line, inner, ""), inner)
                for line in lines[start:start + self.height]
            ]
        rows.extend([""] * (self.height - len(rows)))
        return [self._prompt + row for row in rows]

    def view(self) -> str:
        """Render the text area and the save hint."""
        return "\n".join(self._render_area()) + "\n\n  Ctrl+S to save"

    def name(self) -> str:
        return "Editor"

    def layout(self) -> tuple[str, int]:
        return ("full", 0)

    def shortcuts(self) -> list[ShortcutHint]:
        return [ShortcutHint("Ctrl+S", "Save")]


class UtilityViewerScreen(Screen):
    """A scrollable read-only view of text given inline or read from a file."""

    _wheel_step = 3
    _chrome_lines = 4

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        styles: Styles | None = None,
        claude_pane: str = "",
    ) -> None:
        content = _string_field(data, "content") or ""
        path = _string_field(data, "path")
        if path is not None:
            try:
                content = read_file(path)
            except (OSError, UnicodeDecodeError):
                pass
        self.content = "\n".join("  " + line for line in content.split("\n"))
        self._lines = self.content.split("\n")
        self.styles = styles
        self.ready = False
        self.width = 0
        self.height = 0
        self.offset = 0

    def _max_offset(self) -> int:
        return max(0, len(self._lines) - self.height)

    def _scroll(self, delta: int) -> None:
        self.offset = min(self._max_offset(), max(0, self.offset + delta))

    def update(self, msg: Any) -> Cmd:
        """Size the viewport on a resize, then scroll with keys and the wheel."""
        if isinstance(msg, WindowSizeMsg):
            self.width = msg.width
            self.height = max(0, msg.height - self._chrome_lines)
            self.offset = 0
            self.ready = True
            return None
        if not self.ready:
            return None
        if isinstance(msg, KeyMsg):
            key = msg.key
            if key in ("up", "k"):
                self._scroll(-1)
            elif key in ("down", "j"):
                self._scroll(1)
            elif key in ("pgup", "b"):
                self._scroll(-self.height)
            elif key in ("pgdown", "f", " ", "space"):
                self._scroll(self.height)
            elif key in ("u", "ctrl+u"):
                self._scroll(-(self.height // 2))
            elif key in ("d", "ctrl+d"):
                self._scroll(self.height // 2)
        elif isinstance(msg, MouseMsg):
            if msg.button == "wheel_up":
                self._scroll(-self._wheel_step)
            elif msg.button == "wheel_down":
                self._scroll(self._wheel_step)
        return None

    def view(self) -> str:
        """Render the visible part of the text, or a placeholder before sizing."""
        if not self.ready:
            return "Loading..."
        visible = [
            truncate_to_width(line, self.width, "")
            for line in self._lines[self.offset:self.offset + self.height]
        ]
        visible.extend([""] * (self.height - len(visible)))
        return "\n".join(visible)

    def name(self) -> str:
        return "Viewer"

    def layout(self) -> tuple[str, int]:
        return ("full", 0)

    def shortcuts(self) -> list[ShortcutHint]:
        return []