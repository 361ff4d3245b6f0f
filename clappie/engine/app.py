"""The root display model: a stack of views with header, toast and footer."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from clappie.engine.ansi import pad_center, pad_right
from clappie.engine.messages import (
    Action,
    Cmd,
    Command,
    Delayed,
    HeartbeatCheckMsg,
    KeyMsg,
    MouseMsg,
    PopViewMsg,
    PushViewMsg,
    Response,
    SendToClaudeMsg,
    SubmitToClaudeMsg,
    TickMsg,
    ToastExpiredMsg,
    ToastMsg,
    WindowSizeMsg,
    heartbeat_cmd,
    pop_view_cmd,
    push_view_cmd,
    tick_cmd,
)
from clappie.engine.screen import Screen, ViewModule
from clappie.engine.styles import Style, Styles
from clappie.engine.theme import Theme

log = logging.getLogger(__name__)

_TICK_SECONDS = 0.5
_HEARTBEAT_SECONDS = 5.0
_DEFAULT_TOAST_SECONDS = 3.0
_DEFAULT_TOAST_MS = 3000
_FALLBACK_WIDTH = 80
_FALLBACK_HEIGHT = 24
_CHROME_LINES = 4
_BREADCRUMB_LIMIT = 3


def _batch(*cmds: Cmd) -> Cmd:
    present = tuple(cmd for cmd in cmds if cmd is not None)
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    return present


def _decode_data(text: str | None) -> dict[str, Any] | None:
    if not text:
        return None
    try:
        data = json.loads(text)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


@dataclass
class AppConfig:
    """Settings for the display, with hooks to reach the assistant's pane."""

    socket_path: str = ""
    initial_view: str = ""
    initial_data: str = ""
    claude_pane: str = ""
    registry: Mapping[str, ViewModule] = field(default_factory=dict)
    submit_to_claude: Callable[[str, str], None] | None = None
    send_to_claude: Callable[[str, str], None] | None = None
    pane_exists: Callable[[str], bool] | None = None


class AppModel:
    """Manages the view stack, the toast and the layout of the display.

    ``quitting`` becomes true once the display has been asked to exit.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self.theme = Theme()
        self.styles = Styles(self.theme)
        self.view_stack: list[Screen] = []
        self.toast = ""
        self.width = 0
        self.height = 0
        self.quitting = False

    def _quit(self) -> Cmd:
        self.quitting = True
        return None

    def init(self) -> Cmd:
        """Return the start-up commands: the initial view, ticks and heartbeats."""
        cmds: list[Cmd] = []
        if self.config.initial_view:
            data = _decode_data(self.config.initial_data)
            cmds.append(push_view_cmd(self.config.initial_view, data))
        cmds.append(tick_cmd(_TICK_SECONDS))
        cmds.append(heartbeat_cmd(_HEARTBEAT_SECONDS))
        return _batch(*cmds)

    def update(self, msg: Any) -> Cmd:
        """Handle a message and return the follow-up command."""
        if isinstance(msg, WindowSizeMsg):
            log.debug("window size %dx%d", msg.width, msg.height)
            self.width, self.height = msg.width, msg.height
            return self._update_current(msg)

        if isinstance(msg, KeyMsg):
            if msg.key == "ctrl+c":
                return self._quit()
            if msg.key == "esc":
                if len(self.view_stack) > 1:
                    return pop_view_cmd()
                return self._quit()
            return self._update_current(msg)

        if isinstance(msg, MouseMsg):
            return self._update_current(msg)

        if isinstance(msg, PushViewMsg):
            return self.push_view(msg.name, msg.data)

        if isinstance(msg, PopViewMsg):
            return self.pop_view()

        if isinstance(msg, ToastMsg):
            self.toast = msg.message
            return Delayed(msg.duration or _DEFAULT_TOAST_SECONDS, ToastExpiredMsg())

        if isinstance(msg, ToastExpiredMsg):
            self.toast = ""
            return None

        if isinstance(msg, SubmitToClaudeMsg):
            if self.config.submit_to_claude is not None:
                self.config.submit_to_claude(self.config.claude_pane, msg.message)
            return None

        if isinstance(msg, SendToClaudeMsg):
            if self.config.send_to_claude is not None:
                self.config.send_to_claude(self.config.claude_pane, msg.message)
            return None

        if isinstance(msg, TickMsg):
            return _batch(self._update_current(msg), tick_cmd(_TICK_SECONDS))

        if isinstance(msg, HeartbeatCheckMsg):
            pane = self.config.claude_pane
            checker = self.config.pane_exists
            if pane and checker is not None and not checker(pane):
                return self._quit()
            return heartbeat_cmd(_HEARTBEAT_SECONDS)

        return self._update_current(msg)

    def handle_command(self, command: Command) -> tuple[Response, Cmd]:
        """Carry out a request from another process; return the reply and a follow-up command."""
        try:
            action = Action(command.action)
        except ValueError:
            return Response(ok=False, error=f"unknown action: {command.action}"), None

        if action is Action.PING:
            return Response(ok=True, message="pong"), None

        if action is Action.LIST_VIEWS:
            return Response(ok=True, data=json.dumps(self.view_names())), None

        if action is Action.PUSH_VIEW:
            cmd = self.push_view(command.view, _decode_data(command.data))
            return Response(ok=True), cmd

        if action is Action.POP_VIEW:
            self.pop_view()
            return Response(ok=True), None

        if action is Action.TOAST:
            duration_ms = command.duration or _DEFAULT_TOAST_MS
            self.toast = command.message
            log.debug("toast %r (%dms)", command.message, duration_ms)
            return Response(ok=True), Delayed(duration_ms / 1000, ToastExpiredMsg())

        if action in (Action.CLOSE, Action.KILL):
            return Response(ok=True), self._quit()

        if action is Action.GET_THEME:
            return Response(ok=True, message=self.theme.mode), None

        self.theme.set_mode(command.message)
        self.styles.refresh()
        return Response(ok=True), None

    def push_view(self, name: str, data: dict[str, Any] | None = None) -> Cmd:
        """Create a registered view and put it on top; unknown names are ignored."""
        module = self.config.registry.get(name)
        if module is None:
            return None

        screen = module.create(data, self.styles, self.config.claude_pane)
        self.view_stack.append(screen)
        log.debug("push view %s (stack size %d)", name, len(self.view_stack))

        init_cmd = screen.init()
        size_cmd: Cmd = None
        if self.width > 0 and self.height > 0:
            size_cmd = screen.update(WindowSizeMsg(self.width, self.height))
        return _batch(init_cmd, size_cmd)

    def pop_view(self) -> Cmd:
        """Remove the top view, if any."""
        if self.view_stack:
            self.view_stack.pop()
        return None

    def _update_current(self, msg: Any) -> Cmd:
        if not self.view_stack:
            return None
        return self.view_stack[-1].update(msg)

    def view_names(self) -> list[str]:
        """Return the names of the stacked views, bottom first."""
        return [screen.name() for screen in self.view_stack]

    def build_breadcrumbs(self) -> str:
        """Return the breadcrumb trail, shortened to the last two beyond three views."""
        parts = self.view_names()
        if len(parts) > _BREADCRUMB_LIMIT:
            parts = ["...", *parts[-2:]]
        return " > ".join(parts)

    def view(self) -> str:
        """Render the whole display."""
        if self.width == 0:
            self.width = _FALLBACK_WIDTH
        if self.height == 0:
            self.height = _FALLBACK_HEIGHT

        sections = [
            self._render_header(),
            self._render_toast(),
            self._render_content(),
            self._render_shortcuts(),
        ]
        return "\n".join(section for section in sections if section != "")

    def _render_header(self) -> str:
        line = " " + self.styles.breadcrumb_style.render(self.build_breadcrumbs())
        return self.styles.header_style.render(pad_right(line, self.width))

    def _render_toast(self) -> str:
        if self.toast:
            toast = self.styles.toast_style.render(f" {self.toast} ")
            return pad_center(toast, self.width)
        return " " * self.width

    def _render_content(self) -> str:
        if not self.view_stack:
            return ""
        current = self.view_stack[-1]
        lines = current.view().split("\n")
        content_height = max(1, self.height - _CHROME_LINES)
        lines.extend([""] * (content_height - len(lines)))

        mode, max_width = current.layout()
        if mode == "centered" and 0 < max_width < self.width:
            return "\n".join(
                pad_center(pad_right(line, max_width), self.width) for line in lines
            )
        return "\n".join(pad_right(line, self.width) for line in lines)

    def _render_shortcuts(self) -> str:
        if not self.view_stack:
            return ""
        shortcuts = self.view_stack[-1].shortcuts()
        line = ""
        if shortcuts:
            parts = [
                f" {self.styles.shortcut_key.render(sc.key)} "
                f"{self.styles.shortcut_label.render(sc.label)} "
                for sc in shortcuts
            ]
            line = " " + "  ".join(parts)
        plain = Style()
        return "\n".join(plain.render(pad_right(text, self.width)) for text in (line, ""))