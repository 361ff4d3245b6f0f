"""Messages passed through the display event loop, and the commands that produce them.

A command is one of:

* ``None``: nothing to do;
* a callable taking no arguments that returns a message;
* a :class:`Delayed`, a message to deliver after a number of seconds;
* a tuple of commands, all of which are to be run.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class Action(str, Enum):
    """Requests another process can make of a running display."""

    PING = "ping"
    LIST_VIEWS = "list-views"
    PUSH_VIEW = "push-view"
    POP_VIEW = "pop-view"
    TOAST = "toast"
    CLOSE = "close"
    KILL = "kill"
    GET_THEME = "get-theme"
    SET_THEME = "set-theme"


@dataclass
class Command:
    """A request sent to the display; ``duration`` is in milliseconds."""

    action: Action | str
    view: str = ""
    data: str | None = None
    message: str = ""
    duration: int = 0
    no_focus: bool = False


@dataclass
class Response:
    """The display's answer to a :class:`Command`; ``data`` is JSON text."""

    ok: bool
    message: str = ""
    error: str = ""
    data: str | None = None


@dataclass(frozen=True)
class KeyMsg:
    """A key press, named like ``"a"``, ``"enter"``, ``"esc"`` or ``"ctrl+c"``."""

    key: str


@dataclass(frozen=True)
class MouseMsg:
    """A mouse event; ``button`` is e.g. ``"wheel_up"`` or ``"wheel_down"``."""

    button: str
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class WindowSizeMsg:
    """The terminal's size in cells."""

    width: int
    height: int


@dataclass(frozen=True)
class PushViewMsg:
    """Ask for a view to be pushed onto the stack."""

    name: str
    data: dict[str, Any] | None = None


@dataclass(frozen=True)
class PopViewMsg:
    """Ask for the current view to be popped."""


@dataclass(frozen=True)
class ToastMsg:
    """Show a toast for ``duration`` seconds."""

    message: str
    duration: float = 0.0


@dataclass(frozen=True)
class ToastExpiredMsg:
    """The toast's time is up."""


@dataclass(frozen=True)
class SubmitToClaudeMsg:
    """Type a message into the assistant's pane and press Enter."""

    message: str


@dataclass(frozen=True)
class SendToClaudeMsg:
    """Type a message into the assistant's pane without pressing Enter."""

    message: str


@dataclass(frozen=True)
class TickMsg:
    """Periodic tick for animations and refreshes."""


@dataclass(frozen=True)
class HeartbeatCheckMsg:
    """Time to check that the assistant's pane still exists."""


@dataclass(frozen=True)
class RefreshMsg:
    """Ask for a re-render."""


@dataclass(frozen=True)
class Delayed:
    """A message to be delivered after ``delay`` seconds."""

    delay: float
    message: Any


Cmd = Union[Callable[[], Any], Delayed, tuple, None]

_DEFAULT_TOAST_SECONDS = 3.0


def push_view_cmd(name: str, data: dict[str, Any] | None = None) -> Callable[[], PushViewMsg]:
    """Return a command that pushes a view."""
    return lambda: PushViewMsg(name=name, data=data)


def pop_view_cmd() -> Callable[[], PopViewMsg]:
    """Return a command that pops the current view."""
    return PopViewMsg


def toast_cmd(message: str, duration: float = 0.0) -> Callable[[], ToastMsg]:
    """Return a command that shows a toast; a zero duration means three seconds."""
    if not duration:
        duration = _DEFAULT_TOAST_SECONDS
    return lambda: ToastMsg(message=message, duration=duration)


def submit_to_claude_cmd(message: str) -> Callable[[], SubmitToClaudeMsg]:
    """Return a command that submits a message to the assistant's pane."""
    return lambda: SubmitToClaudeMsg(message=message)


def send_to_claude_cmd(message: str) -> Callable[[], SendToClaudeMsg]:
    """Return a command that types a message into the assistant's pane."""
    return lambda: SendToClaudeMsg(message=message)


def tick_cmd(delay: float) -> Delayed:
    """Return a command that ticks after ``delay`` seconds."""
    return Delayed(delay, TickMsg())


def heartbeat_cmd(delay: float) -> Delayed:
    """Return a command that triggers a heartbeat check after ``delay`` seconds."""
    return Delayed(delay, HeartbeatCheckMsg())