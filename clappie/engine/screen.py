"""The interface every display view implements, and how views are registered."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from clappie.engine.messages import Cmd

if TYPE_CHECKING:
    from clappie.engine.styles import Styles


@dataclass(frozen=True)
class ShortcutHint:
    """A key and its label, shown in the footer."""

    key: str
    label: str


class Screen(ABC):
    """A view on the display stack.

    ``update`` changes the screen in place and returns a command.
    """

    def init(self) -> Cmd:
        """Return the command to run when the screen is first shown."""
        return None

    def update(self, msg: Any) -> Cmd:
        """Handle a message and return a follow-up command."""
        return None

    @abstractmethod
    def view(self) -> str:
        """Render the screen's content."""

    @abstractmethod
    def name(self) -> str:
        """Return the name shown in the breadcrumbs."""

    def layout(self) -> tuple[str, int]:
        """Return the layout mode, ``"centered"`` or ``"full"``, and the maximum width."""
        return ("full", 0)

    def shortcuts(self) -> list[ShortcutHint]:
        """Return the shortcuts shown in the footer."""
        return []


ViewFactory = Callable[[Any, "Styles", str], Screen]


@dataclass(frozen=True)
class ViewModule:
    """A registered view: its factory and preferred layout."""

    create: ViewFactory
    layout: str = "full"
    max_width: int = 0