"""Demonstration views and the party status view."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from clappie.engine.messages import Cmd, KeyMsg, toast_cmd
from clappie.engine.screen import Screen, ShortcutHint
from clappie.engine.styles import Style, Styles

_BOLD = Style(bold=True)
_FAINT = Style(faint=True)


class HelloWorldScreen(Screen):
    """A greeting with a party mode toggled by P."""

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        styles: Styles | None = None,
        claude_pane: str = "",
    ) -> None:
        self.party_mode = False
        self.styles = styles

    def update(self, msg: Any) -> Cmd:
        """Toggle party mode on P."""
        if isinstance(msg, KeyMsg) and msg.key in ("p", "P"):
            self.party_mode = not self.party_mode
        return None

    def view(self) -> str:
        """Render the greeting."""
        lines = ["", "  Hello, World!", ""]
        if self.party_mode:
            lines.extend(["  🎉🎊🥳🎉🎊🥳🎉", ""])
        lines.extend(
            [
                _FAINT.render("  Welcome to Go-Clappie!"),
                _FAINT.render("  This is a demo display."),
                "",
                f"  Party mode: {'true' if self.party_mode else 'false'}",
            ]
        )
        return "\n".join(lines)

    def name(self) -> str:
        return "Hello"

    def layout(self) -> tuple[str, int]:
        return ("centered", 50)

    def shortcuts(self) -> list[ShortcutHint]:
        return [ShortcutHint("P", "Party")]


class PartiesStatusScreen(Screen):
    """The status of one party game."""

    def __init__(
        self,
        data: Mapping[str, Any] | None = None,
        styles: Styles | None = None,
        claude_pane: str = "",
    ) -> None:
        game = data.get("game") if data else None
        self.game_name = game if isinstance(game, str) else ""
        self.styles = styles

    def update(self, msg: Any) -> Cmd:
        """Announce the launch on L."""
        if isinstance(msg, KeyMsg) and msg.key in ("l", "L"):
            return toast_cmd("Launching simulation...", 0)
        return None

    def view(self) -> str:
        """Render the game name and a status line."""
        return "\n".join(
            [
                "",
                "  Game: " + _BOLD.render(self.game_name),
                "",
                _FAINT.render("  Status view - simulation details will appear here."),
            ]
        )

    def name(self) -> str:
        return "Party Status"

    def layout(self) -> tuple[str, int]:
        return ("centered", 70)

    def shortcuts(self) -> list[ShortcutHint]:
        return [ShortcutHint("L", "Launch")]