"""Terminal text styles derived from the active theme."""

from __future__ import annotations

from dataclasses import dataclass

from clappie.engine.theme import RGB, Theme, hex_to_rgb

_RESET = "\x1b[0m"


def rgb_to_hex(color: RGB) -> str:
    """Format a colour as ``#rrggbb``."""
    return f"#{color.r:02x}{color.g:02x}{color.b:02x}"


def _color_code(prefix: str, hex_color: str) -> str:
    rgb = hex_to_rgb(hex_color)
    if rgb is None:
        raise ValueError(f"invalid colour: {hex_color!r}")
    return f"{prefix};2;{rgb.r};{rgb.g};{rgb.b}"


@dataclass(frozen=True)
class Style:
    """Colours, weight and horizontal padding applied to rendered text."""

    foreground: str | None = None
    background: str | None = None
    bold: bool = False
    faint: bool = False
    padding: int = 0
    border_foreground: str | None = None

    def _codes(self) -> list[str]:
        codes: list[str] = []
        if self.bold:
            codes.append("1")
        if self.faint:
            codes.append("2")
        if self.foreground:
            codes.append(_color_code("38", self.foreground))
        if self.background:
            codes.append(_color_code("48", self.background))
        return codes

    def render(self, text: str) -> str:
        """Return the text padded and wrapped in ANSI codes, line by line."""
        pad = " " * self.padding
        codes = self._codes()
        lines = []
        for line in text.split("\n"):
            line = f"{pad}{line}{pad}"
            if codes:
                line = f"\x1b[{';'.join(codes)}m{line}{_RESET}"
            lines.append(line)
        return "\n".join(lines)


class Styles:
    """Style presets built from a theme; call refresh after it changes."""

    def __init__(self, theme: Theme) -> None:
        self.theme = theme
        self.refresh()

    def refresh(self) -> None:
        """Rebuild every style from the theme's current colours."""
        color = self.theme.color
        bg = rgb_to_hex(color("background"))
        fg = rgb_to_hex(color("text"))
        muted = rgb_to_hex(color("textMuted"))

        self.background = Style(background=bg)
        self.text = Style(foreground=fg)
        self.text_muted = Style(foreground=muted)
        self.bold = Style(foreground=fg, bold=True)

        self.success = Style(foreground=rgb_to_hex(color("success")))
        self.error = Style(foreground=rgb_to_hex(color("error")))
        self.warning = Style(foreground=rgb_to_hex(color("warning")))
        self.info = Style(foreground=rgb_to_hex(color("info")))

        self.header_style = Style(foreground=fg, background=bg)
        self.toast_style = Style(
            foreground="#000000", background="#ffcc00", bold=True, padding=1
        )
        self.border_focused = Style(border_foreground=rgb_to_hex(color("primary")))
        self.border_normal = Style(border_foreground=rgb_to_hex(color("border")))
        self.shortcut_key = Style(foreground=muted)
        self.shortcut_label = Style(foreground=fg)
        self.selected_item = Style(foreground=fg, bold=True)
        self.breadcrumb_style = Style(foreground=muted)