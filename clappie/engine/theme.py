"""Colour palettes for dark and light mode, with per-project overrides."""

from __future__ import annotations

import contextlib
import os
import re
from pathlib import Path
from typing import NamedTuple


class RGB(NamedTuple):
    """A colour as red, green and blue components."""

    r: int
    g: int
    b: int


_FALLBACK = RGB(128, 128, 128)
_HEX_PATTERN = re.compile(r"[0-9a-fA-F]{6}")
_MODES = ("light", "dark")

_SHARED = {
    "crab": RGB(200, 150, 50),
    # Garden
    "grass1": RGB(80, 160, 60),
    "grass2": RGB(60, 140, 45),
    "grass3": RGB(90, 170, 70),
    "grass4": RGB(70, 150, 55),
    "stem": RGB(60, 130, 40),
    "dirt": RGB(140, 110, 80),
    "pebbles": RGB(180, 170, 160),
    # Flowers
    "flowerWhite": RGB(255, 255, 255),
    "flowerRed": RGB(220, 60, 80),
    "flowerPurple": RGB(160, 100, 200),
    "flowerBlue": RGB(100, 140, 220),
    "flowerPink": RGB(240, 140, 180),
    "flowerOrange": RGB(240, 160, 60),
}

LIGHT_COLORS: dict[str, RGB] = {
    "background": RGB(245, 243, 238),
    "primary": RGB(60, 100, 200),
    "text": RGB(30, 30, 30),
    "textMuted": RGB(120, 120, 120),
    "border": RGB(200, 195, 185),
    "divider": RGB(220, 215, 205),
    "success": RGB(40, 167, 69),
    "error": RGB(220, 53, 69),
    "warning": RGB(255, 193, 7),
    "info": RGB(23, 162, 184),
    "highlight": RGB(255, 248, 220),
    "accent": RGB(106, 90, 205),
    # Sky
    "sky": RGB(135, 195, 235),
    "cloudBright": RGB(255, 255, 255),
    "cloudMid": RGB(230, 235, 240),
    "sunCore": RGB(255, 220, 100),
    "skyTitle": RGB(255, 255, 255),
    "skyLead": RGB(200, 220, 240),
    # Sprites
    "spriteEyes": RGB(30, 30, 30),
    **_SHARED,
}

DARK_COLORS: dict[str, RGB] = {
    "background": RGB(28, 28, 32),
    "primary": RGB(100, 140, 230),
    "text": RGB(240, 240, 240),
    "textMuted": RGB(140, 140, 150),
    "border": RGB(60, 60, 70),
    "divider": RGB(50, 50, 60),
    "success": RGB(60, 187, 89),
    "error": RGB(240, 73, 89),
    "warning": RGB(255, 213, 27),
    "info": RGB(43, 182, 204),
    "highlight": RGB(50, 48, 40),
    "accent": RGB(136, 120, 225),
    # Sky
    "sky": RGB(28, 28, 32),
    "cloudBright": RGB(60, 60, 70),
    "cloudMid": RGB(50, 50, 60),
    "sunCore": RGB(200, 180, 80),
    "skyTitle": RGB(240, 240, 240),
    "skyLead": RGB(140, 140, 150),
    # Sprites
    "spriteEyes": RGB(240, 240, 240),
    **_SHARED,
}


def hex_to_rgb(text: str) -> RGB | None:
    """Parse ``#rrggbb`` (the ``#`` is optional); None if it is not valid."""
    digits = text.removeprefix("#")
    if not _HEX_PATTERN.fullmatch(digits):
        return None
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _theme_dir(root: str | os.PathLike[str]) -> Path:
    return Path(root) / "recall" / "settings" / "theme"


class Theme:
    """The active colour scheme: a mode palette with overrides applied."""

    def __init__(self) -> None:
        self._mode = "dark"
        self._overrides: dict[str, RGB] = {}
        self._colors: dict[str, RGB] = {}
        self.root: str | None = None
        self._update_colors()

    @property
    def mode(self) -> str:
        """The current mode name, ``"dark"`` or ``"light"``."""
        return self._mode

    def init_from_root(self, root: str | os.PathLike[str]) -> None:
        """Load the saved mode and colour overrides of a project."""
        self.root = os.fspath(root)
        theme_dir = _theme_dir(root)

        try:
            mode = (theme_dir / "mode.txt").read_text(encoding="utf-8").strip()
        except OSError:
            mode = ""
        if mode in _MODES:
            self._mode = mode

        try:
            overrides = (theme_dir / "colors.txt").read_text(encoding="utf-8")
        except OSError:
            overrides = ""
        for raw in overrides.split("\n"):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            name, sep, value = line.partition("=")
            if not sep:
                continue
            rgb = hex_to_rgb(value.strip())
            if rgb is not None:
                self._overrides[name.strip()] = rgb

        self._update_colors()

    def _update_colors(self) -> None:
        palette = DARK_COLORS if self._mode == "dark" else LIGHT_COLORS
        self._colors = {**palette, **self._overrides}

    def is_dark(self) -> bool:
        """Tell whether dark mode is active."""
        return self._mode == "dark"

    def set_mode(self, mode: str) -> None:
        """Switch mode, saving it to the project when one is loaded."""
        self._mode = mode
        self._update_colors()
        if self.root:
            theme_dir = _theme_dir(self.root)
            with contextlib.suppress(OSError):
                theme_dir.mkdir(parents=True, exist_ok=True)
                (theme_dir / "mode.txt").write_text(mode, encoding="utf-8")

    def toggle(self) -> None:
        """Switch between dark and light mode."""
        self.set_mode("light" if self._mode == "dark" else "dark")

    def color(self, name: str) -> RGB:
        """Return a named colour, or mid grey for an unknown name."""
        return self._colors.get(name, _FALLBACK)