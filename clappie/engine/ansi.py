"""Measuring and fitting terminal text that may hold ANSI escapes and wide characters."""

from __future__ import annotations

import os
import re
import unicodedata

from wcwidth import wcwidth

_ANSI_PATTERN = re.compile(r"\x1b\[[0-9;]*[a-zA-Z]|\x1b\].*?\x1b\\|\x1b\][^\x07]*\x07")


def _ambiguous_is_wide() -> bool:
    wide = bool(os.environ.get("MSYSTEM")) or os.environ.get("TERM_PROGRAM") == "mintty"
    override = os.environ.get("GO_CLAPPIE_EAST_ASIAN_WIDTH")
    if override == "1":
        return True
    if override == "0":
        return False
    return wide


# Some terminals (MinTTY among them) draw East Asian ambiguous-width
# characters, such as box drawing and bullets, two cells wide.
_AMBIGUOUS_WIDE = _ambiguous_is_wide()


def _char_width(char: str) -> int:
    width = wcwidth(char)
    if width < 0:
        return 0
    if width == 1 and _AMBIGUOUS_WIDE and unicodedata.east_asian_width(char) == "A":
        return 2
    return width


def strip_ansi(s: str) -> str:
    """Remove every ANSI escape sequence."""
    return _ANSI_PATTERN.sub("", s)


def visual_width(s: str) -> int:
    """Return the number of terminal cells the text occupies."""
    return sum(_char_width(char) for char in strip_ansi(s))


def truncate_to_width(s: str, max_width: int, ellipsis: str) -> str:
    """Cut the text to fit ``max_width`` cells, ending it with ``ellipsis``.

    Text that already fits is returned untouched; truncated text loses its
    ANSI escapes.
    """
    if visual_width(s) <= max_width:
        return s

    target = max(0, max_width - visual_width(ellipsis))
    kept: list[str] = []
    width = 0
    for char in strip_ansi(s):
        char_width = _char_width(char)
        if width + char_width > target:
            break
        kept.append(char)
        width += char_width
    return "".join(kept) + ellipsis


def pad_right(s: str, width: int) -> str:
    """Pad with spaces on the right up to ``width`` cells."""
    missing = width - visual_width(s)
    if missing <= 0:
        return s
    return s + " " * missing


def pad_center(s: str, width: int) -> str:
    """Center within ``width`` cells, the extra space going to the right."""
    text_width = visual_width(s)
    if text_width >= width:
        return s
    left = (width - text_width) // 2
    right = width - text_width - left
    return " " * left + s + " " * right


def repeat_to_width(ch: str, width: int) -> str:
    """Repeat ``ch`` as many whole times as fit in ``width`` cells."""
    ch_width = visual_width(ch)
    if ch_width <= 0 or width <= 0:
        return ""
    return ch * (width // ch_width)