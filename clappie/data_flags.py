"""Turning ``-d`` command-line values into a JSON document."""

from __future__ import annotations

import json
from collections.abc import Sequence

_GO_STYLE_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class DataFlagError(ValueError):
    """A data flag could not be understood or its file could not be read."""


def _reject_constant(name: str) -> float:
    raise ValueError(f"invalid JSON constant {name}")


def _is_valid_json(text: str) -> bool:
    try:
        json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return False
    return True


def _encode(mapping: dict[str, str]) -> str:
    text = json.dumps(mapping, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    for char, escape in _GO_STYLE_ESCAPES.items():
        text = text.replace(char, escape)
    return text


def parse_data(flags: Sequence[str]) -> str | None:
    """Build JSON text from data flags, or None when there are none.

    A single flag holding a JSON object is passed through unchanged.
    Otherwise each flag is ``key=value`` or ``key=@file``, the latter taking
    the file's stripped content as the value.
    """
    if not flags:
        return None

    if len(flags) == 1 and flags[0].strip().startswith("{") and _is_valid_json(flags[0]):
        return flags[0]

    result: dict[str, str] = {}
    for flag in flags:
        idx = flag.find("=@")
        if idx > 0:
            key, source = flag[:idx], flag[idx + 2:]
            try:
                with open(source, encoding="utf-8") as handle:
                    content = handle.read()
            except OSError as exc:
                raise DataFlagError(f"read data file {source}: {exc}") from exc
            result[key] = content.strip()
            continue

        idx = flag.find("=")
        if idx > 0:
            result[flag[:idx]] = flag[idx + 1:]
            continue

        raise DataFlagError(
            f"invalid data flag: {json.dumps(flag)} (expected key=value or key=@file)"
        )

    return _encode(result)