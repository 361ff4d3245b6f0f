"""A directory of .txt files used as a simple database."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from clappie.filestore.meta import MetaBlock, format_file, parse_file

_EXTENSION = ".txt"


@dataclass(frozen=True)
class Entry:
    """A stored file: name without extension, full path and modification time."""

    name: str
    path: str
    mod_time: datetime


def list_entries(directory: str | os.PathLike[str]) -> list[Entry]:
    """Return the .txt files in a directory, newest first.

    A missing directory yields an empty list.
    """
    try:
        scanned = list(os.scandir(directory))
    except FileNotFoundError:
        return []

    entries: list[Entry] = []
    for item in scanned:
        if not item.name.endswith(_EXTENSION):
            continue
        try:
            if item.is_dir():
                continue
            info = item.stat()
        except OSError:
            continue
        entries.append(
            Entry(
                name=item.name[: -len(_EXTENSION)],
                path=os.path.join(os.fspath(directory), item.name),
                mod_time=datetime.fromtimestamp(info.st_mtime),
            )
        )

    entries.sort(key=lambda e: e.mod_time, reverse=True)
    return entries


def read_file(path: str | os.PathLike[str]) -> str:
    """Read a text file."""
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def write_file(path: str | os.PathLike[str], content: str) -> None:
    """Write a text file, creating parent directories as needed."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(content)


def delete_file(path: str | os.PathLike[str]) -> None:
    """Remove a file; a file that is already gone is not an error."""
    Path(path).unlink(missing_ok=True)


def exists(path: str | os.PathLike[str]) -> bool:
    """Tell whether something exists at the path."""
    return os.path.exists(path)


def file_path(directory: str | os.PathLike[str], name: str) -> str:
    """Return the path of a named entry, adding the .txt extension if absent."""
    if not name.endswith(_EXTENSION):
        name += _EXTENSION
    return os.path.join(os.fspath(directory), name)


def count(directory: str | os.PathLike[str]) -> int:
    """Count the .txt files in a directory; 0 if it cannot be read."""
    try:
        with os.scandir(directory) as items:
            return sum(
                1 for item in items if item.name.endswith(_EXTENSION) and not item.is_dir()
            )
    except OSError:
        return 0


def read_and_parse(path: str | os.PathLike[str]) -> tuple[str, list[MetaBlock]]:
    """Read a file and split it into body and metadata blocks."""
    return parse_file(read_file(path))


def write_with_meta(
    path: str | os.PathLike[str], body: str, blocks: list[MetaBlock]
) -> None:
    """Write a file made of a body and metadata blocks."""
    write_file(path, format_file(body, blocks))