"""Chores: tasks waiting for a human to approve, reject or shelve them."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from clappie.filestore.meta import MetaBlock, get_meta, set_meta_field
from clappie.filestore.paths import timestamped_name
from clappie.filestore.store import (
    Entry,
    delete_file,
    file_path,
    list_entries,
    read_and_parse,
    read_file,
    write_file,
    write_with_meta,
)

_META_TAG = "chore-meta"
_CREATED_FORMAT = "%Y-%m-%d %H:%M"


class ChoreStatus(str, Enum):
    """Stages in a chore's life."""

    PENDING = "pending"
    APPROVED = "approved"
    COMPLETED = "completed"
    REJECTED = "rejected"
    SHELVED = "shelved"


@dataclass
class Chore:
    """A task that needs a human decision."""

    name: str
    path: str = ""
    title: str = ""
    summary: str = ""
    icon: str = ""
    context: str = ""
    status: str = ""
    created: datetime | None = None
    body: str = ""


def create(chores_dir: str | os.PathLike[str], chore: Chore) -> None:
    """Write a new pending chore into the chores directory."""
    Path(chores_dir).mkdir(parents=True, exist_ok=True)
    path = file_path(chores_dir, chore.name)
    blocks = [
        MetaBlock(
            tag=_META_TAG,
            fields={
                "title": chore.title,
                "summary": chore.summary,
                "icon": chore.icon,
                "context": chore.context,
                "status": ChoreStatus.PENDING.value,
                "created": datetime.now().strftime(_CREATED_FORMAT),
            },
        )
    ]
    write_with_meta(path, chore.body, blocks)


def get_pending(chores_dir: str | os.PathLike[str]) -> list[Chore]:
    """Return the chores that are still pending, newest first."""
    return _list_by_status(chores_dir, ChoreStatus.PENDING)


def get_all(chores_dir: str | os.PathLike[str]) -> list[Chore]:
    """Return every chore, newest first."""
    return _list_by_status(chores_dir, None)


def _list_by_status(
    chores_dir: str | os.PathLike[str], status: ChoreStatus | None
) -> list[Chore]:
    chores: list[Chore] = []
    for entry in list_entries(chores_dir):
        try:
            chore = _read_chore(entry)
        except (OSError, UnicodeDecodeError):
            continue
        if status is None or chore.status == status.value:
            chores.append(chore)
    return chores


def _read_chore(entry: Entry) -> Chore:
    body, blocks = read_and_parse(entry.path)
    chore = Chore(name=entry.name, path=entry.path, body=body)

    meta = get_meta(blocks, _META_TAG)
    if meta is not None:
        fields = meta.fields
        chore.title = fields.get("title", "")
        chore.summary = fields.get("summary", "")
        chore.icon = fields.get("icon", "")
        chore.context = fields.get("context", "")
        chore.status = fields.get("status", "")
        created = fields.get("created")
        if created is not None:
            try:
                chore.created = datetime.strptime(created, _CREATED_FORMAT)
            except ValueError:
                pass

    if not chore.title:
        chore.title = entry.name
    return chore


def approve(chores_dir: str | os.PathLike[str], name: str) -> None:
    """Mark a chore approved."""
    _set_status(chores_dir, name, ChoreStatus.APPROVED)


def complete(
    chores_dir: str | os.PathLike[str], log_dir: str | os.PathLike[str], name: str
) -> None:
    """Mark a chore completed and move it into the log directory."""
    _set_status(chores_dir, name, ChoreStatus.COMPLETED)

    src_path = file_path(chores_dir, name)
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    dst_path = file_path(log_dir, timestamped_name(name))

    write_file(dst_path, read_file(src_path))
    delete_file(src_path)


def reject(chores_dir: str | os.PathLike[str], name: str) -> None:
    """Mark a chore rejected."""
    _set_status(chores_dir, name, ChoreStatus.REJECTED)


def shelve(chores_dir: str | os.PathLike[str], name: str) -> None:
    """Put a chore aside for later."""
    _set_status(chores_dir, name, ChoreStatus.SHELVED)


def _set_status(
    chores_dir: str | os.PathLike[str], name: str, status: ChoreStatus
) -> None:
    path = file_path(chores_dir, name)
    body, blocks = read_and_parse(path)
    set_meta_field(blocks, _META_TAG, "status", status.value)
    write_with_meta(path, body, blocks)