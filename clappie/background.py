"""Discovery of clapps that can run in the background."""

from __future__ import annotations

import os
from dataclasses import dataclass

_MARKER = ".background"


@dataclass
class App:
    """A background-capable app and, when known, its running session."""

    name: str
    path: str
    running: bool = False
    session: str = ""


def discover(clapps_dir: str | os.PathLike[str]) -> list[App]:
    """Return the app directories that hold a ``.background`` marker, by name.

    A missing directory yields an empty list.
    """
    try:
        with os.scandir(clapps_dir) as items:
            directories = sorted(item.name for item in items if item.is_dir())
    except FileNotFoundError:
        return []

    base = os.fspath(clapps_dir)
    apps: list[App] = []
    for name in directories:
        app_path = os.path.join(base, name)
        if os.path.exists(os.path.join(app_path, _MARKER)):
            apps.append(App(name=name, path=app_path))
    return apps