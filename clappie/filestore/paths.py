"""Locations of logs and settings under a project root."""

from __future__ import annotations

import os
from datetime import datetime


def log_path(root: str | os.PathLike[str], category: str) -> str:
    """Return the log directory for a category."""
    return os.path.join(os.fspath(root), "recall", "logs", category)


def chore_log_path(root: str | os.PathLike[str]) -> str:
    """Return the chore log directory."""
    return log_path(root, "chores")


def heartbeat_log_path(root: str | os.PathLike[str]) -> str:
    """Return the heartbeat log directory."""
    return log_path(root, "heartbeat")


def sidekick_log_path(root: str | os.PathLike[str]) -> str:
    """Return the sidekick log directory."""
    return log_path(root, "sidekicks")


def notification_log_path(root: str | os.PathLike[str]) -> str:
    """Return the notification log directory."""
    return log_path(root, "notifications")


def timestamped_name(name: str) -> str:
    """Prefix a name with the current local time, e.g. 2025-01-31-142501-name."""
    return datetime.now().strftime("%Y-%m-%d-%H%M%S") + "-" + name


def settings_path(root: str | os.PathLike[str], name: str) -> str:
    """Return the path of a settings file."""
    return os.path.join(os.fspath(root), "recall", "settings", name)