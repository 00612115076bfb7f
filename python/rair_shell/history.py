"""Command history location and backing store."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

from prompt_toolkit.history import FileHistory, History, InMemoryHistory

LOGGER = logging.getLogger("rair_shell.history")

APP_NAME = "rair"


def user_data_dir() -> Path:
    """Per-user application data directory for this platform."""
    if sys.platform.startswith("win"):
        base = os.environ.get("APPDATA")
        return Path(base) if base else Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    base = os.environ.get("XDG_DATA_HOME")
    return Path(base) if base else Path.home() / ".local" / "share"


def history_path() -> Path:
    return user_data_dir() / APP_NAME / "history"


def open_history(path: Optional[Union[str, Path]]) -> History:
    """History persisted at *path*, or kept in memory when that is impossible."""
    if path is None:
        return InMemoryHistory()
    target = Path(path).expanduser()
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.touch(exist_ok=True)
    except OSError as exc:
        LOGGER.warning("history disabled, cannot write %s: %s", target, exc)
        return InMemoryHistory()
    return FileHistory(str(target))


__all__ = ["history_path", "open_history", "user_data_dir"]
