"""Error types raised inside the rair shell core."""

from __future__ import annotations

from typing import Sequence


class ShellError(Exception):
    """Base class for shell errors."""


class DuplicateCommand(ShellError):
    def __init__(self, name: str) -> None:
        super().__init__(f"command {name!r} already registered")
        self.name = name


class CommandNotFound(ShellError):
    def __init__(self, name: str, suggestions: Sequence[str] = ()) -> None:
        super().__init__(f"command {name!r} not found")
        self.name = name
        self.suggestions = list(suggestions)


class AddressError(ShellError, ValueError):
    """Raised for out-of-range cursors and unmapped or overlapping ranges."""


class UsageError(ShellError):
    """Raised when an operation receives malformed arguments."""


__all__ = [
    "ShellError",
    "DuplicateCommand",
    "CommandNotFound",
    "AddressError",
    "UsageError",
]
