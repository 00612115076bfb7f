"""Command line parsing helpers for rair-shell."""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from typing import List, Optional

from .address_space import U64_MAX


@dataclass
class CommandLine:
    """One parsed input line: ``cmd args... [@ addr]`` or ``cmd?``."""

    command: str
    args: List[str] = field(default_factory=list)
    at: Optional[int] = None
    help: bool = False


def parse_int(text: str) -> int:
    """Parse an integer literal (``0x``/``0o``/``0b`` prefixes allowed)."""
    return int(text.strip().replace("_", ""), 0)


def _parse_address(text: str) -> int:
    value = parse_int(text)
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"address {text} is outside the 64-bit address space")
    return value


def split_command(line: str) -> List[str]:
    """Split a command line into argv tokens using shlex rules."""
    if not line:
        return []
    return shlex.split(line, comments=False, posix=True)


def parse_line(line: str) -> Optional[CommandLine]:
    """Parse *line*; returns None for blank lines and comments.

    Raises ValueError on unbalanced quotes, a dangling ``@`` or a
    malformed address.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    argv = split_command(stripped)
    if not argv:
        return None
    at: Optional[int] = None
    if "@" in argv:
        pos = argv.index("@")
        tail = argv[pos + 1 :]
        if len(tail) != 1:
            raise ValueError("expected exactly one address after '@'")
        at = _parse_address(tail[0])
        argv = argv[:pos]
    elif len(argv) > 1 and argv[-1].startswith("@"):
        at = _parse_address(argv[-1][1:])
        argv = argv[:-1]
    if not argv:
        raise ValueError("missing command before '@'")
    name, *args = argv
    if name.endswith("?") and len(name) > 1:
        return CommandLine(name[:-1], args, at, help=True)
    return CommandLine(name, args, at)


__all__ = ["CommandLine", "parse_int", "parse_line", "split_command"]
