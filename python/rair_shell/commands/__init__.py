"""Command registry for rair-shell."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from ..errors import DuplicateCommand
from ..spelltree import SpellTree
from .base import Command
from .exit import ExitCommand
from .files import FilesCommand, OpenCommand
from .help import HelpCommand
from .mapping import ListMapsCommand, MapCommand, UnmapCommand
from .mode import ModeCommand
from .print_hex import PrintHexCommand
from .seek import SeekCommand

LOGGER = logging.getLogger("rair_shell.commands")

Entry = Tuple[str, Command]

SUGGESTION_DISTANCE = 2


class CommandRegistry:
    """Maps command names to commands; names are unique.

    Aliases are ordinary entries that happen to point at the same
    command object.
    """

    def __init__(self) -> None:
        self._tree: SpellTree[Command] = SpellTree()

    def __len__(self) -> int:
        return len(self._tree)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and bool(self.lookup_exact(name))

    def register(self, name: str, command: Command) -> None:
        """Bind *name* to *command*; raises DuplicateCommand on collision."""
        exact, _ = self.find(name, 0)
        if exact or not self._tree.insert(name, command):
            LOGGER.debug("rejected duplicate command %s", name)
            raise DuplicateCommand(name)
        LOGGER.debug("registered command %s -> %s", name, command.name)

    def find(self, name: str, max_distance: int) -> Tuple[List[Entry], List[Entry]]:
        return self._tree.find(name, max_distance)

    def lookup_exact(self, name: str) -> List[Entry]:
        exact, _ = self.find(name, 0)
        return exact

    def lookup_similar(self, name: str, max_distance: int = SUGGESTION_DISTANCE) -> List[Entry]:
        _, similar = self.find(name, max_distance)
        return similar

    def get(self, name: str) -> Optional[Command]:
        exact = self.lookup_exact(name)
        return exact[0][1] if exact else None

    def names(self) -> List[str]:
        return [name for name, _ in self._tree.items()]

    def list_commands(self) -> Iterable[Command]:
        seen: List[Command] = []
        for _, command in self._tree.items():
            if not any(command is known for known in seen):
                seen.append(command)
        return seen


def default_commands() -> List[Command]:
    return [
        MapCommand(),
        ListMapsCommand(),
        ModeCommand(),
        PrintHexCommand(),
        SeekCommand(),
        UnmapCommand(),
        OpenCommand(),
        FilesCommand(),
        HelpCommand(),
        ExitCommand(),
    ]


__all__ = ["Command", "CommandRegistry", "SUGGESTION_DISTANCE", "default_commands"]
