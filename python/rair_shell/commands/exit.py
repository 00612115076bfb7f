"""Exit command."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .base import Command

if TYPE_CHECKING:  # pragma: no cover
    from ..context import ShellContext


class ExitCommand(Command):
    def __init__(self) -> None:
        super().__init__("exit", "Exit the shell", aliases=("quit", "q"))

    def run(self, ctx: "ShellContext", argv: List[str]) -> None:
        raise SystemExit(0)
