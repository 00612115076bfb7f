"""Help command."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .base import Command

if TYPE_CHECKING:  # pragma: no cover
    from ..context import ShellContext


class HelpCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "help",
            "Show available commands",
            aliases=("?",),
            usage=("help            list commands", "help command    describe one command", "command?        same as help command"),
        )

    def run(self, ctx: "ShellContext", argv: List[str]) -> None:
        if argv:
            for name in argv:
                ctx.help(name)
            return
        for command in ctx.commands.list_commands():
            ctx.stdout.writeln(command.format_help())
