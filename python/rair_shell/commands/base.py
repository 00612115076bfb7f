"""Command base classes for rair-shell."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, NoReturn, Sequence

from ..errors import UsageError
from ..parser import parse_int

if TYPE_CHECKING:  # pragma: no cover
    from ..context import ShellContext


class CommandArgumentParser(argparse.ArgumentParser):
    """argparse variant that raises instead of printing and exiting."""

    def __init__(self, prog: str) -> None:
        super().__init__(prog=prog, add_help=False)

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def address(text: str) -> int:
    """argparse ``type=`` hook accepting any integer literal."""
    try:
        return parse_int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


@dataclass
class Command:
    """Abstract command description."""

    name: str
    description: str
    aliases: Sequence[str] = field(default_factory=tuple)
    usage: Sequence[str] = field(default_factory=tuple)

    def run(self, ctx: "ShellContext", argv: List[str]) -> None:
        raise NotImplementedError("Command must implement run()")

    def help(self, ctx: "ShellContext") -> None:
        names = " | ".join([self.name, *self.aliases])
        ctx.stdout.writeln(f"Command: [{names}]")
        ctx.stdout.writeln()
        ctx.stdout.writeln(self.description)
        if self.usage:
            ctx.stdout.writeln("Usage:")
            for line in self.usage:
                ctx.stdout.writeln(f"  {line}")

    def format_help(self) -> str:
        return f"{self.name:<12} {self.description}"
