"""File loading commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .base import Command, CommandArgumentParser, address
from ..errors import AddressError, UsageError
from ..output import error_msg

if TYPE_CHECKING:  # pragma: no cover
    from ..context import ShellContext


class OpenCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "open",
            "Load a file into the physical address space",
            aliases=("o",),
            usage=("open path [paddr]    defaults to the first free physical address",),
        )
        parser = CommandArgumentParser("open")
        parser.add_argument("path")
        parser.add_argument("paddr", nargs="?", type=address)
        self._parser = parser

    def run(self, ctx: "ShellContext", argv: List[str]) -> None:
        try:
            args = self._parser.parse_args(argv)
            desc = ctx.io.open(args.path, args.paddr)
        except (UsageError, AddressError, OSError) as exc:
            error_msg(ctx, "Failed to open file.", str(exc))
            return
        ctx.stdout.writeln(f"{desc.path} @ 0x{desc.paddr:x} (0x{desc.size:x} bytes)")


class FilesCommand(Command):
    def __init__(self) -> None:
        super().__init__("files", "List opened files")

    def run(self, ctx: "ShellContext", argv: List[str]) -> None:
        if argv:
            error_msg(ctx, "Failed to list files.", f"Expected 0 arguments, found {len(argv)}.")
            return
        ctx.stdout.writeln(f"{'Path':<39} {'Physical Address':<19} Size")
        for desc in ctx.io.files():
            ctx.stdout.writeln(f"{desc.path:<39} {f'0x{desc.paddr:x}':<19} 0x{desc.size:x}")
