"""Virtual memory mapping commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .base import Command, CommandArgumentParser, address
from ..errors import AddressError, UsageError
from ..output import error_msg

if TYPE_CHECKING:  # pragma: no cover
    from ..context import ShellContext


class MapCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "map",
            "Map a physical range into the virtual address space",
            usage=("map paddr vaddr size",),
        )
        parser = CommandArgumentParser("map")
        parser.add_argument("paddr", type=address)
        parser.add_argument("vaddr", type=address)
        parser.add_argument("size", type=address)
        self._parser = parser

    def run(self, ctx: "ShellContext", argv: List[str]) -> None:
        try:
            args = self._parser.parse_args(argv)
            ctx.io.map(args.paddr, args.vaddr, args.size)
        except (UsageError, AddressError) as exc:
            error_msg(ctx, "Failed to map memory.", str(exc))


class UnmapCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "unmap",
            "Remove a virtual range from the address space",
            aliases=("um",),
            usage=("unmap vaddr size",),
        )
        parser = CommandArgumentParser("unmap")
        parser.add_argument("vaddr", type=address)
        parser.add_argument("size", type=address)
        self._parser = parser

    def run(self, ctx: "ShellContext", argv: List[str]) -> None:
        try:
            args = self._parser.parse_args(argv)
            ctx.io.unmap(args.vaddr, args.size)
        except (UsageError, AddressError) as exc:
            error_msg(ctx, "Failed to unmap memory.", str(exc))


class ListMapsCommand(Command):
    def __init__(self) -> None:
        super().__init__("maps", "List virtual mappings")

    def run(self, ctx: "ShellContext", argv: List[str]) -> None:
        if argv:
            error_msg(ctx, "Failed to list maps.", f"Expected 0 arguments, found {len(argv)}.")
            return
        ctx.stdout.writeln(f"{'Virtual Address':<19} {'Physical Address':<19} Size")
        for mapping in ctx.io.maps():
            ctx.stdout.writeln(f"{f'0x{mapping.vaddr:x}':<19} {f'0x{mapping.paddr:x}':<19} 0x{mapping.size:x}")
