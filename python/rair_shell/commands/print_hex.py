"""Hex dump command."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .base import Command
from ..address_space import U64_MAX
from ..output import error_msg, render_hex
from ..parser import parse_int

if TYPE_CHECKING:  # pragma: no cover
    from ..context import ShellContext


class PrintHexCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "printHex",
            "Hex dump bytes at the current address",
            aliases=("px",),
            usage=("printHex size    dump size bytes using the current addressing mode",),
        )

    def run(self, ctx: "ShellContext", argv: List[str]) -> None:
        if len(argv) != 1:
            error_msg(ctx, "Failed to print data.", f"Expected 1 argument, found {len(argv)}.")
            return
        try:
            size = parse_int(argv[0])
        except ValueError as exc:
            error_msg(ctx, "Failed to print data.", str(exc))
            return
        if size <= 0:
            error_msg(ctx, "Failed to print data.", f"Size must be positive, found {argv[0]}.")
            return
        start = ctx.get_loc()
        # the dump stops at the top of the 64-bit address space
        size = min(size, U64_MAX - start + 1)
        render_hex(ctx.stdout, start, ctx.io.read(start, size, ctx.mode))
