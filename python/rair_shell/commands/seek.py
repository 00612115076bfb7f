"""Seek command."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .base import Command
from ..errors import AddressError
from ..output import error_msg
from ..parser import parse_int

if TYPE_CHECKING:  # pragma: no cover
    from ..context import ShellContext


class SeekCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "seek",
            "Show or move the current address cursor",
            aliases=("s",),
            usage=(
                "seek          print the current address",
                "seek +off     move forward by off",
                "seek -off     move backward by off",
                "seek addr     move to addr",
            ),
        )

    def run(self, ctx: "ShellContext", argv: List[str]) -> None:
        if not argv:
            ctx.stdout.writeln(f"0x{ctx.get_loc():x}")
            return
        if len(argv) != 1:
            error_msg(ctx, "Failed to seek.", f"Expected 1 argument, found {len(argv)}.")
            return
        text = argv[0]
        try:
            if text.startswith(("+", "-")):
                offset = parse_int(text[1:])
                target = ctx.get_loc() + offset if text[0] == "+" else ctx.get_loc() - offset
            else:
                target = parse_int(text)
            ctx.set_loc(target)
        except ValueError as exc:
            error_msg(ctx, "Failed to seek.", str(exc))
