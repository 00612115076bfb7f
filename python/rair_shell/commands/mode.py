"""Addressing mode command."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .base import Command
from ..address_space import AddrMode
from ..output import error_msg

if TYPE_CHECKING:  # pragma: no cover
    from ..context import ShellContext


class ModeCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "mode",
            "Show or set the addressing mode",
            aliases=("m",),
            usage=(
                "mode          print the current mode",
                "mode phy      use physical addresses",
                "mode vir      use virtual addresses",
            ),
        )

    def run(self, ctx: "ShellContext", argv: List[str]) -> None:
        if not argv:
            ctx.stdout.writeln(ctx.mode.value)
            return
        if len(argv) != 1:
            error_msg(ctx, "Failed to set mode.", f"Expected 1 argument, found {len(argv)}.")
            return
        try:
            ctx.mode = AddrMode.parse(argv[0])
        except ValueError as exc:
            error_msg(ctx, "Failed to set mode.", str(exc))
