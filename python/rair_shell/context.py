"""Shell session state and command dispatch."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .address_space import U64_MAX, AddressSpace, AddrMode
from .commands import SUGGESTION_DISTANCE, Command, CommandRegistry, default_commands
from .errors import AddressError, CommandNotFound, DuplicateCommand
from .output import Writer, error_msg, rgb_style

LOGGER = logging.getLogger("rair_shell.context")

RGB = Tuple[int, int, int]

DEFAULT_PALETTE: Sequence[RGB] = (
    (0x58, 0x68, 0x75),
    (0xB5, 0x89, 0x00),
    (0xCB, 0x4B, 0x16),
    (0xDC, 0x32, 0x2F),
    (0xD3, 0x36, 0x82),
    (0x6C, 0x71, 0xC4),
    (0x26, 0x8B, 0xD2),
    (0x2A, 0xA1, 0x98),
    (0x85, 0x99, 0x00),
)

SUGGESTION_COLOR_INDEX = 5


def _check_u64(value: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= U64_MAX:
        raise AddressError(f"address {value!r} is outside the 64-bit address space")
    return value


class LocationContext:
    """The session's address cursor."""

    def __init__(self, value: int = 0) -> None:
        self._value = _check_u64(value)

    def get(self) -> int:
        return self._value

    def set(self, value: int) -> None:
        self._value = _check_u64(value)

    @contextmanager
    def override(self, value: int) -> Iterator[int]:
        """Install *value* for the duration of the block.

        The cursor captured on entry is written back on every exit path,
        whatever the block did to the cursor in between.
        """
        _check_u64(value)
        saved = self._value
        self._value = value
        try:
            yield value
        finally:
            self._value = saved


@dataclass
class ShellContext:
    """Holds shared shell state and resolves command names."""

    stdout: Writer = field(default_factory=Writer.stdout)
    stderr: Writer = field(default_factory=Writer.stderr)
    mode: AddrMode = AddrMode.PHY
    io: AddressSpace = field(default_factory=AddressSpace)
    color_palette: List[RGB] = field(default_factory=lambda: list(DEFAULT_PALETTE))
    max_suggestions: Optional[int] = None
    commands: CommandRegistry = field(default_factory=CommandRegistry, repr=False)
    location: LocationContext = field(default_factory=LocationContext)

    @classmethod
    def new(cls, **kwargs) -> "ShellContext":
        """Create a context with the default command set loaded."""
        ctx = cls(**kwargs)
        ctx.load_commands()
        return ctx

    def load_commands(self, commands: Optional[Iterable[Command]] = None) -> None:
        for command in default_commands() if commands is None else commands:
            for name in (command.name, *command.aliases):
                self.add_command(name, command)

    def get_loc(self) -> int:
        return self.location.get()

    def set_loc(self, loc: int) -> None:
        self.location.set(loc)

    def add_command(self, name: str, command: Command) -> bool:
        """Register *command* under *name*; collisions are reported, not raised."""
        try:
            self.commands.register(name, command)
        except DuplicateCommand as exc:
            message = [("Command ", None), (exc.name, "bold"), (" already existed.", None)]
            error_msg(self, "Cannot add this command.", message)
            return False
        return True

    def run(self, command: str, args: Sequence[str] = ()) -> None:
        exact, similar = self.commands.find(command, SUGGESTION_DISTANCE)
        if not exact:
            self._report_not_found(CommandNotFound(command, [name for name, _ in similar]))
            return
        _, operation = exact[0]
        operation.run(self, list(args))

    def run_at(self, command: str, args: Sequence[str], at: int) -> None:
        with self.location.override(at):
            self.run(command, args)

    def help(self, command: str) -> None:
        exact, similar = self.commands.find(command, SUGGESTION_DISTANCE)
        if not exact:
            self._report_not_found(CommandNotFound(command, [name for name, _ in similar]))
            return
        _, operation = exact[0]
        operation.help(self)

    def _report_not_found(self, exc: CommandNotFound) -> None:
        LOGGER.debug("command %s not found (%d similar)", exc.name, len(exc.suggestions))
        error_msg(self, "Execution failed", [("Command ", None), (exc.name, "bold"), (" is not found.", None)])
        names = exc.suggestions
        if self.max_suggestions is not None:
            names = names[: max(0, self.max_suggestions)]
        if not names:
            return
        style = self._suggestion_style()
        self.stderr.write("Similar command: ")
        for idx, name in enumerate(names):
            if idx:
                self.stderr.write(", ")
            self.stderr.write_span(name, style)
        self.stderr.writeln(".")

    def _suggestion_style(self) -> Optional[str]:
        if SUGGESTION_COLOR_INDEX < len(self.color_palette):
            return rgb_style(self.color_palette[SUGGESTION_COLOR_INDEX])
        return None


__all__ = ["DEFAULT_PALETTE", "LocationContext", "ShellContext", "SUGGESTION_COLOR_INDEX"]
