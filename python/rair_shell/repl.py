"""Interactive REPL for rair-shell."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import History, InMemoryHistory

from .completion import ShellCompleter
from .context import ShellContext
from .parser import parse_line

LOGGER = logging.getLogger("rair_shell.repl")


def execute_line(ctx: ShellContext, line: str) -> bool:
    """Dispatch one input line; returns False if the line did not parse."""
    try:
        parsed = parse_line(line)
    except ValueError as exc:
        ctx.stderr.writeln(f"Parse error: {exc}")
        return False
    if parsed is None:
        return True
    if parsed.help:
        ctx.help(parsed.command)
    elif parsed.at is not None:
        ctx.run_at(parsed.command, parsed.args, parsed.at)
    else:
        ctx.run(parsed.command, parsed.args)
    return True


class ShellREPL:
    """prompt_toolkit REPL with a plain line reader for piped input."""

    def __init__(self, ctx: ShellContext, *, history: Optional[History] = None) -> None:
        self.ctx = ctx
        self.history = history if history is not None else InMemoryHistory()

    def prompt_text(self) -> str:
        return f"[0x{self.ctx.get_loc():08x}]> "

    def run(self) -> int:
        if not sys.stdin.isatty():
            return self._fallback_loop()
        session: PromptSession[str] = PromptSession(history=self.history, completer=ShellCompleter(self.ctx))
        buffer: list[str] = []
        while True:
            try:
                line = session.prompt(self.prompt_text())
            except (EOFError, KeyboardInterrupt):
                self.ctx.stdout.writeln()
                return 0
            self._accept(buffer, line)

    def _fallback_loop(self) -> int:
        buffer: list[str] = []
        for line in sys.stdin:
            self._accept(buffer, line.rstrip("\n"))
        return 0

    def _accept(self, buffer: list[str], line: str) -> None:
        if self._handle_multiline(buffer, line):
            return
        payload = " ".join(buffer) if buffer else line
        buffer.clear()
        self._record_history(payload)
        self._dispatch(payload)

    def _dispatch(self, line: str) -> None:
        try:
            execute_line(self.ctx, line)
        except SystemExit:
            raise
        except Exception as exc:
            LOGGER.exception("command failed")
            self.ctx.stderr.writeln(f"Command '{line.strip()}' failed: {exc}")

    def _handle_multiline(self, buffer: list[str], line: str) -> bool:
        stripped = line.rstrip()
        if stripped.endswith("\\"):
            buffer.append(stripped[:-1])
            return True
        if buffer:
            buffer.append(stripped)
        return False

    def _record_history(self, entry: str) -> None:
        stripped = entry.strip()
        if not stripped:
            return
        strings = self.history.get_strings()
        if strings and strings[-1] == stripped:
            return
        self.history.append_string(stripped)


__all__ = ["ShellREPL", "execute_line"]
