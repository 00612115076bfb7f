"""prompt_toolkit completer for rair-shell."""

from __future__ import annotations

import shlex
from typing import Iterable, List

from prompt_toolkit.completion import CompleteEvent, Completer, Completion, PathCompleter
from prompt_toolkit.document import Document

from .context import ShellContext

PATH_COMMANDS = {"open"}


def _normalise_tokens(text: str) -> List[str]:
    if not text:
        return []
    try:
        tokens = shlex.split(text, posix=True)
        trailing = text[-1].isspace()
    except ValueError:
        tokens = text.strip().split()
        trailing = text.endswith((" ", "\t"))
    if trailing:
        tokens.append("")
    return tokens


class ShellCompleter(Completer):
    """Completes command names, and file paths for ``open``."""

    def __init__(self, ctx: ShellContext) -> None:
        self.ctx = ctx
        self._path = PathCompleter(expanduser=True)

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        tokens = _normalise_tokens(document.text_before_cursor)
        if len(tokens) <= 1:
            prefix = tokens[0] if tokens else ""
            for name in self._command_names(prefix):
                yield Completion(name, start_position=-len(prefix))
            return
        command = self.ctx.commands.get(tokens[0])
        if command is not None and command.name in PATH_COMMANDS and len(tokens) == 2:
            path_doc = Document(tokens[1], cursor_position=len(tokens[1]))
            yield from self._path.get_completions(path_doc, complete_event)

    def _command_names(self, prefix: str) -> List[str]:
        return sorted(name for name in self.ctx.commands.names() if name.startswith(prefix))


__all__ = ["ShellCompleter"]
