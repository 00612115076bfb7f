"""Tests for history location and persistence."""

from __future__ import annotations

import io
import sys

import pytest
from prompt_toolkit.history import FileHistory, InMemoryHistory

from rair_shell.context import ShellContext
from rair_shell.history import history_path, open_history
from rair_shell.output import Writer
from rair_shell.repl import ShellREPL


def _saved_lines(path):
    return list(reversed(list(FileHistory(str(path)).load_history_strings())))


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="XDG layout only")
def test_history_path_follows_xdg_data_home(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    assert history_path() == tmp_path / "rair" / "history"


def test_open_history_creates_missing_directories(tmp_path):
    target = tmp_path / "rair" / "history"
    history = open_history(target)
    assert isinstance(history, FileHistory)
    assert target.exists()


def test_open_history_without_path_is_in_memory():
    assert isinstance(open_history(None), InMemoryHistory)


def test_open_history_falls_back_when_unwritable(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    assert isinstance(open_history(blocker / "history"), InMemoryHistory)


def test_piped_session_lines_are_persisted(tmp_path, monkeypatch):
    target = tmp_path / "history"
    ctx = ShellContext.new(stdout=Writer.buffer(), stderr=Writer.buffer())
    monkeypatch.setattr(sys, "stdin", io.StringIO("seek 0x10\nseek 0x10\n\npx 4 @ 0x10\n"))
    assert ShellREPL(ctx, history=open_history(target)).run() == 0
    assert _saved_lines(target) == ["seek 0x10", "px 4 @ 0x10"]


def test_history_survives_restart(tmp_path, monkeypatch):
    target = tmp_path / "history"
    for script in ("mode vir\n", "maps\n"):
        ctx = ShellContext.new(stdout=Writer.buffer(), stderr=Writer.buffer())
        monkeypatch.setattr(sys, "stdin", io.StringIO(script))
        ShellREPL(ctx, history=open_history(target)).run()
    assert _saved_lines(target) == ["mode vir", "maps"]
