"""CLI, script and REPL driver tests for rair-shell."""

from __future__ import annotations

import io
import sys

from prompt_toolkit.history import InMemoryHistory

from rair_shell.cli import _run_script, main
from rair_shell.context import ShellContext
from rair_shell.output import Writer
from rair_shell.repl import ShellREPL, execute_line


def _ctx() -> ShellContext:
    return ShellContext.new(stdout=Writer.buffer(), stderr=Writer.buffer())


def test_execute_line_routes_at_and_help():
    ctx = _ctx()
    assert execute_line(ctx, "seek 0x40")
    assert execute_line(ctx, "seek @ 0x99")
    assert execute_line(ctx, "seek?")
    out = ctx.stdout.utf8_string()
    assert out.startswith("0x99\nCommand: [seek | s]\n")
    assert ctx.get_loc() == 0x40


def test_execute_line_reports_parse_errors():
    ctx = _ctx()
    assert execute_line(ctx, "px 4 @") is False
    assert ctx.stderr.utf8_string().startswith("Parse error: ")


def test_main_single_command_not_found(capsys):
    rc = main(["--no-color", "-c", "seeker"])
    assert rc == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: Execution failed\nCommand seeker is not found.\nSimilar command: seek.\n"


def test_main_opens_file_and_dumps(tmp_path, capsys):
    target = tmp_path / "blob.bin"
    target.write_bytes(b"ABCD")
    rc = main(["--no-color", "-c", "px 4", str(target)])
    assert rc == 0
    assert capsys.readouterr().out.startswith("0x00000000: 41 42 43 44")


def test_main_max_suggestions(capsys):
    rc = main(["--no-color", "--max-suggestions", "1", "-c", "mapz"])
    assert rc == 0
    assert capsys.readouterr().err.splitlines()[-1] == "Similar command: map."


def test_main_parse_error_returns_failure(capsys):
    assert main(["--no-color", "-c", "px 4 @"]) == 1
    assert "Parse error" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main(["--no-color", "-c", "px 1", str(tmp_path / "nope.bin")]) == 1
    assert "Cannot open" in capsys.readouterr().err


def test_script_executes_commands(tmp_path):
    ctx = _ctx()
    script = tmp_path / "script.txt"
    script.write_text("# comment\nseek 0x20\n\nseek\n", encoding="utf-8")
    assert _run_script(ctx, script) == 0
    assert ctx.stdout.utf8_string() == "0x20\n"


def test_script_reports_parse_failure(tmp_path):
    ctx = _ctx()
    script = tmp_path / "script.txt"
    script.write_text("seek 'open\nseek 0x8\n", encoding="utf-8")
    assert _run_script(ctx, script) == 1
    assert ctx.get_loc() == 0x8


def test_script_stops_on_exit(tmp_path):
    ctx = _ctx()
    script = tmp_path / "script.txt"
    script.write_text("seek 0x8\nq\nseek 0x10\n", encoding="utf-8")
    assert _run_script(ctx, script) == 0
    assert ctx.get_loc() == 0x8


def test_script_missing_file_returns_error(tmp_path):
    ctx = _ctx()
    assert _run_script(ctx, tmp_path / "missing.txt") != 0


def test_repl_reads_piped_input(tmp_path, monkeypatch):
    ctx = _ctx()
    history = InMemoryHistory()
    monkeypatch.setattr(sys, "stdin", io.StringIO("seek \\\n0x40\nseek\nbogus\n"))
    assert ShellREPL(ctx, history=history).run() == 0
    assert ctx.stdout.utf8_string() == "0x40\n"
    assert "Command bogus is not found." in ctx.stderr.utf8_string()
    assert history.get_strings() == ["seek  0x40", "seek", "bogus"]


def test_repl_logs_failing_commands(monkeypatch, caplog):
    ctx = _ctx()

    def explode(ctx, argv):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(ctx.commands.get("seek"), "run", explode)
    monkeypatch.setattr(sys, "stdin", io.StringIO("seek 1\nseek\n"))
    assert ShellREPL(ctx).run() == 0
    assert ctx.stderr.utf8_string().count("failed: kaboom") == 2
    assert "command failed" in caplog.text


def test_prompt_shows_cursor():
    ctx = _ctx()
    ctx.set_loc(0x1234)
    assert ShellREPL(ctx).prompt_text() == "[0x00001234]> "
