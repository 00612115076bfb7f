"""rair-shell CLI entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List

from .context import ShellContext
from .errors import AddressError
from .history import history_path, open_history
from .output import Writer
from .repl import ShellREPL, execute_line

LOGGER = logging.getLogger("rair_shell.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="rair inspection shell")
    parser.add_argument("file", nargs="?", help="File to load at physical address 0")
    parser.add_argument(
        "-c",
        "--command",
        help="Execute a single command non-interactively (quote the command string)",
    )
    parser.add_argument("--script", type=Path, help="Execute commands from a file, one per line")
    parser.add_argument(
        "--history",
        type=Path,
        default=history_path(),
        help="Path to command history file",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable coloured output")
    parser.add_argument(
        "--max-suggestions",
        type=int,
        help="Limit the number of similar commands suggested for unknown names",
    )
    parser.add_argument("--log-level", default=os.environ.get("RAIR_LOG", "WARNING"), help="Logging level (default WARNING)")
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    color = not args.no_color and "NO_COLOR" not in os.environ
    ctx = ShellContext.new(
        stdout=Writer.stdout(color=color),
        stderr=Writer.stderr(color=color),
        max_suggestions=args.max_suggestions,
    )
    if args.file:
        try:
            ctx.io.open(args.file, 0)
        except (OSError, AddressError) as exc:
            ctx.stderr.writeln(f"Cannot open {args.file}: {exc}")
            return 1
    if args.command:
        return _run_single_command(ctx, args.command)
    if args.script:
        return _run_script(ctx, args.script)
    repl = ShellREPL(ctx, history=open_history(args.history))
    try:
        return repl.run()
    except KeyboardInterrupt:
        ctx.stdout.writeln()
        return 0


def _run_single_command(ctx: ShellContext, command_line: str) -> int:
    try:
        return 0 if execute_line(ctx, command_line) else 1
    except SystemExit as exc:
        return int(exc.code or 0)
    except Exception as exc:
        LOGGER.exception("command failed")
        ctx.stderr.writeln(f"Command '{command_line}' failed: {exc}")
        return 1


def _run_script(ctx: ShellContext, path: Path | str) -> int:
    try:
        lines = Path(path).read_text(encoding="utf-8").splitlines()
    except OSError as exc:
        ctx.stderr.writeln(f"Cannot read script {path}: {exc}")
        return 1
    rc = 0
    for lineno, line in enumerate(lines, 1):
        LOGGER.debug("script %s:%d: %s", path, lineno, line)
        try:
            if not execute_line(ctx, line):
                rc = 1
        except SystemExit as exc:
            return int(exc.code or 0)
        except Exception as exc:
            LOGGER.exception("script line %d failed", lineno)
            ctx.stderr.writeln(f"{path}:{lineno}: command failed: {exc}")
            rc = 1
    return rc


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
