"""
Pytest configuration and fixtures for rair-shell tests.
"""
import sys
from pathlib import Path

import pytest

PYTHON_SRC = Path(__file__).resolve().parents[1]
if str(PYTHON_SRC) not in sys.path:
    sys.path.append(str(PYTHON_SRC))

from rair_shell.context import ShellContext
from rair_shell.output import Writer


@pytest.fixture
def ctx():
    """Context with the default command set and captured output."""
    return ShellContext.new(stdout=Writer.buffer(), stderr=Writer.buffer())


@pytest.fixture
def bare_ctx():
    """Context with captured output and no commands registered."""
    return ShellContext(stdout=Writer.buffer(), stderr=Writer.buffer())


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "sample.bin"
    path.write_bytes(b"hello world!")
    return path
