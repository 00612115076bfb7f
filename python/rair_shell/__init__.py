"""
rair-shell package.

Command resolution core and interactive shell for inspecting files and
address spaces.  Use ``python -m rair_shell`` or the ``rair-shell``
console script to launch it.
"""

from __future__ import annotations

from .cli import main

__all__ = ["main"]
__version__ = "0.1.0"
