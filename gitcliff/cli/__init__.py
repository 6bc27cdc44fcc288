from __future__ import annotations

from gitcliff.cli.commands import main

__all__ = ["main"]
