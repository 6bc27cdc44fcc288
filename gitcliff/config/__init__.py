from __future__ import annotations

from gitcliff.config.loader import load_config
from gitcliff.config.schema import STDIO_MODES, LauncherConfig, SpawnOptions

__all__ = [
    "STDIO_MODES",
    "LauncherConfig",
    "SpawnOptions",
    "load_config",
]
