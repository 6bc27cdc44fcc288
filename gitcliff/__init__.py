"""
gitcliff - run the prebuilt git-cliff changelog generator from Python.

 - locator.py: finds the platform-specific executable
 - options.py: options mapping -> argv
 - runner.py: spawns the executable (blocking, async, exit-on-finish)
 - cli/: `gitcliff` console script forwarding argv unchanged
"""
from __future__ import annotations

from loguru import logger

from gitcliff.config import LauncherConfig, SpawnOptions, load_config
from gitcliff.errors import BinaryNotFoundError, GitCliffError, SpawnError
from gitcliff.locator import BinaryTarget, PlatformInfo, binary_target, current_platform, find_binary
from gitcliff.options import Options, options_to_args, to_hyphen_case
from gitcliff.runner import (
    RunResult,
    exit_status,
    normalize_args,
    run_and_exit,
    run_git_cliff,
    run_git_cliff_async,
)

logger.disable("gitcliff")

__version__ = "0.1.0"

__all__ = [
    "BinaryNotFoundError",
    "BinaryTarget",
    "GitCliffError",
    "LauncherConfig",
    "Options",
    "PlatformInfo",
    "RunResult",
    "SpawnError",
    "SpawnOptions",
    "binary_target",
    "current_platform",
    "exit_status",
    "find_binary",
    "load_config",
    "normalize_args",
    "options_to_args",
    "run_and_exit",
    "run_git_cliff",
    "run_git_cliff_async",
    "to_hyphen_case",
]
