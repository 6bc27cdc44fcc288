from __future__ import annotations

import asyncio
import contextlib
import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, NoReturn, Union

from loguru import logger

from gitcliff.config.schema import SpawnOptions
from gitcliff.errors import SpawnError
from gitcliff.locator import PlatformInfo, find_binary
from gitcliff.options import options_to_args

GitCliffArgs = Union[Mapping[str, Any], Sequence[str], None]


@dataclass(slots=True)
class RunResult:
    executable: Path
    args: list[str]
    exit_code: int
    stdout: str | None = None
    stderr: str | None = None

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


def normalize_args(arguments: GitCliffArgs) -> list[str]:
    """Collapse an options mapping or a raw argv into a single argv list."""
    if arguments is None:
        return []
    if isinstance(arguments, Mapping):
        return options_to_args(arguments)
    if isinstance(arguments, (str, bytes)):
        raise TypeError("arguments must be an options mapping or a list of strings, not a single string")
    return [str(item) for item in arguments]


def exit_status(code: int) -> int:
    """Map a child return code to a process exit status (signal N -> 128 + N)."""
    if code < 0:
        return 128 - code
    return code


def _build_env(spawn: SpawnOptions) -> dict[str, str] | None:
    """None inherits the parent environment unchanged."""
    if not spawn.extend_env:
        return dict(spawn.env)
    if not spawn.env:
        return None
    env = os.environ.copy()
    env.update(spawn.env)
    return env


def _stdio(mode: str) -> tuple[Any, Any, Any]:
    """(stdin, stdout, stderr) for subprocess and asyncio alike."""
    if mode == "capture":
        return None, subprocess.PIPE, subprocess.PIPE
    if mode == "ignore":
        return subprocess.DEVNULL, subprocess.DEVNULL, subprocess.DEVNULL
    return None, None, None


def _decode(raw: bytes | None) -> str | None:
    if raw is None:
        return None
    return raw.decode("utf-8", errors="replace")


def _prepare(arguments: GitCliffArgs, platform_info: PlatformInfo | None) -> tuple[Path, list[str]]:
    args = normalize_args(arguments)
    executable = find_binary(platform_info)
    logger.debug("spawning git-cliff executable={} args={}", executable, args)
    return executable, args


def run_git_cliff(
    arguments: GitCliffArgs = None,
    spawn: SpawnOptions | None = None,
    *,
    platform_info: PlatformInfo | None = None,
) -> RunResult:
    """
    Run git-cliff and block until it exits.

    `arguments` is either an options mapping (see `gitcliff.options.Options`)
    or a raw argv list passed through unchanged. A nonzero exit code is
    returned in the result, not raised.

    Raises:
        BinaryNotFoundError: the platform package is not installed; nothing
            was spawned.
        SpawnError: the OS refused to start the executable.
    """
    spawn = spawn or SpawnOptions()
    executable, args = _prepare(arguments, platform_info)
    stdin, stdout, stderr = _stdio(spawn.stdio)
    try:
        proc = subprocess.run(
            [str(executable), *args],
            stdin=stdin,
            stdout=stdout,
            stderr=stderr,
            cwd=spawn.cwd,
            env=_build_env(spawn),
            check=False,
        )
    except OSError as exc:
        logger.debug("git-cliff spawn failed executable={} error={}", executable, exc)
        raise SpawnError(executable, str(exc)) from exc

    logger.debug("git-cliff exited code={}", proc.returncode)
    return RunResult(
        executable=executable,
        args=args,
        exit_code=proc.returncode,
        stdout=_decode(proc.stdout),
        stderr=_decode(proc.stderr),
    )


async def run_git_cliff_async(
    arguments: GitCliffArgs = None,
    spawn: SpawnOptions | None = None,
    *,
    platform_info: PlatformInfo | None = None,
) -> RunResult:
    """Awaitable counterpart of `run_git_cliff`; same errors, same result."""
    spawn = spawn or SpawnOptions()
    executable, args = _prepare(arguments, platform_info)
    stdin, stdout, stderr = _stdio(spawn.stdio)
    try:
        process = await asyncio.create_subprocess_exec(
            str(executable),
            *args,
            stdin=stdin,
            stdout=stdout,
            stderr=stderr,
            cwd=spawn.cwd,
            env=_build_env(spawn),
        )
    except OSError as exc:
        logger.debug("git-cliff spawn failed executable={} error={}", executable, exc)
        raise SpawnError(executable, str(exc)) from exc

    try:
        out, err = await process.communicate()
    except asyncio.CancelledError:
        if process.returncode is None:
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            await process.wait()
        raise

    code = process.returncode if process.returncode is not None else 0
    logger.debug("git-cliff exited code={}", code)
    return RunResult(
        executable=executable,
        args=args,
        exit_code=code,
        stdout=_decode(out),
        stderr=_decode(err),
    )


def run_and_exit(
    arguments: GitCliffArgs = None,
    spawn: SpawnOptions | None = None,
    *,
    platform_info: PlatformInfo | None = None,
) -> NoReturn:
    result = run_git_cliff(arguments, spawn, platform_info=platform_info)
    sys.exit(exit_status(result.exit_code))
