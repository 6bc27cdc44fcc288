from __future__ import annotations

from pathlib import Path


class GitCliffError(RuntimeError):
    """Base class for launcher failures."""


class BinaryNotFoundError(GitCliffError):
    """The platform-specific git-cliff package or its executable is missing."""

    def __init__(self, *, package_name: str, platform_id: str, detail: str = "") -> None:
        self.package_name = package_name
        self.platform_id = platform_id
        message = (
            f"Couldn't find the git-cliff binary for {platform_id}. "
            f"Install the '{package_name}' package"
        )
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class SpawnError(GitCliffError):
    """The operating system refused to start the git-cliff process."""

    def __init__(self, executable: str | Path, reason: str) -> None:
        self.executable = Path(executable)
        super().__init__(f"failed to start {self.executable}: {reason}")
