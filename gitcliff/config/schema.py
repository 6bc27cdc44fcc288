from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

STDIO_MODES = ("inherit", "capture", "ignore")


@dataclass(slots=True)
class SpawnOptions:
    cwd: str | Path | None = None
    env: dict[str, str] = field(default_factory=dict)
    extend_env: bool = True
    stdio: str = "inherit"

    def __post_init__(self) -> None:
        if self.stdio not in STDIO_MODES:
            raise ValueError(f"invalid stdio mode {self.stdio!r}: expected one of {', '.join(STDIO_MODES)}")

    @classmethod
    def from_dict(cls, raw: dict[str, Any] | None) -> SpawnOptions:
        data = dict(raw or {})
        if "extendEnv" in data:
            extend_env = bool(data.get("extendEnv", True))
        else:
            extend_env = bool(data.get("extend_env", True))
        env_raw = data.get("env")
        env = {str(key): str(value) for key, value in env_raw.items()} if isinstance(env_raw, dict) else {}
        cwd = data.get("cwd") or None
        return cls(
            cwd=str(cwd) if cwd else None,
            env=env,
            extend_env=extend_env,
            stdio=str(data.get("stdio") or "inherit"),
        )


@dataclass(slots=True)
class LauncherConfig:
    log_level: str = "WARNING"
    spawn: SpawnOptions = field(default_factory=SpawnOptions)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LauncherConfig:
        raw = dict(data or {})
        level = raw.get("log_level", raw.get("logLevel"))
        return cls(
            log_level=str(level or cls().log_level).upper(),
            spawn=SpawnOptions.from_dict(raw.get("spawn") if isinstance(raw.get("spawn"), dict) else None),
        )
