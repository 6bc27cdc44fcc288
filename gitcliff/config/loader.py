from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml

from gitcliff.config.schema import LauncherConfig

DEFAULT_CONFIG_PATH = Path.home() / ".gitcliff" / "config.json"


def _read_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        if path.suffix.lower() in {".yaml", ".yml"}:
            loaded = yaml.safe_load(text)
        else:
            loaded = json.loads(text)
    except (ValueError, yaml.YAMLError) as exc:
        raise RuntimeError(f"cannot parse launcher config {path}: {exc}") from exc
    if not isinstance(loaded, dict):
        raise RuntimeError(f"invalid launcher config {path}: expected a mapping at top level")
    return loaded


def config_path(path: str | Path | None = None) -> Path:
    if path:
        return Path(path).expanduser()
    from_env = os.getenv("GITCLIFF_LAUNCHER_CONFIG", "").strip()
    if from_env:
        return Path(from_env).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(path: str | Path | None = None) -> LauncherConfig:
    """Defaults, then the config file, then `GITCLIFF_LOG_LEVEL`."""
    cfg = LauncherConfig.from_dict(_read_file(config_path(path)))
    level = os.getenv("GITCLIFF_LOG_LEVEL", "").strip()
    if level:
        cfg.log_level = level.upper()
    return cfg
