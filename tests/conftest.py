from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from gitcliff.locator import PlatformInfo, binary_target

FAKE_PLATFORM = PlatformInfo(system="linux", machine="testarch")
MISSING_PLATFORM = PlatformInfo(system="linux", machine="nosucharch")


@pytest.fixture(autouse=True)
def _isolated_launcher_config(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("GITCLIFF_LAUNCHER_CONFIG", str(tmp_path / "no-config.json"))
    monkeypatch.delenv("GITCLIFF_LOG_LEVEL", raising=False)


@pytest.fixture
def install_binary(tmp_path: Path, monkeypatch) -> Callable[..., Path]:
    """Write a fake `git_cliff_<os>_<arch>` package holding a shell script binary."""
    site = tmp_path / "site"

    def _install(
        body: str = "",
        *,
        platform_info: PlatformInfo = FAKE_PLATFORM,
        executable: bool = True,
        interpreter: str = "/usr/bin/env sh",
    ) -> Path:
        target = binary_target(platform_info)
        package = site / target.module_name
        bin_dir = package / "bin"
        bin_dir.mkdir(parents=True, exist_ok=True)
        (package / "__init__.py").write_text("", encoding="utf-8")
        script = bin_dir / target.executable_name
        script.write_text(f"#!{interpreter}\n" + body, encoding="utf-8")
        script.chmod(0o755 if executable else 0o644)
        monkeypatch.syspath_prepend(str(site))
        return script

    return _install


@pytest.fixture
def fake_platform() -> PlatformInfo:
    return FAKE_PLATFORM


@pytest.fixture
def missing_platform() -> PlatformInfo:
    return MISSING_PLATFORM


@pytest.fixture
def recorded_args() -> Callable[[Path], list[str]]:
    def _read(script: Path) -> list[str]:
        return (script.parent / "args.txt").read_text(encoding="utf-8").splitlines()

    return _read
