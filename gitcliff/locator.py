"""
Locate the prebuilt git-cliff executable for the running platform.

Binaries ship in per-platform distributions named `git-cliff-<os>-<arch>`
(import name `git_cliff_<os>_<arch>`), each holding `bin/git-cliff[.exe]`.
"""
from __future__ import annotations

import importlib.util
import platform
import sys
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from gitcliff.errors import BinaryNotFoundError

TOOL_NAME = "git-cliff"
WINDOWS_PLATFORMS = frozenset({"win32", "cygwin"})


@dataclass(frozen=True, slots=True)
class PlatformInfo:
    system: str
    machine: str


@dataclass(frozen=True, slots=True)
class BinaryTarget:
    os_name: str
    arch: str
    extension: str
    tool: str = TOOL_NAME

    @property
    def platform_id(self) -> str:
        return f"{self.os_name}-{self.arch}"

    @property
    def package_name(self) -> str:
        return f"{self.tool}-{self.platform_id}"

    @property
    def module_name(self) -> str:
        return self.package_name.replace("-", "_")

    @property
    def executable_name(self) -> str:
        return f"{self.tool}{self.extension}"


def current_platform() -> PlatformInfo:
    return PlatformInfo(system=sys.platform, machine=platform.machine())


def binary_target(platform_info: PlatformInfo | None = None, tool: str = TOOL_NAME) -> BinaryTarget:
    info = platform_info or current_platform()
    if info.system in WINDOWS_PLATFORMS:
        return BinaryTarget(os_name="windows", arch=info.machine, extension=".exe", tool=tool)
    return BinaryTarget(os_name=info.system, arch=info.machine, extension="", tool=tool)


def _package_dir(module_name: str) -> Path | None:
    try:
        spec = importlib.util.find_spec(module_name)
    except (ImportError, ValueError) as exc:
        logger.debug("platform package lookup failed module={} error={}", module_name, exc)
        return None
    if spec is None:
        return None
    locations = list(spec.submodule_search_locations or [])
    if locations:
        return Path(locations[0])
    if spec.origin:
        return Path(spec.origin).parent
    return None


def find_binary(platform_info: PlatformInfo | None = None) -> Path:
    """Return the absolute path of the git-cliff executable for this platform."""
    target = binary_target(platform_info)
    logger.debug("locating binary platform={} module={}", target.platform_id, target.module_name)

    package_dir = _package_dir(target.module_name)
    if package_dir is None:
        logger.debug("platform package missing package={} platform={}", target.package_name, target.platform_id)
        raise BinaryNotFoundError(package_name=target.package_name, platform_id=target.platform_id)

    candidate = package_dir / "bin" / target.executable_name
    if not candidate.is_file():
        logger.debug("platform package has no binary package={} path={}", target.package_name, candidate)
        raise BinaryNotFoundError(
            package_name=target.package_name,
            platform_id=target.platform_id,
            detail=f"missing {candidate}",
        )

    resolved = candidate.resolve()
    logger.debug("binary resolved path={}", resolved)
    return resolved
