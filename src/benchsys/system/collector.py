"""System snapshot collection for benchmark reports."""

import logging
import platform
import re
import sys
import sysconfig
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import psutil

from benchsys.config.models import SnapshotConfig

from .cpu import cpu_model
from .memory import available_memory
from .os_family import OsFamily, detect_os_family
from .runner import CommandRunner

logger = logging.getLogger(__name__)

_PY_VERSION_RE = re.compile(r'^#define\s+PY_VERSION\s+"([^"]+)"', re.MULTILINE)


@dataclass(frozen=True)
class SystemSnapshot:
    """Snapshot of the host environment at time of collection."""

    runtime_version: str
    platform_version: str
    core_count: int
    os_family: OsFamily
    cpu_model: str
    available_memory: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "runtime_version": self.runtime_version,
            "platform_version": self.platform_version,
            "core_count": self.core_count,
            "os_family": self.os_family.value,
            "cpu_model": self.cpu_model,
            "available_memory": self.available_memory,
        }


def runtime_version() -> str:
    """Interpreter implementation and version, e.g. 'CPython 3.12.1'."""
    version = ".".join(str(part) for part in sys.implementation.version[:3])
    return f"{platform.python_implementation()} {version}"


def default_version_file() -> Path:
    return Path(sysconfig.get_paths()["include"]) / "patchlevel.h"


def platform_version(version_file: Optional[Path] = None) -> str:
    """Read the precise Python version from the installed ``patchlevel.h``.

    Falls back to the ``major.minor`` release when the file cannot be read,
    e.g. when the interpreter was installed without its development headers.
    """
    release = f"{sys.version_info.major}.{sys.version_info.minor}"
    path = version_file or default_version_file()

    try:
        content = path.read_text(errors="replace")
    except OSError as e:
        logger.warning(
            f"Error trying to determine Python version from {path}: {e}, "
            f"falling back to release {release}"
        )
        return release

    match = _PY_VERSION_RE.search(content)
    if match is None:
        logger.warning(f"No PY_VERSION define in {path}, falling back to release {release}")
        return release
    return match.group(1).strip()


def num_cores() -> int:
    """Number of logical CPUs this process may be scheduled on."""
    try:
        affinity = psutil.Process().cpu_affinity()
        if affinity:
            return len(affinity)
    except (AttributeError, psutil.Error, OSError) as e:
        # cpu_affinity() does not exist on macOS
        logger.debug(f"CPU affinity unavailable: {e}")
    return psutil.cpu_count(logical=True) or 1


class SystemInfoCollector:
    """Build a SystemSnapshot from runtime metadata and OS commands."""

    def __init__(
        self,
        runner: Optional[CommandRunner] = None,
        config: Optional[SnapshotConfig] = None,
    ) -> None:
        self.runner = runner or CommandRunner()
        self.config = config or SnapshotConfig()

    def collect(self) -> SystemSnapshot:
        """Collect a fresh snapshot. Never raises for host-environment issues."""
        family = self.config.os_family or detect_os_family()
        logger.debug(f"Collecting system information for {family.value}")

        return SystemSnapshot(
            runtime_version=runtime_version(),
            platform_version=platform_version(self.config.platform_version_file),
            core_count=num_cores(),
            os_family=family,
            cpu_model=cpu_model(family, self.runner),
            available_memory=available_memory(
                family, self.runner, precision=self.config.memory.precision
            ),
        )


def collect_system_info(config: Optional[SnapshotConfig] = None) -> SystemSnapshot:
    """Collect current system information.

    Returns:
        SystemSnapshot with current system state.
    """
    return SystemInfoCollector(config=config).collect()
