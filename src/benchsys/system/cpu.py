"""CPU model detection per operating-system family."""

import logging
import re

from .os_family import OsFamily
from .runner import NOT_AVAILABLE, CommandRunner

logger = logging.getLogger(__name__)

UNRECOGNIZED_PROCESSOR = "Unrecognized processor"

CPU_COMMANDS: dict[OsFamily, tuple[str, list[str]]] = {
    OsFamily.WINDOWS: ("WMIC", ["CPU", "GET", "NAME"]),
    OsFamily.MACOS: ("sysctl", ["-n", "machdep.cpu.brand_string"]),
    OsFamily.FREEBSD: ("sysctl", ["-n", "hw.model"]),
    OsFamily.LINUX: ("cat", ["/proc/cpuinfo"]),
}

_LINUX_CPUINFO_RE = re.compile(r"model name.*:([\w \(\)\-\@\.]*)", re.IGNORECASE)
_WINDOWS_HEADER = "Name"


def parse_cpu(family: OsFamily, raw_output: str) -> str:
    """Extract the CPU model string from a family's command output."""
    if raw_output == NOT_AVAILABLE:
        return NOT_AVAILABLE

    if family is OsFamily.WINDOWS:
        if not raw_output.startswith(_WINDOWS_HEADER):
            logger.warning(
                f"Unexpected WMIC CPU output without '{_WINDOWS_HEADER}' header: {raw_output!r}"
            )
            return UNRECOGNIZED_PROCESSOR
        return raw_output[len(_WINDOWS_HEADER):].strip()

    if family in (OsFamily.MACOS, OsFamily.FREEBSD):
        return raw_output.strip()

    match = _LINUX_CPUINFO_RE.search(raw_output)
    if match is None:
        return UNRECOGNIZED_PROCESSOR
    return match.group(1).strip()


def cpu_model(family: OsFamily, runner: CommandRunner) -> str:
    """Query and parse the CPU model for ``family``."""
    command, args = CPU_COMMANDS[family]
    return parse_cpu(family, runner.run(command, args))
