"""Total physical memory detection per operating-system family."""

import logging
import re
from typing import Optional

from benchsys.conversion.memory import BYTE, KILOBYTE, convert, format_memory

from .os_family import OsFamily
from .runner import NOT_AVAILABLE, CommandRunner

logger = logging.getLogger(__name__)

MEMORY_COMMANDS: dict[OsFamily, tuple[str, list[str]]] = {
    OsFamily.WINDOWS: ("WMIC", ["COMPUTERSYSTEM", "GET", "TOTALPHYSICALMEMORY"]),
    OsFamily.MACOS: ("sysctl", ["-n", "hw.memsize"]),
    OsFamily.FREEBSD: ("sysctl", ["-n", "hw.physmem"]),
    OsFamily.LINUX: ("cat", ["/proc/meminfo"]),
}

_DIGITS_RE = re.compile(r"\d+")
_LEADING_INT_RE = re.compile(r"\s*(\d+)")
_MEMTOTAL_RE = re.compile(r"MemTotal:\s*(\d+)\s*kB")


def memory_bytes(family: OsFamily, raw_output: str) -> Optional[int]:
    """Return total memory in bytes, or None if the output has no usable number."""
    if raw_output == NOT_AVAILABLE:
        return None

    if family is OsFamily.WINDOWS:
        # WMIC prints a header line followed by the byte count
        match = _DIGITS_RE.search(raw_output)
        return int(match.group(0)) if match else None

    if family in (OsFamily.MACOS, OsFamily.FREEBSD):
        match = _LEADING_INT_RE.match(raw_output)
        return int(match.group(1)) if match else None

    match = _MEMTOTAL_RE.search(raw_output)
    if match is None:
        return None
    return convert(int(match.group(1)), KILOBYTE, BYTE)


def parse_memory(family: OsFamily, raw_output: str, precision: int = 2) -> str:
    """Parse a family's memory command output into a formatted size.

    Args:
        family: OS family whose command produced ``raw_output``.
        raw_output: Raw command output, or ``"N/A"`` if the command failed.
        precision: Decimal places kept in the formatted size.

    Returns:
        A size such as ``"15.5 GB"``, or ``"N/A"``.
    """
    if raw_output == NOT_AVAILABLE:
        return NOT_AVAILABLE

    total = memory_bytes(family, raw_output)
    if total is None:
        logger.warning(f"Could not parse total memory from {family.value} output: {raw_output!r}")
        return NOT_AVAILABLE
    return format_memory(total, precision=precision)


def available_memory(family: OsFamily, runner: CommandRunner, precision: int = 2) -> str:
    """Query and parse total physical memory for ``family``."""
    command, args = MEMORY_COMMANDS[family]
    return parse_memory(family, runner.run(command, args), precision=precision)
