"""Operating-system family detection."""

import os
import platform
from enum import Enum
from typing import Optional


class OsFamily(str, Enum):
    """The four operating-system families we know how to query."""

    MACOS = "macOS"
    WINDOWS = "Windows"
    FREEBSD = "FreeBSD"
    LINUX = "Linux"


_FAMILY_BY_TAG = {
    "darwin": OsFamily.MACOS,
    "nt": OsFamily.WINDOWS,
    "freebsd": OsFamily.FREEBSD,
}


def os_type_tag() -> str:
    """Return the low-level OS tag, e.g. 'nt', 'darwin', 'freebsd', 'linux'."""
    if os.name == "nt":
        return "nt"
    return platform.system().lower()


def detect_os_family(tag: Optional[str] = None) -> OsFamily:
    """Map an OS tag to its family; anything unrecognized is Linux.

    Args:
        tag: OS tag to map. Defaults to the tag of the running system.
    """
    if tag is None:
        tag = os_type_tag()
    return _FAMILY_BY_TAG.get(tag, OsFamily.LINUX)
