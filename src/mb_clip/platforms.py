"""Host operating system detection."""

import platform
import sys
from enum import StrEnum

from mb_clip.errors import UnsupportedPlatformError


class OperatingSystem(StrEnum):
    """Operating systems the clipboard layer knows about."""

    WINDOWS = "windows"
    LINUX = "linux"
    DARWIN = "darwin"
    FREEBSD = "freebsd"
    NETBSD = "netbsd"
    AIX = "aix"
    SOLARIS = "solaris"
    ILLUMOS = "illumos"


# sys.platform prefix -> OperatingSystem, checked in order
_PLATFORM_PREFIXES: tuple[tuple[str, OperatingSystem], ...] = (
    ("win32", OperatingSystem.WINDOWS),
    ("cygwin", OperatingSystem.WINDOWS),
    ("linux", OperatingSystem.LINUX),
    ("darwin", OperatingSystem.DARWIN),
    ("freebsd", OperatingSystem.FREEBSD),
    ("netbsd", OperatingSystem.NETBSD),
    ("aix", OperatingSystem.AIX),
)


def detect_os(sys_platform: str | None = None) -> OperatingSystem:
    """Map ``sys.platform`` to an OperatingSystem member.

    Raises:
        UnsupportedPlatformError: The platform is outside the known set.

    """
    name = sys.platform if sys_platform is None else sys_platform
    for prefix, os_ in _PLATFORM_PREFIXES:
        if name.startswith(prefix):
            return os_
    if name.startswith("sunos"):
        # illumos distributions report "illumos" in the kernel version string
        return OperatingSystem.ILLUMOS if "illumos" in platform.version().lower() else OperatingSystem.SOLARIS
    raise UnsupportedPlatformError(name)
