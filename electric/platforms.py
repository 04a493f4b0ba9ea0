"""Platform identifiers and host detection."""

import sys
from enum import Enum
from typing import Optional

from electric.errors import UnsupportedPlatformError


class Platform(str, Enum):
    """Platforms DenoCEF binaries are published for."""

    WINDOWS = "windows"
    LINUX = "linux"
    DARWIN = "darwin"


# Accepted spellings on the command line
ALIASES = {
    "mac": Platform.DARWIN,
    "macos": Platform.DARWIN,
}


def detect_host_platform(sys_platform: Optional[str] = None) -> Platform:
    """Map ``sys.platform`` to a Platform.

    Args:
        sys_platform: Value to map. Defaults to ``sys.platform``.

    Returns:
        Host platform.

    Raises:
        UnsupportedPlatformError: If the host is not windows, linux or darwin.
    """
    value = sys_platform if sys_platform is not None else sys.platform
    if value == "win32":
        return Platform.WINDOWS
    if value == "darwin":
        return Platform.DARWIN
    if value.startswith("linux"):
        return Platform.LINUX
    raise UnsupportedPlatformError(f"Unsupported host platform: {value}")


def parse_platform(value: Optional[str], host: Platform) -> Platform:
    """Resolve a platform argument, falling back to the host.

    Args:
        value: Platform name from the command line, or None.
        host: Host platform used when no name is given.

    Returns:
        The selected platform.

    Raises:
        UnsupportedPlatformError: If the name is not recognized.
    """
    if not value:
        return host

    name = value.strip().lower()
    if name in ALIASES:
        return ALIASES[name]
    try:
        return Platform(name)
    except ValueError:
        choices = ", ".join(p.value for p in Platform)
        raise UnsupportedPlatformError(
            f"Unknown platform '{value}' (expected one of: {choices}, or 'mac')"
        ) from None
