"""Platform-specific adapters."""

import sys

from .launcher import SubprocessLauncher

WINDOWS_COMMANDS = [["cmd", "/C", "start", ""]]
MACOS_COMMANDS = [["open"]]
UNIX_COMMANDS = [["libreoffice"], ["openoffice"], ["xdg-open"]]


def default_candidates(platform: str = sys.platform) -> list[list[str]]:
    """Ordered viewer command prefixes for a platform; the path is appended."""
    if platform in ("win32", "cygwin"):
        commands = WINDOWS_COMMANDS
    elif platform == "darwin":
        commands = MACOS_COMMANDS
    else:
        # Linux and other Unix-like systems
        commands = UNIX_COMMANDS
    return [list(command) for command in commands]


__all__ = ["SubprocessLauncher", "default_candidates"]
