"""Helper utility functions for shadow-build."""

import platform
import shutil


def find_tool(tool_name, path=None):
    """Locate a command-line tool.

    Args:
        tool_name (str): Name or path of the tool.
        path (str, optional): Search path in PATH format; the process PATH
            when omitted.

    Returns:
        str: Full path of the executable, or None if it was not found.
    """
    return shutil.which(tool_name, path=path)


def detect_platform():
    """Detect the current platform.

    Returns:
        str: Platform name (macos, linux, windows) or the lowercased system name.
    """
    system = platform.system().lower()

    if system == "darwin":
        return "macos"
    elif system in ("linux", "windows"):
        return system
    else:
        return system or "unknown"


def detect_arch():
    """Detect the host CPU architecture using Rust target naming.

    Returns:
        str: Architecture name such as x86_64 or aarch64.
    """
    machine = platform.machine().lower()
    aliases = {
        "amd64": "x86_64",
        "x64": "x86_64",
        "arm64": "aarch64",
        "i686": "x86",
        "i386": "x86",
    }
    return aliases.get(machine, machine)
