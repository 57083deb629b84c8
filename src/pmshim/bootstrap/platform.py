"""Platform detection for release artifact naming.

Maps the running operating system and CPU architecture to the tags used in
release artifact file names. Unknown values pass through unchanged so the
download step, not detection, reports an unsupported platform.
"""

from __future__ import annotations

import platform as _platform
import sys
from dataclasses import dataclass
from typing import Dict, Optional

# sys.platform -> artifact OS tag
OS_TAGS: Dict[str, str] = {
    "darwin": "macos",
    "linux": "linux",
    "win32": "windows",
    "cygwin": "windows",
    "msys": "windows",
}

# platform.machine() (lowercased) -> artifact arch tag
ARCH_TAGS: Dict[str, str] = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
}

WINDOWS_OS_TAG = "windows"
WINDOWS_EXECUTABLE_SUFFIX = ".exe"


@dataclass(frozen=True)
class PlatformInfo:
    """OS tag, architecture tag and executable suffix of the running host."""

    os: str
    arch: str
    executable_suffix: str = ""

    @property
    def is_windows(self) -> bool:
        return self.os == WINDOWS_OS_TAG

    def __str__(self) -> str:
        return f"{self.os}-{self.arch}"


def normalize_os(system: str) -> str:
    return OS_TAGS.get(system, system)


def normalize_arch(machine: str) -> str:
    return ARCH_TAGS.get(machine.lower(), machine)


def get_platform_info(
    system: Optional[str] = None,
    machine: Optional[str] = None,
) -> PlatformInfo:
    """Resolve the platform of the running process.

    Never raises. Values missing from the lookup tables are returned as-is.

    Args:
        system: Override for ``sys.platform``.
        machine: Override for ``platform.machine()``.

    Returns:
        PlatformInfo for the given (or current) platform.
    """
    system = sys.platform if system is None else system
    machine = _platform.machine() if machine is None else machine

    os_tag = normalize_os(system)
    suffix = WINDOWS_EXECUTABLE_SUFFIX if os_tag == WINDOWS_OS_TAG else ""
    return PlatformInfo(os=os_tag, arch=normalize_arch(machine), executable_suffix=suffix)
