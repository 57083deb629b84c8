"""Checks on the installed binary.

Works out where the launcher will look for the binary and whether something
runnable sits there. Used by ``pmshim status``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from pmshim.bootstrap.paths import binary_path
from pmshim.bootstrap.platform import PlatformInfo


class ToolStatus(str, Enum):
    """State of the install target path."""

    PRESENT = "present"
    MISSING = "missing"
    NOT_A_FILE = "not_a_file"
    NOT_EXECUTABLE = "not_executable"

    @property
    def description(self) -> str:
        return _STATUS_DESCRIPTIONS[self]


_STATUS_DESCRIPTIONS = {
    ToolStatus.PRESENT: "installed",
    ToolStatus.MISSING: "not installed, run `pmshim install`",
    ToolStatus.NOT_A_FILE: "not a regular file, remove it and run `pmshim install`",
    ToolStatus.NOT_EXECUTABLE: "not executable",
}


@dataclass(frozen=True)
class InstalledBinary:
    """Install target path together with its status."""

    path: Path
    status: ToolStatus

    @property
    def is_runnable(self) -> bool:
        return self.status == ToolStatus.PRESENT

    def __str__(self) -> str:
        return f"{self.path} ({self.status.description})"


def validate_binary(path: Path) -> ToolStatus:
    """Classify whatever is at ``path``.

    The installer skips the download whenever the target path exists, so a
    directory or non-executable file there blocks the launcher until it is
    removed. Those cases are reported separately from a missing binary.
    """
    if not path.exists():
        return ToolStatus.MISSING
    if not path.is_file():
        return ToolStatus.NOT_A_FILE
    if not os.access(path, os.X_OK):
        return ToolStatus.NOT_EXECUTABLE
    return ToolStatus.PRESENT


def inspect_installed(
    install_root: Path,
    binary_name: str,
    platform_info: Optional[PlatformInfo] = None,
) -> InstalledBinary:
    """Check the binary the launcher would run for ``install_root``.

    The target includes the platform's executable suffix (``pm.exe`` on
    Windows).
    """
    target = binary_path(install_root, binary_name, platform_info)
    return InstalledBinary(path=target, status=validate_binary(target))
