"""Path management for the pmshim install root.

Handles the ~/.pmshim directory structure. The installed binary always
lives at ``<install_root>/bin/<binary_name><executable_suffix>``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Optional

from pmshim.bootstrap.platform import PlatformInfo, get_platform_info

# Default directory name under user home
DEFAULT_HOME_DIR_NAME = ".pmshim"

# Environment variable to override home directory
PMSHIM_HOME_ENV = "PMSHIM_HOME"


def get_pmshim_home() -> Path:
    """Get the pmshim home directory path.

    Resolution order:
    1. PMSHIM_HOME environment variable (if set)
    2. ~/.pmshim (default)

    Returns:
        Path to the pmshim home directory.
    """
    env_home = os.environ.get(PMSHIM_HOME_ENV)
    if env_home:
        return Path(env_home).expanduser()
    return Path.home() / DEFAULT_HOME_DIR_NAME


@dataclass
class PmshimPaths:
    """Manages paths within an install root.

    Directory structure:
        <install_root>/
            bin/
                pm          - installed binary (pm.exe on Windows)
    """

    home: Path

    _BIN_DIR: ClassVar[str] = "bin"

    @property
    def bin_dir(self) -> Path:
        """Directory containing the installed binary."""
        return self.home / self._BIN_DIR

    def binary_path(
        self,
        binary_name: str,
        platform_info: Optional[PlatformInfo] = None,
    ) -> Path:
        """Get the install path of a binary for the given platform.

        Args:
            binary_name: Binary name without suffix (e.g., 'pm').
            platform_info: Platform to resolve the suffix for. Defaults to
                the running platform.

        Returns:
            Path the binary is (or will be) installed at.
        """
        platform_info = platform_info or get_platform_info()
        return self.bin_dir / f"{binary_name}{platform_info.executable_suffix}"

    def ensure_directories(self) -> None:
        """Create the bin directory if it doesn't exist."""
        self.bin_dir.mkdir(parents=True, exist_ok=True)


def binary_path(
    install_root: Path,
    binary_name: str,
    platform_info: Optional[PlatformInfo] = None,
) -> Path:
    """Shortcut for ``PmshimPaths(install_root).binary_path(...)``."""
    return PmshimPaths(install_root).binary_path(binary_name, platform_info)
