"""
Bootstrap module for installing the prebuilt binary.

This module handles:
- Platform detection (OS + architecture)
- Install root and binary path management (~/.pmshim/bin/)
- Release artifact download
- Binary validation utilities
"""

from pmshim.bootstrap.platform import get_platform_info, PlatformInfo
from pmshim.bootstrap.paths import binary_path, get_pmshim_home, PmshimPaths
from pmshim.bootstrap.validation import (
    InstalledBinary,
    ToolStatus,
    inspect_installed,
    validate_binary,
)
from pmshim.bootstrap.fetcher import (
    RepositoryIdentity,
    build_artifact_name,
    build_download_url,
    ensure_installed,
    parse_repository_url,
)

__all__ = [
    "get_platform_info",
    "PlatformInfo",
    "binary_path",
    "get_pmshim_home",
    "PmshimPaths",
    "InstalledBinary",
    "inspect_installed",
    "validate_binary",
    "ToolStatus",
    "RepositoryIdentity",
    "build_artifact_name",
    "build_download_url",
    "ensure_installed",
    "parse_repository_url",
]
