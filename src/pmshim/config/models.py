"""Configuration data models for pmshim.

Defines the typed view of the package manifest: which package is being
shimmed, which binary to install and where to put it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DEFAULT_BINARY_NAME = "pm"


@dataclass(frozen=True)
class PackageIdentity:
    """Name, version and repository reference of the shimmed package.

    ``version`` never carries a leading ``v``; release tags add it back.
    """

    name: str
    version: str
    repository_url: Optional[str] = None


@dataclass
class ShimConfig:
    """Typed manifest contents."""

    package: PackageIdentity
    binary_name: str = DEFAULT_BINARY_NAME
    install_root: Optional[Path] = None  # None = pmshim home

    # Populated by the loader
    manifest_source: Optional[str] = field(default=None, repr=False)
