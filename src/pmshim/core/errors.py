"""Error taxonomy for pmshim.

Every failure raised by the installer or launcher derives from
``PmshimError`` so entry points can map them to exit status 1.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional


class PmshimError(Exception):
    """Base class for all pmshim errors."""


class ConfigError(PmshimError):
    """Manifest loading or repository reference error."""

    pass


class DownloadError(PmshimError):
    """Release artifact could not be downloaded."""

    def __init__(
        self,
        status: Optional[int],
        reason: str,
        url: Optional[str] = None,
    ) -> None:
        self.status = status
        self.reason = reason
        self.url = url
        if status is not None:
            message = f"Failed to download binary: {status} {reason}"
        else:
            message = f"Failed to download binary: {reason}"
        if url:
            message = f"{message} ({url})"
        super().__init__(message)


class FilesystemError(PmshimError):
    """Install directory or binary could not be written."""

    pass


class LaunchErrorKind(str, Enum):
    """Why the binary could not be spawned."""

    NOT_FOUND = "not_found"
    OTHER = "other"


class LaunchError(PmshimError):
    """The installed binary could not be spawned."""

    def __init__(self, kind: LaunchErrorKind, path: Path, message: str) -> None:
        self.kind = kind
        self.path = path
        super().__init__(message)
