"""Release fetcher for the prebuilt binary.

Downloads the platform-specific artifact from a GitHub release and installs
it under ``<install_root>/bin/``. Installing is idempotent: an existing file
at the target path is left untouched.
"""

from __future__ import annotations

import http.client
import os
import re
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.error import HTTPError, URLError
from urllib.request import urlopen

from pmshim.bootstrap.paths import PmshimPaths
from pmshim.bootstrap.platform import PlatformInfo, get_platform_info
from pmshim.config.models import PackageIdentity
from pmshim.core.errors import ConfigError, DownloadError, FilesystemError
from pmshim.core.logging import get_logger

LOGGER = get_logger(__name__)

# Matches https, git+https, git:// and scp-like ssh forms.
GITHUB_REPO_PATTERN = re.compile(r"github\.com[/:]([^/]+)/([^/]+?)(?:\.git)?/?$")

RELEASE_DOWNLOAD_URL = "https://github.com/{owner}/{repo}/releases/download/v{version}/{file_name}"

BINARY_MODE = 0o755


@dataclass(frozen=True)
class RepositoryIdentity:
    """GitHub repository owner and name."""

    owner: str
    repo: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}"


def parse_repository_url(url: str) -> RepositoryIdentity:
    """Parse a GitHub repository reference.

    Accepts ``https://github.com/o/r``, ``git+https://github.com/o/r.git``
    and ``git@github.com:o/r.git`` style references.

    Raises:
        ConfigError: If the URL is not a GitHub repository reference.
    """
    match = GITHUB_REPO_PATTERN.search(url.strip())
    if not match:
        raise ConfigError(f"Cannot parse GitHub repository URL: {url}")
    owner, repo = match.group(1), match.group(2)
    if not (owner.isascii() and repo.isascii()):
        raise ConfigError(f"Cannot parse GitHub repository URL: {url}")
    return RepositoryIdentity(owner=owner, repo=repo)


def build_artifact_name(binary_name: str, platform_info: PlatformInfo) -> str:
    """Release artifact file name, e.g. ``pm-linux-x64`` or ``pm-windows-x64.exe``."""
    return (
        f"{binary_name}-{platform_info.os}-{platform_info.arch}"
        f"{platform_info.executable_suffix}"
    )


def build_download_url(repository: RepositoryIdentity, version: str, file_name: str) -> str:
    return RELEASE_DOWNLOAD_URL.format(
        owner=repository.owner,
        repo=repository.repo,
        version=version,
        file_name=file_name,
    )


def download_bytes(url: str) -> bytes:
    """GET ``url`` and return the full response body.

    Raises:
        DownloadError: On a non-success status or transport failure.
    """
    try:
        with urlopen(url) as response:
            status = getattr(response, "status", 200)
            if not 200 <= status < 300:
                raise DownloadError(status, getattr(response, "reason", ""), url)
            return response.read()
    except HTTPError as e:
        raise DownloadError(e.code, str(e.reason), url) from e
    except URLError as e:
        raise DownloadError(None, str(e.reason), url) from e
    except (OSError, http.client.HTTPException) as e:
        raise DownloadError(None, str(e), url) from e


def write_executable(target_path: Path, payload: bytes) -> None:
    """Write ``payload`` to ``target_path`` with mode 0755.

    The data goes to a temporary file in the same directory that is renamed
    into place, so the target path never holds a partial binary.

    Raises:
        FilesystemError: If the file cannot be written or renamed.
    """
    tmp_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=target_path.parent,
            prefix=f".{target_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp_file:
            tmp_path = Path(tmp_file.name)
            tmp_file.write(payload)
        tmp_path.chmod(BINARY_MODE)
        os.replace(tmp_path, target_path)
        tmp_path = None
    except OSError as e:
        raise FilesystemError(f"Failed to write binary to {target_path}: {e}") from e
    finally:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)


def ensure_installed(
    identity: PackageIdentity,
    binary_name: str,
    install_root: Path,
    platform_info: Optional[PlatformInfo] = None,
) -> Path:
    """Ensure the release binary is installed under ``install_root``.

    Args:
        identity: Package name, version and repository reference.
        binary_name: Binary name without suffix (e.g., 'pm').
        install_root: Root containing the ``bin`` directory.
        platform_info: Platform to install for. Defaults to the running one.

    Returns:
        Path of the installed binary.

    Raises:
        ConfigError: Missing or unparseable repository URL.
        DownloadError: The artifact could not be downloaded.
        FilesystemError: The binary could not be written.
    """
    if not identity.repository_url:
        raise ConfigError("Repository URL not found in package manifest")

    repository = parse_repository_url(identity.repository_url)
    platform_info = platform_info or get_platform_info()

    paths = PmshimPaths(install_root)
    target_path = paths.binary_path(binary_name, platform_info)

    try:
        paths.ensure_directories()
    except OSError as e:
        raise FilesystemError(f"Failed to create {paths.bin_dir}: {e}") from e

    if target_path.exists():
        LOGGER.info("Binary already exists, skipping download")
        LOGGER.debug(f"Existing binary: {target_path}")
        return target_path

    file_name = build_artifact_name(binary_name, platform_info)
    url = build_download_url(repository, identity.version, file_name)

    LOGGER.info(f"Downloading binary from: {url}")
    payload = download_bytes(url)

    write_executable(target_path, payload)
    LOGGER.info(f"Binary installed successfully: {target_path}")
    return target_path
