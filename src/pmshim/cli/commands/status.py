"""Status command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pmshim.config.models import ShimConfig

from pmshim.bootstrap.fetcher import (
    build_artifact_name,
    build_download_url,
    parse_repository_url,
)
from pmshim.bootstrap.paths import get_pmshim_home
from pmshim.bootstrap.platform import get_platform_info
from pmshim.bootstrap.validation import inspect_installed
from pmshim.cli.commands import Command
from pmshim.config.models import DEFAULT_BINARY_NAME
from pmshim.core.errors import ConfigError
from pmshim.core.exit_codes import EXIT_FAILURE, EXIT_SUCCESS


class StatusCommand(Command):
    """Shows platform, manifest and installed binary status."""

    def __init__(self, version: str):
        """Initialize StatusCommand.

        Args:
            version: Current pmshim version string.
        """
        self._version = version

    @property
    def name(self) -> str:
        """Command identifier."""
        return "status"

    def execute(self, args: Namespace, config: "ShimConfig | None" = None) -> int:
        """Execute the status command.

        Returns:
            0 if the binary is installed and executable, 1 otherwise.
        """
        platform_info = get_platform_info()
        binary_name = config.binary_name if config else DEFAULT_BINARY_NAME
        install_root = (config.install_root if config else None) or get_pmshim_home()
        installed = inspect_installed(install_root, binary_name, platform_info)

        print(f"pmshim version: {self._version}")
        print(f"Platform: {platform_info}")
        print(f"Install root: {install_root}")

        if config is None:
            print("Manifest: not loaded")
        else:
            package = config.package
            print(f"Manifest: {config.manifest_source}")
            print(f"Package: {package.name} {package.version}")
            if package.repository_url:
                try:
                    repository = parse_repository_url(package.repository_url)
                except ConfigError as e:
                    print(f"Release URL: unavailable ({e})")
                else:
                    file_name = build_artifact_name(binary_name, platform_info)
                    url = build_download_url(repository, package.version, file_name)
                    print(f"Release URL: {url}")
            else:
                print("Release URL: unavailable (no repository URL)")

        print(f"Binary: {installed}")
        return EXIT_SUCCESS if installed.is_runnable else EXIT_FAILURE
