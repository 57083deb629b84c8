"""Install command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pmshim.config.models import ShimConfig

from pmshim.cli.commands import Command
from pmshim.core.exit_codes import EXIT_FAILURE
from pmshim.core.logging import get_logger
from pmshim.installer import install

LOGGER = get_logger(__name__)


class InstallCommand(Command):
    """Downloads the release binary if it is not installed yet."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "install"

    def execute(self, args: Namespace, config: "ShimConfig | None" = None) -> int:
        if config is None:
            LOGGER.error("Failed to install binary: no package manifest loaded")
            return EXIT_FAILURE
        return install(config)
