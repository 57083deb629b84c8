"""Which command implementation."""

from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pmshim.config.models import ShimConfig

from pmshim.bootstrap.paths import binary_path, get_pmshim_home
from pmshim.cli.commands import Command
from pmshim.config.models import DEFAULT_BINARY_NAME
from pmshim.core.exit_codes import EXIT_SUCCESS


class WhichCommand(Command):
    """Prints the installed binary path, whether or not it exists yet."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "which"

    def execute(self, args: Namespace, config: "ShimConfig | None" = None) -> int:
        binary_name = config.binary_name if config else DEFAULT_BINARY_NAME
        install_root = (config.install_root if config else None) or get_pmshim_home()
        print(binary_path(install_root, binary_name))
        return EXIT_SUCCESS
