"""CLI runner for pmshim.

Parses arguments, configures logging, loads the manifest and dispatches to
the selected command.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from typing import Dict, Iterable, List, Optional

from pmshim.cli.arguments import build_parser
from pmshim.cli.commands import Command, InstallCommand, StatusCommand, WhichCommand
from pmshim.config import ShimConfig, load_manifest
from pmshim.core.errors import ConfigError
from pmshim.core.exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from pmshim.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


def get_version() -> str:
    try:
        return version("pmshim")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from pmshim import __version__

        return __version__


class CLIRunner:
    """Runs a single ``pmshim`` invocation."""

    def __init__(self) -> None:
        self.parser = build_parser()
        self._version = get_version()
        self._commands: Dict[str, Command] = {
            "install": InstallCommand(),
            "status": StatusCommand(version=self._version),
            "which": WhichCommand(),
        }

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv[1:]).

        Returns:
            Exit code.
        """
        argv_list: Optional[List[str]] = list(argv) if argv is not None else None

        # Handle top-level --help specially to return 0
        if argv_list is not None and argv_list[:1] in (["--help"], ["-h"]):
            self.parser.print_help()
            return EXIT_SUCCESS

        args = self.parser.parse_args(argv_list)

        # Configure logging as early as possible.
        configure_logging(debug=args.debug, verbose=args.verbose, quiet=args.quiet)

        if args.version:
            print(self._version)
            return EXIT_SUCCESS

        command = self._commands.get(args.command or "")
        if command is None:
            self.parser.print_help()
            return EXIT_SUCCESS

        config: Optional[ShimConfig] = None
        try:
            config = load_manifest(args.manifest)
        except ConfigError as e:
            if command.name == "install":
                LOGGER.error(f"Failed to install binary: {e}")
                return EXIT_FAILURE
            LOGGER.warning(str(e))
        except Exception as e:
            LOGGER.error(f"Failed to load manifest: {e}")
            LOGGER.debug("Traceback:", exc_info=True)
            return EXIT_FAILURE

        try:
            return command.execute(args, config)
        except Exception as e:
            LOGGER.error(f"{command.name} failed: {e}")
            LOGGER.debug("Traceback:", exc_info=True)
            return EXIT_FAILURE
