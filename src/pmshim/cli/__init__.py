"""pmshim CLI package.

This package provides the ``pmshim`` admin command-line interface.
"""

from __future__ import annotations

from typing import Iterable, Optional

from pmshim.cli.runner import CLIRunner, get_version
from pmshim.cli.arguments import build_parser
from pmshim.core.exit_codes import EXIT_SUCCESS, EXIT_FAILURE


def main(argv: Optional[Iterable[str]] = None) -> int:
    """CLI entrypoint.

    Returns an exit code suitable for use as a console script.

    Args:
        argv: Command-line arguments (defaults to sys.argv).

    Returns:
        Exit code.
    """
    runner = CLIRunner()
    return runner.run(argv)


__all__ = [
    "main",
    "build_parser",
    "get_version",
    "CLIRunner",
    "EXIT_SUCCESS",
    "EXIT_FAILURE",
]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
