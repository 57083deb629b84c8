"""Argument parser for the pmshim admin CLI."""

from __future__ import annotations

import argparse
from pathlib import Path


def _add_global_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce logging output to errors only.",
    )
    parser.add_argument(
        "--manifest",
        metavar="PATH",
        type=Path,
        default=None,
        help="Path to the package manifest (default: $PMSHIM_MANIFEST or the bundled manifest).",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``pmshim``."""
    parser = argparse.ArgumentParser(
        prog="pmshim",
        description="pmshim - install and locate the prebuilt pm binary.",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show pmshim version and exit.",
    )
    _add_global_options(parser)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    subparsers.add_parser(
        "install",
        help="Download the release binary for this platform (no-op if present).",
    )
    subparsers.add_parser(
        "status",
        help="Show platform, manifest and installed binary status.",
    )
    subparsers.add_parser(
        "which",
        help="Print the path the binary is installed at.",
    )

    return parser
