"""Install step for the prebuilt binary.

Backs ``pmshim install`` and the ``pmshim-install`` console script. Any
failure is logged and reported as exit status 1; nothing escapes unhandled.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pmshim.bootstrap.fetcher import ensure_installed
from pmshim.bootstrap.paths import get_pmshim_home
from pmshim.bootstrap.platform import PlatformInfo
from pmshim.config import ShimConfig, load_manifest
from pmshim.core.errors import PmshimError
from pmshim.core.exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from pmshim.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


def install(
    config: ShimConfig,
    platform_info: Optional[PlatformInfo] = None,
) -> int:
    """Install the binary described by ``config``.

    Returns:
        EXIT_SUCCESS if the binary is installed (or already was),
        EXIT_FAILURE otherwise.
    """
    install_root = config.install_root or get_pmshim_home()
    try:
        ensure_installed(
            config.package,
            config.binary_name,
            install_root,
            platform_info=platform_info,
        )
    except PmshimError as e:
        LOGGER.error(f"Failed to install binary: {e}")
        return EXIT_FAILURE
    except Exception as e:
        LOGGER.error(f"Failed to install binary: unexpected error: {e}")
        LOGGER.debug("Traceback:", exc_info=True)
        return EXIT_FAILURE

    return EXIT_SUCCESS


def install_from_manifest(manifest_path: Optional[Path] = None) -> int:
    """Load the manifest and install the binary it describes."""
    try:
        config = load_manifest(manifest_path)
    except PmshimError as e:
        LOGGER.error(f"Failed to install binary: {e}")
        return EXIT_FAILURE
    except Exception as e:
        LOGGER.error(f"Failed to install binary: unexpected error: {e}")
        LOGGER.debug("Traceback:", exc_info=True)
        return EXIT_FAILURE
    return install(config)


def main() -> int:
    """Entry point for the ``pmshim-install`` console script."""
    configure_logging()
    return install_from_manifest()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
