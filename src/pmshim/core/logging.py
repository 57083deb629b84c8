"""Logging setup for pmshim.

All module loggers hang off the ``pmshim`` logger and write to stderr,
leaving stdout free for command output.
"""

from __future__ import annotations

import logging
import sys

_ROOT_LOGGER_NAME = "pmshim"
_HANDLER_NAME = "pmshim-stderr"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the pmshim namespace.

    Args:
        name: Usually ``__name__`` of the calling module.
    """
    if name == _ROOT_LOGGER_NAME or name.startswith(f"{_ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> logging.Logger:
    """Configure the pmshim logger.

    Safe to call more than once; later calls only adjust the level.

    Args:
        debug: Log everything, including tracebacks of unexpected errors.
        verbose: Log progress at INFO level, same as the default.
        quiet: Only log errors.

    Returns:
        The configured ``pmshim`` logger.
    """
    if debug:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.INFO

    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = True

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    if debug:
        for handler in logger.handlers:
            if handler.get_name() == _HANDLER_NAME:
                handler.setFormatter(
                    logging.Formatter("%(levelname)s %(name)s: %(message)s")
                )

    return logger
