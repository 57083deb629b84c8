"""pmshim - installer and launcher for the prebuilt pm binary.

The distribution ships no pm functionality of its own. It downloads the
matching release artifact for the running platform and forwards every
invocation of the ``pm`` console script to it.
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["__version__"]
