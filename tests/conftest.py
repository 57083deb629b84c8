"""Shared fixtures for pmshim tests."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_pmshim_logger():
    """Undo configure_logging() between tests."""
    logger = logging.getLogger("pmshim")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Point PMSHIM_HOME at a temp dir and use the bundled manifest."""
    home = tmp_path / "pmshim-home"
    monkeypatch.setenv("PMSHIM_HOME", str(home))
    monkeypatch.delenv("PMSHIM_MANIFEST", raising=False)
    monkeypatch.delenv("PMSHIM_REPOSITORY_URL", raising=False)
    return home
