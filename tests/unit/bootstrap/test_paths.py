"""Tests for pmshim.bootstrap.paths."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

from pmshim.bootstrap.paths import (
    DEFAULT_HOME_DIR_NAME,
    PMSHIM_HOME_ENV,
    PmshimPaths,
    binary_path,
    get_pmshim_home,
)
from pmshim.bootstrap.platform import PlatformInfo

LINUX = PlatformInfo(os="linux", arch="x64", executable_suffix="")
WINDOWS = PlatformInfo(os="windows", arch="x64", executable_suffix=".exe")


class TestGetPmshimHome:
    """Tests for home directory resolution."""

    def test_env_override(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {PMSHIM_HOME_ENV: str(tmp_path)}):
            assert get_pmshim_home() == tmp_path

    def test_default_under_user_home(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {}, clear=True), patch(
            "pmshim.bootstrap.paths.Path.home", return_value=tmp_path
        ):
            assert get_pmshim_home() == tmp_path / DEFAULT_HOME_DIR_NAME


class TestPmshimPaths:
    """Tests for PmshimPaths."""

    def test_bin_dir(self, tmp_path: Path) -> None:
        paths = PmshimPaths(tmp_path)
        assert paths.bin_dir == tmp_path / "bin"

    def test_binary_path_without_suffix(self, tmp_path: Path) -> None:
        paths = PmshimPaths(tmp_path)
        assert paths.binary_path("pm", LINUX) == tmp_path / "bin" / "pm"

    def test_binary_path_with_windows_suffix(self, tmp_path: Path) -> None:
        paths = PmshimPaths(tmp_path)
        assert paths.binary_path("pm", WINDOWS) == tmp_path / "bin" / "pm.exe"

    def test_binary_path_defaults_to_running_platform(self, tmp_path: Path) -> None:
        with patch("pmshim.bootstrap.paths.get_platform_info", return_value=WINDOWS):
            assert PmshimPaths(tmp_path).binary_path("pm") == tmp_path / "bin" / "pm.exe"

    def test_ensure_directories_is_idempotent(self, tmp_path: Path) -> None:
        paths = PmshimPaths(tmp_path / "nested" / "root")
        paths.ensure_directories()
        paths.ensure_directories()
        assert paths.bin_dir.is_dir()

    def test_module_shortcut_matches(self, tmp_path: Path) -> None:
        assert binary_path(tmp_path, "tool", LINUX) == PmshimPaths(tmp_path).binary_path(
            "tool", LINUX
        )
