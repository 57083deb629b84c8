"""Tests for pmshim.bootstrap.platform."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from pmshim.bootstrap.platform import PlatformInfo, get_platform_info


class TestOsMapping:
    """Tests for OS tag resolution."""

    @pytest.mark.parametrize(
        "system,expected",
        [
            ("darwin", "macos"),
            ("linux", "linux"),
            ("win32", "windows"),
            ("cygwin", "windows"),
        ],
    )
    def test_known_os_tags(self, system: str, expected: str) -> None:
        info = get_platform_info(system=system, machine="x86_64")
        assert info.os == expected

    @pytest.mark.parametrize("system", ["freebsd13", "sunos5", "aix"])
    def test_unknown_os_passes_through(self, system: str) -> None:
        info = get_platform_info(system=system, machine="x86_64")
        assert info.os == system


class TestArchMapping:
    """Tests for architecture tag resolution."""

    @pytest.mark.parametrize(
        "machine,expected",
        [
            ("x86_64", "x64"),
            ("AMD64", "x64"),
            ("amd64", "x64"),
            ("aarch64", "arm64"),
            ("arm64", "arm64"),
        ],
    )
    def test_known_arch_tags(self, machine: str, expected: str) -> None:
        info = get_platform_info(system="linux", machine=machine)
        assert info.arch == expected

    @pytest.mark.parametrize("machine", ["riscv64", "ppc64le", "i686", "armv7l"])
    def test_unknown_arch_passes_through(self, machine: str) -> None:
        info = get_platform_info(system="linux", machine=machine)
        assert info.arch == machine


class TestExecutableSuffix:
    """Tests for the executable suffix."""

    def test_windows_uses_exe(self) -> None:
        info = get_platform_info(system="win32", machine="AMD64")
        assert info.executable_suffix == ".exe"
        assert info.is_windows

    @pytest.mark.parametrize("system", ["linux", "darwin", "freebsd13"])
    def test_non_windows_has_no_suffix(self, system: str) -> None:
        info = get_platform_info(system=system, machine="x86_64")
        assert info.executable_suffix == ""
        assert not info.is_windows


class TestGetPlatformInfo:
    """Tests for defaults and the PlatformInfo value."""

    def test_defaults_come_from_running_interpreter(self) -> None:
        with patch("pmshim.bootstrap.platform.sys.platform", "darwin"), patch(
            "pmshim.bootstrap.platform._platform.machine", return_value="arm64"
        ):
            info = get_platform_info()

        assert info == PlatformInfo(os="macos", arch="arm64", executable_suffix="")

    def test_is_immutable(self) -> None:
        info = get_platform_info(system="linux", machine="x86_64")
        with pytest.raises(AttributeError):
            info.os = "windows"  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(get_platform_info(system="linux", machine="aarch64")) == "linux-arm64"
