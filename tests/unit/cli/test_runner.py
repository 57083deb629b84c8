"""Tests for the pmshim admin CLI."""

from __future__ import annotations

import argparse
from pathlib import Path
from unittest.mock import patch

import pmshim.cli as cli
from pmshim.cli import CLIRunner, EXIT_FAILURE, EXIT_SUCCESS


class TestBuildParser:
    """Tests for CLI argument parser."""

    def test_build_parser_includes_global_flags(self) -> None:
        parser = cli.build_parser()
        assert isinstance(parser, argparse.ArgumentParser)

        for flag in ["--version", "--debug", "--verbose", "--quiet", "--manifest"]:
            assert any(a.option_strings and flag in a.option_strings for a in parser._actions)

    def test_subcommands(self) -> None:
        parser = cli.build_parser()
        for command in ["install", "status", "which"]:
            args = parser.parse_args([command])
            assert args.command == command

    def test_manifest_is_path(self) -> None:
        args = cli.build_parser().parse_args(["--manifest", "pkg/package.json", "install"])
        assert args.manifest == Path("pkg/package.json")


class TestMain:
    """Tests for main CLI entry point."""

    def test_help_exits_successfully(self, capsys) -> None:
        exit_code = cli.main(["--help"])
        captured = capsys.readouterr()
        assert exit_code == EXIT_SUCCESS
        assert "usage:" in captured.out.lower()

    def test_no_command_prints_help(self, capsys) -> None:
        exit_code = cli.main([])
        assert exit_code == EXIT_SUCCESS
        assert "install" in capsys.readouterr().out

    def test_version(self, capsys) -> None:
        exit_code = cli.main(["--version"])
        assert exit_code == EXIT_SUCCESS
        assert capsys.readouterr().out.strip()

    @patch("pmshim.cli.CLIRunner")
    def test_main_passes_argv(self, mock_runner_cls) -> None:
        mock_runner = mock_runner_cls.return_value
        mock_runner.run.return_value = 1

        result = cli.main(["install"])

        assert result == 1
        mock_runner.run.assert_called_once_with(["install"])


class TestCLIRunner:
    """Tests for manifest handling and dispatch."""

    def test_install_with_bad_manifest_fails(self, tmp_path: Path, caplog) -> None:
        runner = CLIRunner()
        exit_code = runner.run(["--manifest", str(tmp_path / "missing.yml"), "install"])
        assert exit_code == EXIT_FAILURE
        assert "Manifest file not found" in caplog.text

    def test_which_tolerates_bad_manifest(self, isolated_home: Path, tmp_path: Path, capsys) -> None:
        runner = CLIRunner()
        exit_code = runner.run(["--manifest", str(tmp_path / "missing.yml"), "which"])
        assert exit_code == EXIT_SUCCESS
        assert str(isolated_home / "bin") in capsys.readouterr().out

    def test_install_dispatches_to_installer(self, isolated_home: Path) -> None:
        with patch(
            "pmshim.cli.commands.install.install", return_value=EXIT_SUCCESS
        ) as mock_install:
            exit_code = CLIRunner().run(["install"])

        assert exit_code == EXIT_SUCCESS
        config = mock_install.call_args.args[0]
        assert config.binary_name == "pm"

    def test_command_crash_returns_failure(self, isolated_home: Path, caplog) -> None:
        with patch(
            "pmshim.cli.commands.install.install", side_effect=RuntimeError("boom")
        ):
            exit_code = CLIRunner().run(["install"])

        assert exit_code == EXIT_FAILURE
        assert "install failed: boom" in caplog.text

    def test_undecodable_manifest_fails_install(self, tmp_path: Path, caplog) -> None:
        manifest = tmp_path / "manifest.yml"
        manifest.write_bytes(b"name: pm\nversion: 1.2.3\ndescription: \xff\xfe\n")
        exit_code = CLIRunner().run(["--manifest", str(manifest), "install"])
        assert exit_code == EXIT_FAILURE
        assert "Cannot read manifest" in caplog.text

    def test_unexpected_manifest_error_returns_failure(self, isolated_home: Path, caplog) -> None:
        with patch("pmshim.cli.runner.load_manifest", side_effect=RuntimeError("boom")):
            exit_code = CLIRunner().run(["which"])

        assert exit_code == EXIT_FAILURE
        assert "Failed to load manifest: boom" in caplog.text
