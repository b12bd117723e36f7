"""Tests for the top-level hit group."""

from pathlib import Path

from click.testing import CliRunner

from hitl_cli import __version__
from hitl_cli.cli import cli
from tests.test_utils.context_builders import build_context

COMMANDS = ("search", "install", "update", "list", "uninstall", "stats", "doctor", "contribute")


def test_version_option() -> None:
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_help_lists_every_command() -> None:
    result = CliRunner().invoke(cli, ["-h"])

    assert result.exit_code == 0
    for command in COMMANDS:
        assert command in result.output


def test_no_command_prints_help(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, [], obj=build_context(tmp_path))

    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "Human-in-the-Loop" in result.output
