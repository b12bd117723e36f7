"""Tests for the install command."""

import json
from pathlib import Path

from click.testing import CliRunner

from hitl_cli.cli import cli
from hitl_cli.io.registry_store import get_installed_tools
from tests.test_utils.context_builders import build_context


def test_install_prompt_copies_files_and_creates_command(toolkit: Path, tmp_path: Path) -> None:
    home = tmp_path / "home"
    ctx = build_context(home, toolkit_path=toolkit)

    result = CliRunner().invoke(cli, ["install", "prompt/code-review-ts"], obj=ctx)

    assert result.exit_code == 0, result.output
    installed_dir = home / ".claude" / "tools" / "prompt" / "code-review-ts"
    command_path = home / ".claude" / "commands" / "code-review-ts.md"
    assert (installed_dir / "prompt.yaml").exists()
    assert command_path.exists()
    assert "Successfully installed Code Review Ts v1.2.0" in result.output
    assert f"Installed to: {installed_dir}" in result.output
    assert "Claude command: /code-review-ts" in result.output


def test_install_writes_registry_entry(toolkit: Path, tmp_path: Path) -> None:
    home = tmp_path / "home"
    ctx = build_context(home, toolkit_path=toolkit)

    CliRunner().invoke(cli, ["install", "prompt/code-review-ts"], obj=ctx)

    data = json.loads((home / ".hit" / "registry.json").read_text(encoding="utf-8"))
    assert data["version"] == "1.0.0"
    assert data["installations"] == [
        {
            "id": "code-review-ts",
            "name": "Code Review Ts",
            "version": "1.2.0",
            "type": "prompt",
            "installedPath": str(home / ".claude" / "tools" / "prompt" / "code-review-ts"),
            "installedAt": "2025-03-14T09:26:53+00:00",
        }
    ]


def test_install_xml_prompt_command(toolkit: Path, tmp_path: Path) -> None:
    home = tmp_path / "home"
    ctx = build_context(home, toolkit_path=toolkit)

    result = CliRunner().invoke(cli, ["install", "prompt/api-design"], obj=ctx)

    assert result.exit_code == 0, result.output
    command = (home / ".claude" / "commands" / "api-design.md").read_text(encoding="utf-8")
    assert command.startswith("# API Design Review\n")


def test_install_agent_skips_claude_command(toolkit: Path, tmp_path: Path) -> None:
    home = tmp_path / "home"
    ctx = build_context(home, toolkit_path=toolkit)

    result = CliRunner().invoke(cli, ["install", "agent/test-generator"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert (home / ".claude" / "tools" / "agent" / "test-generator" / "agent.md").exists()
    assert not (home / ".claude" / "commands").exists()
    assert "Claude command" not in result.output


def test_install_no_claude_command_flag(toolkit: Path, tmp_path: Path) -> None:
    home = tmp_path / "home"
    ctx = build_context(home, toolkit_path=toolkit)

    result = CliRunner().invoke(
        cli, ["install", "prompt/code-review-ts", "--no-claude-command"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert not (home / ".claude" / "commands" / "code-review-ts.md").exists()


def test_install_custom_path(toolkit: Path, tmp_path: Path) -> None:
    ctx = build_context(tmp_path / "home", toolkit_path=toolkit)
    target = tmp_path / "elsewhere" / "style"

    result = CliRunner().invoke(
        cli, ["install", "context-pack/python-style", "--path", str(target)], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert (target / "config.json").exists()
    [entry] = get_installed_tools(ctx.config.registry_path)
    assert entry.installed_path == str(target.resolve())


def test_install_invalid_identifier(toolkit: Path, tmp_path: Path) -> None:
    ctx = build_context(tmp_path / "home", toolkit_path=toolkit)

    result = CliRunner().invoke(cli, ["install", "code-review-ts"], obj=ctx)

    assert result.exit_code == 1
    assert "Invalid tool identifier: code-review-ts. Use format: <type>/<id>" in result.output


def test_install_unknown_type(toolkit: Path, tmp_path: Path) -> None:
    ctx = build_context(tmp_path / "home", toolkit_path=toolkit)

    result = CliRunner().invoke(cli, ["install", "widget/code-review-ts"], obj=ctx)

    assert result.exit_code == 1
    assert "Unsupported tool type: widget" in result.output


def test_install_tool_not_found(toolkit: Path, tmp_path: Path) -> None:
    ctx = build_context(tmp_path / "home", toolkit_path=toolkit)

    result = CliRunner().invoke(cli, ["install", "prompt/missing"], obj=ctx)

    assert result.exit_code == 1
    assert 'Tool "prompt/missing" not found' in result.output
    assert "hit search" in result.output
    assert not ctx.config.registry_path.exists()


def test_install_type_must_match(toolkit: Path, tmp_path: Path) -> None:
    """An id under a different type is not found."""
    ctx = build_context(tmp_path / "home", toolkit_path=toolkit)

    result = CliRunner().invoke(cli, ["install", "agent/code-review-ts"], obj=ctx)

    assert result.exit_code == 1
    assert 'Tool "agent/code-review-ts" not found' in result.output


def test_reinstall_declined(toolkit: Path, tmp_path: Path) -> None:
    ctx = build_context(tmp_path / "home", toolkit_path=toolkit)
    runner = CliRunner()
    runner.invoke(cli, ["install", "prompt/code-review-ts"], obj=ctx)
    before = ctx.config.registry_path.read_text(encoding="utf-8")

    result = runner.invoke(cli, ["install", "prompt/code-review-ts"], obj=ctx, input="n\n")

    assert result.exit_code == 0, result.output
    assert 'Tool "code-review-ts" is already installed (v1.2.0)' in result.output
    assert "Do you want to reinstall?" in result.output
    assert "Installation cancelled" in result.output
    assert ctx.config.registry_path.read_text(encoding="utf-8") == before


def test_reinstall_with_force(toolkit: Path, tmp_path: Path) -> None:
    ctx = build_context(tmp_path / "home", toolkit_path=toolkit)
    runner = CliRunner()
    runner.invoke(cli, ["install", "prompt/code-review-ts"], obj=ctx)

    result = runner.invoke(cli, ["install", "prompt/code-review-ts", "--force"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Do you want to reinstall?" not in result.output
    assert "Successfully installed" in result.output
    assert len(get_installed_tools(ctx.config.registry_path)) == 1
