"""Tests for the stats command."""

from datetime import UTC, datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from hitl_cli.cli import cli
from hitl_cli.commands.stats import format_age
from hitl_cli.io.registry_store import register_installation
from hitl_cli.models.registry import InstalledTool
from tests.fakes.fake_clock import DEFAULT_NOW
from tests.test_utils.context_builders import build_context


def _register(registry_path: Path, tool_id: str, tool_type: str, installed_at: str) -> None:
    register_installation(
        registry_path,
        InstalledTool(
            id=tool_id,
            name=tool_id.title(),
            version="1.0.0",
            type=tool_type,  # type: ignore[arg-type]
            installed_path=f"/tools/{tool_id}",
            installed_at=installed_at,
        ),
    )


@pytest.mark.parametrize(
    ("installed_at", "expected"),
    [
        ("2025-03-14T01:00:00+00:00", "today"),
        ("2025-03-13T08:00:00+00:00", "1 day ago"),
        ("2025-03-04T09:26:53+00:00", "10 days ago"),
        ("2025-03-14T01:00:00", "today"),
        ("not a date", "unknown"),
    ],
)
def test_format_age(installed_at: str, expected: str) -> None:
    assert format_age(installed_at, DEFAULT_NOW) == expected


def test_stats_empty(tmp_path: Path) -> None:
    ctx = build_context(tmp_path / "home")

    result = CliRunner().invoke(cli, ["stats"], obj=ctx)

    assert result.exit_code == 0
    assert "📊 Overall Stats:" in result.output
    assert "No tools installed yet" in result.output


def test_stats_overview(tmp_path: Path) -> None:
    ctx = build_context(tmp_path / "home")
    registry_path = ctx.config.registry_path
    _register(registry_path, "old", "prompt", "2025-01-01T00:00:00+00:00")
    _register(registry_path, "newest", "agent", "2025-03-14T08:00:00+00:00")
    _register(registry_path, "middle", "prompt", "2025-03-13T08:00:00+00:00")
    _register(registry_path, "older", "skill", "2025-02-01T00:00:00+00:00")

    result = CliRunner().invoke(cli, ["stats"], obj=ctx)

    assert result.exit_code == 0, result.output
    output = result.output
    assert "Tools Installed: 4" in output
    assert "  prompt: 2" in output
    assert "  agent: 1" in output
    assert "1. newest (today)" in output
    assert "2. middle (1 day ago)" in output
    assert "3. older (41 days ago)" in output
    assert "old (" not in output


def test_stats_for_one_tool(tmp_path: Path) -> None:
    ctx = build_context(tmp_path / "home")
    _register(ctx.config.registry_path, "reviewer", "prompt", "2025-03-10T12:00:00+00:00")

    result = CliRunner().invoke(cli, ["stats", "--tool", "reviewer"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "📊 Stats for Reviewer:" in result.output
    assert "Type: prompt" in result.output
    assert "Installed: 2025-03-10" in result.output
    assert "Path: /tools/reviewer" in result.output
    assert "Usage tracking is not yet implemented" in result.output


def test_stats_for_unknown_tool(tmp_path: Path) -> None:
    ctx = build_context(tmp_path / "home")

    result = CliRunner().invoke(cli, ["stats", "--tool", "ghost"], obj=ctx)

    assert result.exit_code == 0
    assert 'Tool "ghost" not found in installed tools' in result.output


def test_format_age_uses_clock_instant() -> None:
    now = datetime(2025, 1, 3, tzinfo=UTC)

    assert format_age("2025-01-01T00:00:00+00:00", now) == "2 days ago"
