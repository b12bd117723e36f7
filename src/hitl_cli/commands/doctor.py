"""Doctor command for diagnosing the local environment."""

import platform
from dataclasses import dataclass
from pathlib import Path

import click

from hitl_cli.cli.output import format_check_summary, output_header, print_panel, user_output
from hitl_cli.context import HitContext
from hitl_cli.toolkit.scanner import is_valid_toolkit_directory, scan_toolkit


@dataclass
class CheckCounts:
    errors: int = 0
    warnings: int = 0


def _ok(label: str, detail: str) -> None:
    user_output(click.style(f"  ✓ {label}", fg="green") + click.style(f" {detail}", dim=True))


def _warn(label: str, detail: str, counts: CheckCounts) -> None:
    user_output(click.style(f"  ⚠ {label}", fg="yellow") + click.style(f" {detail}", dim=True))
    counts.warnings += 1


def _fail(label: str, detail: str, counts: CheckCounts) -> None:
    user_output(click.style(f"  ✗ {label}", fg="red") + click.style(f" {detail}", dim=True))
    counts.errors += 1


def _check_directory(label: str, path: Path, counts: CheckCounts) -> None:
    # Missing directories are created on first install
    if path.is_dir():
        _ok(label, str(path))
    else:
        _warn(label, "not found (will be created on first install)", counts)


@click.command()
@click.pass_obj
def doctor(ctx: HitContext) -> None:
    """Check the environment, installation paths and toolkit."""
    user_output("🔍 Running diagnostic checks...")
    user_output()
    counts = CheckCounts()

    output_header("Environment:")
    _ok("Python", platform.python_version())
    user_output()

    output_header("Version Control:")
    git_version = ctx.probe.get_version("git")
    if git_version is not None:
        _ok("git", git_version)
    else:
        _warn("git", "not found (recommended)", counts)

    gh_version = ctx.probe.get_version("gh")
    if gh_version is not None:
        _ok("GitHub CLI", gh_version)
    else:
        _warn("GitHub CLI", "not found (needed for contribute command)", counts)
    user_output()

    output_header("Installation Paths:")
    config = ctx.config
    _check_directory(".hit directory", config.hit_home, counts)
    if config.registry_path.is_file():
        _ok("registry.json", "found")
    else:
        _warn("registry.json", "not found (will be created on first install)", counts)
    _check_directory(".claude directory", config.claude_dir, counts)
    _check_directory("tools directory", config.install_root, counts)
    user_output()

    output_header("Toolkit:")
    toolkit_path = ctx.toolkit_path
    if is_valid_toolkit_directory(toolkit_path):
        tool_count = len(scan_toolkit(toolkit_path))
        _ok("toolkit", f"{toolkit_path} ({tool_count} tools)")
    else:
        _fail("toolkit", f"no valid toolkit at {toolkit_path}", counts)
    user_output()

    print_panel(format_check_summary(counts.errors, counts.warnings))

    if gh_version is None:
        user_output(click.style("  To install GitHub CLI: https://cli.github.com/", dim=True))
