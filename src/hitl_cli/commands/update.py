"""Update command for bringing installed tools up to the toolkit version."""

from pathlib import Path

import click
import yaml

from hitl_cli.cli.ensure import Ensure
from hitl_cli.cli.output import (
    output_error,
    output_header,
    output_step,
    output_success,
    output_warning,
    user_output,
)
from hitl_cli.context import HitContext
from hitl_cli.io.definitions import find_definition_file
from hitl_cli.io.registry_store import get_installed_tools
from hitl_cli.operations.claude_commands import create_claude_command
from hitl_cli.operations.install import apply_update, parse_tool_identifier
from hitl_cli.operations.updates import UpdateCandidate, find_updates
from hitl_cli.toolkit.scanner import scan_toolkit


def _tool_id_from_argument(tool: str) -> str:
    if "/" not in tool:
        return tool
    try:
        _, tool_id = parse_tool_identifier(tool)
    except ValueError as e:
        output_error(str(e))
        raise SystemExit(1) from None
    return tool_id


def _refresh_claude_command(candidate: UpdateCandidate, commands_dir: Path) -> None:
    """Regenerate the slash command if one was created at install time."""
    command_path = commands_dir / f"{candidate.id}.md"
    if candidate.type != "prompt" or not command_path.exists():
        return

    definition_path = find_definition_file(Path(candidate.installed_path))
    if definition_path is None:
        return

    try:
        create_claude_command(definition_path, commands_dir, candidate.id)
    except (OSError, ValueError, SyntaxError, yaml.YAMLError) as e:
        output_warning(f"Could not refresh Claude command for {candidate.id}: {e}")


@click.command()
@click.argument("tool", required=False, metavar="[TYPE/ID|ID]")
@click.option("--all", "update_all", is_flag=True, help="Update every installed tool (default)")
@click.option("--check", is_flag=True, help="Only report available updates")
@click.option("--force", "-f", is_flag=True, help="Apply updates without asking")
@click.option("--no-backup", is_flag=True, help="Do not back up the installed copy first")
@click.pass_obj
def update(
    ctx: HitContext,
    tool: str | None,
    update_all: bool,
    check: bool,
    force: bool,
    no_backup: bool,
) -> None:
    """Update installed tools to the newest toolkit version.

    Each installed copy is backed up to <path>.backup-<timestamp> before it is
    overwritten unless --no-backup is given.

    Examples:

        hit update --check

        hit update prompt/code-review-ts

        hit update --all --force
    """
    Ensure.invariant(
        not (tool is not None and update_all),
        "Specify a tool or --all, not both",
    )
    tool_id = _tool_id_from_argument(tool) if tool is not None else None

    user_output("🔍 Checking for updates...")
    user_output()

    registry_path = ctx.config.registry_path
    installed = get_installed_tools(registry_path)
    if not installed:
        output_warning("No tools installed yet")
        output_step(
            "Use " + click.style("hit install <type>/<id>", bold=True) + " to install a tool"
        )
        return

    if tool_id is not None:
        Ensure.invariant(
            any(entry.id == tool_id for entry in installed),
            f'Tool "{tool}" is not installed',
        )

    result = find_updates(installed, scan_toolkit(ctx.toolkit_path), tool_id)

    for missing_id in result.missing:
        output_warning(f'Tool "{missing_id}" not found in toolkit (may have been removed)')

    if not result.candidates:
        output_success("All tools are up to date!")
        return

    count = len(result.candidates)
    plural = "" if count == 1 else "s"
    output_header(f"{count} update{plural} available:")
    for candidate in result.candidates:
        user_output(
            f"  {candidate.type}/{candidate.id}: "
            + click.style(f"v{candidate.current_version}", dim=True)
            + " → "
            + click.style(f"v{candidate.latest_version}", fg="green")
        )
    user_output()

    if check:
        user_output("💡 Run " + click.style("hit update", bold=True) + " to apply updates")
        return

    if not force and not click.confirm(f"Apply {count} update{plural}?", default=False, err=True):
        user_output("Update cancelled")
        return

    failures = 0
    for candidate in result.candidates:
        try:
            applied = apply_update(
                candidate,
                registry_path,
                ctx.clock.now(),
                backup=not no_backup,
            )
        except OSError as e:
            output_error(f"Failed to update {candidate.id}: {e}")
            failures += 1
            continue

        _refresh_claude_command(candidate, ctx.config.commands_dir)
        output_success(
            f"Updated {candidate.id}: v{candidate.current_version} → v{candidate.latest_version}"
        )
        if applied.backup_path is not None:
            output_step(f"Backup: {applied.backup_path}")

    if failures:
        raise SystemExit(1)
