"""Uninstall command for removing an installed tool."""

import click

from hitl_cli.cli.ensure import Ensure
from hitl_cli.cli.output import output_error, output_step, output_success, user_output
from hitl_cli.context import HitContext
from hitl_cli.io.registry_store import get_installed_tool
from hitl_cli.operations.install import parse_tool_identifier, uninstall_tool


@click.command()
@click.argument("tool", metavar="TYPE/ID|ID")
@click.option("--force", "-f", is_flag=True, help="Remove without asking")
@click.pass_obj
def uninstall(ctx: HitContext, tool: str, force: bool) -> None:
    """Remove an installed tool and its registry entry.

    A Claude command generated for the tool is removed as well.
    """
    tool_id = tool
    if "/" in tool:
        try:
            _, tool_id = parse_tool_identifier(tool)
        except ValueError as e:
            output_error(str(e))
            raise SystemExit(1) from None

    registry_path = ctx.config.registry_path
    installed = Ensure.not_none(
        get_installed_tool(registry_path, tool_id),
        f'Tool "{tool}" is not installed',
    )

    if not force and not click.confirm(
        f"Remove {installed.name} from {installed.installed_path}?", default=False, err=True
    ):
        user_output("Uninstall cancelled")
        return

    removed_files = uninstall_tool(installed, registry_path)

    command_path = ctx.config.commands_dir / f"{installed.id}.md"
    if installed.type == "prompt" and command_path.exists():
        command_path.unlink()
        output_step(f"Removed Claude command: {command_path}")

    if not removed_files:
        output_step(f"Installed files were already gone: {installed.installed_path}")
    output_success(f"Uninstalled {installed.name}")
