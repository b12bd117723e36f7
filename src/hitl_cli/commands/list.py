"""List command for showing installed tools."""

import click

from hitl_cli.cli.output import (
    output_header,
    output_list_item,
    output_step,
    output_warning,
    user_output,
)
from hitl_cli.context import HitContext
from hitl_cli.io.registry_store import get_installed_tools
from hitl_cli.models.registry import InstalledTool
from hitl_cli.models.tool import TOOL_TYPE_LABELS


def group_by_type(installed: list[InstalledTool]) -> dict[str, list[InstalledTool]]:
    """Group tools by type, keeping the order in which each type first appears."""
    groups: dict[str, list[InstalledTool]] = {}
    for tool in installed:
        groups.setdefault(tool.type, []).append(tool)
    return groups


@click.command("list")
@click.pass_obj
def list_installed(ctx: HitContext) -> None:
    """List installed tools grouped by type."""
    user_output("📋 Installed tools:")
    user_output()

    installed = get_installed_tools(ctx.config.registry_path)
    if not installed:
        output_warning("No tools installed yet")
        user_output()
        output_step("Use " + click.style("hit search", bold=True) + " to find tools")
        output_step(
            "Use " + click.style("hit install <type>/<id>", bold=True) + " to install a tool"
        )
        return

    for tool_type, tools in group_by_type(installed).items():
        output_header(f"{TOOL_TYPE_LABELS.get(tool_type, tool_type)}:")
        for tool in tools:
            output_list_item(tool.id, f"v{tool.version}")
            user_output(click.style(f"   Installed at: {tool.installed_path}", dim=True))
        user_output()

    plural = "" if len(installed) == 1 else "s"
    output_step(f"Total: {len(installed)} tool{plural} installed")
