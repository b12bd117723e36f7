"""Stats command for summarizing installation data."""

from datetime import UTC, datetime

import click

from hitl_cli.cli.output import output_header, output_step, output_warning, user_output
from hitl_cli.context import HitContext
from hitl_cli.io.registry_store import get_installed_tools
from hitl_cli.models.registry import InstalledTool

RECENT_LIMIT = 3


def _parse_timestamp(value: str) -> datetime | None:
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def format_age(installed_at: str, now: datetime) -> str:
    """Describe an installation timestamp as ``today`` or ``N days ago``."""
    parsed = _parse_timestamp(installed_at)
    if parsed is None:
        return "unknown"

    days = (now - parsed).days
    if days <= 0:
        return "today"
    if days == 1:
        return "1 day ago"
    return f"{days} days ago"


def _sort_key(tool: InstalledTool) -> datetime:
    return _parse_timestamp(tool.installed_at) or datetime.min.replace(tzinfo=UTC)


def _show_tool(tool: InstalledTool) -> None:
    parsed = _parse_timestamp(tool.installed_at)
    installed_on = parsed.date().isoformat() if parsed is not None else tool.installed_at

    user_output(f"📊 Stats for {tool.name}:")
    user_output()
    output_header("Installation Info:")
    output_step(f"ID: {tool.id}")
    output_step(f"Type: {tool.type}")
    output_step(f"Version: {tool.version}")
    output_step(f"Installed: {installed_on}")
    output_step(f"Path: {tool.installed_path}")
    user_output()
    user_output(
        click.style(
            "Note: Usage tracking is not yet implemented. This shows installation data only.",
            dim=True,
        )
    )


@click.command()
@click.option("--tool", "tool_id", help="Show details for one installed tool")
@click.pass_obj
def stats(ctx: HitContext, tool_id: str | None) -> None:
    """Show installation statistics."""
    installed = get_installed_tools(ctx.config.registry_path)

    if tool_id is not None:
        match = next((tool for tool in installed if tool.id == tool_id), None)
        if match is None:
            output_warning(f'Tool "{tool_id}" not found in installed tools')
            output_step("Use " + click.style("hit list", bold=True) + " to see installed tools")
            return
        _show_tool(match)
        return

    user_output("📊 Overall Stats:")
    user_output()

    if not installed:
        output_warning("No tools installed yet")
        user_output()
        output_step("Use " + click.style("hit search", bold=True) + " to find tools")
        output_step(
            "Use " + click.style("hit install <type>/<id>", bold=True) + " to install a tool"
        )
        return

    user_output("Tools Installed: " + click.style(str(len(installed)), fg="green"))

    counts: dict[str, int] = {}
    for tool in installed:
        counts[tool.type] = counts.get(tool.type, 0) + 1

    output_header("By Type:")
    for tool_type, count in counts.items():
        user_output(click.style(f"  {tool_type}: ", dim=True) + click.style(str(count), fg="green"))

    now = ctx.clock.now()
    recent = sorted(installed, key=_sort_key, reverse=True)[:RECENT_LIMIT]
    user_output()
    output_header("Recently Installed:")
    for index, tool in enumerate(recent, start=1):
        user_output(
            click.style(f"  {index}. ", fg="green")
            + click.style(tool.id, bold=True)
            + click.style(f" ({format_age(tool.installed_at, now)})", dim=True)
        )

    user_output()
    user_output(
        click.style(
            "Note: Usage tracking (time saved, uses, etc.) is not yet implemented.", dim=True
        )
    )
    user_output(
        click.style(
            "Currently showing installation data only. Use --tool <id> for details.", dim=True
        )
    )
