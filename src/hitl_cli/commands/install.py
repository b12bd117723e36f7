"""Install command for copying a toolkit tool onto this machine."""

from pathlib import Path

import click
import yaml

from hitl_cli.cli.ensure import Ensure
from hitl_cli.cli.output import (
    output_error,
    output_step,
    output_success,
    output_warning,
    user_output,
)
from hitl_cli.context import HitContext
from hitl_cli.io.file_operations import resolve_path
from hitl_cli.io.registry_store import get_installed_tool
from hitl_cli.models.tool import Tool
from hitl_cli.operations.claude_commands import create_claude_command
from hitl_cli.operations.install import default_install_path, install_tool, parse_tool_identifier
from hitl_cli.toolkit.scanner import scan_toolkit
from hitl_cli.toolkit.search import get_tool_by_reference


def _create_command_for(tool: Tool, installed_dir: Path, commands_dir: Path) -> Path | None:
    definition_path = installed_dir / tool.definition_path.name
    try:
        return create_claude_command(definition_path, commands_dir, tool.id)
    except (OSError, ValueError, SyntaxError, yaml.YAMLError) as e:
        output_warning(f"Could not create Claude command: {e}")
        return None


@click.command()
@click.argument("tool_identifier", metavar="TYPE/ID")
@click.option(
    "--path",
    "install_path",
    type=click.Path(path_type=Path),
    help="Install into this directory instead of ~/.claude/tools/<type>/<id>",
)
@click.option("--force", "-f", is_flag=True, help="Reinstall without asking if already installed")
@click.option(
    "--no-claude-command",
    is_flag=True,
    help="Do not generate a Claude slash command for prompts",
)
@click.pass_obj
def install(
    ctx: HitContext,
    tool_identifier: str,
    install_path: Path | None,
    force: bool,
    no_claude_command: bool,
) -> None:
    """Install a tool from the toolkit.

    Examples:

        hit install prompt/code-review-ts

        hit install agent/test-generator --path ~/my-tools/test-generator
    """
    try:
        tool_type, tool_id = parse_tool_identifier(tool_identifier)
    except ValueError as e:
        output_error(str(e))
        raise SystemExit(1) from None

    user_output(f"📦 Installing {tool_identifier}...")
    user_output()

    output_step("Looking up tool...")
    tool = Ensure.not_none(
        get_tool_by_reference(scan_toolkit(ctx.toolkit_path), tool_type, tool_id),
        f'Tool "{tool_identifier}" not found\n\n'
        + "Use "
        + click.style("hit search", bold=True)
        + " to find available tools",
    )

    if install_path is not None:
        destination = resolve_path(install_path)
    else:
        destination = default_install_path(ctx.config.install_root, tool)

    registry_path = ctx.config.registry_path
    existing = get_installed_tool(registry_path, tool.id)
    if existing is not None:
        output_warning(
            f'Tool "{tool.id}" is already installed (v{existing.version}) '
            f"at {existing.installed_path}"
        )
        if not force and not click.confirm("Do you want to reinstall?", default=False, err=True):
            user_output("Installation cancelled")
            return

    output_step("Copying tool files...")
    try:
        installed = install_tool(tool, destination, registry_path, ctx.clock.now())
    except OSError as e:
        output_error(f"Installation failed: {e}")
        raise SystemExit(1) from None

    command_path: Path | None = None
    if tool.type == "prompt" and not no_claude_command:
        command_path = _create_command_for(tool, destination, ctx.config.commands_dir)

    user_output()
    output_success(f"Successfully installed {tool.name} v{tool.version}")
    output_step(f"Installed to: {installed.installed_path}")
    if command_path is not None:
        output_step(f"Claude command: /{command_path.stem} ({command_path})")
    user_output("💡 Run " + click.style("hit list", bold=True) + " to see all installed tools")
