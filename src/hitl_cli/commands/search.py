"""Search command for finding tools in the toolkit."""

import click

from hitl_cli.cli.output import output_header, output_warning, user_output
from hitl_cli.context import HitContext
from hitl_cli.toolkit.scanner import scan_toolkit
from hitl_cli.toolkit.search import search_tools


@click.command()
@click.argument("query", required=False)
@click.pass_obj
def search(ctx: HitContext, query: str | None) -> None:
    """Search the toolkit for prompts, agents and other tools.

    Matches QUERY against id, name, description, category and tags.
    Without QUERY, lists every tool.

    Examples:

        hit search

        hit search testing
    """
    user_output("🔍 Searching for tools...")
    user_output()

    tools = search_tools(scan_toolkit(ctx.toolkit_path), query)

    if not tools:
        if query:
            output_warning(f'No tools found matching "{query}"')
        else:
            output_warning("No tools found in toolkit")
        return

    if query:
        output_warning(f'Searching for: "{query}"')
    else:
        output_warning("Showing all available tools:")
    user_output()

    plural = "" if len(tools) == 1 else "s"
    output_header(f"Found {len(tools)} tool{plural}:")
    user_output()

    for index, tool in enumerate(tools, start=1):
        user_output(click.style(f"{index}. ", fg="green") + click.style(tool.reference, bold=True))
        user_output(click.style(f"   {tool.description}", dim=True))
        user_output(click.style(f"   Version: {tool.version}", dim=True))
        if tool.tags:
            user_output(click.style(f"   Tags: {', '.join(tool.tags)}", dim=True))
        user_output()

    user_output(
        "💡 Use " + click.style("hit install <type>/<id>", bold=True) + " to install a tool"
    )
