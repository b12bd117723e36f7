"""In-memory search and lookup over a scanned catalog."""

from collections.abc import Iterable

from hitl_cli.models.tool import Tool


def _matches(tool: Tool, needle: str) -> bool:
    fields = (tool.id, tool.name, tool.description, tool.category)
    if any(needle in field.lower() for field in fields):
        return True
    return any(needle in tag.lower() for tag in tool.tags)


def search_tools(tools: Iterable[Tool], query: str | None = None) -> list[Tool]:
    """Filter tools by a case-insensitive substring.

    The query is matched against id, name, description, category and tags.
    An empty or missing query returns every tool.
    """
    if not query:
        return list(tools)

    needle = query.lower()
    return [tool for tool in tools if _matches(tool, needle)]


def get_tool(tools: Iterable[Tool], tool_id: str) -> Tool | None:
    """Return the first tool with the given id.

    Ids are not unique across types; the scan order decides which one wins.
    """
    for tool in tools:
        if tool.id == tool_id:
            return tool
    return None


def get_tool_by_reference(tools: Iterable[Tool], tool_type: str, tool_id: str) -> Tool | None:
    for tool in tools:
        if tool.type == tool_type and tool.id == tool_id:
            return tool
    return None
