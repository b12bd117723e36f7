"""Toolkit discovery and scanning."""

import logging
from pathlib import Path

from hitl_cli.io.definitions import parse_tool_directory
from hitl_cli.models.tool import TOOL_TYPE_DIRECTORIES, Tool, ToolType

logger = logging.getLogger(__name__)

LOCAL_TOOLKIT_DIRNAMES = ("lib", "toolkit")


def get_bundled_toolkit_path() -> Path:
    """Return path to the toolkit shipped inside the package."""
    return Path(__file__).parent.parent / "data" / "toolkit"


def is_valid_toolkit_directory(path: Path) -> bool:
    """Check that path exists and holds at least one tool type subdirectory."""
    if not path.is_dir():
        return False
    return any((path / dirname).is_dir() for dirname in TOOL_TYPE_DIRECTORIES.values())


def resolve_toolkit_path(cwd: Path, configured: Path | None = None) -> Path:
    """Resolve which toolkit directory to scan.

    Order: an explicitly configured path, then ``lib/`` or ``toolkit/`` under
    cwd, then the bundled toolkit. Falls back to ``cwd/lib`` even when it is not
    a valid toolkit, so callers report "no tools found" rather than failing.
    """
    if configured is not None:
        return configured

    for dirname in LOCAL_TOOLKIT_DIRNAMES:
        candidate = cwd / dirname
        if is_valid_toolkit_directory(candidate):
            return candidate

    bundled = get_bundled_toolkit_path()
    if is_valid_toolkit_directory(bundled):
        return bundled

    return cwd / LOCAL_TOOLKIT_DIRNAMES[0]


def _scan_directory(directory: Path, tool_type: ToolType, tools: list[Tool]) -> None:
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.debug("Skipping unreadable directory %s: %s", directory, e)
        return

    for entry in entries:
        # Symlinked directories are not followed
        if entry.is_symlink() or not entry.is_dir():
            continue

        tool = parse_tool_directory(entry, tool_type)
        if tool is not None:
            tools.append(tool)
            continue

        # Grouping directory such as prompts/backend/
        _scan_directory(entry, tool_type, tools)


def scan_toolkit(toolkit_path: Path) -> list[Tool]:
    """Discover every tool under toolkit_path.

    Walks each tool type subdirectory depth-first. A directory that parses as a
    tool is recorded and not descended into; any other directory is searched
    recursively. Missing roots or type directories contribute nothing, an
    unreadable directory is skipped and symlinked directories are not followed.
    """
    tools: list[Tool] = []
    if not toolkit_path.is_dir():
        logger.debug("Toolkit directory not found: %s", toolkit_path)
        return tools

    for tool_type, dirname in TOOL_TYPE_DIRECTORIES.items():
        type_dir = toolkit_path / dirname
        if not type_dir.is_dir():
            continue
        _scan_directory(type_dir, tool_type, tools)

    logger.debug("Found %d tools in %s", len(tools), toolkit_path)
    return tools
