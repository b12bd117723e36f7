"""Update resolution between the installation registry and the catalog."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from hitl_cli.models.registry import InstalledTool
from hitl_cli.models.tool import Tool, ToolType
from hitl_cli.operations.versions import is_newer
from hitl_cli.toolkit.search import get_tool

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateCandidate:
    """An installed tool whose catalog version is newer."""

    id: str
    name: str
    type: ToolType
    current_version: str
    latest_version: str
    installed_path: str
    source_path: str


@dataclass(frozen=True)
class UpdateCheckResult:
    """Result of comparing installed tools against the catalog.

    Attributes:
        candidates: Tools with a newer catalog version, in registry order
        missing: Ids that are installed but no longer in the catalog
    """

    candidates: list[UpdateCandidate] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)


def find_updates(
    installed: Sequence[InstalledTool],
    catalog: Sequence[Tool],
    tool_id: str | None = None,
) -> UpdateCheckResult:
    """Find installed tools that have a newer version in the catalog.

    Args:
        installed: Registry entries to check
        catalog: Tools from the current toolkit scan
        tool_id: If given, only check the installed tool with this id
    """
    candidates: list[UpdateCandidate] = []
    missing: list[str] = []

    for entry in installed:
        if tool_id is not None and entry.id != tool_id:
            continue

        tool = get_tool(catalog, entry.id)
        if tool is None:
            logger.warning(
                "Tool %s not found in toolkit (may have been removed)",
                entry.id,
            )
            missing.append(entry.id)
            continue

        if not is_newer(entry.version, tool.version):
            continue

        candidates.append(
            UpdateCandidate(
                id=entry.id,
                name=tool.name,
                type=entry.type,
                current_version=entry.version,
                latest_version=tool.version,
                installed_path=entry.installed_path,
                source_path=str(tool.path),
            )
        )

    return UpdateCheckResult(candidates=candidates, missing=missing)
