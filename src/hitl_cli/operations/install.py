"""Install, update and uninstall operations.

These functions touch the filesystem and the registry file directly. They are
not transactional: a failed copy can leave a partially written installation,
and the backup taken by apply_update is the only way back.
"""

import logging
import shutil
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from hitl_cli.io.file_operations import copy_directory
from hitl_cli.io.registry_store import register_installation, unregister_installation
from hitl_cli.models.registry import InstalledTool
from hitl_cli.models.tool import Tool, ToolType, validate_tool_type
from hitl_cli.operations.updates import UpdateCandidate

logger = logging.getLogger(__name__)

BACKUP_TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"


@dataclass(frozen=True)
class AppliedUpdate:
    """Result of applying one update."""

    installed: InstalledTool
    backup_path: Path | None


def parse_tool_identifier(identifier: str) -> tuple[ToolType, str]:
    """Split a ``type/id`` identifier.

    Raises:
        ValueError: If the identifier is malformed or names an unknown type
    """
    parts = identifier.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ValueError(
            f"Invalid tool identifier: {identifier}. Use format: <type>/<id>"
        )

    tool_type_str, tool_id = parts
    try:
        tool_type = validate_tool_type(tool_type_str)
    except ValueError as e:
        raise ValueError(f"Invalid tool identifier: {identifier}. {e}") from e

    return tool_type, tool_id


def default_install_path(install_root: Path, tool: Tool) -> Path:
    return install_root / tool.type / tool.id


def install_tool(
    tool: Tool,
    destination: Path,
    registry_path: Path,
    installed_at: datetime,
) -> InstalledTool:
    """Copy the tool directory to destination and record the installation."""
    copy_directory(tool.path, destination)

    installed = InstalledTool(
        id=tool.id,
        name=tool.name,
        version=tool.version,
        type=tool.type,
        installed_path=str(destination.resolve()),
        installed_at=installed_at.isoformat(),
    )
    register_installation(registry_path, installed)
    logger.debug("Installed %s@%s to %s", tool.id, tool.version, destination)
    return installed


def backup_installation(installed_path: Path, timestamp: datetime) -> Path:
    """Copy installed_path aside to ``<name>.backup-<timestamp>``.

    A backup already taken within the same second gets a ``-1``, ``-2``...
    suffix instead of being overwritten.
    """
    stem = f"{installed_path.name}.backup-{timestamp.strftime(BACKUP_TIMESTAMP_FORMAT)}"
    backup_path = installed_path.with_name(stem)
    counter = 1
    while backup_path.exists():
        backup_path = installed_path.with_name(f"{stem}-{counter}")
        counter += 1

    shutil.copytree(installed_path, backup_path)
    return backup_path


def apply_update(
    candidate: UpdateCandidate,
    registry_path: Path,
    installed_at: datetime,
    backup: bool = True,
) -> AppliedUpdate:
    """Copy the newer catalog version over the installed copy and re-register it.

    Args:
        candidate: Update to apply
        registry_path: Registry file to update
        installed_at: Timestamp recorded for the new installation and used in
            the backup directory name
        backup: Copy the current installation aside before overwriting it
    """
    installed_path = Path(candidate.installed_path)

    backup_path: Path | None = None
    if backup and installed_path.is_dir():
        backup_path = backup_installation(installed_path, installed_at)
        logger.debug("Backed up %s to %s", installed_path, backup_path)

    copy_directory(Path(candidate.source_path), installed_path)

    installed = InstalledTool(
        id=candidate.id,
        name=candidate.name,
        version=candidate.latest_version,
        type=candidate.type,
        installed_path=candidate.installed_path,
        installed_at=installed_at.isoformat(),
    )
    register_installation(registry_path, installed)
    return AppliedUpdate(installed=installed, backup_path=backup_path)


def uninstall_tool(installed: InstalledTool, registry_path: Path) -> bool:
    """Remove the installed files and the registry entry.

    Returns True if an installation directory was deleted.
    """
    installed_path = Path(installed.installed_path)
    removed = False
    if installed_path.is_dir():
        shutil.rmtree(installed_path)
        removed = True

    unregister_installation(registry_path, installed.id)
    return removed
