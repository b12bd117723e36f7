"""Installation registry persistence.

The registry lives at ``<hit_home>/registry.json``. Every mutation is a
load-modify-save cycle on the file; there is no locking and the last writer
wins.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from hitl_cli.io.file_operations import read_json_file, write_json_file
from hitl_cli.models.registry import REGISTRY_SCHEMA_VERSION, InstalledTool, Registry

logger = logging.getLogger(__name__)

REGISTRY_FILENAME = "registry.json"


def get_registry_path(hit_home: Path) -> Path:
    return hit_home / REGISTRY_FILENAME


def load_registry(registry_path: Path) -> Registry:
    """Load the registry, falling back to an empty one.

    Never raises: a missing or unparsable file, or one without an
    ``installations`` list, yields a fresh empty Registry. Entries are validated
    one at a time and an invalid entry is skipped, so the remaining
    installations survive the next save.
    """
    data = read_json_file(registry_path)
    if data is None:
        return Registry()

    if not isinstance(data, dict) or not isinstance(data.get("installations", []), list):
        logger.debug("Ignoring registry with unexpected shape at %s", registry_path)
        return Registry()

    installations: list[InstalledTool] = []
    for entry in data.get("installations", []):
        try:
            installations.append(InstalledTool.model_validate(entry))
        except ValidationError as e:
            logger.debug("Skipping invalid registry entry in %s: %s", registry_path, e)

    version = data.get("version")
    if not isinstance(version, str):
        version = REGISTRY_SCHEMA_VERSION

    return Registry(version=version, installations=tuple(installations))


def save_registry(registry_path: Path, registry: Registry) -> None:
    write_json_file(registry_path, registry.model_dump(mode="json", by_alias=True))


def register_installation(registry_path: Path, tool: InstalledTool) -> Registry:
    """Upsert tool keyed by id and persist. Returns the saved registry."""
    registry = load_registry(registry_path).with_installation(tool)
    save_registry(registry_path, registry)
    return registry


def unregister_installation(registry_path: Path, tool_id: str) -> Registry:
    """Remove tool_id if present and persist. Missing ids are a no-op."""
    registry = load_registry(registry_path).without_installation(tool_id)
    save_registry(registry_path, registry)
    return registry


def get_installed_tools(registry_path: Path) -> list[InstalledTool]:
    return list(load_registry(registry_path).installations)


def is_tool_installed(registry_path: Path, tool_id: str) -> bool:
    return load_registry(registry_path).get(tool_id) is not None


def get_installed_tool(registry_path: Path, tool_id: str) -> InstalledTool | None:
    return load_registry(registry_path).get(tool_id)
