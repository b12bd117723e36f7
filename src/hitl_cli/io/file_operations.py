"""Filesystem helpers shared by the registry and install operations."""

import json
import logging
import os
import shutil
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def resolve_path(raw: str | Path) -> Path:
    """Expand ``~`` and make the path absolute."""
    return Path(os.path.expanduser(str(raw))).resolve()


def copy_directory(source: Path, destination: Path) -> None:
    """Recursively copy source into destination, overwriting files that exist.

    Files already in destination that are absent from source are left alone.
    """
    if not source.is_dir():
        raise FileNotFoundError(f"Source directory not found: {source}")

    logger.debug("Copying %s -> %s", source, destination)
    shutil.copytree(source, destination, dirs_exist_ok=True)


def read_json_file(path: Path) -> Any | None:
    """Read JSON from path, or None if the file is missing or unparsable."""
    if not path.is_file():
        return None

    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.debug("Could not read %s: %s", path, e)
        return None


def write_json_file(path: Path, data: Any) -> None:
    """Write data as 2-space indented JSON, creating the parent directory."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
