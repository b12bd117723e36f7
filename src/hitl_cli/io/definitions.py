"""Tool definition file discovery and parsing.

A tool directory holds exactly one definition file, found by probing
DEFINITION_FILENAMES in order. Each format is loaded into a plain mapping and
then validated through RawToolRecord into a Tool.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from hitl_cli.io.frontmatter import split_frontmatter
from hitl_cli.io.xml_prompt import parse_xml_prompt
from hitl_cli.models.tool import DefinitionFormat, RawToolRecord, Tool, ToolType

logger = logging.getLogger(__name__)

# First existing file wins
DEFINITION_FILENAMES = (
    "prompt.md",
    "agent.md",
    "SKILL.md",
    "prompt.xml",
    "prompt.yaml",
    "prompt.yml",
    "agent.yaml",
    "agent.yml",
    "config.yaml",
    "config.yml",
    "prompt.json",
    "agent.json",
    "config.json",
)


def find_definition_file(tool_dir: Path) -> Path | None:
    for filename in DEFINITION_FILENAMES:
        candidate = tool_dir / filename
        if candidate.is_file():
            return candidate
    return None


def detect_format(path: Path, content: str) -> DefinitionFormat:
    """Determine the definition format from file content and suffix.

    A document whose first element is ``<prompt>`` is XML regardless of suffix,
    so ``prompt.md`` files written in pure XML are handled.
    """
    if content.strip().startswith("<prompt>") or path.suffix == ".xml":
        return DefinitionFormat.XML
    if path.suffix == ".md":
        return DefinitionFormat.FRONTMATTER
    if path.suffix in (".yaml", ".yml"):
        return DefinitionFormat.YAML
    if path.suffix == ".json":
        return DefinitionFormat.JSON
    raise ValueError(f"Unsupported definition file: {path.name}")


def load_raw_record(definition_format: DefinitionFormat, content: str) -> dict[str, Any] | None:
    """Load a definition into a raw mapping, or None if the document has the wrong shape."""
    if definition_format == DefinitionFormat.YAML:
        data = yaml.safe_load(content)
    elif definition_format == DefinitionFormat.JSON:
        data = json.loads(content)
    elif definition_format == DefinitionFormat.FRONTMATTER:
        document = split_frontmatter(content)
        if document is None:
            return None
        data = document.data
    else:
        prompt = parse_xml_prompt(content)
        if prompt is None:
            return None
        data = prompt.to_raw_record()

    if not isinstance(data, dict):
        return None
    return data


def parse_definition_file(definition_path: Path, tool_type: ToolType) -> Tool:
    """Parse one definition file into a Tool.

    Raises:
        ValueError: If the document is not a mapping or misses id, name or version
        OSError: If the file cannot be read
    """
    content = definition_path.read_text(encoding="utf-8")
    definition_format = detect_format(definition_path, content)

    data = load_raw_record(definition_format, content)
    if data is None:
        raise ValueError(f"{definition_path} does not contain a {definition_format.value} mapping")

    record = RawToolRecord.model_validate(data)
    return record.to_tool(
        tool_type=tool_type,
        tool_dir=definition_path.parent.resolve(),
        definition_path=definition_path.resolve(),
        definition_format=definition_format,
    )


def parse_tool_directory(tool_dir: Path, tool_type: ToolType) -> Tool | None:
    """Parse the tool defined in tool_dir, if any.

    Never raises: unreadable, malformed or incomplete definitions yield None.
    """
    definition_path = find_definition_file(tool_dir)
    if definition_path is None:
        return None

    # JSONDecodeError and pydantic ValidationError are ValueErrors; xml ParseError is a SyntaxError
    try:
        return parse_definition_file(definition_path, tool_type)
    except (OSError, ValueError, SyntaxError, yaml.YAMLError) as e:
        logger.debug("Skipping %s: %s", definition_path, e)
        return None
