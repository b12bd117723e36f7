"""Toolkit catalog models."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Literal, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

ToolType = Literal["prompt", "agent", "evaluator", "guardrail", "context-pack", "skill"]

# Scan order matters: lookups are first-match across types
TOOL_TYPE_DIRECTORIES: dict[ToolType, str] = {
    "prompt": "prompts",
    "agent": "agents",
    "evaluator": "evaluators",
    "guardrail": "guardrails",
    "context-pack": "context-packs",
    "skill": "skills",
}

TOOL_TYPE_LABELS: dict[ToolType, str] = {
    "prompt": "Prompts",
    "agent": "Agents",
    "evaluator": "Evaluators",
    "guardrail": "Guardrails",
    "context-pack": "Context Packs",
    "skill": "Skills",
}


def validate_tool_type(value: str) -> ToolType:
    """Validate and return tool type.

    Args:
        value: String to validate

    Returns:
        Valid ToolType

    Raises:
        ValueError: If value is not a supported tool type
    """
    if value not in TOOL_TYPE_DIRECTORIES:
        supported = ", ".join(TOOL_TYPE_DIRECTORIES)
        raise ValueError(f"Unsupported tool type: {value} (must be one of {supported})")
    return cast(ToolType, value)


class DefinitionFormat(Enum):
    """On-disk format of a tool definition file."""

    FRONTMATTER = "frontmatter"
    XML = "xml"
    YAML = "yaml"
    JSON = "json"


@dataclass(frozen=True)
class ToolMetadata:
    """Optional descriptive metadata attached to a tool."""

    author: str | None = None
    license: str | None = None
    tags: tuple[str, ...] = ()
    last_updated: str | None = None


@dataclass(frozen=True)
class Tool:
    """A tool discovered in the toolkit. Rebuilt on every scan."""

    id: str
    name: str
    version: str
    description: str
    category: str
    type: ToolType
    path: Path  # Tool directory, used as the copy source on install
    definition_path: Path
    definition_format: DefinitionFormat
    metadata: ToolMetadata | None = None

    @property
    def reference(self) -> str:
        """Return the ``type/id`` identifier used on the command line."""
        return f"{self.type}/{self.id}"

    @property
    def tags(self) -> tuple[str, ...]:
        if self.metadata is None:
            return ()
        return self.metadata.tags


def _coerce_scalar(value: Any) -> Any:
    # YAML reads `version: 1.0` as a float and `id: 42` as an int
    if isinstance(value, bool):
        return value
    if isinstance(value, int | float):
        return str(value)
    if isinstance(value, str):
        return value.strip()
    return value


class RawMetadata(BaseModel):
    """Loosely-typed metadata block as it appears in definition files."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    author: str | None = None
    license: str | None = None
    tags: list[str] = Field(default_factory=list)
    last_updated: str | None = Field(default=None, alias="lastUpdated")

    @field_validator("author", "license", "last_updated", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        if value is None:
            return None
        return str(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, list):
            return [str(tag) for tag in value if tag is not None]
        return []


class RawToolRecord(BaseModel):
    """Intermediate record loaded from any definition format.

    Validated field by field into a Tool. Missing or empty id, name or version
    fails validation.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    version: str = Field(..., min_length=1)
    description: str = ""
    category: str = "general"
    metadata: RawMetadata | None = None

    @field_validator("id", "name", "version", mode="before")
    @classmethod
    def _coerce_required(cls, value: Any) -> Any:
        return _coerce_scalar(value)

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("category", mode="before")
    @classmethod
    def _coerce_category(cls, value: Any) -> str:
        if value is None:
            return "general"
        return str(value).strip() or "general"

    @field_validator("metadata", mode="before")
    @classmethod
    def _drop_non_mapping_metadata(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return None
        return value

    def to_tool(
        self,
        tool_type: ToolType,
        tool_dir: Path,
        definition_path: Path,
        definition_format: DefinitionFormat,
    ) -> Tool:
        metadata = None
        if self.metadata is not None:
            metadata = ToolMetadata(
                author=self.metadata.author,
                license=self.metadata.license,
                tags=tuple(self.metadata.tags),
                last_updated=self.metadata.last_updated,
            )

        return Tool(
            id=self.id,
            name=self.name,
            version=self.version,
            description=self.description,
            category=self.category,
            type=tool_type,
            path=tool_dir,
            definition_path=definition_path,
            definition_format=definition_format,
            metadata=metadata,
        )
