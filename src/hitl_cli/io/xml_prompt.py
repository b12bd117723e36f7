"""Pure-XML prompt parsing.

A prompt file has a single ``<prompt>`` root:

    <prompt>
      <metadata>
        <id>api-design</id>
        <name>API Design</name>
        <version>1.0.0</version>
        <tags><tag>api</tag><tag>rest</tag></tags>
        <variables>
          <variable><name>spec</name><required>true</required></variable>
        </variables>
      </metadata>
      <context>...</context>
      <instructions>...</instructions>
      <output_format>...</output_format>
    </prompt>
"""

import textwrap
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Any

PROMPT_SECTIONS = ("context", "instructions", "constraints", "output_format")

_METADATA_TEXT_FIELDS = ("id", "name", "version", "description", "category", "author", "license")


@dataclass(frozen=True)
class PromptVariable:
    name: str
    description: str
    required: bool


@dataclass(frozen=True)
class XmlPrompt:
    """Parsed ``<prompt>`` document."""

    metadata: dict[str, str]
    tags: list[str]
    variables: list[PromptVariable]
    sections: dict[str, str] = field(default_factory=dict)

    def to_raw_record(self) -> dict[str, Any]:
        """Return the mapping shape shared by every definition format."""
        record: dict[str, Any] = {
            key: self.metadata[key]
            for key in ("id", "name", "version", "description", "category")
            if key in self.metadata
        }
        extra: dict[str, Any] = {
            key: self.metadata[key] for key in ("author", "license") if key in self.metadata
        }
        if self.tags:
            extra["tags"] = list(self.tags)
        if extra:
            record["metadata"] = extra
        return record

    def render_body(self) -> str:
        """Re-wrap the prompt sections in their tags, skipping metadata and examples."""
        parts: list[str] = []
        for section in PROMPT_SECTIONS:
            text = self.sections.get(section)
            if not text:
                continue
            parts.extend([f"<{section}>", text, f"</{section}>", ""])
        return "\n".join(parts).strip()


def _child_text(element: ET.Element, tag: str) -> str | None:
    child = element.find(tag)
    if child is None or child.text is None:
        return None
    text = child.text.strip()
    if not text:
        return None
    return text


def inner_xml(element: ET.Element) -> str:
    """Return the element's content including nested markup, dedented."""
    pieces = [element.text or ""]
    for child in element:
        pieces.append(ET.tostring(child, encoding="unicode"))
    return textwrap.dedent("".join(pieces)).strip()


def _parse_tags(metadata: ET.Element) -> list[str]:
    tags_el = metadata.find("tags")
    if tags_el is None:
        return []

    nested = [tag.text.strip() for tag in tags_el.findall("tag") if tag.text and tag.text.strip()]
    if nested:
        return nested

    # <tags>api, rest</tags>
    if tags_el.text is None:
        return []
    return [tag.strip() for tag in tags_el.text.split(",") if tag.strip()]


def _parse_variables(container: ET.Element | None) -> list[PromptVariable]:
    if container is None:
        return []

    variables: list[PromptVariable] = []
    for variable in container.findall("variable"):
        required_text = _child_text(variable, "required") or variable.get("required", "false")
        variables.append(
            PromptVariable(
                name=_child_text(variable, "name") or variable.get("name", ""),
                description=_child_text(variable, "description") or "",
                required=required_text.strip().lower() == "true",
            )
        )
    return variables


def parse_xml_prompt(content: str) -> XmlPrompt | None:
    """Parse a pure-XML prompt document.

    Returns None when the root element is not ``<prompt>``. Malformed XML raises
    ``xml.etree.ElementTree.ParseError``.
    """
    root = ET.fromstring(content.strip())
    if root.tag != "prompt":
        return None

    metadata_el = root.find("metadata")
    metadata: dict[str, str] = {}
    tags: list[str] = []
    variables: list[PromptVariable] = []
    if metadata_el is not None:
        for key in _METADATA_TEXT_FIELDS:
            value = _child_text(metadata_el, key)
            if value is not None:
                metadata[key] = value
        tags = _parse_tags(metadata_el)
        variables = _parse_variables(metadata_el.find("variables"))

    # Variables may also sit directly under <prompt>
    if not variables:
        variables = _parse_variables(root.find("variables"))

    sections: dict[str, str] = {}
    for section in (*PROMPT_SECTIONS, "examples"):
        section_el = root.find(section)
        if section_el is not None:
            sections[section] = inner_xml(section_el)

    return XmlPrompt(metadata=metadata, tags=tags, variables=variables, sections=sections)
