"""Claude slash command generation for installed prompts.

A command file is a markdown document in ``~/.claude/commands/<name>.md``
holding a short comment header followed by the prompt text.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from hitl_cli.io.frontmatter import split_frontmatter
from hitl_cli.io.xml_prompt import PromptVariable, parse_xml_prompt

GENERATED_BY = "Generated by Human in the Loop CLI"


@dataclass(frozen=True)
class CommandSource:
    """Prompt content extracted from a definition file."""

    command_id: str | None
    name: str | None
    description: str | None
    variables: list[PromptVariable]
    body: str


def _variables_from_mapping(raw: Any) -> list[PromptVariable]:
    if not isinstance(raw, list):
        return []

    variables: list[PromptVariable] = []
    for item in raw:
        if not isinstance(item, dict) or "name" not in item:
            continue
        variables.append(
            PromptVariable(
                name=str(item["name"]),
                description=str(item.get("description") or ""),
                required=item.get("required") is True,
            )
        )
    return variables


def _optional_text(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    return str(value)


def load_command_source(definition_path: Path) -> CommandSource:
    """Extract the prompt body and header fields from a definition file.

    Raises:
        ValueError: If the file is not a usable prompt definition
    """
    content = definition_path.read_text(encoding="utf-8")

    if content.strip().startswith("<prompt>"):
        prompt = parse_xml_prompt(content)
        if prompt is None:
            raise ValueError("Invalid XML prompt format")
        return CommandSource(
            command_id=prompt.metadata.get("id"),
            name=prompt.metadata.get("name"),
            description=prompt.metadata.get("description"),
            variables=prompt.variables,
            body=prompt.render_body(),
        )

    if definition_path.suffix == ".md":
        document = split_frontmatter(content)
        if document is None:
            raise ValueError("Invalid markdown frontmatter")
        return CommandSource(
            command_id=_optional_text(document.data, "id"),
            name=_optional_text(document.data, "name"),
            description=_optional_text(document.data, "description"),
            variables=_variables_from_mapping(document.data.get("variables")),
            body=document.body,
        )

    data = yaml.safe_load(content)
    if not isinstance(data, dict) or "template" not in data:
        raise ValueError(f"No prompt template found in {definition_path.name}")
    return CommandSource(
        command_id=_optional_text(data, "id"),
        name=_optional_text(data, "name"),
        description=_optional_text(data, "description"),
        variables=_variables_from_mapping(data.get("variables")),
        body=str(data["template"]),
    )


def render_command(source: CommandSource) -> str:
    lines: list[str] = []
    if source.name:
        lines.append(f"# {source.name}\n")
    if source.description:
        lines.append(f"# {source.description}\n")
    lines.append(f"# {GENERATED_BY}\n")

    if source.variables:
        lines.append("# Variables:")
        for variable in source.variables:
            required = "(required)" if variable.required else "(optional)"
            lines.append(f"#   {{{{{variable.name}}}}} {required} - {variable.description}")
        lines.append("")

    lines.append(source.body)
    return "\n".join(lines)


def create_claude_command(
    definition_path: Path,
    commands_dir: Path,
    command_name: str | None = None,
) -> Path:
    """Write a slash command for the prompt at definition_path.

    Args:
        definition_path: prompt.yaml, prompt.md or prompt.xml file
        commands_dir: Claude commands directory, created if missing
        command_name: Command name; defaults to the prompt id

    Returns:
        Path to the written command file
    """
    source = load_command_source(definition_path)
    name = command_name or source.command_id or "unknown"

    commands_dir.mkdir(parents=True, exist_ok=True)
    command_path = commands_dir / f"{name}.md"
    command_path.write_text(render_command(source), encoding="utf-8")
    return command_path
