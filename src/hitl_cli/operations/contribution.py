"""Quality checks for contributed tools and the GitHub issue that reports them."""

import json
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from hitl_cli.io.frontmatter import split_frontmatter
from hitl_cli.models.tool import TOOL_TYPE_DIRECTORIES, ToolType

CONTRIBUTION_LABEL = "contribution"
CONTRIBUTION_LABEL_DESCRIPTION = "New tool submitted for review"
CONTRIBUTION_LABEL_COLOR = "0E8A16"

REQUIRED_FIELDS = ("id", "name", "version", "description", "category")
REQUIRED_METADATA_FIELDS = ("author", "license")
REQUIRED_XML_METADATA_FIELDS = REQUIRED_FIELDS + REQUIRED_METADATA_FIELDS
REQUIRED_XML_SECTIONS = ("context", "instructions", "output_format")
RECOMMENDED_TEMPLATE_TAGS = ("context", "instructions", "output_format")

MIN_README_LENGTH = 200
V2_README_MARKER = "## What You'll Be Asked"
V2_README_SECTIONS = ("## Usage Examples", "## Related Resources")

_OPEN_TAG = re.compile(r"<(\w+)(?:\s[^<>]*)?(?<!/)>")
_CLOSE_TAG = re.compile(r"</(\w+)>")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one group of checks. Warnings never fail validation."""

    passed: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def _result(errors: list[str], warnings: list[str]) -> ValidationResult:
    return ValidationResult(passed=not errors, errors=errors, warnings=warnings)


def detect_tool_type(path: Path | str) -> ToolType | None:
    """Infer the tool type from a ``/prompts/``-style segment in path."""
    normalized = str(path).replace("\\", "/").lower()
    for tool_type, dirname in TOOL_TYPE_DIRECTORIES.items():
        if f"/{dirname}/" in normalized:
            return tool_type
    return None


def _tag_balance_errors(text: str) -> tuple[list[str], list[str]]:
    """Return (errors, open tag names) for simple ``<tag>``/``</tag>`` pairs."""
    open_tags = _OPEN_TAG.findall(text)
    counts: dict[str, int] = {}
    for tag in open_tags:
        counts[tag] = counts.get(tag, 0) + 1
    for tag in _CLOSE_TAG.findall(text):
        counts[tag] = counts.get(tag, 0) - 1

    errors: list[str] = []
    for tag, count in counts.items():
        if count > 0:
            errors.append(f"Unclosed XML tag: <{tag}>")
        elif count < 0:
            errors.append(f"Extra closing tag: </{tag}>")
    return errors, open_tags


def validate_template_xml(template: str) -> ValidationResult:
    """Check the XML structure embedded in a prompt template."""
    errors, open_tags = _tag_balance_errors(template)
    warnings: list[str] = []

    if not any(f"<{tag}>" in template for tag in RECOMMENDED_TEMPLATE_TAGS):
        warnings.append(
            "Template missing recommended XML structure tags "
            "(context, instructions, output_format). See docs/xml-template-migration.md"
        )

    has_user_input = "{{" in template and any(tag != "thinking" for tag in open_tags)
    if has_user_input and not any("input" in tag for tag in open_tags):
        warnings.append(
            "Template contains variables but no input-related XML tags. "
            "Consider wrapping user input in descriptive tags "
            "(e.g., <code_to_review>, <user_input>)"
        )

    return _result(errors, warnings)


def validate_xml_prompt(content: str) -> ValidationResult:
    """Validate a pure-XML prompt document."""
    errors: list[str] = []
    warnings: list[str] = []
    text = content.strip()

    if not text.startswith("<prompt>"):
        errors.append("File must start with <prompt> root element")
    if not text.endswith("</prompt>"):
        errors.append("File must end with </prompt> closing tag")

    balance_errors, _ = _tag_balance_errors(text)
    errors.extend(balance_errors)
    if errors:
        return _result(errors, warnings)

    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        errors.append(f"Failed to parse XML: {e}")
        return _result(errors, warnings)

    metadata = root.find("metadata")
    if metadata is None:
        errors.append("Missing <metadata> section")
    else:
        for key in REQUIRED_XML_METADATA_FIELDS:
            value = metadata.find(key)
            if value is None or not (value.text or "").strip():
                errors.append(f"Missing required metadata field: {key}")

    for section in REQUIRED_XML_SECTIONS:
        if root.find(section) is None:
            errors.append(f"Missing <{section}> section")

    if root.find("constraints") is None:
        warnings.append("Missing <constraints> section (recommended)")
    if root.find("examples") is None:
        warnings.append("Missing <examples> section (recommended: at least 2)")

    return _result(errors, warnings)


def validate_yaml_definition(data: dict[str, Any], tool_type: str) -> ValidationResult:
    """Validate the fields of a YAML, JSON or frontmatter definition."""
    errors: list[str] = []
    warnings: list[str] = []

    for key in REQUIRED_FIELDS:
        if not data.get(key):
            errors.append(f"Missing required field: {key}")

    metadata = data.get("metadata")
    if not isinstance(metadata, dict):
        errors.append("Missing metadata section")
    else:
        for key in REQUIRED_METADATA_FIELDS:
            if not metadata.get(key):
                errors.append(f"Missing required metadata field: {key}")

    template = data.get("template")
    if tool_type == "prompt":
        if not template:
            errors.append("Prompts must have a template field")
        else:
            template_result = validate_template_xml(str(template))
            errors.extend(template_result.errors)
            warnings.extend(template_result.warnings)

    if not data.get("examples"):
        warnings.append("No examples provided (recommended: at least 2)")

    return _result(errors, warnings)


def validate_definition_file(definition_path: Path, tool_type: str) -> ValidationResult:
    """Validate a definition file in whichever format it is written."""
    content = definition_path.read_text(encoding="utf-8")

    if content.strip().startswith("<prompt>") or definition_path.suffix == ".xml":
        return validate_xml_prompt(content)

    try:
        if definition_path.suffix == ".md":
            document = split_frontmatter(content)
            if document is None:
                return _result(["Missing or invalid frontmatter block"], [])
            # The markdown body is the prompt template
            data = {"template": document.body, **document.data}
        elif definition_path.suffix == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (yaml.YAMLError, ValueError) as e:
        return _result([f"Failed to parse {definition_path.name}: {e}"], [])

    if not isinstance(data, dict):
        return _result([f"{definition_path.name} must contain a mapping"], [])

    return validate_yaml_definition(data, tool_type)


def validate_documentation(tool_dir: Path) -> ValidationResult:
    """Check README.md for the sections reviewers rely on."""
    readme_path = tool_dir / "README.md"
    if not readme_path.is_file():
        return _result(["Missing README.md file"], [])

    content = readme_path.read_text(encoding="utf-8")
    errors: list[str] = []
    warnings: list[str] = []

    if V2_README_MARKER in content:
        for section in V2_README_SECTIONS:
            if section not in content:
                errors.append(f'README.md missing required "{section}" section (v2.0.0 format)')
    elif "## Usage" not in content:
        errors.append('README.md missing required "## Usage" section')

    if len(content) < MIN_README_LENGTH:
        warnings.append("README.md is very short (recommended: detailed documentation)")

    return _result(errors, warnings)


def build_issue_title(tool_type: str, tool_name: str) -> str:
    return f"[Contribution] New {tool_type}: {tool_name}"


def _format_result_section(title: str, result: ValidationResult) -> list[str]:
    lines = [f"#### {title}", "✅ Passed" if result.passed else "❌ Failed", ""]
    if result.errors:
        lines.append("**Errors:**")
        lines.extend(f"- {error}" for error in result.errors)
        lines.append("")
    if result.warnings:
        lines.append("**Warnings:**")
        lines.extend(f"- {warning}" for warning in result.warnings)
        lines.append("")
    return lines


def build_issue_body(
    tool_type: str,
    tool_name: str,
    definition: ValidationResult,
    documentation: ValidationResult,
) -> str:
    all_passed = definition.passed and documentation.passed
    status = "✅ All validations passed" if all_passed else "⚠️ Validation issues found"

    lines = [
        "## 🎁 New Contribution",
        "",
        f"**Type:** {tool_type}",
        f"**Name:** {tool_name}",
        f"**Status:** {status}",
        "",
        "---",
        "",
        "### Validation Results",
        "",
    ]
    lines.extend(_format_result_section("Definition", definition))
    lines.extend(_format_result_section("Documentation", documentation))
    lines.extend(
        [
            "---",
            "",
            "### Review Checklist",
            "",
            "- [ ] Metadata complete and valid",
            "- [ ] Documentation clear and comprehensive",
            "- [ ] Examples provided (minimum 2)",
            "- [ ] Follows contribution guidelines",
            "- [ ] Maintainer review completed",
            "",
            "---",
            "",
            "### Next Steps",
            "",
        ]
    )

    if all_passed:
        lines.extend(
            [
                "**For Contributor:**",
                "1. Create a pull request with your changes",
                "2. Link this issue to your PR",
                "3. Wait for maintainer review",
                "",
                "**For Maintainers:**",
                "1. Review the contribution",
                "2. Test functionality",
                "3. Approve and merge",
            ]
        )
    else:
        lines.extend(
            [
                "**For Contributor:**",
                "1. Fix validation errors listed above",
                "2. Run `hit contribute` again to validate",
                "3. Create PR once all checks pass",
                "",
                "**For Maintainers:**",
                "Waiting for contributor to resolve validation issues.",
            ]
        )

    return "\n".join(lines)
