"""Tests for contribution quality checks and issue formatting."""

from pathlib import Path

import pytest

from hitl_cli.operations.contribution import (
    ValidationResult,
    build_issue_body,
    build_issue_title,
    detect_tool_type,
    validate_definition_file,
    validate_documentation,
    validate_template_xml,
    validate_xml_prompt,
    validate_yaml_definition,
)
from tests.conftest import XML_PROMPT
from tests.test_utils.toolkit_builders import write_file

COMPLETE_FIELDS = {
    "id": "x",
    "name": "X",
    "version": "1.0.0",
    "description": "Does x",
    "category": "general",
    "metadata": {"author": "Jane Doe", "license": "MIT"},
    "examples": ["a", "b"],
}


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/home/me/toolkit/prompts/review", "prompt"),
        ("/home/me/toolkit/Agents/helper", "agent"),
        ("lib/context-packs/style/", "context-pack"),
        ("/srv/skills/pdf", "skill"),
        ("/home/me/review", None),
    ],
)
def test_detect_tool_type(path: str, expected: str | None) -> None:
    assert detect_tool_type(path) == expected


def test_complete_xml_prompt_passes() -> None:
    result = validate_xml_prompt(XML_PROMPT)

    assert result == ValidationResult(passed=True)


def test_xml_prompt_missing_metadata_field() -> None:
    content = XML_PROMPT.replace("<license>MIT</license>", "")

    result = validate_xml_prompt(content)

    assert not result.passed
    assert result.errors == ["Missing required metadata field: license"]


def test_xml_prompt_recommended_sections_are_warnings() -> None:
    content = XML_PROMPT.replace("<constraints>Be concise.</constraints>", "")

    result = validate_xml_prompt(content)

    assert result.passed
    assert result.warnings == ["Missing <constraints> section (recommended)"]


def test_xml_prompt_unbalanced_tags() -> None:
    result = validate_xml_prompt("<prompt><context>x</prompt>")

    assert not result.passed
    assert result.errors == ["Unclosed XML tag: <context>"]


def test_xml_prompt_wrong_root() -> None:
    result = validate_xml_prompt("<doc></doc>")

    assert result.errors == [
        "File must start with <prompt> root element",
        "File must end with </prompt> closing tag",
    ]


def test_xml_prompt_missing_sections() -> None:
    result = validate_xml_prompt(
        "<prompt><metadata><id>x</id></metadata><context>c</context></prompt>"
    )

    assert "Missing <instructions> section" in result.errors
    assert "Missing <output_format> section" in result.errors
    assert "Missing required metadata field: author" in result.errors


def test_template_without_structure_tags_warns() -> None:
    result = validate_template_xml("Review {{code}}")

    assert result.passed
    assert len(result.warnings) == 1
    assert result.warnings[0].startswith("Template missing recommended XML structure tags")


def test_template_variables_without_input_tag_warns() -> None:
    result = validate_template_xml("<context>Review</context> {{code}}")

    assert result.passed
    assert result.warnings[0].startswith("Template contains variables but no input-related")


def test_template_extra_closing_tag_fails() -> None:
    result = validate_template_xml("<context>a</context></context>")

    assert result.errors == ["Extra closing tag: </context>"]


def test_template_self_closing_and_attributes_balance() -> None:
    result = validate_template_xml('<context lang="en">a<br/></context>')

    assert result.errors == []


def test_yaml_definition_missing_fields() -> None:
    result = validate_yaml_definition({"id": "x"}, "agent")

    assert not result.passed
    assert result.errors == [
        "Missing required field: name",
        "Missing required field: version",
        "Missing required field: description",
        "Missing required field: category",
        "Missing metadata section",
    ]
    assert result.warnings == ["No examples provided (recommended: at least 2)"]


def test_yaml_prompt_requires_template() -> None:
    result = validate_yaml_definition(COMPLETE_FIELDS, "prompt")

    assert result.errors == ["Prompts must have a template field"]


def test_yaml_prompt_with_structured_template_passes() -> None:
    data = {**COMPLETE_FIELDS, "template": "<context>c</context><user_input>{{x}}</user_input>"}

    assert validate_yaml_definition(data, "prompt") == ValidationResult(passed=True)


def test_validate_definition_file_yaml(toolkit: Path) -> None:
    path = toolkit / "prompts" / "code-review-ts" / "prompt.yaml"

    result = validate_definition_file(path, "prompt")

    assert result.passed
    assert result.warnings == ["No examples provided (recommended: at least 2)"]


def test_validate_definition_file_frontmatter(toolkit: Path) -> None:
    result = validate_definition_file(toolkit / "agents" / "test-generator" / "agent.md", "agent")

    assert result.errors == [
        "Missing required metadata field: author",
        "Missing required metadata field: license",
    ]


def test_validate_definition_file_xml(toolkit: Path) -> None:
    path = toolkit / "prompts" / "backend" / "api-design" / "prompt.xml"

    assert validate_definition_file(path, "prompt").passed


def test_validate_definition_file_unparsable_yaml(tmp_path: Path) -> None:
    path = write_file(tmp_path / "prompt.yaml", "id: [unclosed\n")

    result = validate_definition_file(path, "prompt")

    assert not result.passed
    assert result.errors[0].startswith("Failed to parse prompt.yaml")


def test_documentation_missing_readme(tmp_path: Path) -> None:
    assert validate_documentation(tmp_path) == ValidationResult(
        passed=False, errors=["Missing README.md file"]
    )


def test_documentation_legacy_usage_section(tmp_path: Path) -> None:
    write_file(tmp_path / "README.md", "# X\n\n## Usage\n\nRun it.\n")

    result = validate_documentation(tmp_path)

    assert result.passed
    assert result.warnings == ["README.md is very short (recommended: detailed documentation)"]


def test_documentation_legacy_missing_usage(tmp_path: Path) -> None:
    write_file(tmp_path / "README.md", "# X\n\n" + "Details. " * 40)

    result = validate_documentation(tmp_path)

    assert result.errors == ['README.md missing required "## Usage" section']
    assert result.warnings == []


def test_documentation_v2_requires_sections(tmp_path: Path) -> None:
    write_file(tmp_path / "README.md", "# X\n\n## What You'll Be Asked\n\n- a file\n")

    result = validate_documentation(tmp_path)

    assert result.errors == [
        'README.md missing required "## Usage Examples" section (v2.0.0 format)',
        'README.md missing required "## Related Resources" section (v2.0.0 format)',
    ]


def test_issue_title() -> None:
    assert build_issue_title("prompt", "API Design") == "[Contribution] New prompt: API Design"


def test_issue_body_for_passing_contribution() -> None:
    passed = ValidationResult(passed=True, warnings=["Missing <examples> section"])

    body = build_issue_body("prompt", "API Design", passed, ValidationResult(passed=True))

    assert "**Type:** prompt" in body
    assert "**Name:** API Design" in body
    assert "✅ All validations passed" in body
    assert "#### Definition" in body
    assert "- Missing <examples> section" in body
    assert "Create a pull request with your changes" in body


def test_issue_body_for_failing_contribution() -> None:
    failed = ValidationResult(passed=False, errors=["Missing README.md file"])

    body = build_issue_body("agent", "Helper", ValidationResult(passed=True), failed)

    assert "⚠️ Validation issues found" in body
    assert "**Errors:**\n- Missing README.md file" in body
    assert "Fix validation errors listed above" in body
