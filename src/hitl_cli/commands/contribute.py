"""Contribute command for submitting a new tool for review."""

from pathlib import Path

import click

from hitl_cli.cli.ensure import Ensure
from hitl_cli.cli.output import (
    output_error,
    output_header,
    output_step,
    output_success,
    output_warning,
    user_output,
)
from hitl_cli.context import HitContext
from hitl_cli.io.definitions import find_definition_file
from hitl_cli.models.tool import TOOL_TYPE_DIRECTORIES
from hitl_cli.operations.contribution import (
    CONTRIBUTION_LABEL,
    CONTRIBUTION_LABEL_COLOR,
    CONTRIBUTION_LABEL_DESCRIPTION,
    ValidationResult,
    build_issue_body,
    build_issue_title,
    detect_tool_type,
    validate_definition_file,
    validate_documentation,
)


def _report(label: str, result: ValidationResult) -> None:
    if result.passed:
        output_success(f"{label} validation passed")
        return

    user_output(click.style(f"✗ {label} validation failed", fg="red"))
    for error in result.errors:
        user_output(f"  - {error}")


@click.command()
@click.argument("tool_type", metavar="TYPE", type=click.Choice(list(TOOL_TYPE_DIRECTORIES)))
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def contribute(ctx: HitContext, tool_type: str, path: Path) -> None:
    """Validate a tool and open a GitHub issue to submit it.

    PATH is the tool directory or its definition file.

    Examples:

        hit contribute prompt toolkit/prompts/api-design

        hit contribute agent toolkit/agents/test-generator/agent.md
    """
    user_output(f"📤 Submitting {tool_type} for review...")
    user_output()

    output_step(f"Validating {path}...")
    Ensure.path_exists(path)

    if path.is_dir():
        tool_dir = path
        definition_path = Ensure.not_none(
            find_definition_file(path),
            f"No tool definition file found in {path}",
        )
    else:
        tool_dir = path.parent
        definition_path = path

    detected = detect_tool_type(path.resolve())
    if detected is not None and detected != tool_type:
        user_output(f"Detected type from path: {detected} (you specified: {tool_type})")

    tool_name = tool_dir.resolve().name

    output_step("Running quality checks...")
    definition_result = validate_definition_file(definition_path, tool_type)
    docs_result = validate_documentation(tool_dir)
    user_output()

    _report("Definition", definition_result)
    _report("Documentation", docs_result)

    warnings = [*definition_result.warnings, *docs_result.warnings]
    if warnings:
        user_output()
        output_warning("Warnings:")
        for warning in warnings:
            user_output(f"  - {warning}")

    user_output()
    output_step("Creating GitHub issue...")
    Ensure.gh_available(ctx.github.is_available())

    ctx.github.ensure_label_exists(
        CONTRIBUTION_LABEL,
        CONTRIBUTION_LABEL_DESCRIPTION,
        CONTRIBUTION_LABEL_COLOR,
    )
    result = ctx.github.create_issue(
        build_issue_title(tool_type, tool_name),
        build_issue_body(tool_type, tool_name, definition_result, docs_result),
        [CONTRIBUTION_LABEL],
    )

    if not result.success:
        output_error(f"Failed to create issue: {result.error_message or 'gh exited with an error'}")
        user_output("Make sure you have gh CLI installed and authenticated:")
        user_output("  gh auth login")
        raise SystemExit(1)

    user_output()
    output_success("Contribution issue created successfully!")
    user_output(f"  → {result.issue_url}")
    user_output()

    output_header("Next steps:")
    if definition_result.passed and docs_result.passed:
        user_output("  1. Create a pull request with your changes")
        user_output("  2. Link the PR to the issue above")
        user_output("  3. Wait for peer review")
        user_output("  4. Address any feedback")
    else:
        user_output("  1. Fix the validation errors listed above")
        user_output("  2. Run validation again: hit contribute <type> <path>")
        user_output("  3. Create PR once all checks pass")
