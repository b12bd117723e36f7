"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use a red "Error:"
prefix for visual consistency.
"""

from pathlib import Path

import click

from hitl_cli.cli.output import user_output


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Args:
            condition: Boolean condition to check
            error_message: Error message to display if condition is false.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def not_none[T](value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Provides type narrowing: takes ``T | None`` and returns ``T``.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)
        return value

    @staticmethod
    def path_exists(path: Path, error_message: str | None = None) -> None:
        """Ensure path exists, otherwise output styled error and exit.

        Args:
            path: Path to check for existence
            error_message: Optional custom error message. Defaults to
                          "Path does not exist: {path}".
        """
        if not path.exists():
            if error_message is None:
                error_message = f"Path does not exist: {path}"
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def gh_available(available: bool) -> None:
        """Ensure the GitHub CLI (gh) was found on PATH.

        Raises:
            SystemExit: If gh CLI is not available
        """
        if not available:
            user_output(
                click.style("Error: ", fg="red")
                + "GitHub CLI (gh) is not installed\n\n"
                + "Install it from: https://cli.github.com/\n"
                + "Then authenticate with: gh auth login"
            )
            raise SystemExit(1)
