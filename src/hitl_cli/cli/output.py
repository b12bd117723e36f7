"""Output utilities for CLI commands.

All user-facing text goes to stderr through user_output, leaving stdout free
for anything a caller may want to pipe.
"""

import sys

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text


def user_output(message: str = "") -> None:
    """Print a line for the user (stderr)."""
    click.echo(message, err=True)


def output_header(message: str) -> None:
    user_output(click.style(message, bold=True))


def output_step(message: str) -> None:
    user_output(click.style(f"  {message}", dim=True))


def output_success(message: str) -> None:
    user_output(click.style("✓ ", fg="green") + message)


def output_warning(message: str) -> None:
    user_output(click.style("⚠ ", fg="yellow") + message)


def output_error(message: str) -> None:
    user_output(click.style("Error: ", fg="red") + message)


def output_list_item(name: str, detail: str) -> None:
    user_output("  " + click.style("•", fg="cyan") + f" {click.style(name, bold=True)} {detail}")


def format_check_summary(errors: int, warnings: int) -> Panel:
    """Build the summary box shown at the end of ``hit doctor``.

    Args:
        errors: Number of failed critical checks
        warnings: Number of missing optional dependencies
    """
    if errors:
        text = Text(
            "✗ Some critical checks failed. Install the missing dependencies.", style="red"
        )
        border = "red"
    elif warnings:
        text = Text(
            "⚠ All critical checks passed, but some optional tools are missing.", style="yellow"
        )
        border = "yellow"
    else:
        text = Text("✓ All checks passed! Your environment is ready.", style="green")
        border = "green"

    return Panel(text, title="Summary", border_style=border, expand=False)


def print_panel(panel: Panel) -> None:
    # Looked up per call so a swapped sys.stderr (CliRunner) is honored
    console = Console(file=sys.stderr, highlight=False)
    console.print(panel)
