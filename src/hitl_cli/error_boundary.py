"""Error boundary handling for the CLI entry point.

Catches well-known exceptions and displays clean error messages without
stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any

import click


def cli_error_boundary[T: Callable[..., Any]](func: T) -> T:
    """Decorator that turns predictable failures into ``Error: ...`` and exit code 1.

    Catches:
        - FileExistsError: File/directory conflicts
        - FileNotFoundError: Missing files/directories
        - ValueError: Invalid input or configuration
        - PermissionError: Permission denied errors

    All other exceptions bubble up normally with full stack traces.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (FileExistsError, FileNotFoundError, PermissionError, ValueError) as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
