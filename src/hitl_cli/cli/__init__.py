import logging
import os

import click

from hitl_cli.cli.output import user_output
from hitl_cli.context import create_context
from hitl_cli.error_boundary import cli_error_boundary
from hitl_cli.version import __version__

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])

DEBUG_ENV = "HIT_DEBUG"

# Track whether commands are registered
_commands_registered = False


class LazyGroup(click.Group):
    """Click Group that lazily loads commands."""

    def list_commands(self, ctx):
        """List available commands, registering them if needed."""
        if not _commands_registered:
            _register_commands()
        return super().list_commands(ctx)

    def get_command(self, ctx, cmd_name):
        """Get a command by name, registering if needed."""
        if not _commands_registered:
            _register_commands()
        return super().get_command(ctx, cmd_name)


def configure_logging(debug: bool) -> None:
    if debug or os.getenv(DEBUG_ENV):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.command(cls=LazyGroup, invoke_without_command=True, context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Human-in-the-Loop: search, install and manage AI prompts and agents."""
    configure_logging(debug)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(debug=debug)

    if ctx.invoked_subcommand is None:
        user_output(ctx.get_help())


def _register_commands() -> None:
    """Register all commands with the CLI group."""
    global _commands_registered

    if _commands_registered:
        return

    from hitl_cli.commands.contribute import contribute
    from hitl_cli.commands.doctor import doctor
    from hitl_cli.commands.install import install
    from hitl_cli.commands.list import list_installed
    from hitl_cli.commands.search import search
    from hitl_cli.commands.stats import stats
    from hitl_cli.commands.uninstall import uninstall
    from hitl_cli.commands.update import update

    cli.add_command(search)
    cli.add_command(install)
    cli.add_command(update)
    cli.add_command(list_installed)
    cli.add_command(uninstall)
    cli.add_command(stats)
    cli.add_command(doctor)
    cli.add_command(contribute)

    _commands_registered = True


def main() -> None:
    """Entry point with error boundary."""
    cli_error_boundary(cli)()


if __name__ == "__main__":
    main()
