"""Application context with dependency injection.

The HitContext dataclass holds all dependencies (config, GitHub CLI, command
probe, clock) and is created once at the CLI entry point, then threaded
through the commands via Click's context object.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from hitl_cli.config import HitConfig, load_config
from hitl_cli.integrations.clock import Clock, RealClock
from hitl_cli.integrations.command_probe import CommandProbe, RealCommandProbe
from hitl_cli.integrations.github_cli import GitHubCli, RealGitHubCli
from hitl_cli.toolkit.scanner import resolve_toolkit_path


@dataclass(frozen=True)
class HitContext:
    """Immutable context holding all dependencies for hit commands.

    Attributes:
        config: Paths and settings loaded at startup
        github: GitHub CLI integration used by contribute
        probe: External program version probe used by doctor
        clock: Time source for installation timestamps
        cwd: Directory used to auto-detect a local toolkit
        debug: Debug flag (verbose logging)
    """

    config: HitConfig
    github: GitHubCli
    probe: CommandProbe
    clock: Clock
    cwd: Path
    debug: bool

    @property
    def toolkit_path(self) -> Path:
        return resolve_toolkit_path(self.cwd, self.config.toolkit_path)


def create_context(*, debug: bool) -> HitContext:
    """Create production context with real implementations.

    Raises:
        ValueError: If the config file is malformed
    """
    return HitContext(
        config=load_config(os.environ),
        github=RealGitHubCli(),
        probe=RealCommandProbe(),
        clock=RealClock(),
        cwd=Path.cwd(),
        debug=debug,
    )
