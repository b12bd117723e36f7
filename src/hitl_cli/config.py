"""Configuration data structures and loading.

Provides immutable config loaded once at the CLI entry point from the
environment and the optional ``~/.hit/config.toml``:

    toolkit_path = "~/src/my-toolkit"
    install_root = "~/.claude/tools"

``HIT_HOME`` relocates the hit home directory and ``HIT_TOOLKIT_PATH``
overrides ``toolkit_path``.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from hitl_cli.io.registry_store import get_registry_path

CONFIG_FILENAME = "config.toml"
HIT_HOME_ENV = "HIT_HOME"
TOOLKIT_PATH_ENV = "HIT_TOOLKIT_PATH"


@dataclass(frozen=True)
class HitConfig:
    """Immutable configuration.

    Attributes:
        hit_home: Directory holding registry.json and config.toml
        claude_dir: Claude's user directory, parent of commands/
        install_root: Tools install to ``install_root/<type>/<id>``
        toolkit_path: Toolkit to scan; None means auto-detect
    """

    hit_home: Path
    claude_dir: Path
    install_root: Path
    toolkit_path: Path | None

    @property
    def registry_path(self) -> Path:
        return get_registry_path(self.hit_home)

    @property
    def commands_dir(self) -> Path:
        return self.claude_dir / "commands"

    @staticmethod
    def for_home(home: Path, toolkit_path: Path | None = None) -> "HitConfig":
        """Build the default layout under a home directory."""
        claude_dir = home / ".claude"
        return HitConfig(
            hit_home=home / ".hit",
            claude_dir=claude_dir,
            install_root=claude_dir / "tools",
            toolkit_path=toolkit_path,
        )


class ConfigOps(ABC):
    """Abstract interface for config loading.

    Provides dependency injection for config access, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the config file (for error messages and debugging)."""
        ...

    @abstractmethod
    def load(self) -> HitConfig:
        """Load config.

        Raises:
            ValueError: If the config file is malformed
        """
        ...


def _optional_path(data: Mapping[str, object], key: str, config_path: Path) -> Path | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ValueError(f"'{key}' in {config_path} must be a non-empty string")
    return Path(value).expanduser().resolve()


class FilesystemConfigOps(ConfigOps):
    """Production implementation reading the environment and config.toml."""

    def __init__(self, home: Path, env: Mapping[str, str]) -> None:
        self._home = home
        self._env = env

    def _hit_home(self) -> Path:
        override = self._env.get(HIT_HOME_ENV)
        if override:
            return Path(override).expanduser().resolve()
        return self._home / ".hit"

    def path(self) -> Path:
        return self._hit_home() / CONFIG_FILENAME

    def load(self) -> HitConfig:
        defaults = HitConfig.for_home(self._home)
        hit_home = self._hit_home()
        config_path = self.path()

        data: dict[str, object] = {}
        if config_path.exists():
            try:
                data = tomllib.loads(config_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Malformed config file {config_path}: {e}") from e

        toolkit_path = _optional_path(data, "toolkit_path", config_path)
        env_toolkit = self._env.get(TOOLKIT_PATH_ENV)
        if env_toolkit:
            toolkit_path = Path(env_toolkit).expanduser().resolve()

        install_root = _optional_path(data, "install_root", config_path)

        return HitConfig(
            hit_home=hit_home,
            claude_dir=defaults.claude_dir,
            install_root=install_root or defaults.install_root,
            toolkit_path=toolkit_path,
        )


def load_config(env: Mapping[str, str] | None = None) -> HitConfig:
    """Load config for the current user."""
    if env is None:
        env = os.environ
    return FilesystemConfigOps(home=Path.home(), env=env).load()
