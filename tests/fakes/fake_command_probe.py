"""Fake CommandProbe implementation for testing."""

from hitl_cli.integrations.command_probe import CommandProbe


class FakeCommandProbe(CommandProbe):
    """Reports versions from a fixed mapping; unknown commands are not installed."""

    def __init__(self, versions: dict[str, str] | None = None) -> None:
        self._versions = versions or {}
        self._probed: list[str] = []

    @property
    def probed(self) -> list[str]:
        """Commands queried, in call order. For test assertions only."""
        return self._probed

    def get_version(self, command: str, version_flag: str = "--version") -> str | None:
        self._probed.append(command)
        return self._versions.get(command)
