"""Version probing for external programs, used by the doctor command."""

import re
import shutil
import subprocess
from abc import ABC, abstractmethod

_VERSION_PATTERN = re.compile(r"\d+\.\d+\.\d+")


def extract_version(output: str) -> str | None:
    """Pull a ``X.Y.Z`` version out of ``--version`` output.

    Falls back to the first line when no such triple is present.
    """
    text = output.strip()
    if not text:
        return None

    match = _VERSION_PATTERN.search(text)
    if match is not None:
        return match.group(0)
    return text.splitlines()[0]


class CommandProbe(ABC):
    """Abstract interface for asking installed programs for their version."""

    @abstractmethod
    def get_version(self, command: str, version_flag: str = "--version") -> str | None:
        """Return the program's version, or None if it is not installed or fails."""
        ...


class RealCommandProbe(CommandProbe):
    def get_version(self, command: str, version_flag: str = "--version") -> str | None:
        if shutil.which(command) is None:
            return None

        result = subprocess.run(
            [command, version_flag],
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None

        return extract_version(result.stdout or result.stderr)
