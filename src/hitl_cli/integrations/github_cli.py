"""GitHub CLI access for ``hit contribute``.

A contribution is filed as an issue in the toolkit repository, tagged with a
``contribution`` label and a per-type label such as ``prompt``. Everything
goes through the ``gh`` executable, so authentication and repository
selection are whatever ``gh`` resolves for the current directory.

Real calls never raise on a gh failure; they report it in the returned
result. The in-memory fake lives in tests/fakes.
"""

import json
import logging
import re
import shutil
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ISSUE_URL_PATTERN = re.compile(r"/issues/(\d+)$")


@dataclass(frozen=True)
class IssueCreationResult:
    """Outcome of filing a contribution issue.

    issue_number is -1 and issue_url empty when success is False.
    """

    success: bool
    issue_number: int
    issue_url: str
    error_message: str = ""


@dataclass(frozen=True)
class LabelResult:
    exists: bool  # label was already in the repository
    created: bool  # label was created by this call


def parse_issue_number(issue_url: str) -> int | None:
    """Extract the issue number from the URL gh prints after creating an issue."""
    match = ISSUE_URL_PATTERN.search(issue_url)
    if match is None:
        return None
    return int(match.group(1))


class GitHubCli(ABC):
    """Operations the contribute command needs from GitHub."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether gh is on PATH."""
        ...

    @abstractmethod
    def create_issue(
        self,
        title: str,
        body: str,
        labels: list[str],
    ) -> IssueCreationResult:
        """File a contribution issue with the given labels applied.

        The labels must already exist; call ensure_label_exists first.
        """
        ...

    @abstractmethod
    def ensure_label_exists(
        self,
        label: str,
        description: str,
        color: str,
    ) -> LabelResult:
        """Create label (hex color without ``#``) unless the repository has it."""
        ...


def _failed_issue(message: str) -> IssueCreationResult:
    return IssueCreationResult(success=False, issue_number=-1, issue_url="", error_message=message)


class RealGitHubCli(GitHubCli):
    """Runs gh as a subprocess with ``check=False`` and inspects the exit code."""

    def _run_gh(
        self, args: list[str], stdin: str | None = None
    ) -> subprocess.CompletedProcess[str]:
        logger.debug("Running: gh %s", " ".join(args))
        return subprocess.run(
            ["gh", *args],
            input=stdin,
            capture_output=True,
            text=True,
            check=False,
        )

    def is_available(self) -> bool:
        return shutil.which("gh") is not None

    def create_issue(
        self,
        title: str,
        body: str,
        labels: list[str],
    ) -> IssueCreationResult:
        if not self.is_available():
            return _failed_issue("gh CLI not found on PATH")

        # The body goes over stdin so validation reports of any length pass intact
        args = ["issue", "create", "--title", title, "--body-file", "-"]
        for label in labels:
            args += ["--label", label]

        result = self._run_gh(args, stdin=body)
        if result.returncode != 0:
            return _failed_issue(result.stderr.strip())

        issue_url = result.stdout.strip()
        issue_number = parse_issue_number(issue_url)
        if issue_number is None:
            return _failed_issue(f"Unexpected gh output: {issue_url}")

        return IssueCreationResult(success=True, issue_number=issue_number, issue_url=issue_url)

    def _has_label(self, label: str) -> bool:
        result = self._run_gh(["label", "list", "--search", label, "--json", "name"])
        if result.returncode != 0:
            return False
        try:
            names = [entry["name"] for entry in json.loads(result.stdout)]
        except (ValueError, KeyError, TypeError):
            return False
        return label in names

    def ensure_label_exists(
        self,
        label: str,
        description: str,
        color: str,
    ) -> LabelResult:
        if self._has_label(label):
            return LabelResult(exists=True, created=False)

        result = self._run_gh(
            ["label", "create", label, "--description", description, "--color", color]
        )
        if result.returncode != 0:
            # gh refuses to create a label that already exists; issue creation still proceeds
            logger.debug("gh label create %s failed: %s", label, result.stderr.strip())
            return LabelResult(exists=True, created=False)

        return LabelResult(exists=False, created=True)
