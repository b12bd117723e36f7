"""Tests for version probing."""

import pytest

from hitl_cli.integrations.command_probe import RealCommandProbe, extract_version


@pytest.mark.parametrize(
    ("output", "expected"),
    [
        ("git version 2.43.0\n", "2.43.0"),
        ("gh version 2.40.1 (2023-12-13)\nhttps://github.com/cli/cli/releases\n", "2.40.1"),
        ("v20.11.1", "20.11.1"),
        ("custom-tool nightly\nmore", "custom-tool nightly"),
        ("   \n", None),
    ],
)
def test_extract_version(output: str, expected: str | None) -> None:
    assert extract_version(output) == expected


def test_real_probe_missing_command() -> None:
    probe = RealCommandProbe()

    assert probe.get_version("hit-definitely-not-installed-xyz") is None
