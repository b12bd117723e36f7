"""Semantic version comparison.

Versions are compared as three integers, so ``1.10.0`` is newer than ``1.9.0``.
Pre-release and build suffixes are not understood: ``1.0.0-beta`` reads as
``1.0.0``.
"""

import re

_LEADING_DIGITS = re.compile(r"^\d+")


def _segment_value(segment: str) -> int:
    match = _LEADING_DIGITS.match(segment.strip())
    if match is None:
        return 0
    return int(match.group(0))


def parse_version(version: str) -> tuple[int, int, int]:
    """Parse ``[v]MAJOR.MINOR.PATCH`` leniently.

    Missing segments are 0 and each segment contributes its leading digits,
    so ``v2`` is ``(2, 0, 0)`` and ``1.2rc1.x`` is ``(1, 2, 0)``.
    """
    text = version.strip()
    if text[:1] in ("v", "V"):
        text = text[1:]

    segments = text.split(".")
    padded = (segments + ["0", "0", "0"])[:3]
    major, minor, patch = (_segment_value(segment) for segment in padded)
    return major, minor, patch


def compare_versions(a: str, b: str) -> int:
    """Return -1, 0 or 1 as a is older than, equal to or newer than b."""
    left = parse_version(a)
    right = parse_version(b)
    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def is_newer(current: str, candidate: str) -> bool:
    """Check whether candidate is strictly newer than current."""
    return compare_versions(candidate, current) > 0
