"""
Version comparator — newest-first ordering over version strings.

Only the first ``MAJOR.MINOR.PATCH`` triple in a string counts. There
are no pre-release or build-metadata semantics: two strings with the
same triple compare equal.
"""

from __future__ import annotations

import re
from functools import cmp_to_key

from fnm_desk.core.models.version import NodeVersion

_TRIPLE_RE = re.compile(r"v?(\d+)\.(\d+)\.(\d+)")
_MAJOR_RE = re.compile(r"v?(\d+)")


def version_triple(version: str) -> tuple[int, int, int]:
    """Extract ``(major, minor, patch)``; ``(0, 0, 0)`` when absent."""
    match = _TRIPLE_RE.search(version)
    if not match:
        return (0, 0, 0)
    return (int(match.group(1)), int(match.group(2)), int(match.group(3)))


def compare_versions(a: str, b: str) -> int:
    """Compare two version strings for a descending sort.

    Returns a negative number when ``a`` is newer than ``b``, so sorting
    ascending with this comparator yields newest first.
    """
    a_major, a_minor, a_patch = version_triple(a)
    b_major, b_minor, b_patch = version_triple(b)

    if a_major != b_major:
        return b_major - a_major
    if a_minor != b_minor:
        return b_minor - a_minor
    return b_patch - a_patch


_version_key = cmp_to_key(compare_versions)


def sort_versions(versions: list[NodeVersion]) -> list[NodeVersion]:
    """Return a new list sorted newest first (stable)."""
    return sorted(versions, key=lambda v: _version_key(v.name))


def group_versions_by_major(versions: list[NodeVersion]) -> dict[int, list[NodeVersion]]:
    """Group versions by major number, in order of first appearance.

    Versions whose name carries no number at all are left out.
    """
    groups: dict[int, list[NodeVersion]] = {}
    for version in versions:
        match = _MAJOR_RE.search(version.name)
        if not match:
            continue
        groups.setdefault(int(match.group(1)), []).append(version)
    return groups


def latest_by_major(versions: list[NodeVersion]) -> list[NodeVersion]:
    """Newest version of each major line, majors descending."""
    groups = group_versions_by_major(versions)
    return [sort_versions(groups[major])[0] for major in sorted(groups, reverse=True)]
