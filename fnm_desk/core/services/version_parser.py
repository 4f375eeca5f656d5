"""
Version parser — turn raw ``fnm`` output into NodeVersion records.

Pure functions: no I/O, no state, never raise on malformed input.

``fnm list`` output::

    * v22.21.1 default
    * v20.12.2 lts-latest
    * v18.20.8
    * system

``fnm list-remote`` output::

    v22.21.1
    v20.12.2 (Iron)
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from fnm_desk.core.models.version import NodeVersion

# Token fnm prints for the host's pre-existing Node install
SYSTEM_SENTINEL = "system"

DEFAULT_TAG = "default"

_ACTIVE_MARKER_RE = re.compile(r"^\*\s*")
_REMOTE_LINE_RE = re.compile(r"^(v[\d.]+)(?:\s+\(([^)]+)\))?")


def is_lts_tag(tag: str) -> bool:
    """Whether a tag on an installed line designates an LTS line."""
    return "lts" in tag.lower()


def parse_installed_versions(output: str, current_version: str) -> list[NodeVersion]:
    """Parse ``fnm list`` output, preserving line order.

    Args:
        output: Raw command output.
        current_version: The active version, already trimmed by the caller.

    Returns:
        One record per installed version. The ``system`` line is excluded.
    """
    versions: list[NodeVersion] = []

    for line in output.splitlines():
        clean = _ACTIVE_MARKER_RE.sub("", line.strip()).strip()
        if not clean:
            continue

        name, *tags = clean.split()
        if name == SYSTEM_SENTINEL:
            continue

        lts_tags = [t for t in tags if is_lts_tag(t)]
        versions.append(
            NodeVersion(
                name=name,
                is_installed=True,
                is_default=DEFAULT_TAG in tags,
                is_current=name == current_version,
                is_lts=bool(lts_tags),
                lts_name=lts_tags[0] if lts_tags else None,
                aliases=[t for t in tags if t != DEFAULT_TAG and not is_lts_tag(t)],
            )
        )

    return versions


def parse_remote_versions(output: str, installed_names: Iterable[str]) -> list[NodeVersion]:
    """Parse ``fnm list-remote`` output.

    Lines that don't start with ``v<digits/dots>`` are dropped silently.
    Remote entries never carry default/current state or aliases.
    """
    installed = set(installed_names)
    versions: list[NodeVersion] = []

    for line in output.splitlines():
        match = _REMOTE_LINE_RE.match(line.strip())
        if not match:
            continue

        name, lts_name = match.group(1), match.group(2)
        versions.append(
            NodeVersion(
                name=name,
                is_installed=name in installed,
                is_lts=lts_name is not None,
                lts_name=lts_name,
            )
        )

    return versions
