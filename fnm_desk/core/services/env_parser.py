"""
``fnm env`` parser — shell-specific export lines into an FnmEnv snapshot.

Handles the POSIX, cmd and PowerShell flavours fnm prints::

    export FNM_DIR="/home/me/.local/share/fnm"
    set FNM_ARCH=x64
    $env:FNM_LOGLEVEL = "info"
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from pathlib import Path

from fnm_desk.core.models.env import DEFAULT_NODE_DIST_MIRROR, FnmEnv

logger = logging.getLogger(__name__)

# env var → FnmEnv field
_KEYS: dict[str, str] = {
    "FNM_DIR": "fnm_dir",
    "FNM_NODE_DIST_MIRROR": "node_dist_mirror",
    "FNM_VERSION_FILE_STRATEGY": "version_file_strategy",
    "FNM_COREPACK_ENABLED": "corepack_enabled",
    "FNM_RESOLVE_ENGINES": "resolve_engines",
    "FNM_ARCH": "arch",
    "FNM_LOGLEVEL": "loglevel",
}

_BOOL_FIELDS = {"corepack_enabled", "resolve_engines"}

_STRATEGIES = {"local", "recursive"}


def parse_fnm_env(output: str) -> FnmEnv:
    """Build an FnmEnv from ``fnm env`` output.

    Unknown keys and malformed lines are ignored. Missing directory and
    architecture fall back to platform defaults.
    """
    values: dict[str, object] = {}

    for line in output.splitlines():
        parsed = _parse_assignment(line)
        if parsed is None:
            continue
        key, value = parsed
        field = _KEYS.get(key)
        if field is None:
            continue
        if field in _BOOL_FIELDS:
            values[field] = _parse_bool(value)
        else:
            values[field] = value

    if values.get("version_file_strategy") not in _STRATEGIES:
        if "version_file_strategy" in values:
            logger.warning(
                "Unknown FNM_VERSION_FILE_STRATEGY %r, using 'local'",
                values["version_file_strategy"],
            )
        values["version_file_strategy"] = "local"

    if not values.get("node_dist_mirror"):
        values["node_dist_mirror"] = DEFAULT_NODE_DIST_MIRROR
    if not values.get("fnm_dir"):
        values["fnm_dir"] = default_fnm_dir()
    if not values.get("arch"):
        values["arch"] = host_arch()

    return FnmEnv(**values)


def extract_env_value(line: str, key: str) -> str | None:
    """Return the value assigned to ``key`` on ``line``, or None."""
    parsed = _parse_assignment(line)
    if parsed is None or parsed[0] != key:
        return None
    return parsed[1]


def default_fnm_dir() -> str:
    """Platform default fnm data directory ("" when unresolvable)."""
    if sys.platform == "darwin":
        home = os.environ.get("HOME")
        return str(Path(home) / "Library" / "Application Support" / "fnm") if home else ""
    if sys.platform == "win32":
        local_appdata = os.environ.get("LOCALAPPDATA")
        return str(Path(local_appdata) / "fnm") if local_appdata else ""
    home = os.environ.get("HOME")
    return str(Path(home) / ".local" / "share" / "fnm") if home else ""


def host_arch() -> str:
    """Host architecture in fnm's naming (x64 / arm64)."""
    machine = platform.machine().lower()
    if machine in ("x86_64", "amd64"):
        return "x64"
    if machine in ("aarch64", "arm64"):
        return "arm64"
    return "unknown"


# ── Internal helpers ────────────────────────────────────────────


def _parse_assignment(line: str) -> tuple[str, str] | None:
    line = line.strip()
    lowered = line.lower()
    for prefix in ("export ", "set ", "$env:"):
        if lowered.startswith(prefix):
            line = line[len(prefix):].lstrip()
            break

    if "=" not in line:
        return None
    key, _, value = line.partition("=")
    key = key.strip()
    if not key or " " in key:
        return None

    value = value.strip().rstrip(";").strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    return key, value


def _parse_bool(value: str) -> bool:
    return value.lower() == "true" or value == "1"
