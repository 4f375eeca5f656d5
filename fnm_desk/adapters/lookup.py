"""
fnm lookup — locate the fnm executable and its data directory.

GUI launches often get a minimal PATH, so the executable is searched in
the usual install locations before falling back to PATH lookup. Every
fnm invocation gets an enhanced PATH and, when resolvable, FNM_DIR.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path

from fnm_desk.adapters.base import CommandError
from fnm_desk.core.services.env_parser import default_fnm_dir

logger = logging.getLogger(__name__)

INSTALL_HINT = (
    "fnm not found. Make sure fnm is installed.\n\n"
    "Install:\n"
    "  macOS:   brew install fnm\n"
    "  Windows: winget install Schniz.fnm\n"
    "  Linux:   curl -fsSL https://fnm.vercel.app/install | bash"
)


def candidate_paths() -> list[Path]:
    """Well-known fnm install locations for the current platform."""
    home = Path.home()
    paths: list[Path] = []

    if sys.platform == "darwin":
        paths += [Path("/opt/homebrew/bin/fnm"), Path("/usr/local/bin/fnm")]
        paths += [home / ".cargo/bin/fnm", home / ".fnm/fnm", home / ".local/bin/fnm"]
    elif sys.platform == "win32":
        paths += [home / ".cargo" / "bin" / "fnm.exe", home / "scoop" / "shims" / "fnm.exe"]
        for var in ("LOCALAPPDATA", "ProgramFiles"):
            base = os.environ.get(var)
            if base:
                paths.append(Path(base) / "fnm" / "fnm.exe")
    else:
        paths += [Path("/usr/bin/fnm"), Path("/usr/local/bin/fnm")]
        paths += [home / ".cargo/bin/fnm", home / ".fnm/fnm", home / ".local/bin/fnm"]

    return paths


def find_fnm(explicit: str | None = None) -> Path:
    """Resolve the fnm executable.

    Raises:
        CommandError: fnm could not be found anywhere.
    """
    if explicit:
        path = Path(explicit).expanduser()
        if path.is_file():
            return path
        raise CommandError(f"Configured fnm path does not exist: {path}")

    for path in candidate_paths():
        if path.is_file():
            logger.debug("Found fnm at %s", path)
            return path

    which = shutil.which("fnm")
    if which:
        return Path(which)

    raise CommandError(INSTALL_HINT)


def enhanced_path(current: str | None = None) -> str:
    """PATH with the common binary directories appended."""
    current = os.environ.get("PATH", "") if current is None else current
    parts = [current] if current else []

    if sys.platform != "win32":
        home = Path.home()
        extra = ["/usr/bin", "/usr/local/bin"]
        if sys.platform == "darwin":
            extra.insert(0, "/opt/homebrew/bin")
        extra += [str(home / ".cargo/bin"), str(home / ".fnm"), str(home / ".local/bin")]
        parts += extra

    return os.pathsep.join(parts)


def fnm_environment(fnm_dir: str | None = None) -> dict[str, str]:
    """Process environment for running fnm."""
    env = dict(os.environ)
    env["PATH"] = enhanced_path(env.get("PATH", ""))
    resolved = fnm_dir or env.get("FNM_DIR") or default_fnm_dir()
    if resolved:
        env["FNM_DIR"] = resolved
    return env


def version_dir(fnm_dir: str, version: str) -> Path:
    """Installation directory of a version under the fnm data dir."""
    return Path(fnm_dir) / "node-versions" / version / "installation"


def open_directory(path: str | Path) -> None:
    """Open a directory in the OS file manager (detached).

    Raises:
        CommandError: The opener could not be started.
    """
    if sys.platform == "darwin":
        opener = "open"
    elif sys.platform == "win32":
        opener = "explorer"
    else:
        opener = "xdg-open"

    logger.debug("Opening %s with %s", path, opener)
    try:
        subprocess.Popen(
            [opener, str(path)],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=sys.platform != "win32",
        )
    except OSError as e:
        raise CommandError(f"Failed to open directory: {e}") from e
