"""
fnm bridge — the real command interface, backed by the fnm executable.

Each command runs ``fnm`` as a subprocess in a worker thread, so the
event loop stays free while fnm works. A non-zero exit becomes a
``CommandError`` carrying fnm's stderr.

Command → fnm invocation:
    list_installed_versions   fnm list
    get_current_version       fnm current
    list_remote_versions      fnm list-remote [--lts]
    install_version           fnm install <version>
    uninstall_version         fnm uninstall <version>
    use_version               fnm use <version>
    set_default_version       fnm default <version>
    get_fnm_env               fnm env
"""

from __future__ import annotations

import asyncio
import logging
import subprocess
import time
from pathlib import Path
from typing import Any, Awaitable, Callable

from fnm_desk.adapters.base import CommandError, CommandInterface
from fnm_desk.adapters.lookup import (
    candidate_paths,
    find_fnm,
    fnm_environment,
    open_directory,
    version_dir,
)
from fnm_desk.core.models.env import FnmEnv
from fnm_desk.core.services.env_parser import default_fnm_dir, extract_env_value, parse_fnm_env

logger = logging.getLogger(__name__)


class FnmCommandInterface(CommandInterface):
    """Runs store commands against the installed fnm.

    Args:
        fnm_path: Explicit fnm executable (default: auto-detect).
        fnm_dir: Override for FNM_DIR (default: environment / platform default).
    """

    def __init__(self, fnm_path: str | None = None, fnm_dir: str | None = None):
        self._fnm_path = fnm_path
        self._fnm_dir = fnm_dir
        self._handlers: dict[str, Callable[[dict[str, Any]], Awaitable[Any]]] = {
            "list_installed_versions": lambda a: self._run(["list"]),
            "get_current_version": self._get_current_version,
            "list_remote_versions": self._list_remote_versions,
            "install_version": lambda a: self._run(["install", _version_arg(a)]),
            "uninstall_version": lambda a: self._run(["uninstall", _version_arg(a)]),
            "use_version": lambda a: self._run(["use", _version_arg(a)]),
            "set_default_version": lambda a: self._run(["default", _version_arg(a)]),
            "open_version_directory": self._open_version_directory,
            "get_fnm_env": self._get_fnm_env,
            "get_fnm_dir": lambda a: self._get_fnm_dir(),
            "open_fnm_directory": self._open_fnm_directory,
            "debug_fnm_lookup": lambda a: asyncio.to_thread(self._debug_lookup),
        }

    @property
    def name(self) -> str:
        return "fnm"

    async def invoke(self, command: str, args: dict[str, Any] | None = None) -> Any:
        handler = self._handlers.get(command)
        if handler is None:
            raise CommandError(f"Unknown command: {command}", command=command)
        try:
            return await handler(args or {})
        except CommandError as e:
            if not e.command:
                e.command = command
            raise

    # ── Commands ────────────────────────────────────────────────

    async def _get_current_version(self, args: dict[str, Any]) -> str:
        return (await self._run(["current"])).strip()

    async def _list_remote_versions(self, args: dict[str, Any]) -> str:
        argv = ["list-remote"]
        if args.get("lts_only"):
            argv.append("--lts")
        return await self._run(argv)

    async def _get_fnm_env(self, args: dict[str, Any]) -> FnmEnv:
        env = parse_fnm_env(await self._run(["env"]))
        if self._fnm_dir:
            env = env.model_copy(update={"fnm_dir": self._fnm_dir})
        return env

    async def _get_fnm_dir(self) -> str:
        if self._fnm_dir:
            return self._fnm_dir
        try:
            output = await self._run(["env"])
        except CommandError as e:
            logger.debug("fnm env failed, using default dir: %s", e)
            output = ""
        for line in output.splitlines():
            value = extract_env_value(line, "FNM_DIR")
            if value:
                return value
        fallback = default_fnm_dir()
        if not fallback:
            raise CommandError("Cannot determine the fnm directory (HOME is not set)")
        return fallback

    async def _open_version_directory(self, args: dict[str, Any]) -> None:
        path = version_dir(await self._get_fnm_dir(), _version_arg(args))
        open_directory(path)

    async def _open_fnm_directory(self, args: dict[str, Any]) -> None:
        open_directory(await self._get_fnm_dir())

    # ── Process execution ───────────────────────────────────────

    async def _run(self, argv: list[str]) -> str:
        return await asyncio.to_thread(self._run_sync, argv)

    def _run_sync(self, argv: list[str]) -> str:
        fnm = find_fnm(self._fnm_path)
        cmd = [str(fnm), *argv]
        logger.debug("Executing: %s", " ".join(cmd))
        start = time.monotonic()

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                env=fnm_environment(self._fnm_dir),
            )
        except OSError as e:
            raise CommandError(f"Failed to run fnm {argv[0]}: {e}") from e

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.debug("fnm %s exited %d in %dms", argv[0], result.returncode, elapsed_ms)

        if result.returncode != 0:
            stderr = result.stderr.strip()
            raise CommandError(stderr or f"fnm {argv[0]} exited with code {result.returncode}")
        return result.stdout

    def _debug_lookup(self) -> str:
        """Plain-text report of how fnm is located and whether it runs."""
        lines = [f"Home directory: {Path.home()}", "", "Possible fnm paths:"]
        for path in candidate_paths():
            lines.append(f"  {path} - exists: {path.exists()}, is_file: {path.is_file()}")

        try:
            fnm = find_fnm(self._fnm_path)
        except CommandError as e:
            lines += ["", f"fnm lookup failed: {e}"]
            return "\n".join(lines)

        lines += ["", f"Resolved fnm: {fnm}"]
        for argv in (["--version"], ["list"], ["current"]):
            lines += ["", f"--- fnm {' '.join(argv)} ---"]
            try:
                result = subprocess.run(
                    [str(fnm), *argv],
                    capture_output=True,
                    text=True,
                    env=fnm_environment(self._fnm_dir),
                )
            except OSError as e:
                lines.append(f"Failed to run: {e}")
                continue
            lines.append(f"exit status: {result.returncode}")
            lines.append(f"stdout: {result.stdout.strip()}")
            if result.stderr.strip():
                lines.append(f"stderr: {result.stderr.strip()}")

        return "\n".join(lines)


def _version_arg(args: dict[str, Any]) -> str:
    version = str(args.get("version") or "").strip()
    if not version:
        raise CommandError("Missing required arg: 'version'")
    return version
