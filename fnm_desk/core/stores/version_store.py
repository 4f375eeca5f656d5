"""
VersionStateStore — the authoritative in-memory view of fnm's versions.

Synchronization contract
────────────────────────
- ``fetch_installed``: ``fnm list`` and ``fnm current`` run concurrently;
  both must succeed before the installed list is replaced.
- ``fetch_remote``: replaces the remote list, joining ``is_installed``
  against the current installed names. Never touches the installed list.
- ``install`` / ``uninstall``: after the mutating call succeeds, the
  installed list is fully re-fetched (fnm may move default/current as a
  side effect), then remote ``is_installed`` flags are re-derived.
- ``use`` / ``set_default``: optimistic local patch, no re-fetch. These
  only move pointers, never change the inventory.
- ``open_version_directory``: side effect only, no state change.

Mutations of the installed list are serialized by one lock per store
(recreated per event loop), so concurrent install/uninstall/use/default
calls cannot overwrite each other with a stale view. Reads are not locked.

On failure no list is modified; the message lands in ``error`` and the
method returns False.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Literal

from fnm_desk.adapters.base import CommandInterface
from fnm_desk.core.models.version import NodeVersion
from fnm_desk.core.services.event_bus import EventBus
from fnm_desk.core.services.version_compare import sort_versions
from fnm_desk.core.services.version_filter import filter_versions
from fnm_desk.core.services.version_parser import parse_installed_versions, parse_remote_versions
from fnm_desk.core.stores.base import StateStore

logger = logging.getLogger(__name__)

VersionSource = Literal["installed", "remote"]


class VersionStateStore(StateStore):
    """Installed/remote version lists plus current and default pointers."""

    domain = "versions"

    def __init__(self, commands: CommandInterface, bus: EventBus | None = None):
        super().__init__(commands, bus)
        self.installed_versions: list[NodeVersion] = []
        self.remote_versions: list[NodeVersion] = []
        self.current_version: str = ""
        self.loading = False
        self.remote_loading = False
        self._lock: asyncio.Lock | None = None
        self._lock_loop: asyncio.AbstractEventLoop | None = None

    # ── Derived views (recomputed on every access) ──────────────

    @property
    def installed_names(self) -> list[str]:
        return [v.name for v in self.installed_versions]

    @property
    def sorted_installed_versions(self) -> list[NodeVersion]:
        return sort_versions(self.installed_versions)

    @property
    def sorted_remote_versions(self) -> list[NodeVersion]:
        return sort_versions(self.remote_versions)

    @property
    def default_version(self) -> NodeVersion | None:
        return next((v for v in self.installed_versions if v.is_default), None)

    def get_filtered_versions(
        self,
        source: VersionSource,
        *,
        lts_only: bool | None = None,
        keyword: str | None = None,
    ) -> list[NodeVersion]:
        """Sorted view of one list, narrowed by LTS flag and keyword."""
        if source == "installed":
            versions = self.sorted_installed_versions
        elif source == "remote":
            versions = self.sorted_remote_versions
        else:
            raise ValueError(f"Unknown version source: {source!r}")
        return filter_versions(
            versions,
            lts_only=lts_only,
            installed_only=source == "installed",
            keyword=keyword,
        )

    # ── Reads ───────────────────────────────────────────────────

    async def fetch_installed(self) -> bool:
        """Replace the installed list from ``fnm list`` + ``fnm current``."""
        self.loading = True
        self.error = None
        try:
            await self._refresh_installed()
            return True
        except Exception as e:
            self._fail("fetch installed versions", e)
            return False
        finally:
            self.loading = False

    async def fetch_remote(self, lts_only: bool = False) -> bool:
        """Replace the remote list from ``fnm list-remote``."""
        self.remote_loading = True
        self.error = None
        try:
            output = await self.commands.invoke("list_remote_versions", {"lts_only": lts_only})
            self.remote_versions = parse_remote_versions(output or "", self.installed_names)
            logger.info("Fetched %d remote versions (lts_only=%s)", len(self.remote_versions), lts_only)
            self._notify("remote", data={"count": len(self.remote_versions), "lts_only": lts_only})
            return True
        except Exception as e:
            self._fail("fetch remote versions", e)
            return False
        finally:
            self.remote_loading = False

    # ── Inventory mutations (full reconciliation) ───────────────

    async def install(self, version: str) -> bool:
        """Install a version, then re-sync installed and remote state."""
        return await self._mutate_inventory("install_version", "install version", version)

    async def uninstall(self, version: str) -> bool:
        """Uninstall a version, then re-sync installed and remote state."""
        return await self._mutate_inventory("uninstall_version", "uninstall version", version)

    # ── Pointer mutations (optimistic local patch) ──────────────

    async def use(self, version: str) -> bool:
        """Switch the active version; patches ``is_current`` locally."""
        async with self._mutation_guard():
            self.error = None
            try:
                await self.commands.invoke("use_version", {"version": version})
            except Exception as e:
                self._fail("use version", e)
                return False

            self.current_version = version
            self.installed_versions = [
                v.model_copy(update={"is_current": v.name == version})
                for v in self.installed_versions
            ]
            logger.info("Switched to %s", version)
            self._notify("current", data={"version": version})
            return True

    async def set_default(self, version: str) -> bool:
        """Set the default version; patches ``is_default`` locally."""
        async with self._mutation_guard():
            self.error = None
            try:
                await self.commands.invoke("set_default_version", {"version": version})
            except Exception as e:
                self._fail("set default version", e)
                return False

            self.installed_versions = [
                v.model_copy(update={"is_default": v.name == version})
                for v in self.installed_versions
            ]
            logger.info("Default version set to %s", version)
            self._notify("default", data={"version": version})
            return True

    # ── Side effects ────────────────────────────────────────────

    async def open_version_directory(self, version: str) -> bool:
        """Open a version's install directory in the file manager."""
        self.error = None
        try:
            await self.commands.invoke("open_version_directory", {"version": version})
            return True
        except Exception as e:
            self._fail("open version directory", e)
            return False

    # ── Internal helpers ────────────────────────────────────────

    def _mutation_guard(self) -> asyncio.Lock:
        """Per-loop mutation lock; a store may outlive several ``asyncio.run`` calls."""
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    async def _mutate_inventory(self, command: str, operation: str, version: str) -> bool:
        async with self._mutation_guard():
            self.loading = True
            self.error = None
            try:
                await self.commands.invoke(command, {"version": version})
            except Exception as e:
                self._fail(operation, e)
                return False
            else:
                logger.info("%s: %s done", operation.capitalize(), version)
                try:
                    await self._refresh_installed()
                except Exception as e:
                    # fnm already changed; surface the stale view
                    self._fail("fetch installed versions", e)
                else:
                    self._sync_remote_installed()
                return True
            finally:
                self.loading = False

    async def _refresh_installed(self) -> None:
        listing, current = await asyncio.gather(
            self.commands.invoke("list_installed_versions"),
            self.commands.invoke("get_current_version"),
        )
        current = str(current or "").strip()
        versions = parse_installed_versions(listing or "", current)

        self.current_version = current
        self.installed_versions = versions
        logger.info("Fetched %d installed versions (current=%s)", len(versions), current or "-")
        self._notify("installed", data={"count": len(versions), "current": current})

    def _sync_remote_installed(self) -> None:
        names = set(self.installed_names)
        self.remote_versions = [
            v.model_copy(update={"is_installed": v.name in names})
            for v in self.remote_versions
        ]
        self._notify("remote", data={"count": len(self.remote_versions)})
