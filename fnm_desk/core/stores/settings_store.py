"""
SettingsStateStore — fnm's environment snapshot.

Two error tiers:
    - best-effort (``BEST_EFFORT_OPERATIONS``): failures are logged and
      a neutral value is returned; ``error`` is left alone.
    - error-surfacing (everything else): failures land in ``error`` and
      the method returns False.
"""

from __future__ import annotations

import logging

from fnm_desk.adapters.base import CommandInterface, error_message
from fnm_desk.core.models.env import DEFAULT_NODE_DIST_MIRROR, FnmEnv, MirrorOption
from fnm_desk.core.services.event_bus import EventBus
from fnm_desk.core.stores.base import StateStore

logger = logging.getLogger(__name__)

BEST_EFFORT_OPERATIONS: tuple[str, ...] = ("get_fnm_dir",)

MIRROR_OPTIONS: tuple[MirrorOption, ...] = (
    MirrorOption(label="Official", value=DEFAULT_NODE_DIST_MIRROR),
    MirrorOption(label="npmmirror (Taobao)", value="https://npmmirror.com/mirrors/node"),
    MirrorOption(label="Tencent Cloud", value="https://mirrors.cloud.tencent.com/nodejs-release"),
    MirrorOption(label="Huawei Cloud", value="https://mirrors.huaweicloud.com/nodejs"),
)


class SettingsStateStore(StateStore):
    """Holds the last loaded FnmEnv; full reload only."""

    domain = "settings"
    mirror_options = MIRROR_OPTIONS

    def __init__(self, commands: CommandInterface, bus: EventBus | None = None):
        super().__init__(commands, bus)
        self.env = FnmEnv()
        self.loading = False

    # Flat accessors mirroring the snapshot fields

    @property
    def fnm_dir(self) -> str:
        return self.env.fnm_dir

    @property
    def node_dist_mirror(self) -> str:
        return self.env.node_dist_mirror

    @property
    def version_file_strategy(self) -> str:
        return self.env.version_file_strategy

    @property
    def corepack_enabled(self) -> bool:
        return self.env.corepack_enabled

    @property
    def resolve_engines(self) -> bool:
        return self.env.resolve_engines

    @property
    def arch(self) -> str:
        return self.env.arch

    @property
    def loglevel(self) -> str:
        return self.env.loglevel

    # ── Operations ──────────────────────────────────────────────

    async def load_settings(self) -> bool:
        """Reload the whole snapshot from ``get_fnm_env``."""
        self.loading = True
        self.error = None
        try:
            result = await self.commands.invoke("get_fnm_env")
            env = result if isinstance(result, FnmEnv) else FnmEnv.model_validate(result)
        except Exception as e:
            self._fail("load settings", e)
            return False
        finally:
            self.loading = False

        self.env = env
        logger.info("Loaded fnm settings (dir=%s, mirror=%s)", env.fnm_dir, env.node_dist_mirror)
        self._notify("loaded", key="env", data=env.model_dump())
        return True

    async def get_fnm_dir(self) -> str:
        """fnm data directory, or "" on failure. Best-effort: never sets ``error``."""
        try:
            return str(await self.commands.invoke("get_fnm_dir") or "")
        except Exception as e:
            logger.warning("Failed to get fnm dir: %s", error_message(e))
            return ""

    async def open_fnm_directory(self) -> bool:
        """Open the fnm data directory in the file manager."""
        self.error = None
        try:
            await self.commands.invoke("open_fnm_directory")
            return True
        except Exception as e:
            self._fail("open fnm directory", e)
            return False
