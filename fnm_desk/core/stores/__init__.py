"""State stores — reactive mirrors of fnm's versions and settings."""

from fnm_desk.core.stores.settings_store import (
    BEST_EFFORT_OPERATIONS,
    MIRROR_OPTIONS,
    SettingsStateStore,
)
from fnm_desk.core.stores.version_store import VersionStateStore

__all__ = [
    "BEST_EFFORT_OPERATIONS",
    "MIRROR_OPTIONS",
    "SettingsStateStore",
    "VersionStateStore",
]
