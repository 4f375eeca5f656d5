"""
FnmEnv — the settings snapshot reported by ``fnm env``.

Immutable from this package's point of view: the settings store only
ever replaces the whole snapshot on reload.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

DEFAULT_NODE_DIST_MIRROR = "https://nodejs.org/dist"


class FnmEnv(BaseModel):
    """Flat record of fnm configuration fields."""

    model_config = ConfigDict(frozen=True)

    fnm_dir: str = ""
    node_dist_mirror: str = DEFAULT_NODE_DIST_MIRROR
    version_file_strategy: Literal["local", "recursive"] = "local"
    corepack_enabled: bool = False
    resolve_engines: bool = True
    arch: str = ""
    loglevel: str = "info"


class MirrorOption(BaseModel):
    """A selectable Node download mirror."""

    label: str
    value: str
