"""
Domain models — pydantic schemas for versions and fnm settings.

Public re-exports for convenient access.
"""

from fnm_desk.core.models.env import DEFAULT_NODE_DIST_MIRROR, FnmEnv, MirrorOption
from fnm_desk.core.models.version import NodeVersion, VersionFilter

__all__ = [
    "DEFAULT_NODE_DIST_MIRROR",
    "FnmEnv",
    "MirrorOption",
    "NodeVersion",
    "VersionFilter",
]
