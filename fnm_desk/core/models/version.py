"""
NodeVersion and VersionFilter models — one row per known Node version.

Records are created fresh on every parse call. Stores replace their
lists wholesale on fetch, or patch the boolean flags of a copy after a
mutating call.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class NodeVersion(BaseModel):
    """A Node.js version as reported by fnm."""

    name: str                       # e.g. "v22.21.1"
    is_installed: bool = False
    is_default: bool = False
    is_current: bool = False
    is_lts: bool = False
    lts_name: str | None = None     # e.g. "Jod" or "lts-latest"
    aliases: list[str] = Field(default_factory=list)

    def matches(self, keyword: str) -> bool:
        """Case-insensitive substring match on name, LTS name or aliases."""
        needle = keyword.lower()
        if needle in self.name.lower():
            return True
        if self.lts_name and needle in self.lts_name.lower():
            return True
        return any(needle in alias.lower() for alias in self.aliases)


class VersionFilter(BaseModel):
    """Transient filter criteria, combined with logical AND.

    ``None`` means "no constraint" for every field.
    """

    lts_only: bool | None = None
    installed_only: bool | None = None
    keyword: str | None = None
