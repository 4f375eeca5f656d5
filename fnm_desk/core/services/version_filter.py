"""
Version filter — predicate-based narrowing of a version list.

Each predicate only removes entries; relative order of survivors is
kept and the input list is never mutated.
"""

from __future__ import annotations

from fnm_desk.core.models.version import NodeVersion, VersionFilter


def filter_versions(
    versions: list[NodeVersion],
    criteria: VersionFilter | None = None,
    *,
    lts_only: bool | None = None,
    installed_only: bool | None = None,
    keyword: str | None = None,
) -> list[NodeVersion]:
    """Filter versions by LTS status, install state and keyword.

    Criteria can be given as a ``VersionFilter`` or as keyword arguments;
    explicit keyword arguments win over the model's fields.
    """
    if criteria is not None:
        lts_only = criteria.lts_only if lts_only is None else lts_only
        installed_only = criteria.installed_only if installed_only is None else installed_only
        keyword = criteria.keyword if keyword is None else keyword

    result = list(versions)

    if lts_only:
        result = [v for v in result if v.is_lts]

    if installed_only:
        result = [v for v in result if v.is_installed]

    if keyword:
        result = [v for v in result if v.matches(keyword)]

    return result
