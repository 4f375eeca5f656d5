"""
Tests for version comparison, sorting, and grouping by major.
"""

from functools import cmp_to_key

from fnm_desk.core.models.version import NodeVersion
from fnm_desk.core.services.version_compare import (
    compare_versions,
    group_versions_by_major,
    latest_by_major,
    sort_versions,
    version_triple,
)


def _v(name: str, **kw) -> NodeVersion:
    return NodeVersion(name=name, **kw)


class TestCompareVersions:
    def test_sorts_newest_first(self):
        result = sorted(["v18.0.0", "v20.0.0", "v16.0.0"], key=cmp_to_key(compare_versions))
        assert result == ["v20.0.0", "v18.0.0", "v16.0.0"]

    def test_newer_minor_ranks_first(self):
        assert compare_versions("v20.1.0", "v20.2.0") > 0
        assert compare_versions("v20.2.0", "v20.1.0") < 0

    def test_patch(self):
        assert compare_versions("v20.1.9", "v20.1.10") > 0

    def test_numeric_not_lexicographic(self):
        assert compare_versions("v9.0.0", "v10.0.0") > 0

    def test_garbage_is_zero(self):
        result = sorted(["garbage", "v1.0.0"], key=cmp_to_key(compare_versions))
        assert result == ["v1.0.0", "garbage"]

    def test_optional_v_prefix(self):
        assert compare_versions("20.0.0", "v20.0.0") == 0

    def test_suffix_ignored(self):
        assert compare_versions("v20.0.0-nightly", "v20.0.0") == 0

    def test_triple_found_anywhere(self):
        assert version_triple("node-v18.2.3-linux") == (18, 2, 3)

    def test_missing_triple(self):
        assert version_triple("v20") == (0, 0, 0)


class TestSortVersions:
    def test_new_list_newest_first(self):
        versions = [_v("v16.0.0"), _v("v22.1.0"), _v("v20.5.1")]
        result = sort_versions(versions)
        assert [v.name for v in result] == ["v22.1.0", "v20.5.1", "v16.0.0"]
        assert [v.name for v in versions] == ["v16.0.0", "v22.1.0", "v20.5.1"]

    def test_stable_on_equal_triples(self):
        versions = [_v("v20.0.0", aliases=["a"]), _v("v20.0.0", aliases=["b"])]
        assert [v.aliases for v in sort_versions(versions)] == [["a"], ["b"]]


class TestGrouping:
    def test_group_by_major(self):
        groups = group_versions_by_major(
            [_v("v20.1.0"), _v("v18.0.0"), _v("v20.3.0"), _v("latest")]
        )
        assert sorted(groups) == [18, 20]
        assert [v.name for v in groups[20]] == ["v20.1.0", "v20.3.0"]

    def test_latest_by_major(self):
        versions = [_v("v18.19.0"), _v("v20.1.0"), _v("v18.20.8"), _v("v22.0.0"), _v("v20.12.2")]
        assert [v.name for v in latest_by_major(versions)] == ["v22.0.0", "v20.12.2", "v18.20.8"]

    def test_latest_by_major_empty(self):
        assert latest_by_major([]) == []
