"""
Tests for the version parser — fnm list / list-remote output.
"""

from fnm_desk.core.services.version_parser import (
    is_lts_tag,
    parse_installed_versions,
    parse_remote_versions,
)

from conftest import INSTALLED_OUTPUT

# ── Installed ────────────────────────────────────────────────────────


class TestParseInstalled:
    def test_basic_listing(self):
        versions = parse_installed_versions(INSTALLED_OUTPUT, "v22.21.1")
        assert [v.name for v in versions] == ["v22.21.1", "v20.12.2", "v18.20.8"]
        assert all(v.is_installed for v in versions)

    def test_preserves_input_order(self):
        out = "* v16.0.0\n* v20.0.0\n* v18.0.0\n"
        names = [v.name for v in parse_installed_versions(out, "")]
        assert names == ["v16.0.0", "v20.0.0", "v18.0.0"]

    def test_system_line_excluded(self):
        versions = parse_installed_versions("* system\n* v20.0.0\n", "")
        assert [v.name for v in versions] == ["v20.0.0"]

    def test_system_line_excluded_with_tags(self):
        versions = parse_installed_versions("* system default\nv20.0.0\n", "system")
        assert [v.name for v in versions] == ["v20.0.0"]

    def test_default_tag(self):
        versions = parse_installed_versions(INSTALLED_OUTPUT, "")
        assert [v.is_default for v in versions] == [True, False, False]

    def test_lts_tag(self):
        v = parse_installed_versions("* v20.12.2 lts-latest\n", "")[0]
        assert v.is_lts
        assert v.lts_name == "lts-latest"

    def test_lts_name_verbatim_first_match(self):
        v = parse_installed_versions("* v20.12.2 LTS-Iron lts-latest\n", "")[0]
        assert v.lts_name == "LTS-Iron"

    def test_lts_name_never_default(self):
        v = parse_installed_versions("* v20.12.2 default lts-latest\n", "")[0]
        assert v.is_default
        assert v.lts_name == "lts-latest"

    def test_no_lts(self):
        v = parse_installed_versions("* v21.0.0\n", "")[0]
        assert not v.is_lts
        assert v.lts_name is None

    def test_aliases_exclude_reserved_tags(self):
        v = parse_installed_versions("* v20.12.2 work default lts-latest legacy\n", "")[0]
        assert v.aliases == ["work", "legacy"]

    def test_current_exact_match(self):
        versions = parse_installed_versions(INSTALLED_OUTPUT, "v20.12.2")
        assert [v.is_current for v in versions] == [False, True, False]

    def test_current_not_trimmed_by_parser(self):
        versions = parse_installed_versions("* v20.12.2\n", "v20.12.2\n")
        assert not versions[0].is_current

    def test_blank_lines_skipped(self):
        versions = parse_installed_versions("\n\n* v20.0.0\n   \n", "")
        assert len(versions) == 1

    def test_line_without_marker(self):
        v = parse_installed_versions("v20.0.0 default\n", "")[0]
        assert v.name == "v20.0.0"
        assert v.is_default

    def test_malformed_line_best_effort(self):
        v = parse_installed_versions("* garbage here\n", "")[0]
        assert v.name == "garbage"
        assert v.aliases == ["here"]

    def test_empty_output(self):
        assert parse_installed_versions("", "v20.0.0") == []


# ── Remote ───────────────────────────────────────────────────────────


class TestParseRemote:
    def test_mixed_lines(self):
        out = "v20.12.2 (Jod)\nv21.0.0\nnot-a-version\n"
        versions = parse_remote_versions(out, ["v20.12.2"])
        assert len(versions) == 2

        first, second = versions
        assert first.name == "v20.12.2"
        assert first.is_lts
        assert first.lts_name == "Jod"
        assert first.is_installed

        assert second.name == "v21.0.0"
        assert not second.is_lts
        assert second.lts_name is None
        assert not second.is_installed

    def test_never_default_or_current(self):
        for v in parse_remote_versions("v20.0.0 (Iron)\nv21.0.0\n", ["v20.0.0"]):
            assert not v.is_default
            assert not v.is_current
            assert v.aliases == []

    def test_leading_whitespace_tolerated(self):
        versions = parse_remote_versions("   v18.0.0 (Hydrogen)\n", [])
        assert versions[0].lts_name == "Hydrogen"

    def test_requires_v_prefix(self):
        assert parse_remote_versions("20.0.0\nlatest\n", []) == []

    def test_multi_word_codename(self):
        v = parse_remote_versions("v4.2.0 (Argon Beta)\n", [])[0]
        assert v.lts_name == "Argon Beta"

    def test_installed_join_is_exact(self):
        v = parse_remote_versions("v20.0.0\n", ["20.0.0", "V20.0.0"])[0]
        assert not v.is_installed

    def test_installed_names_any_iterable(self):
        v = parse_remote_versions("v20.0.0\n", {"v20.0.0"})[0]
        assert v.is_installed


class TestIsLtsTag:
    def test_case_insensitive(self):
        assert is_lts_tag("lts-latest")
        assert is_lts_tag("LTS")
        assert is_lts_tag("Lts-Iron")
        assert not is_lts_tag("default")
        assert not is_lts_tag("work")
