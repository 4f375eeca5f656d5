"""
Tests for CLI commands, driven through the mock command interface.
"""

import json
import textwrap
from pathlib import Path

from click.testing import CliRunner

from fnm_desk.adapters.mock import MockCommandInterface
from fnm_desk.core.models.env import FnmEnv
from fnm_desk.main import cli


def _invoke(commands: MockCommandInterface, args: list[str]):
    return CliRunner().invoke(cli, args, obj={"commands": commands})


class TestCLIGlobal:
    def test_help(self):
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "fnm-desk" in result.output

    def test_version(self):
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_bad_config(self, tmp_path: Path):
        config = tmp_path / "fnm-desk.yml"
        config.write_text("- not a mapping\n")
        result = CliRunner().invoke(cli, ["--config", str(config), "list"])
        assert result.exit_code == 1
        assert "mapping" in result.output

    def test_config_check_json(self, tmp_path: Path):
        config = tmp_path / "fnm-desk.yml"
        config.write_text(textwrap.dedent("""\
            fnm_dir: /data/fnm
        """))
        result = CliRunner().invoke(cli, ["--config", str(config), "config", "check", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["fnm_dir"] == "/data/fnm"


class TestVersionCommands:
    def test_list(self, commands):
        result = _invoke(commands, ["list"])
        assert result.exit_code == 0
        assert "v22.21.1" in result.output
        assert "system" not in result.output

    def test_list_json_sorted(self, commands):
        result = _invoke(commands, ["list", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [v["name"] for v in data] == ["v22.21.1", "v20.12.2", "v18.20.8"]
        assert data[0]["is_current"] is True

    def test_list_keyword(self, commands):
        result = _invoke(commands, ["list", "--keyword", "work", "--json"])
        assert [v["name"] for v in json.loads(result.output)] == ["v20.12.2"]

    def test_list_failure(self, commands):
        commands.set_failure("list_installed_versions", "fnm not found")
        result = _invoke(commands, ["list"])
        assert result.exit_code == 1
        assert "fnm not found" in result.output

    def test_remote_latest(self, commands):
        result = _invoke(commands, ["remote", "--latest", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert [v["name"] for v in data] == ["v22.21.1", "v21.7.3", "v20.12.2", "v18.20.8"]
        assert data[1]["is_installed"] is False

    def test_remote_warns_when_installed_listing_fails(self, commands):
        commands.set_failure("list_installed_versions", "fnm list broke")
        result = _invoke(commands, ["remote"])
        assert result.exit_code == 0
        assert "Installed status unknown: fnm list broke" in result.output
        assert "✓ installed" not in result.output

    def test_remote_lts_flag_forwarded(self, commands):
        _invoke(commands, ["remote", "--lts"])
        assert ("list_remote_versions", {"lts_only": True}) in commands.call_log

    def test_install(self, commands):
        result = _invoke(commands, ["install", "v21.7.3"])
        assert result.exit_code == 0
        assert "Installed v21.7.3" in result.output
        assert commands.calls_to("install_version") == 1

    def test_install_failure(self, commands):
        commands.set_failure("install_version", "download failed")
        result = _invoke(commands, ["install", "v21.7.3"])
        assert result.exit_code == 1
        assert "download failed" in result.output

    def test_uninstall(self, commands):
        result = _invoke(commands, ["uninstall", "v18.20.8"])
        assert result.exit_code == 0
        assert commands.calls_to("uninstall_version") == 1

    def test_use(self, commands):
        result = _invoke(commands, ["use", "v18.20.8"])
        assert result.exit_code == 0
        assert commands.call_log == [("use_version", {"version": "v18.20.8"})]

    def test_default(self, commands):
        result = _invoke(commands, ["default", "v20.12.2"])
        assert result.exit_code == 0
        assert "Default set to v20.12.2" in result.output

    def test_open_failure(self, commands):
        commands.set_failure("open_version_directory", "no opener")
        result = _invoke(commands, ["open", "v20.12.2"])
        assert result.exit_code == 1


class TestSettingsCommands:
    def test_env_json(self, commands):
        commands.set_response("get_fnm_env", FnmEnv(fnm_dir="/data/fnm", arch="x64"))
        result = _invoke(commands, ["env", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["fnm_dir"] == "/data/fnm"

    def test_env_text_marks_active_mirror(self, commands):
        commands.set_response("get_fnm_env", FnmEnv(fnm_dir="/data/fnm"))
        result = _invoke(commands, ["env"])
        assert result.exit_code == 0
        assert "https://nodejs.org/dist ← active" in result.output

    def test_dir(self, commands):
        commands.set_response("get_fnm_dir", "/data/fnm")
        result = _invoke(commands, ["dir"])
        assert result.exit_code == 0
        assert result.output.strip() == "/data/fnm"

    def test_dir_failure_exits(self, commands):
        commands.set_failure("get_fnm_dir", "no HOME")
        result = _invoke(commands, ["dir"])
        assert result.exit_code == 1

    def test_dir_open(self, commands):
        result = _invoke(commands, ["dir", "--open"])
        assert result.exit_code == 0
        assert commands.calls_to("open_fnm_directory") == 1

    def test_doctor(self, commands):
        commands.set_response("debug_fnm_lookup", "Resolved fnm: /opt/fnm")
        result = _invoke(commands, ["doctor"])
        assert result.exit_code == 0
        assert "Resolved fnm" in result.output
