"""Basic CLI tests - tests for mdlc/cli/__init__.py."""

import json

import pytest
import yaml

from tests.integration.conftest import run_cli

pytestmark = pytest.mark.config


def test_cli_version_flag(monkeypatch):
    monkeypatch.setattr("mdlc.api.config.cmd_version.get_package_version", lambda: "9.9.9")
    rc, out, _ = run_cli(["--version"])
    assert rc == 0
    assert out.strip() == "mdlc 9.9.9"


def test_cli_help_flag():
    rc, out, _ = run_cli(["--help"])
    assert rc == 0
    for command in ("check", "links", "anchors", "config"):
        assert command in out


def test_cli_no_command_shows_help():
    rc, out, _ = run_cli([])
    assert rc == 0
    assert "check" in out


def test_cli_unknown_command_is_usage_error():
    rc, _, err = run_cli(["frobnicate"])
    assert rc == 2
    assert "Usage error" in err


def test_cli_invalid_display():
    rc, _, err = run_cli(["--display", "xml", "config", "show"])
    assert rc == 1
    assert "--display must be 'json' or 'yaml'" in err


def test_cli_config_show_yaml():
    rc, out, err = run_cli(["config", "show", "check"])
    assert rc == 0
    data = yaml.safe_load(out)
    assert data["section"] == "check"
    assert data["content"]["workers"] == 8
    assert "Configuration section 'check'" in err


def test_cli_config_show_json():
    rc, out, _ = run_cli(["--display", "json", "config", "show"])
    assert rc == 0
    assert set(json.loads(out)["content"]) == {"check", "walk", "log"}


def test_cli_config_show_unknown_section():
    rc, out, _ = run_cli(["--display", "json", "config", "show", "bogus"])
    assert rc == 1
    assert json.loads(out)["errors"]
