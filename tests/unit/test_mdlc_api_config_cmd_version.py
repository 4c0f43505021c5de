"""Unit tests for mdlc.api.config.cmd_version module."""

import pytest

from mdlc.api.config import cmd_version
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.config


def test_cmd_version_reports_package_version(monkeypatch):
    monkeypatch.setattr("mdlc.api.config.cmd_version.get_package_version", lambda: "0.1.0")

    result = run_cmd(cmd_version.cmd_version)

    assert result.success is True
    assert result.output["version"] == "0.1.0"
    assert result.output["errors"] == []
    assert result.output["warnings"] == []
    assert result.result == "mdlc version: 0.1.0"
