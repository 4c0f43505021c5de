"""Unit tests for mdlc.api.link.cmd_links module."""

import pytest

from mdlc.api.link import cmd_links
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.link


def test_cmd_links_lists_and_classifies(tmp_path):
    (tmp_path / "doc.md").write_text(
        "[a](guide.md#x) [b](#top) <https://example.com> [c](mailto:me@example.com)\n"
    )

    result = run_cmd(cmd_links.cmd_links, str(tmp_path))

    assert result.success is True
    assert result.output["files_scanned"] == 1
    links = result.output["links"]
    assert [link["target"]["kind"] for link in links] == ["local_path", "local_anchor", "remote_url", "ignored"]
    assert links[0]["target"]["fragment"] == "x"
    assert links[2]["link_type"] == "autolink"
    assert (links[1]["line"], links[1]["column"]) == (1, 17)


def test_cmd_links_does_not_touch_targets(tmp_path):
    (tmp_path / "doc.md").write_text("[gone](missing.md)\n")
    result = run_cmd(cmd_links.cmd_links, str(tmp_path / "doc.md"))

    assert result.success is True
    assert result.output["links"][0]["raw_target"] == "missing.md"


def test_cmd_links_missing_path():
    result = run_cmd(cmd_links.cmd_links, "/nonexistent/docs")
    assert result.success is False
    assert result.output["links"] == []
