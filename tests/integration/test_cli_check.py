"""CLI tests for mdlc check, links and anchors."""

import json
from pathlib import Path

import pytest
import requests

from mdlc.api.link.Coordinator import Coordinator
from tests.conftest import FakeResponse
from tests.integration.conftest import run_cli

pytestmark = pytest.mark.link


@pytest.fixture
def docs(tmp_path: Path) -> Path:
    (tmp_path / "guide.md").write_text("# Guide\n\n## Install\n")
    (tmp_path / "README.md").write_text(
        "# Readme\n"
        "\n"
        "[guide](guide.md#install) [gone](gone.md) [web](https://example.com/missing)\n"
        "<mailto:team@example.com>\n"
    )
    return tmp_path


@pytest.fixture(autouse=True)
def fake_http(monkeypatch):
    def fake_head(self, url, **kwargs):
        return FakeResponse(404 if "missing" in url else 200)

    monkeypatch.setattr(requests.Session, "head", fake_head)


def test_check_reports_broken_links_and_exits_nonzero(docs):
    rc, out, err = run_cli(["--display", "json", "check", str(docs), "--retries", "0"])

    assert rc == 1
    data = json.loads(out)
    assert data["broken_count"] == 2
    assert data["valid_count"] == 1
    assert data["skipped_count"] == 1

    assert "README.md:3:27  path not found  gone.md" in err
    assert "README.md:3:43  http status 404  https://example.com/missing" in err
    assert "4 links in 2 files" in err


def test_check_offline_clean_run_exits_zero(docs):
    (docs / "README.md").write_text("[guide](guide.md) [web](https://example.com/missing)\n")
    rc, out, err = run_cli(["--display", "json", "check", str(docs), "--offline"])

    assert rc == 0
    assert json.loads(out)["is_valid"] is True
    assert "1 skipped" in err


def test_check_ignore_scheme_and_exclude(docs):
    (docs / "drafts").mkdir()
    (docs / "drafts" / "wip.md").write_text("[x](nowhere.md)\n")
    (docs / "README.md").write_text("[ftp](ftp://files.example/x)\n")

    rc, out, _ = run_cli(
        ["--display", "json", "check", str(docs), "--ignore-scheme", "ftp", "--exclude", "drafts/*"]
    )

    assert rc == 0
    data = json.loads(out)
    assert data["results"][0]["reason"] == "scheme not checked"
    assert data["files_checked"] == 2


def test_check_root_option(docs):
    (docs / "sub").mkdir()
    (docs / "sub" / "page.md").write_text("[top](/guide.md)\n")

    rc, _, _ = run_cli(["check", str(docs / "sub"), "--root", str(docs)])
    assert rc == 0

    rc, _, _ = run_cli(["check", str(docs / "sub")])
    assert rc == 1


def test_check_missing_path(tmp_path):
    rc, out, _ = run_cli(["--display", "json", "check", str(tmp_path / "nope")])
    assert rc == 1
    assert json.loads(out)["errors"]


def test_check_rejects_invalid_option_value(docs):
    rc, out, _ = run_cli(["--display", "json", "check", str(docs), "--workers", "0"])
    assert rc == 1
    assert "Failed to load config" in json.loads(out)["errors"][0]


def test_check_interrupt_exits_130(docs, monkeypatch):
    def interrupted(self, occurrences, on_result=None):
        raise KeyboardInterrupt

    monkeypatch.setattr(Coordinator, "run", interrupted)
    rc, _, err = run_cli(["check", str(docs)])

    assert rc == 130
    assert "Interrupted" in err


def test_links_command(docs):
    rc, out, _ = run_cli(["--display", "json", "links", str(docs / "README.md")])

    assert rc == 0
    kinds = [link["target"]["kind"] for link in json.loads(out)["links"]]
    assert kinds == ["local_path", "local_path", "remote_url", "ignored"]


def test_anchors_command(docs):
    rc, out, _ = run_cli(["--display", "json", "anchors", str(docs / "guide.md")])

    assert rc == 0
    assert json.loads(out)["anchors"] == ["guide", "install"]
