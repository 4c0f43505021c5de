"""Unit tests for mdlc.api.link.classify_target."""

from pathlib import Path

import pytest

from mdlc.api.link.classify_target import classify_target
from mdlc.api.link.Ignored import Ignored
from mdlc.api.link.LocalAnchor import LocalAnchor
from mdlc.api.link.LocalPath import LocalPath
from mdlc.api.link.RemoteUrl import RemoteUrl

pytestmark = pytest.mark.link


@pytest.fixture
def source(tmp_path: Path) -> Path:
    return tmp_path / "docs" / "README.md"


def test_fragment_only_is_local_anchor(source):
    assert classify_target("#intro", source) == LocalAnchor(fragment="intro")
    assert classify_target("#", source) == LocalAnchor(fragment="")


@pytest.mark.parametrize("target", ["https://example.com/x", "http://example.com", "HTTPS://Example.com/A"])
def test_http_targets_are_remote(source, target):
    kind = classify_target(target, source)
    assert isinstance(kind, RemoteUrl)
    assert kind.url == target
    assert kind.scheme == target.split(":")[0].lower()


def test_remote_host_is_lowercased_with_port(source):
    kind = classify_target("https://Example.COM:8443/a?b#c", source)
    assert kind.host == "example.com:8443"


@pytest.mark.parametrize("target", ["mailto:a@b.com", "tel:+15551234", "javascript:void(0)", "data:text/plain,x"])
def test_default_ignored_schemes(source, target):
    kind = classify_target(target, source)
    assert isinstance(kind, Ignored)
    assert kind.reason == f"{target.split(':')[0]} scheme not checked"


def test_unsupported_scheme_is_ignored(source):
    assert classify_target("ftp://files.example.com/x", source) == Ignored(reason="unsupported scheme 'ftp'")


def test_configured_schemes_take_precedence_over_http(source):
    kind = classify_target("http://localhost:8000", source, ignored_schemes=["http"])
    assert kind == Ignored(reason="http scheme not checked")


def test_bare_email_is_ignored(source):
    assert classify_target("someone@example.com", source) == Ignored(reason="mailto scheme not checked")


def test_file_name_with_at_sign_is_a_path(source):
    kind = classify_target("icon@2x.png", source)
    assert kind == LocalPath(path=source.parent / "icon@2x.png")


def test_relative_path_with_fragment(source):
    kind = classify_target("guide/setup.md#install", source)
    assert kind == LocalPath(path=source.parent / "guide" / "setup.md", fragment="install")


def test_parent_segments_are_normalized(source):
    kind = classify_target("../CHANGELOG.md", source)
    assert kind == LocalPath(path=source.parent.parent / "CHANGELOG.md")


def test_root_relative_path_uses_project_root(source, tmp_path):
    assert classify_target("/api/index.md", source, project_root=tmp_path) == LocalPath(
        path=tmp_path / "api" / "index.md"
    )
    assert classify_target("/api/index.md", source) == LocalPath(path=source.parent / "api" / "index.md")


def test_query_is_dropped_and_percent_escapes_decoded(source):
    kind = classify_target("my%20file.md?raw=1", source)
    assert kind == LocalPath(path=source.parent / "my file.md")


def test_query_only_target_is_the_source_file(source):
    assert classify_target("?plain=1#top", source) == LocalPath(path=source, fragment="top")


def test_surrounding_whitespace_is_ignored(source):
    assert classify_target("  #intro ", source) == LocalAnchor(fragment="intro")
