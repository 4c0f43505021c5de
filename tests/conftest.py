"""Shared pytest configuration and fixtures for all tests."""

import json
import threading
import time
from collections.abc import Iterator
from pathlib import Path

import pytest

from mdlc.utils.logger import reset_logging

MARKERS = {
    "unit": "fast tests of a single module",
    "integration": "tests that drive the CLI end to end",
    "link": "link extraction and checking",
    "config": "configuration loading and commands",
}


def pytest_configure(config):
    for name, description in MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def mdlc_home(tmp_path_factory, monkeypatch) -> Iterator[Path]:
    """Point MDLC_HOME at an empty directory so no test sees a real config or log."""
    home = tmp_path_factory.mktemp("mdlc_home")
    monkeypatch.setenv("MDLC_HOME", str(home))
    reset_logging()
    yield home
    reset_logging()


def write_config(home: Path, data: dict) -> Path:
    """Write config.json into an MDLC home directory."""
    config_path = home / "config.json"
    config_path.write_text(json.dumps(data))
    return config_path


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# HTTP fakes
# =============================================================================


class FakeResponse:
    """Minimal requests.Response stand-in."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        self.closed = False

    def close(self) -> None:
        self.closed = True


class FakeSession:
    """Thread-safe stand-in for requests.Session.

    ``routes`` maps a URL, or a ``(method, url)`` pair, to a list of outcomes
    consumed one per request; the last outcome repeats. An outcome is a status
    code or an exception instance to raise. Unrouted URLs answer 200.
    ``delays`` maps a URL to seconds slept before answering.
    """

    def __init__(self, routes: dict | None = None, delays: dict | None = None):
        self.routes = {key: list(value) for key, value in (routes or {}).items()}
        self.delays = delays or {}
        self.headers: dict[str, str] = {}
        self.calls: list[tuple[str, str, dict]] = []
        self.closed = False
        self._lock = threading.Lock()

    def _respond(self, method: str, url: str, **kwargs) -> FakeResponse:
        with self._lock:
            self.calls.append((method, url, kwargs))
            outcomes = self.routes.get((method, url)) or self.routes.get(url) or [200]
            outcome = outcomes.pop(0) if len(outcomes) > 1 else outcomes[0]
        delay = self.delays.get(url, 0)
        if delay:
            time.sleep(delay)
        if isinstance(outcome, BaseException):
            raise outcome
        return FakeResponse(outcome)

    def head(self, url: str, **kwargs) -> FakeResponse:
        return self._respond("HEAD", url, **kwargs)

    def get(self, url: str, **kwargs) -> FakeResponse:
        return self._respond("GET", url, **kwargs)

    def methods(self, url: str) -> list[str]:
        with self._lock:
            return [method for method, called_url, _ in self.calls if called_url == url]

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()
