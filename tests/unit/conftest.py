"""Unit test fixtures.

Most helpers are in tests/conftest.py.
"""

from pathlib import Path

import pytest

from mdlc.api.config.CheckConfig import CheckConfig
from tests.conftest import FakeSession, run_cmd, write_config

__all__ = ["FakeSession", "fast_check_config", "markdown_tree", "run_cmd", "write_config"]


def fast_check_config(**overrides) -> CheckConfig:
    """CheckConfig without retry backoff, for tests that must not sleep."""
    values = {"workers": 4, "per_host_limit": 2, "timeout_secs": 5.0, "retries": 0, "backoff_secs": 0.0}
    values.update(overrides)
    return CheckConfig(**values)


@pytest.fixture
def markdown_tree(tmp_path: Path) -> Path:
    """A small documentation tree with one broken path and one broken anchor.

    docs/
      README.md       links to guide, guide#install, guide#missing, missing.md, #overview
      guide.md        headings: Guide, Install, Install
      img/logo.png
    """
    docs = tmp_path / "docs"
    (docs / "img").mkdir(parents=True)
    (docs / "img" / "logo.png").write_bytes(b"\x89PNG")
    (docs / "guide.md").write_text("# Guide\n\n## Install\n\nSteps.\n\n## Install\n")
    (docs / "README.md").write_text(
        "# Overview\n"
        "\n"
        "Read the [guide](guide.md) and [install](guide.md#install).\n"
        "Also [gone](guide.md#missing), [nothing](missing.md) and [top](#overview).\n"
        "\n"
        "![logo](img/logo.png)\n"
    )
    return docs
