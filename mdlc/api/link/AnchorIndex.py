"""AnchorIndex model and builder."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote

from .extract_anchors import extract_anchors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnchorIndex:
    """Anchors of one Markdown file. Immutable once built.

    An index whose build failed carries ``error`` and reports every fragment as
    absent (fail-closed).
    """

    path: Path
    anchors: frozenset[str]
    error: str | None = None

    def has(self, fragment: str) -> bool:
        if self.error is not None:
            return False
        fragment = unquote(fragment)
        return fragment in self.anchors or fragment.lower() in self.anchors

    @classmethod
    def build(cls, path: Path) -> AnchorIndex:
        """Read and index a Markdown file, never raising."""
        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot build anchor index for %s: %s", path, exc)
            return cls(path=path, anchors=frozenset(), error=f"cannot read {path}: {exc}")
        anchors = frozenset(extract_anchors(text))
        logger.debug("Built anchor index for %s (%d anchors)", path, len(anchors))
        return cls(path=path, anchors=anchors)
