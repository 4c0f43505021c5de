"""Existence checks for each kind of link target (private)."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from ..config.CheckConfig import CheckConfig
from ._AnchorRegistry import _AnchorRegistry
from ._constants import (
    REASON_ANCHOR_NOT_FOUND,
    REASON_PATH_NOT_FOUND,
    REASON_REMOTE_DISABLED,
    REASON_SCHEME_NOT_CHECKED,
)
from ._RemoteChecker import _RemoteChecker
from .AnchorIndex import AnchorIndex
from .Ignored import Ignored
from .LinkStatus import LinkStatus
from .LocalAnchor import LocalAnchor
from .LocalPath import LocalPath
from .RemoteUrl import RemoteUrl
from .TargetKind import TargetKind


class _Resolver:
    """Resolves a classified target to a LinkStatus."""

    def __init__(
        self,
        config: CheckConfig,
        anchors: _AnchorRegistry | None = None,
        remote: _RemoteChecker | None = None,
        markdown_extensions: Iterable[str] = (".md", ".markdown"),
    ):
        """Initialize resolver.

        Args:
            config: Check configuration
            anchors: Shared anchor index registry (a private one if None)
            remote: HTTP checker (built from config if None)
            markdown_extensions: Suffixes whose fragments are checked against an anchor index
        """
        self.config = config
        self.anchors = anchors if anchors is not None else _AnchorRegistry()
        self.remote = remote if remote is not None else _RemoteChecker(config)
        self.markdown_extensions = frozenset(ext.lower() for ext in markdown_extensions)
        self.resolvers: list[tuple[type, Callable[[Any, Path], LinkStatus]]] = [
            (LocalPath, self._resolve_local_path),
            (LocalAnchor, self._resolve_local_anchor),
            (RemoteUrl, self._resolve_remote_url),
            (Ignored, self._resolve_ignored),
        ]

    def resolve(self, kind: TargetKind, source_file: Path) -> LinkStatus:
        """Check one target.

        Args:
            kind: Classified target
            source_file: Document containing the link

        Returns:
            LinkStatus for the target
        """
        for kind_type, resolver in self.resolvers:
            if isinstance(kind, kind_type):
                return resolver(kind, source_file)
        return LinkStatus.skipped(f"unknown target kind {type(kind).__name__}")

    @staticmethod
    def _missing_anchor(index: AnchorIndex) -> LinkStatus:
        if index.error is not None:
            return LinkStatus.broken(f"{REASON_ANCHOR_NOT_FOUND} ({index.error})")
        return LinkStatus.broken(REASON_ANCHOR_NOT_FOUND)

    def _is_markdown(self, path: Path) -> bool:
        return path.suffix.lower() in self.markdown_extensions

    # Resolvers
    def _resolve_local_path(self, kind: LocalPath, source_file: Path) -> LinkStatus:  # noqa: ARG002
        if not kind.path.exists():
            return LinkStatus.broken(REASON_PATH_NOT_FOUND)
        if not kind.fragment or not kind.path.is_file() or not self._is_markdown(kind.path):
            return LinkStatus.valid()
        index = self.anchors.get(kind.path)
        return LinkStatus.valid() if index.has(kind.fragment) else self._missing_anchor(index)

    def _resolve_local_anchor(self, kind: LocalAnchor, source_file: Path) -> LinkStatus:
        if not kind.fragment:
            # "#" is the top of the document
            return LinkStatus.valid()
        index = self.anchors.get(source_file)
        return LinkStatus.valid() if index.has(kind.fragment) else self._missing_anchor(index)

    def _resolve_remote_url(self, kind: RemoteUrl, source_file: Path) -> LinkStatus:  # noqa: ARG002
        if not self.config.check_remote:
            return LinkStatus.skipped(REASON_REMOTE_DISABLED)
        return self.remote.check(kind.url)

    def _resolve_ignored(self, kind: Ignored, source_file: Path) -> LinkStatus:  # noqa: ARG002
        # kind.reason is only shown by the links listing
        return LinkStatus.skipped(REASON_SCHEME_NOT_CHECKED)
