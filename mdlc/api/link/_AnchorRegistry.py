"""Process-scoped cache of anchor indexes with single-flight builds (private)."""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from .AnchorIndex import AnchorIndex


@dataclass
class _Entry:
    lock: threading.Lock = field(default_factory=threading.Lock)
    index: AnchorIndex | None = None


class _AnchorRegistry:
    """Lazily built, shared, immutable AnchorIndex per resolved file path.

    The first caller for a path builds the index while holding that path's
    guard; concurrent callers for the same path wait on the guard and reuse
    the result. The registry lock only covers creating the per-path entry.
    """

    def __init__(self, builder: Callable[[Path], AnchorIndex] = AnchorIndex.build):
        self._builder = builder
        self._lock = threading.Lock()
        self._entries: dict[Path, _Entry] = {}

    @staticmethod
    def _key(path: Path) -> Path:
        try:
            return path.resolve()
        except (OSError, RuntimeError):
            # RuntimeError: symlink loop
            return path.absolute()

    def get(self, path: Path) -> AnchorIndex:
        key = self._key(path)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                entry = self._entries[key] = _Entry()
        with entry.lock:
            if entry.index is None:
                entry.index = self._builder(key)
            return entry.index

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
