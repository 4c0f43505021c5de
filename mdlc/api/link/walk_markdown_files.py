"""Markdown file walker (UNO: single function)."""

import fnmatch
import os
from collections.abc import Iterator
from pathlib import Path

from ..config.WalkConfig import WalkConfig


def _is_excluded(rel_path: str, exclude_globs: list[str]) -> bool:
    return any(fnmatch.fnmatch(rel_path, pattern) for pattern in exclude_globs)


def walk_markdown_files(root: Path, config: WalkConfig | None = None) -> Iterator[Path]:
    """Yield Markdown files under root in a stable (sorted) order.

    A file root is yielded as-is when it has a Markdown extension. Directory
    names in ``exclude_dirnames`` are never descended into; ``exclude_globs``
    are matched against POSIX paths relative to the root.

    Args:
        root: File or directory to walk
        config: Walk configuration (defaults if None)

    Yields:
        Paths of Markdown files
    """
    if config is None:
        config = WalkConfig()
    extensions = set(config.extensions)

    if root.is_file():
        if root.suffix.lower() in extensions:
            yield root
        return

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in config.exclude_dirnames)
        base = Path(dirpath)
        for filename in sorted(filenames):
            path = base / filename
            if path.suffix.lower() not in extensions:
                continue
            if _is_excluded(path.relative_to(root).as_posix(), config.exclude_globs):
                continue
            yield path
