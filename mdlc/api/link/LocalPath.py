"""LocalPath target kind (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LocalPath:
    """A filesystem path, optionally followed by an anchor inside the target."""

    path: Path
    fragment: str | None = None
