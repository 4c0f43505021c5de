"""LocalAnchor target kind (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LocalAnchor:
    """A same-document anchor reference."""

    fragment: str
