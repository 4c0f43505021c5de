"""Ignored target kind (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Ignored:
    """A target deliberately left unchecked."""

    reason: str
