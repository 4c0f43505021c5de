"""LinkStatus model (UNO: single model)."""

from __future__ import annotations

from dataclasses import dataclass

from ._constants import STATUS_BROKEN, STATUS_SKIPPED, STATUS_VALID


@dataclass(frozen=True)
class LinkStatus:
    """Outcome of a check: valid, broken(reason) or skipped(reason)."""

    state: str
    reason: str = ""

    @classmethod
    def valid(cls) -> LinkStatus:
        return cls(STATUS_VALID)

    @classmethod
    def broken(cls, reason: str) -> LinkStatus:
        return cls(STATUS_BROKEN, reason)

    @classmethod
    def skipped(cls, reason: str) -> LinkStatus:
        return cls(STATUS_SKIPPED, reason)

    @property
    def is_valid(self) -> bool:
        return self.state == STATUS_VALID

    @property
    def is_broken(self) -> bool:
        return self.state == STATUS_BROKEN

    @property
    def is_skipped(self) -> bool:
        return self.state == STATUS_SKIPPED
