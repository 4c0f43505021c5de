"""ValidationResult model (UNO: single model)."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .LinkOccurrence import LinkOccurrence
from .LinkStatus import LinkStatus
from .TargetKind import TargetKind, kind_to_dict


@dataclass(frozen=True)
class ValidationResult:
    """Outcome for one LinkOccurrence."""

    occurrence: LinkOccurrence
    status: LinkStatus
    kind: TargetKind

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for command output."""
        return {
            "source_file": str(self.occurrence.source_file),
            "line": self.occurrence.line,
            "column": self.occurrence.column,
            "raw_target": self.occurrence.raw_target,
            "link_text": self.occurrence.link_text,
            "link_type": self.occurrence.link_type,
            "status": self.status.state,
            "reason": self.status.reason,
            "target": kind_to_dict(self.kind),
        }


def all_valid(results: Iterable[ValidationResult]) -> bool:
    """True when no result is broken (skipped results do not count against a run)."""
    return not any(result.status.is_broken for result in results)
