"""LinkOccurrence model (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LinkOccurrence:
    """One link found in one document.

    ``line`` and ``column`` are 1-based; ``column`` counts UTF-8 bytes from the
    start of the line.
    """

    source_file: Path
    line: int
    column: int
    raw_target: str
    link_text: str
    link_type: str

    def location(self) -> str:
        return f"{self.source_file}:{self.line}:{self.column}"
