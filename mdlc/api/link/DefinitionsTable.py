"""DefinitionsTable model (UNO: single model)."""

from dataclasses import dataclass, field


def normalize_label(label: str) -> str:
    """Reference labels match case-insensitively with internal whitespace collapsed."""
    return " ".join(label.split()).casefold()


@dataclass(frozen=True)
class DefinitionsTable:
    """Reference definitions of one document, built before occurrences are scanned."""

    targets: dict[str, str] = field(default_factory=dict)
    line_numbers: frozenset[int] = frozenset()

    def lookup(self, label: str) -> str | None:
        return self.targets.get(normalize_label(label))

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and normalize_label(label) in self.targets

    def __len__(self) -> int:
        return len(self.targets)
