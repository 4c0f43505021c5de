"""Reference definition collector (UNO: single function)."""

import re

from .DefinitionsTable import DefinitionsTable, normalize_label

DEFINITION_PATTERN = re.compile(
    r"""^[ ]{0,3}\[(?P<label>(?:[^\]\\]|\\.)+)\]:[ \t]*
    (?:<(?P<angle>[^<>\n]*)>|(?P<bare>\S+))
    (?:[ \t]+(?:"[^"\n]*"|'[^'\n]*'|\([^)\n]*\)))?
    [ \t]*$""",
    re.VERBOSE,
)


def collect_definitions(text: str) -> DefinitionsTable:
    """Collect ``[label]: target`` definitions from the whole document.

    The first definition of a label wins. Footnote definitions (``[^1]: ...``)
    are not link definitions and are left alone.

    Args:
        text: Markdown content with code regions already masked

    Returns:
        DefinitionsTable with targets and the 1-based lines that hold definitions
    """
    targets: dict[str, str] = {}
    line_numbers: set[int] = set()
    for line_num, line in enumerate(text.split("\n"), start=1):
        match = DEFINITION_PATTERN.match(line.rstrip("\r"))
        if not match:
            continue
        label = match.group("label")
        if label.startswith("^") or not label.strip():
            continue
        target = match.group("angle") if match.group("angle") is not None else match.group("bare")
        line_numbers.add(line_num)
        targets.setdefault(normalize_label(label), target)
    return DefinitionsTable(targets=targets, line_numbers=frozenset(line_numbers))
