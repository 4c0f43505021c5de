"""Markdown link extractor (UNO: single function)."""

from collections.abc import Iterator
from pathlib import Path

from ._LinkScanner import _LinkScanner
from .collect_definitions import collect_definitions
from .LinkOccurrence import LinkOccurrence
from .mask_code import mask_code


def _mask_lines(text: str, line_numbers: frozenset[int]) -> str:
    if not line_numbers:
        return text
    lines = text.split("\n")
    for line_num in line_numbers:
        lines[line_num - 1] = " " * len(lines[line_num - 1])
    return "\n".join(lines)


def extract_links(text: str, source_file: Path, bare_urls: bool = True) -> Iterator[LinkOccurrence]:
    """Extract every link occurrence from a Markdown document, in document order.

    Recognizes inline links, images, reference links (full, collapsed and
    shortcut, resolved against definitions anywhere in the document),
    autolinks and, unless disabled, bare http(s) URLs. Fenced code blocks,
    inline code spans and HTML comments are never scanned. Malformed spans
    are skipped and scanning continues.

    Args:
        text: Markdown content to parse
        source_file: Path of the document, recorded on each occurrence
        bare_urls: Treat bare http(s) URLs in running text as links

    Yields:
        LinkOccurrence objects with 1-based line and column
    """
    masked = mask_code(text)
    definitions = collect_definitions(masked)
    masked = _mask_lines(masked, definitions.line_numbers)
    yield from _LinkScanner(source_file, text, masked, definitions, bare_urls).scan()
