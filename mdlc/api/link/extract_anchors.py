"""Anchor extractor (UNO: single function)."""

import re

from .mask_code import mask_code
from .slugify import slugify, unique_slugs

ATX_HEADING_PATTERN = re.compile(r"^ {0,3}(#{1,6})(?=[ \t]|$)(.*)$")
ATX_CLOSING_PATTERN = re.compile(r"(?:^|[ \t]+)#+[ \t]*$")
SETEXT_UNDERLINE_PATTERN = re.compile(r"^ {0,3}(=+|-+)[ \t]*$")
EXPLICIT_ID_PATTERN = re.compile(r"[ \t]*\{#([A-Za-z0-9_:.\-]+)(?:[ \t][^}]*)?\}[ \t]*$")
HTML_ID_PATTERN = re.compile(r"<[A-Za-z][^>]*?\s(?:id|name)\s*=\s*[\"']([^\"']+)[\"']", re.IGNORECASE)
# Lines that cannot be the text of a setext heading
NOT_PARAGRAPH_PATTERN = re.compile(r"^ {0,3}(?:[-*+>|#]|\d+[.)])")


def _front_matter_end(lines: list[str]) -> int:
    """Index of the first line after a leading YAML front matter block, 0 if none."""
    if not lines or lines[0].strip() != "---":
        return 0
    for index in range(1, len(lines)):
        if lines[index].strip() in ("---", "..."):
            return index + 1
    return 0


def _heading_anchor(text: str) -> tuple[str, bool]:
    """Anchor for heading text: (explicit id, True) or (slug, False)."""
    explicit = EXPLICIT_ID_PATTERN.search(text)
    if explicit:
        return explicit.group(1), True
    return slugify(text), False


def extract_anchors(text: str) -> list[str]:
    """Extract anchor identifiers from a Markdown document, in document order.

    Headings (ATX and setext) are slugified and de-duplicated; an explicit
    ``{#id}`` attribute replaces the generated slug. HTML elements carrying
    ``id`` or ``name`` attributes contribute their value as written. Fenced
    code blocks and HTML comments are ignored.

    Args:
        text: Markdown content

    Returns:
        Anchor identifiers (generated slugs already disambiguated)
    """
    lines = mask_code(text, inline=False).split("\n")
    entries: list[tuple[str, bool]] = []
    paragraph: list[str] = []

    for line in lines[_front_matter_end(lines) :]:
        line = line.rstrip("\r")
        entries.extend((value, True) for value in HTML_ID_PATTERN.findall(line))

        atx = ATX_HEADING_PATTERN.match(line)
        if atx:
            content = ATX_CLOSING_PATTERN.sub("", atx.group(2).strip())
            entries.append(_heading_anchor(content.strip()))
            paragraph = []
            continue

        if paragraph and SETEXT_UNDERLINE_PATTERN.match(line):
            entries.append(_heading_anchor(" ".join(part.strip() for part in paragraph)))
            paragraph = []
            continue

        if not line.strip():
            paragraph = []
        elif NOT_PARAGRAPH_PATTERN.match(line) and not paragraph:
            continue
        else:
            paragraph.append(line)

    slugs = iter(unique_slugs(value for value, explicit in entries if not explicit))
    return [value if explicit else next(slugs) for value, explicit in entries]
