"""Heading text to anchor identifier, following the GitHub rendering convention."""

import re
from collections.abc import Iterable

IMAGE_PATTERN = re.compile(r"!\[([^\]]*)\]\([^)]*\)")
LINK_PATTERN = re.compile(r"\[([^\]]*)\](?:\([^)]*\)|\[[^\]]*\])")
HTML_TAG_PATTERN = re.compile(r"<[^>]+>")
PUNCTUATION_PATTERN = re.compile(r"[^\w\s-]")
WHITESPACE_PATTERN = re.compile(r"\s+")


def slugify(heading: str) -> str:
    """Slugify heading text.

    Links and images contribute their text, tags and punctuation other than
    hyphens and underscores are dropped, the result is lower-cased and each
    whitespace run becomes one hyphen.

    >>> slugify("My Section!")
    'my-section'
    """
    text = IMAGE_PATTERN.sub(r"\1", heading)
    text = LINK_PATTERN.sub(r"\1", text)
    text = HTML_TAG_PATTERN.sub("", text)
    text = PUNCTUATION_PATTERN.sub("", text.lower())
    return WHITESPACE_PATTERN.sub("-", text.strip())


def unique_slugs(slugs: Iterable[str]) -> list[str]:
    """Disambiguate repeated slugs in order of appearance: x, x-1, x-2, ..."""
    seen: set[str] = set()
    counts: dict[str, int] = {}
    result: list[str] = []
    for slug in slugs:
        candidate = slug
        if candidate in seen:
            n = counts.get(slug, 0)
            while candidate in seen:
                n += 1
                candidate = f"{slug}-{n}"
            counts[slug] = n
        seen.add(candidate)
        result.append(candidate)
    return result
