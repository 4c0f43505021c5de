"""Character scanner that turns masked Markdown into link occurrences (private)."""

from __future__ import annotations

import logging
import re
from bisect import bisect_right
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from ._constants import (
    LINK_TYPE_AUTOLINK,
    LINK_TYPE_BARE_URL,
    LINK_TYPE_IMAGE,
    LINK_TYPE_INLINE,
    LINK_TYPE_REFERENCE,
)
from .DefinitionsTable import DefinitionsTable
from .LinkOccurrence import LinkOccurrence

logger = logging.getLogger(__name__)

URI_AUTOLINK_PATTERN = re.compile(r"<([A-Za-z][A-Za-z0-9+.\-]{1,31}:[^\s<>]*)>")
EMAIL_AUTOLINK_PATTERN = re.compile(
    r"<([A-Za-z0-9.!#$%&'*+/=?^_`{|}~\-]+@[A-Za-z0-9](?:[A-Za-z0-9\-]{0,61}[A-Za-z0-9])?"
    r"(?:\.[A-Za-z0-9](?:[A-Za-z0-9\-]{0,61}[A-Za-z0-9])?)*)>"
)
BARE_URL_PATTERN = re.compile(r"https?://[^\s<>]+", re.IGNORECASE)
BLANK_LINE_PATTERN = re.compile(r"\n[ \t\r]*\n")

# Characters after which a bare URL may start
BARE_URL_BOUNDARY = " \t\r\n*_~(\"'"
BARE_URL_TRAILING = "?!.,:*_~'\";"
TITLE_CLOSERS = {'"': '"', "'": "'", "(": ")"}


@dataclass(frozen=True)
class _Link:
    """A bracketed link parsed at some offset."""

    target: str
    link_type: str
    text_start: int
    text_end: int
    end: int


class _LinkScanner:
    """Scan one document. Structure comes from the masked text, strings from the original."""

    def __init__(self, source_file: Path, text: str, masked: str, definitions: DefinitionsTable, bare_urls: bool):
        self.source_file = source_file
        self.text = text
        self.masked = masked
        self.definitions = definitions
        self.bare_urls = bare_urls
        self._line_starts = [0] + [m.end() for m in re.finditer("\n", masked)]

    def scan(self) -> Iterator[LinkOccurrence]:
        return self._scan(0, len(self.masked), in_link_text=False)

    def _position(self, offset: int) -> tuple[int, int]:
        """1-based line and UTF-8 byte column of a character offset."""
        index = bisect_right(self._line_starts, offset) - 1
        line_start = self._line_starts[index]
        return index + 1, len(self.text[line_start:offset].encode("utf-8", "surrogatepass")) + 1

    def _occurrence(self, offset: int, target: str, link_text: str, link_type: str) -> LinkOccurrence:
        line, column = self._position(offset)
        return LinkOccurrence(
            source_file=self.source_file,
            line=line,
            column=column,
            raw_target=target,
            link_text=link_text.strip(),
            link_type=link_type,
        )

    def _issue(self, offset: int, message: str) -> None:
        line, column = self._position(offset)
        logger.debug("Skipping malformed link at %s:%d:%d: %s", self.source_file, line, column, message)

    def _scan(self, start: int, end: int, in_link_text: bool) -> Iterator[LinkOccurrence]:
        s = self.masked
        i = start
        while i < end:
            ch = s[i]
            if ch == "\\":
                i += 2
                continue

            if ch == "[" or (ch == "!" and i + 1 < end and s[i + 1] == "["):
                is_image = ch == "!"
                open_idx = i + 1 if is_image else i
                link = self._parse_link(open_idx, end, is_image)
                if link is None:
                    i = open_idx + 1
                    continue
                if link.target:
                    yield self._occurrence(i, link.target, self.text[link.text_start : link.text_end], link.link_type)
                else:
                    self._issue(i, "empty link destination")
                yield from self._scan(link.text_start, link.text_end, in_link_text=True)
                i = link.end
                continue

            if ch == "<" and not in_link_text:
                match = URI_AUTOLINK_PATTERN.match(s, i, end) or EMAIL_AUTOLINK_PATTERN.match(s, i, end)
                if match:
                    target = self.text[match.start(1) : match.end(1)]
                    yield self._occurrence(i, target, target, LINK_TYPE_AUTOLINK)
                    i = match.end()
                    continue

            if self.bare_urls and not in_link_text and ch in "hH" and (i == 0 or s[i - 1] in BARE_URL_BOUNDARY):
                match = BARE_URL_PATTERN.match(s, i, end)
                if match:
                    url_end = self._trim_bare_url(i, match.end())
                    if url_end > i + len("http://"):
                        target = self.text[i:url_end]
                        yield self._occurrence(i, target, target, LINK_TYPE_BARE_URL)
                        i = url_end
                        continue

            i += 1

    def _trim_bare_url(self, start: int, end: int) -> int:
        """Drop trailing punctuation and unbalanced closing parentheses, like GFM autolinks."""
        s = self.masked
        while end > start:
            last = s[end - 1]
            if last in BARE_URL_TRAILING:
                end -= 1
            elif last == ")" and s.count(")", start, end) > s.count("(", start, end):
                end -= 1
            else:
                break
        return end

    def _find_closing_bracket(self, open_idx: int, end: int) -> int:
        s = self.masked
        depth = 0
        j = open_idx
        while j < end:
            ch = s[j]
            if ch == "\\":
                j += 2
                continue
            if ch == "[":
                depth += 1
            elif ch == "]":
                depth -= 1
                if depth == 0:
                    return j
            elif ch == "\n" and BLANK_LINE_PATTERN.match(s, j):
                return -1
            j += 1
        return -1

    def _parse_link(self, open_idx: int, end: int, is_image: bool) -> _Link | None:
        close = self._find_closing_bracket(open_idx, end)
        if close < 0:
            self._issue(open_idx, "unmatched '['")
            return None

        after = close + 1
        text_start, text_end = open_idx + 1, close

        if after < end and self.masked[after] == "(":
            destination = self._parse_destination(after, end)
            if destination is not None:
                target, dest_end = destination
                link_type = LINK_TYPE_IMAGE if is_image else LINK_TYPE_INLINE
                return _Link(target, link_type, text_start, text_end, dest_end)

        link_type = LINK_TYPE_IMAGE if is_image else LINK_TYPE_REFERENCE

        if after < end and self.masked[after] == "[":
            label_close = self.masked.find("]", after + 1, end)
            if label_close >= 0 and "[" not in self.masked[after + 1 : label_close]:
                label = self.text[after + 1 : label_close]
                if not label.strip():
                    # Collapsed reference: [text][]
                    label = self.text[text_start:text_end]
                target = self.definitions.lookup(label)
                if target is None:
                    self._issue(open_idx, f"undefined reference label '{label.strip()}'")
                    return None
                return _Link(target, link_type, text_start, text_end, label_close + 1)

        # Shortcut reference: [label]
        target = self.definitions.lookup(self.text[text_start:text_end])
        if target is None:
            return None
        return _Link(target, link_type, text_start, text_end, after)

    def _skip_whitespace(self, j: int, end: int) -> int:
        """Skip spaces and tabs with at most one line ending."""
        s = self.masked
        seen_newline = False
        while j < end and s[j] in " \t\r\n":
            if s[j] == "\n":
                if seen_newline:
                    break
                seen_newline = True
            j += 1
        return j

    def _parse_destination(self, paren: int, end: int) -> tuple[str, int] | None:
        """Parse ``(target "title")`` starting at the opening parenthesis.

        Returns:
            (target, offset after the closing parenthesis), or None if this is not a destination
        """
        s = self.masked
        j = self._skip_whitespace(paren + 1, end)
        if j >= end:
            return None

        if s[j] == "<":
            close = j + 1
            while close < end and s[close] not in "<>\n":
                close += 1 if s[close] != "\\" else 2
            if close >= end or s[close] != ">":
                return None
            target = self.text[j + 1 : close]
            j = close + 1
        else:
            start = j
            depth = 0
            while j < end:
                ch = s[j]
                if ch == "\\" and j + 1 < end:
                    j += 2
                    continue
                if ch.isspace():
                    break
                if ch == "(":
                    depth += 1
                elif ch == ")":
                    if depth == 0:
                        break
                    depth -= 1
                j += 1
            if depth != 0:
                return None
            target = self.text[start:j]

        j = self._skip_whitespace(j, end)
        if j < end and s[j] in TITLE_CLOSERS and (j == 0 or s[j - 1].isspace()):
            closer = TITLE_CLOSERS[s[j]]
            k = j + 1
            while k < end and s[k] != closer:
                if s[k] == "\\":
                    k += 1
                elif s[k] == "\n" and BLANK_LINE_PATTERN.match(s, k):
                    return None
                k += 1
            if k >= end:
                return None
            j = self._skip_whitespace(k + 1, end)

        if j < end and s[j] == ")":
            return target, j + 1
        return None
