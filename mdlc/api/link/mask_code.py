"""Blank out Markdown regions that are never hyperlink contexts."""

import re

FENCE_OPEN_PATTERN = re.compile(r"^ {0,3}(`{3,}|~{3,})(.*)$")
HTML_COMMENT_PATTERN = re.compile(r"<!--.*?-->", re.DOTALL)
BLANK_LINE_PATTERN = re.compile(r"\n[ \t\r]*\n")


def _blank(chars: list[str], start: int, end: int) -> None:
    for i in range(start, end):
        if chars[i] != "\n":
            chars[i] = " "


def _fenced_block_spans(text: str) -> list[tuple[int, int]]:
    """Offsets of fenced code blocks, fences included. An unclosed fence runs to end of text."""
    spans: list[tuple[int, int]] = []
    offset = 0
    open_start = -1
    fence_char = ""
    fence_len = 0
    for line in text.splitlines(keepends=True):
        content = line.rstrip("\r\n")
        if open_start < 0:
            match = FENCE_OPEN_PATTERN.match(content)
            # Backtick fences cannot carry backticks in their info string
            if match and not (match.group(1)[0] == "`" and "`" in match.group(2)):
                open_start = offset
                fence_char = match.group(1)[0]
                fence_len = len(match.group(1))
        else:
            stripped = content.strip()
            if (
                len(content) - len(content.lstrip(" ")) <= 3
                and len(stripped) >= fence_len
                and stripped == fence_char * len(stripped)
            ):
                spans.append((open_start, offset + len(line)))
                open_start = -1
        offset += len(line)
    if open_start >= 0:
        spans.append((open_start, len(text)))
    return spans


def _code_span_spans(text: str) -> list[tuple[int, int]]:
    """Offsets of inline code spans (backtick runs closed by a run of equal length)."""
    spans: list[tuple[int, int]] = []
    n = len(text)
    i = 0
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch != "`":
            i += 1
            continue
        run_end = i
        while run_end < n and text[run_end] == "`":
            run_end += 1
        run = run_end - i
        close = _find_closing_run(text, run_end, run)
        if close < 0 or BLANK_LINE_PATTERN.search(text, i, close):
            i = run_end
            continue
        spans.append((i, close + run))
        i = close + run
    return spans


def _find_closing_run(text: str, start: int, run: int) -> int:
    n = len(text)
    j = start
    while True:
        k = text.find("`", j)
        if k < 0:
            return -1
        end = k
        while end < n and text[end] == "`":
            end += 1
        if end - k == run:
            return k
        j = end


def mask_code(text: str, inline: bool = True) -> str:
    """Return text of the same length with code and comments replaced by spaces.

    Newlines are kept, so offsets, line numbers and columns computed on the
    result are valid for the original text.

    Args:
        text: Markdown document
        inline: Also blank inline code spans (headings keep them for slugs)
    """
    chars = list(text)
    fenced = _fenced_block_spans(text)
    for start, end in fenced:
        _blank(chars, start, end)

    for match in HTML_COMMENT_PATTERN.finditer("".join(chars)):
        _blank(chars, match.start(), match.end())

    if inline:
        for start, end in _code_span_spans("".join(chars)):
            _blank(chars, start, end)

    return "".join(chars)
