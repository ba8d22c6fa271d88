from __future__ import annotations

import re

from .markdown import HEADING_RE, scan

_LIST_MARKER_RE = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+")
_CHECKBOX_RE = re.compile(r"^\[[ xX]\]\s*")
_QUOTE_RE = re.compile(r"^\s{0,3}(?:>\s?)+")
_TABLE_SEPARATOR_RE = re.compile(r"^\s*\|?\s*:?-{3,}:?\s*(?:\|\s*:?-{3,}:?\s*)*\|?\s*$")
_THEMATIC_BREAK_RE = re.compile(r"^\s{0,3}([-*_=])(?:\s*\1){2,}\s*$")


def prose_line(line: str) -> str:
    """Return `line` with heading, list, checkbox, quote and table syntax removed."""
    if _THEMATIC_BREAK_RE.match(line) or _TABLE_SEPARATOR_RE.match(line):
        return ""
    line = _QUOTE_RE.sub("", line, count=1)
    heading = HEADING_RE.match(line)
    if heading:
        text = heading.group("text") or ""
        line = re.sub(r"(?:^|\s+)#+$", "", text)
    else:
        line = _LIST_MARKER_RE.sub("", line, count=1)
        line = _CHECKBOX_RE.sub("", line, count=1)
    return line.replace("|", " ")


def word_count(text: str) -> int:
    lines, _ = scan(text)
    return sum(len(prose_line(line.text).split()) for line in lines if not line.fenced)
