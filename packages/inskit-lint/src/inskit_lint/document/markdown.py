"""Line-level markdown scanning shared by the parser and the word counter."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .model import CodeBlock

_FENCE_RE = re.compile(r"^(?P<indent>[ \t]*)(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
_LIST_ITEM_RE = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+")
HEADING_RE = re.compile(r"^ {0,3}(?P<marks>#{1,6})(?:[ \t]+(?P<text>.*?))?[ \t]*$")
_CLOSING_HASHES_RE = re.compile(r"(?:^|[ \t]+)#+$")
CHECKLIST_RE = re.compile(r"^\s*(?:[-*+]|\d+[.)])\s+\[(?P<mark>[ xX])\]\s+(?P<text>\S.*)$")


@dataclass(frozen=True)
class MarkdownLine:
    number: int
    text: str
    fenced: bool


def _indent(line: str) -> int:
    expanded = line.expandtabs(4)
    return len(expanded) - len(expanded.lstrip(" "))


def _dedent(line: str, width: int) -> str:
    expanded = line.expandtabs(4)
    return expanded[min(width, _indent(expanded)) :]


def _closes(line: str, fence: str, fence_indent: int) -> bool:
    stripped = line.strip()
    if _indent(line) > fence_indent + 3:
        return False
    return len(stripped) >= len(fence) and set(stripped) == {fence[0]}


def scan(text: str) -> tuple[list[MarkdownLine], list[CodeBlock]]:
    """Split `text` into lines flagged as fenced or not, and collect the fenced code blocks.

    A fence opens at up to three spaces of indentation, or at any indentation
    while inside a list item, and closes at no deeper than three spaces past
    its opening indentation. An unterminated fence runs to the end of the text.
    """
    lines: list[MarkdownLine] = []
    blocks: list[CodeBlock] = []
    fence = ""
    fence_indent = 0
    language = ""
    start = 0
    body: list[str] = []
    in_list = False
    for number, raw in enumerate(text.splitlines(), start=1):
        if fence:
            lines.append(MarkdownLine(number, raw, True))
            if _closes(raw, fence, fence_indent):
                blocks.append(CodeBlock(language=language, code="\n".join(body), line=start, closed=True))
                fence = ""
                body = []
            else:
                body.append(_dedent(raw, fence_indent))
            continue
        indent = _indent(raw)
        match = _FENCE_RE.match(raw)
        if (
            match
            and (indent <= 3 or in_list)
            and not (match.group("fence")[0] == "`" and "`" in match.group("info"))
        ):
            fence = match.group("fence")
            fence_indent = indent
            info = match.group("info").strip()
            language = info.split()[0] if info else ""
            start = number
            if indent == 0:
                in_list = False
            lines.append(MarkdownLine(number, raw, True))
            continue
        if raw.strip():
            if _LIST_ITEM_RE.match(raw):
                in_list = True
            elif indent == 0:
                in_list = False
        lines.append(MarkdownLine(number, raw, False))
    if fence:
        blocks.append(CodeBlock(language=language, code="\n".join(body), line=start, closed=False))
    return lines, blocks


def heading_of(line: str) -> tuple[int, str] | None:
    match = HEADING_RE.match(line)
    if not match:
        return None
    text = match.group("text") or ""
    text = _CLOSING_HASHES_RE.sub("", text).strip()
    return len(match.group("marks")), text
