from __future__ import annotations

from pathlib import PurePosixPath

from .markdown import CHECKLIST_RE, MarkdownLine, heading_of, scan
from .model import InstructionDocument, Section
from .word_count import word_count


def normalize_source_path(path: str) -> str:
    raw = str(path).replace("\\", "/").strip()
    parts: list[str] = []
    for part in raw.split("/"):
        if part in ("", "."):
            continue
        if part == ".." and parts and parts[-1] != "..":
            parts.pop()
            continue
        parts.append(part)
    return "/".join(parts)


def _as_text(text: object) -> str:
    if text is None:
        return ""
    if isinstance(text, bytes):
        return text.decode("utf-8", errors="replace")
    return str(text)


def _build_sections(lines: list[MarkdownLine]) -> list[Section]:
    heads: list[tuple[int, int, str]] = []
    for index, line in enumerate(lines):
        if line.fenced:
            continue
        parsed = heading_of(line.text)
        if parsed is not None:
            heads.append((index, parsed[0], parsed[1]))
    sections: list[Section] = []
    for pos, (index, level, heading) in enumerate(heads):
        end = heads[pos + 1][0] if pos + 1 < len(heads) else len(lines)
        own = lines[index + 1 : end]
        checklist = tuple(
            match.group("text").strip()
            for match in (CHECKLIST_RE.match(line.text) for line in own if not line.fenced)
            if match
        )
        sections.append(
            Section(
                level=level,
                heading=heading,
                content="\n".join(line.text for line in own).strip("\n"),
                line=lines[index].number,
                checklist=checklist,
            )
        )
    return sections


def parse_document(text: object, source_path: str) -> InstructionDocument:
    """Parse markdown into an `InstructionDocument`.

    Never raises: anything that is not a string is coerced, and missing
    structure simply yields no title, sections or code examples.
    """
    body = _as_text(text)
    rel = normalize_source_path(source_path)
    lines, blocks = scan(body)
    sections = _build_sections(lines)
    title = next((section.heading for section in sections if section.level == 1), None)
    return InstructionDocument(
        name=PurePosixPath(rel).stem,
        source_path=rel,
        body=body,
        title=title,
        word_count=word_count(body),
        sections=tuple(sections),
        code_examples=tuple(blocks),
    )
