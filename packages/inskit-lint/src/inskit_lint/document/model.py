from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodeBlock:
    language: str
    code: str
    line: int
    closed: bool = True


@dataclass(frozen=True)
class Section:
    level: int
    heading: str
    content: str
    line: int
    checklist: tuple[str, ...] = ()


@dataclass(frozen=True)
class InstructionDocument:
    """One parsed instruction file.

    `sections` keeps every heading in document order; nesting is recovered from
    heading levels, so a section's subtree is every following section with a
    deeper level up to the next heading at the same or a shallower level.
    """

    name: str
    source_path: str
    body: str
    title: str | None
    word_count: int
    sections: tuple[Section, ...]
    code_examples: tuple[CodeBlock, ...]

    def sections_named(self, heading: str) -> list[Section]:
        wanted = normalize_heading(heading)
        return [section for section in self.sections if normalize_heading(section.heading) == wanted]

    def descendants(self, parent: Section) -> list[Section]:
        try:
            start = self.sections.index(parent)
        except ValueError:
            return []
        out: list[Section] = []
        for section in self.sections[start + 1 :]:
            if section.level <= parent.level:
                break
            out.append(section)
        return out

    def subsections(self, parent: Section) -> list[Section]:
        return [section for section in self.descendants(parent) if section.level == parent.level + 1]

    def checklist_items(self, parent: Section) -> list[str]:
        items = list(parent.checklist)
        for section in self.descendants(parent):
            items.extend(section.checklist)
        return items


def normalize_heading(text: str) -> str:
    return " ".join(text.strip().rstrip(":").split()).casefold()
