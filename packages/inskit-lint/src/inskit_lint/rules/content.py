from __future__ import annotations

from ..document.model import InstructionDocument, normalize_heading
from .base import RuleDef, RuleInput
from .ids import NO_TOOL_NAMES
from .model import Finding, Severity


def exempt_lines(document: InstructionDocument, headings: tuple[str, ...]) -> set[int]:
    """Line numbers covered by sections whose heading opens an allowed context."""
    allowed = {normalize_heading(h) for h in headings}
    total = len(document.body.splitlines())
    lines: set[int] = set()
    sections = list(document.sections)
    for index, section in enumerate(sections):
        if normalize_heading(section.heading) not in allowed:
            continue
        end = total
        for later in sections[index + 1 :]:
            if later.level <= section.level:
                end = later.line - 1
                break
        lines.update(range(section.line, end + 1))
    return lines


def check_no_tool_names(inp: RuleInput) -> list[Finding]:
    terms: list[str] = []
    for raw in inp.config.tool_denylist:
        term = raw.strip().casefold()
        if term and term not in terms:
            terms.append(term)
    if not terms:
        return []
    skip = exempt_lines(inp.document, inp.config.allowed_context_headings)
    hits: dict[str, list[int]] = {}
    for number, line in enumerate(inp.document.body.splitlines(), start=1):
        if number in skip:
            continue
        folded = line.casefold()
        for term in terms:
            occurrences = folded.count(term)
            if occurrences:
                hits.setdefault(term, []).extend([number] * occurrences)
    return [
        Finding(
            f"mentions AI tool name `{term}` {len(hits[term])} time(s) outside an allowed context",
            line=hits[term][0],
            observed=len(hits[term]),
        )
        for term in terms
        if term in hits
    ]


RULES: tuple[RuleDef, ...] = (
    RuleDef(NO_TOOL_NAMES, "guidance stays tool-agnostic", Severity.WARNING, check_no_tool_names, fix_hint="Describe behaviour generically, or move tool names under an allowed testing-tools heading."),
)
