from __future__ import annotations

import re

from ..document.model import InstructionDocument, Section
from .base import RuleDef, RuleInput
from .ids import CORE_GUIDELINES, GUIDELINE_COUNT, QUICK_REF_COUNT, QUICK_REFERENCE, REQUIRED_SECTIONS
from .model import Finding, Severity

_REQUIRED = (CORE_GUIDELINES, QUICK_REFERENCE)
NUMBERED_HEADING_RE = re.compile(r"^\d+[.)]\s+\S")


def guideline_sections(document: InstructionDocument) -> list[Section]:
    """Numbered `N. Name` subsections directly under the first Core Guidelines section."""
    found = document.sections_named(CORE_GUIDELINES)
    if not found:
        return []
    return [section for section in document.subsections(found[0]) if NUMBERED_HEADING_RE.match(section.heading)]


def check_guideline_count(inp: RuleInput) -> list[Finding]:
    doc = inp.document
    limits = inp.config.limits
    found = doc.sections_named(CORE_GUIDELINES)
    count = len(guideline_sections(doc))
    if limits.guidelines_min <= count <= limits.guidelines_max:
        return []
    line = found[0].line if found else 0
    return [
        Finding(
            f"expected {limits.guidelines_min}-{limits.guidelines_max} numbered `{CORE_GUIDELINES}` subsections, found {count}",
            line=line,
            observed=count,
        )
    ]


def check_quick_ref_count(inp: RuleInput) -> list[Finding]:
    doc = inp.document
    limits = inp.config.limits
    found = doc.sections_named(QUICK_REFERENCE)
    count = len(doc.checklist_items(found[0])) if found else 0
    if limits.quick_ref_min <= count <= limits.quick_ref_max:
        return []
    line = found[0].line if found else 0
    return [
        Finding(
            f"expected {limits.quick_ref_min}-{limits.quick_ref_max} `{QUICK_REFERENCE}` checklist items, found {count}",
            line=line,
            observed=count,
        )
    ]


def check_required_sections(inp: RuleInput) -> list[Finding]:
    findings: list[Finding] = []
    for heading in _REQUIRED:
        found = inp.document.sections_named(heading)
        if not found:
            findings.append(Finding(f"missing required `{heading}` section", observed=0))
        elif len(found) > 1:
            findings.append(
                Finding(
                    f"`{heading}` heading appears {len(found)} times; expected exactly one",
                    line=found[1].line,
                    observed=len(found),
                )
            )
    return findings


RULES: tuple[RuleDef, ...] = (
    RuleDef(GUIDELINE_COUNT, "Core Guidelines holds the expected number of numbered subsections", Severity.ERROR, check_guideline_count, fix_hint="Use `### N. <Name>` subsections under `## Core Guidelines`."),
    RuleDef(QUICK_REF_COUNT, "Quick Reference holds the expected number of checklist items", Severity.ERROR, check_quick_ref_count, fix_hint="List `- [ ] item` checkboxes under `## Quick Reference`."),
    RuleDef(REQUIRED_SECTIONS, "Core Guidelines and Quick Reference each appear exactly once", Severity.ERROR, check_required_sections, fix_hint="Keep a single `## Core Guidelines` and a single `## Quick Reference` heading."),
)
