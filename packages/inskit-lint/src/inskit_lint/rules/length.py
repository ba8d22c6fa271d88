from __future__ import annotations

from .base import RuleDef, RuleInput
from .ids import LENGTH_MAX, LENGTH_MIN, LENGTH_TARGET
from .model import Finding, Severity


def check_length_min(inp: RuleInput) -> list[Finding]:
    count = inp.document.word_count
    floor = inp.config.limits.word_min
    if count >= floor:
        return []
    return [Finding(f"word count {count} is below the minimum of {floor}", observed=count)]


def check_length_target(inp: RuleInput) -> list[Finding]:
    count = inp.document.word_count
    low = inp.config.limits.word_target_min
    high = inp.config.limits.word_target_max
    if low <= count <= high:
        return []
    return [Finding(f"word count {count} is outside the target range {low}-{high}", observed=count)]


def check_length_max(inp: RuleInput) -> list[Finding]:
    count = inp.document.word_count
    ceiling = inp.config.limits.word_max
    if count <= ceiling:
        return []
    return [Finding(f"word count {count} exceeds the maximum of {ceiling}", observed=count)]


RULES: tuple[RuleDef, ...] = (
    RuleDef(LENGTH_MIN, "prose word count meets the minimum", Severity.ERROR, check_length_min, fix_hint="Expand the guideline prose; code blocks do not count."),
    RuleDef(LENGTH_TARGET, "prose word count sits in the target range", Severity.WARNING, check_length_target, fix_hint="Aim for the target range; it is advisory."),
    RuleDef(LENGTH_MAX, "prose word count stays under the maximum", Severity.ERROR, check_length_max, fix_hint="Trim prose or split the instruction in two."),
)
