"""Rule table for instruction documents.

Order here is the order violations are reported in.
"""

from __future__ import annotations

from . import code, content, length, naming, structure
from .base import RuleDef, RuleFunc, RuleInput
from .model import Finding, Severity, ValidationReport, Violation

RULES: tuple[RuleDef, ...] = (
    *length.RULES,
    structure.RULES[0],
    *code.RULES,
    structure.RULES[1],
    structure.RULES[2],
    *naming.RULES,
    *content.RULES,
)


def rule_by_id(rule_id: str) -> RuleDef | None:
    return next((rule for rule in RULES if rule.rule_id == rule_id), None)


__all__ = [
    "Finding",
    "RULES",
    "RuleDef",
    "RuleFunc",
    "RuleInput",
    "Severity",
    "ValidationReport",
    "Violation",
    "rule_by_id",
]
