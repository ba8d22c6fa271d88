"""Structural validation of one instruction document against its manifest entry.

`InstructionValidator.validate` is a pure function of its inputs and the rule
table: it performs no I/O, keeps no state between calls, and never raises.
Every anomaly, including a rule that fails unexpectedly, comes back as a
violation in the report.
"""

from __future__ import annotations

from typing import Sequence

from .config import LintConfig
from .document.model import InstructionDocument
from .manifest.model import ManifestEntry
from .rules import RULES, RuleDef, RuleInput, Severity, ValidationReport, Violation
from .rules.ids import RULE_ERROR


def _word_count(document: object) -> int:
    count = getattr(document, "word_count", 0)
    return count if isinstance(count, int) else 0


class InstructionValidator:
    def __init__(self, config: LintConfig | None = None, rules: Sequence[RuleDef] = RULES) -> None:
        self.config = config or LintConfig()
        self.rules = tuple(rules)

    def _run_rule(self, rule: RuleDef, inp: RuleInput) -> list[Violation]:
        try:
            findings = rule.fn(inp)
        except Exception as exc:  # noqa: BLE001
            return [
                Violation(
                    rule_id=RULE_ERROR,
                    message=f"rule {rule.rule_id} could not evaluate the document: {type(exc).__name__}: {exc}",
                    severity=Severity.ERROR,
                    hint="Check the document for malformed markdown.",
                )
            ]
        return [
            Violation(
                rule_id=rule.rule_id,
                message=finding.message,
                severity=rule.severity,
                line=finding.line,
                observed=finding.observed,
                hint=rule.fix_hint,
            )
            for finding in findings
        ]

    def validate(self, document: InstructionDocument, entry: ManifestEntry | None) -> ValidationReport:
        inp = RuleInput(document=document, entry=entry, config=self.config)
        violations: list[Violation] = []
        for rule in self.rules:
            if rule.needs_entry and entry is None:
                continue
            violations.extend(self._run_rule(rule, inp))
        return ValidationReport(
            document_name=str(getattr(document, "name", "")),
            passed=not any(item.is_error for item in violations),
            violations=tuple(violations),
            source_path=str(getattr(document, "source_path", "")),
            word_count=_word_count(document),
        )


def validate(
    document: InstructionDocument,
    entry: ManifestEntry | None,
    config: LintConfig | None = None,
) -> ValidationReport:
    return InstructionValidator(config).validate(document, entry)
