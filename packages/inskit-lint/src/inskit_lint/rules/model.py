from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Finding:
    message: str
    line: int = 0
    observed: int | None = None


@dataclass(frozen=True)
class Violation:
    rule_id: str
    message: str
    severity: Severity
    line: int = 0
    observed: int | None = None
    hint: str = ""

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def as_row(self) -> dict[str, object]:
        return {
            "rule_id": self.rule_id,
            "message": self.message,
            "severity": self.severity.value,
            "line": self.line,
            "observed": self.observed,
            "hint": self.hint,
        }


@dataclass(frozen=True)
class ValidationReport:
    document_name: str
    passed: bool
    violations: tuple[Violation, ...]
    source_path: str = ""
    word_count: int = 0

    @property
    def errors(self) -> list[Violation]:
        return [item for item in self.violations if item.is_error]

    @property
    def warnings(self) -> list[Violation]:
        return [item for item in self.violations if not item.is_error]

    def rule_ids(self) -> list[str]:
        return [item.rule_id for item in self.violations]

    def violations_for(self, rule_id: str) -> list[Violation]:
        return [item for item in self.violations if item.rule_id == rule_id]

    def as_row(self) -> dict[str, object]:
        return {
            "document": self.document_name,
            "source_path": self.source_path,
            "passed": self.passed,
            "word_count": self.word_count,
            "violations": [item.as_row() for item in self.violations],
        }
