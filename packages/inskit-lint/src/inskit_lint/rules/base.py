from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from ..config import LintConfig
from ..document.model import InstructionDocument
from ..manifest.model import ManifestEntry
from .model import Finding, Severity

_RULE_ID_PATTERN = re.compile(r"^[A-Z][A-Z0-9_]*$")


@dataclass(frozen=True)
class RuleInput:
    document: InstructionDocument
    entry: ManifestEntry | None
    config: LintConfig


RuleFunc = Callable[[RuleInput], list[Finding]]


@dataclass(frozen=True)
class RuleDef:
    rule_id: str
    description: str
    severity: Severity
    fn: RuleFunc
    fix_hint: str = "Review the rule description and update the document."
    needs_entry: bool = False

    def __post_init__(self) -> None:
        if not _RULE_ID_PATTERN.fullmatch(self.rule_id):
            raise ValueError(f"invalid rule id `{self.rule_id}`: expected UPPER_SNAKE_CASE")
