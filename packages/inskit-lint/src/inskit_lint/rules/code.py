from __future__ import annotations

from .base import RuleDef, RuleInput
from .ids import CODE_EXAMPLE_COUNT, CODE_LANG_TAGGED
from .model import Finding, Severity


def check_code_example_count(inp: RuleInput) -> list[Finding]:
    limits = inp.config.limits
    count = len(inp.document.code_examples)
    if limits.code_examples_min <= count <= limits.code_examples_max:
        return []
    return [
        Finding(
            f"expected {limits.code_examples_min}-{limits.code_examples_max} code examples, found {count}",
            observed=count,
        )
    ]


def check_code_lang_tagged(inp: RuleInput) -> list[Finding]:
    return [
        Finding(f"code block starting on line {block.line} has no language tag", line=block.line)
        for block in inp.document.code_examples
        if not block.language.strip()
    ]


RULES: tuple[RuleDef, ...] = (
    RuleDef(CODE_EXAMPLE_COUNT, "document carries the expected number of code examples", Severity.ERROR, check_code_example_count, fix_hint="Give each guideline one fenced example."),
    RuleDef(CODE_LANG_TAGGED, "every fenced code block declares a language", Severity.ERROR, check_code_lang_tagged, fix_hint="Open fences with a language, e.g. ```python."),
)
