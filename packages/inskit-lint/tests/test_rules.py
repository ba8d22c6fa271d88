from __future__ import annotations

import pytest
from helpers import make_document, make_entry

from inskit_lint.config import LintConfig
from inskit_lint.rules import RULES, RuleDef, Severity, rule_by_id
from inskit_lint.rules import ids
from inskit_lint.rules.base import RuleInput
from inskit_lint.rules.content import check_no_tool_names, exempt_lines
from inskit_lint.validator import InstructionValidator


def test_rule_table_order_and_severities() -> None:
    assert [rule.rule_id for rule in RULES] == [
        ids.LENGTH_MIN,
        ids.LENGTH_TARGET,
        ids.LENGTH_MAX,
        ids.GUIDELINE_COUNT,
        ids.CODE_EXAMPLE_COUNT,
        ids.CODE_LANG_TAGGED,
        ids.QUICK_REF_COUNT,
        ids.REQUIRED_SECTIONS,
        ids.MANIFEST_PRESENT,
        ids.MANIFEST_PATH_VALID,
        ids.TAG_COUNT,
        ids.TAG_FORMAT,
        ids.FILENAME_MATCH,
        ids.NO_TOOL_NAMES,
    ]
    warnings = {rule.rule_id for rule in RULES if rule.severity is Severity.WARNING}
    assert warnings == {ids.LENGTH_TARGET, ids.NO_TOOL_NAMES}


def test_rule_def_rejects_non_canonical_ids() -> None:
    with pytest.raises(ValueError):
        RuleDef("lowercase-id", "bad", Severity.ERROR, lambda inp: [])


def test_rule_by_id() -> None:
    rule = rule_by_id(ids.TAG_COUNT)
    assert rule is not None and rule.needs_entry
    assert rule_by_id("NOPE") is None


def test_tool_names_are_flagged_case_insensitively() -> None:
    doc = make_document(extra="\nAsk Copilot or COPILOT and then claude.\n")
    report = InstructionValidator().validate(doc, make_entry())
    hits = report.violations_for(ids.NO_TOOL_NAMES)
    assert [v.severity for v in hits] == [Severity.WARNING, Severity.WARNING]
    by_term = {v.message.split("`")[1]: v.observed for v in hits}
    assert by_term == {"claude": 1, "copilot": 2}
    assert report.passed is True


def test_tool_names_under_testing_tools_heading_are_allowed() -> None:
    extra = "\n## Testing Tools\n\nVerified with Copilot and Claude.\n"
    doc = make_document(extra=extra)
    assert InstructionValidator().validate(doc, make_entry()).violations_for(ids.NO_TOOL_NAMES) == []


def test_allowed_context_ends_at_next_sibling_heading() -> None:
    extra = "\n## Testing Tools\n\nCopilot here is fine.\n\n## Notes\n\nCopilot here is not.\n"
    doc = make_document(extra=extra)
    inp = RuleInput(document=doc, entry=make_entry(), config=LintConfig())
    findings = check_no_tool_names(inp)
    assert len(findings) == 1
    assert findings[0].observed == 1
    assert "Notes" in doc.body.splitlines()[findings[0].line - 3]


def test_denylist_and_context_headings_are_injected() -> None:
    doc = make_document(extra="\n## Tried With\n\nAcmeBot output.\n\nAcmeBot again.\n")
    custom = LintConfig(tool_denylist=("acmebot",), allowed_context_headings=())
    hits = InstructionValidator(custom).validate(doc, make_entry()).violations_for(ids.NO_TOOL_NAMES)
    assert len(hits) == 1 and hits[0].observed == 2
    allowed = LintConfig(tool_denylist=("acmebot",), allowed_context_headings=("Tried With",))
    assert InstructionValidator(allowed).validate(doc, make_entry()).violations_for(ids.NO_TOOL_NAMES) == []


def test_empty_denylist_disables_tool_name_rule() -> None:
    doc = make_document(extra="\nclaude\n")
    config = LintConfig(tool_denylist=())
    assert InstructionValidator(config).validate(doc, make_entry()).violations == ()


def test_exempt_lines_cover_nested_subsections() -> None:
    doc = make_document(extra="\n## Testing Tools\n\n### Local\n\nx\n")
    covered = exempt_lines(doc, ("testing tools",))
    lines = doc.body.splitlines()
    heading_line = lines.index("## Testing Tools") + 1
    assert heading_line in covered
    assert len(lines) in covered


@pytest.mark.parametrize("rule", [rule for rule in RULES if rule.needs_entry], ids=lambda rule: rule.rule_id)
def test_entry_rules_called_without_entry_report_nothing(rule: RuleDef) -> None:
    inp = RuleInput(document=make_document(), entry=None, config=LintConfig())
    assert rule.fn(inp) == []
