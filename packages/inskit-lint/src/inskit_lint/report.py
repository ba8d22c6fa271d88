from __future__ import annotations

from typing import Any

from .contracts import CHECK_RUN, validate_self
from .library.runner import LibraryReport
from .rules.model import ValidationReport


def build_report_payload(report: LibraryReport, *, run_id: str = "", strict: bool = False) -> dict[str, Any]:
    passed = report.passed_strict() if strict else report.passed
    payload: dict[str, Any] = {
        "schema_name": CHECK_RUN,
        "schema_version": 1,
        "tool": "inskit-lint",
        "kind": "check-run",
        "run_id": run_id,
        "status": "pass" if passed else "fail",
        "strict": strict,
        "summary": report.summary(),
        "library_violations": [item.as_row() for item in report.library_violations],
        "reports": [item.as_row() for item in report.reports],
    }
    return validate_self(CHECK_RUN, payload)


def render_document_text(report: ValidationReport) -> list[str]:
    status = "PASS" if report.passed else "FAIL"
    lines = [f"{status} {report.source_path or report.document_name} (words={report.word_count})"]
    for item in report.violations:
        where = f":{item.line}" if item.line else ""
        lines.append(f"  {item.severity.value:<7} {item.rule_id}{where} {item.message}")
    return lines


def render_text(report: LibraryReport, *, strict: bool = False) -> str:
    lines: list[str] = []
    for item in report.reports:
        lines.extend(render_document_text(item))
    if report.library_violations:
        lines.append("library:")
        for item in report.library_violations:
            lines.append(f"  {item.severity.value:<7} {item.rule_id} {item.message}")
    summary = report.summary()
    passed = report.passed_strict() if strict else report.passed
    lines.append(
        f"{'pass' if passed else 'fail'}: documents={summary['documents']} passed={summary['passed']} "
        f"failed={summary['failed']} errors={summary['errors']} warnings={summary['warnings']}"
    )
    return "\n".join(lines)
