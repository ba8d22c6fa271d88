from __future__ import annotations

from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from ..config import LintConfig
from ..core.context import RunContext
from ..core.logging import log_event
from ..manifest.model import Manifest
from ..rules.ids import MANIFEST_DUPLICATE_NAME, MANIFEST_DUPLICATE_PATH, MANIFEST_ORPHAN_ENTRY
from ..rules.model import Severity, ValidationReport, Violation
from ..validator import InstructionValidator
from .discovery import PairedDocument, discover_documents, load_document, pair_documents


@dataclass(frozen=True)
class LibraryReport:
    reports: tuple[ValidationReport, ...]
    library_violations: tuple[Violation, ...]
    paired: tuple[PairedDocument, ...] = ()

    @property
    def passed(self) -> bool:
        return all(report.passed for report in self.reports) and not any(v.is_error for v in self.library_violations)

    def passed_strict(self) -> bool:
        return self.passed and self.warning_count == 0

    @property
    def error_count(self) -> int:
        return sum(len(r.errors) for r in self.reports) + sum(1 for v in self.library_violations if v.is_error)

    @property
    def warning_count(self) -> int:
        return sum(len(r.warnings) for r in self.reports) + sum(1 for v in self.library_violations if not v.is_error)

    def summary(self) -> dict[str, int]:
        passed = sum(1 for report in self.reports if report.passed)
        return {
            "documents": len(self.reports),
            "passed": passed,
            "failed": len(self.reports) - passed,
            "errors": self.error_count,
            "warnings": self.warning_count,
        }


def check_manifest_pairing(root: Path, manifest: Manifest) -> list[Violation]:
    """Library-wide pairing rules that belong to no single document."""
    violations: list[Violation] = []
    for name, count in sorted(Counter(manifest.names()).items()):
        if count > 1:
            violations.append(
                Violation(
                    MANIFEST_DUPLICATE_NAME,
                    f"manifest lists `{name}` {count} times",
                    Severity.ERROR,
                    observed=count,
                    hint="Keep exactly one manifest entry per instruction.",
                )
            )
    for path, count in sorted(Counter(entry.normalized_path for entry in manifest.entries).items()):
        if count > 1:
            violations.append(
                Violation(
                    MANIFEST_DUPLICATE_PATH,
                    f"manifest points {count} entries at `{path}`",
                    Severity.ERROR,
                    observed=count,
                    hint="Each instruction file backs exactly one manifest entry.",
                )
            )
    for entry in manifest.entries:
        if not (root / entry.normalized_path).is_file():
            violations.append(
                Violation(
                    MANIFEST_ORPHAN_ENTRY,
                    f"manifest entry `{entry.name}` points at missing file `{entry.file_path}`",
                    Severity.ERROR,
                    hint="Fix filePath or remove the stale entry.",
                )
            )
    return violations


def validate_paired(pairs: list[PairedDocument], config: LintConfig, jobs: int = 1) -> list[ValidationReport]:
    validator = InstructionValidator(config)

    def _one(pair: PairedDocument) -> ValidationReport:
        return validator.validate(pair.document, pair.entry)

    if jobs > 1:
        with ThreadPoolExecutor(max_workers=jobs) as ex:
            return list(ex.map(_one, pairs))
    return [_one(pair) for pair in pairs]


def run_library(
    ctx: RunContext,
    manifest: Manifest,
    config: LintConfig,
    *,
    jobs: int = 1,
    names: list[str] | None = None,
) -> LibraryReport:
    root = ctx.library_root
    paths = discover_documents(root, config.instructions_dir)
    log_event(ctx, "info", "library", "discover", root=root.as_posix(), documents=len(paths))
    documents = [load_document(root, path) for path in paths]
    if names:
        wanted = set(names)
        documents = [doc for doc in documents if doc.name in wanted]
        missing = sorted(wanted - {doc.name for doc in documents})
        if missing:
            log_event(ctx, "warn", "library", "select", missing=",".join(missing))
    documents.sort(key=lambda doc: (doc.name, doc.source_path))
    pairs = pair_documents(documents, manifest)
    reports = validate_paired(pairs, config, jobs=jobs)
    for report in reports:
        log_event(
            ctx,
            "debug",
            "validator",
            "document",
            document=report.document_name,
            passed=report.passed,
            errors=len(report.errors),
            warnings=len(report.warnings),
        )
    library_violations = check_manifest_pairing(root, manifest) if not names else []
    result = LibraryReport(reports=tuple(reports), library_violations=tuple(library_violations), paired=tuple(pairs))
    log_event(ctx, "info", "library", "checked", status="pass" if result.passed else "fail", **result.summary())
    return result
