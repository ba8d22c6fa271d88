from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from helpers import instruction_text

from inskit_lint.config import LintConfig
from inskit_lint.core.context import RunContext
from inskit_lint.document import parse_document
from inskit_lint.errors import LintError
from inskit_lint.exit_codes import ERR_USAGE
from inskit_lint.library import (
    build_index,
    check_manifest_pairing,
    discover_documents,
    run_library,
    scaffold_instruction,
    search_index,
)
from inskit_lint.manifest import load_manifest, manifest_from_payload
from inskit_lint.rules import ids
from inskit_lint.validator import validate


def _ctx(root: Path) -> RunContext:
    return RunContext(run_id="test-run", library_root=root, output_format="text", verbose=False, quiet=True, log_json=False)


def _run(root: Path, **kwargs: object):
    return run_library(_ctx(root), load_manifest(root / "manifest.yaml"), LintConfig(), **kwargs)  # type: ignore[arg-type]


def test_discovery_is_sorted_and_skips_readme_and_drafts(library_root: Path) -> None:
    base = library_root / "instructions"
    (base / "README.md").write_text("# Readme\n", encoding="utf-8")
    (base / "_draft.md").write_text("# Draft\n", encoding="utf-8")
    (base / "nested").mkdir()
    (base / "nested" / "deep-topic.md").write_text("# Deep\n", encoding="utf-8")
    (base / "notes.txt").write_text("ignored", encoding="utf-8")
    found = [p.relative_to(library_root).as_posix() for p in discover_documents(library_root, "instructions")]
    assert found == [
        "instructions/error-handling.md",
        "instructions/naming-things.md",
        "instructions/nested/deep-topic.md",
    ]


def test_missing_instructions_dir_discovers_nothing(tmp_path: Path) -> None:
    assert discover_documents(tmp_path, "instructions") == []


def test_clean_library_passes(library_root: Path) -> None:
    report = _run(library_root)
    assert report.passed is True
    assert report.passed_strict() is True
    assert [r.document_name for r in report.reports] == ["error-handling", "naming-things"]
    assert report.library_violations == ()
    assert report.summary() == {"documents": 2, "passed": 2, "failed": 0, "errors": 0, "warnings": 0}


def test_unlisted_document_fails_manifest_present_only(library_root: Path) -> None:
    (library_root / "instructions" / "unlisted.md").write_text(instruction_text(title="Unlisted"), encoding="utf-8")
    report = _run(library_root)
    unlisted = next(r for r in report.reports if r.document_name == "unlisted")
    assert unlisted.rule_ids() == [ids.MANIFEST_PRESENT]
    assert report.passed is False
    assert report.summary()["failed"] == 1


def test_orphan_and_duplicate_entries_are_library_violations(tmp_path: Path) -> None:
    (tmp_path / "instructions").mkdir()
    (tmp_path / "instructions" / "a.md").write_text("# A\n", encoding="utf-8")
    rows = [
        {"name": "a", "description": "A", "filePath": "instructions/a.md", "tags": ["x", "y"]},
        {"name": "a", "description": "A again", "filePath": "./instructions/a.md", "tags": ["x", "y"]},
        {"name": "ghost", "description": "Gone", "filePath": "instructions/ghost.md", "tags": ["x", "y"]},
    ]
    violations = check_manifest_pairing(tmp_path, manifest_from_payload(rows))
    assert [v.rule_id for v in violations] == [
        ids.MANIFEST_DUPLICATE_NAME,
        ids.MANIFEST_DUPLICATE_PATH,
        ids.MANIFEST_ORPHAN_ENTRY,
    ]
    assert violations[0].observed == 2
    assert "ghost" in violations[2].message


def test_name_selection_skips_library_rules(library_root: Path) -> None:
    manifest_path = library_root / "manifest.yaml"
    data = yaml.safe_load(manifest_path.read_text(encoding="utf-8"))
    data["instructions"].append({"name": "ghost", "description": "Gone", "filePath": "instructions/ghost.md", "tags": ["x", "y"]})
    manifest_path.write_text(yaml.safe_dump(data), encoding="utf-8")
    assert _run(library_root).passed is False
    selected = _run(library_root, names=["naming-things"])
    assert [r.document_name for r in selected.reports] == ["naming-things"]
    assert selected.library_violations == ()
    assert selected.passed is True


def test_parallel_validation_preserves_order(library_root: Path) -> None:
    for name in ("zeta-topic", "alpha-topic", "mid-topic"):
        (library_root / "instructions" / f"{name}.md").write_text(instruction_text(words=200), encoding="utf-8")
    serial = _run(library_root)
    parallel = _run(library_root, jobs=4)
    assert [r.as_row() for r in parallel.reports] == [r.as_row() for r in serial.reports]
    assert [r.document_name for r in serial.reports][:2] == ["alpha-topic", "error-handling"]


def test_index_rows_and_search(library_root: Path) -> None:
    payload = build_index(_run(library_root))
    rows = payload["instructions"]
    assert payload["schema_name"] == "inskit.index.v1"
    assert [row["name"] for row in rows] == ["error-handling", "naming-things"]
    first = rows[0]
    assert first["title"] == "Error Handling"
    assert first["tags"] == ["errors", "python"]
    assert first["file_path"] == "instructions/error-handling.md"
    assert first["guidelines"] == [f"{i}. Guideline {i}" for i in range(1, 6)]
    assert first["valid"] is True
    assert [r["name"] for r in search_index(rows, "naming")] == ["naming-things"]
    assert [r["name"] for r in search_index(rows, "GUIDANCE ON")] == ["error-handling", "naming-things"]
    assert [r["name"] for r in search_index(rows, tags=["Python"])] == ["error-handling"]
    assert search_index(rows, "naming", ["python"]) == []


def test_index_excludes_unlisted_documents(library_root: Path) -> None:
    (library_root / "instructions" / "unlisted.md").write_text(instruction_text(), encoding="utf-8")
    names = [row["name"] for row in build_index(_run(library_root))["instructions"]]
    assert names == ["error-handling", "naming-things"]


def test_scaffold_writes_template_and_suggests_entry(tmp_path: Path) -> None:
    path, entry = scaffold_instruction(tmp_path, "api-design", "API Design", "instructions")
    assert path == tmp_path / "instructions" / "api-design.md"
    doc = parse_document(path.read_text(encoding="utf-8"), "instructions/api-design.md")
    assert doc.title == "API Design"
    assert len(doc.code_examples) == 3
    assert all(block.language == "text" for block in doc.code_examples)
    assert entry.as_row() == {
        "name": "api-design",
        "description": "API Design",
        "filePath": "instructions/api-design.md",
        "tags": ["todo-topic", "todo-area"],
    }
    suggested = validate(doc, entry)
    assert [v.rule_id for v in suggested.violations if v.rule_id in (ids.TAG_COUNT, ids.TAG_FORMAT, ids.FILENAME_MATCH)] == []


def test_scaffold_refuses_overwrite(tmp_path: Path) -> None:
    scaffold_instruction(tmp_path, "api-design", "API Design", "instructions")
    with pytest.raises(LintError) as err:
        scaffold_instruction(tmp_path, "api-design", "Again", "instructions")
    assert err.value.code == ERR_USAGE
    assert err.value.kind == "file_exists"


@pytest.mark.parametrize(("name", "title"), [("API_Design", "t"), ("api design", "t"), ("-api", "t"), ("api", "  ")])
def test_scaffold_rejects_bad_input(tmp_path: Path, name: str, title: str) -> None:
    with pytest.raises(LintError) as err:
        scaffold_instruction(tmp_path, name, title, "instructions")
    assert err.value.code == ERR_USAGE
    assert not (tmp_path / "instructions").exists()


def test_root_relative_file_path_is_both_orphaned_and_invalid(library_root: Path) -> None:
    manifest_path = library_root / "manifest.yaml"
    data = yaml.safe_load(manifest_path.read_text(encoding="utf-8"))
    data["instructions"][0]["filePath"] = "error-handling.md"
    manifest_path.write_text(yaml.safe_dump(data), encoding="utf-8")
    report = _run(library_root)
    doc_report = next(r for r in report.reports if r.document_name == "error-handling")
    assert doc_report.rule_ids() == [ids.MANIFEST_PATH_VALID]
    assert [v.rule_id for v in report.library_violations] == [ids.MANIFEST_ORPHAN_ENTRY]
