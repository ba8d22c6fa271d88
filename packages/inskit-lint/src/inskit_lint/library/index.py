from __future__ import annotations

from typing import Any, Iterable

from ..contracts import INDEX, validate_self
from ..rules.structure import guideline_sections
from .runner import LibraryReport


def build_index(report: LibraryReport) -> dict[str, Any]:
    """Index rows for every document that has a manifest entry, sorted by name."""
    valid = {r.source_path: r.passed for r in report.reports}
    rows: list[dict[str, Any]] = []
    for pair in report.paired:
        if pair.entry is None:
            continue
        doc = pair.document
        rows.append(
            {
                "name": pair.entry.name,
                "title": doc.title,
                "description": pair.entry.description,
                "tags": sorted(set(pair.entry.tags)),
                "file_path": doc.source_path,
                "word_count": doc.word_count,
                "guidelines": [section.heading for section in guideline_sections(doc)],
                "valid": valid.get(doc.source_path, False),
            }
        )
    rows.sort(key=lambda row: (row["name"], row["file_path"]))
    payload = {
        "schema_name": INDEX,
        "schema_version": 1,
        "tool": "inskit-lint",
        "kind": "index",
        "instructions": rows,
    }
    return validate_self(INDEX, payload)


def search_index(rows: Iterable[dict[str, Any]], query: str = "", tags: Iterable[str] = ()) -> list[dict[str, Any]]:
    needle = query.strip().casefold()
    wanted = {tag.strip().lower() for tag in tags if tag.strip()}
    out: list[dict[str, Any]] = []
    for row in rows:
        if wanted and not wanted.issubset(set(row.get("tags", []))):
            continue
        if needle:
            haystack = " ".join(str(row.get(key) or "") for key in ("name", "title", "description")).casefold()
            if needle not in haystack:
                continue
        out.append(row)
    return out
