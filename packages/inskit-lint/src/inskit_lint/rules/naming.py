from __future__ import annotations

import re
from pathlib import PurePosixPath

from ..document.parser import normalize_source_path
from .base import RuleDef, RuleInput
from .ids import FILENAME_MATCH, MANIFEST_PATH_VALID, MANIFEST_PRESENT, TAG_COUNT, TAG_FORMAT
from .model import Finding, Severity

KEBAB_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def _paths_match(document_path: str, entry_path: str) -> bool:
    doc = normalize_source_path(document_path)
    want = normalize_source_path(entry_path)
    if not doc or not want:
        return False
    return doc == want


def check_manifest_present(inp: RuleInput) -> list[Finding]:
    if inp.entry is not None:
        return []
    return [Finding(f"no manifest entry for `{inp.document.name}`")]


def check_manifest_path_valid(inp: RuleInput) -> list[Finding]:
    entry = inp.entry
    if entry is None or _paths_match(inp.document.source_path, entry.file_path):
        return []
    return [Finding(f"manifest filePath `{entry.file_path}` does not resolve to `{inp.document.source_path}`")]


def check_tag_count(inp: RuleInput) -> list[Finding]:
    if inp.entry is None:
        return []
    limits = inp.config.limits
    count = len(set(inp.entry.tags))
    if limits.tags_min <= count <= limits.tags_max:
        return []
    return [Finding(f"expected {limits.tags_min}-{limits.tags_max} tags, found {count}", observed=count)]


def check_tag_format(inp: RuleInput) -> list[Finding]:
    if inp.entry is None:
        return []
    findings: list[Finding] = []
    seen: set[str] = set()
    for tag in inp.entry.tags:
        if not KEBAB_RE.fullmatch(tag):
            findings.append(Finding(f"tag `{tag}` must be lowercase kebab-case"))
        if tag in seen:
            findings.append(Finding(f"tag `{tag}` is listed more than once"))
        seen.add(tag)
    return findings


def check_filename_match(inp: RuleInput) -> list[Finding]:
    if inp.entry is None:
        return []
    filename = PurePosixPath(inp.document.source_path).name
    stem = PurePosixPath(filename).stem
    findings: list[Finding] = []
    if not filename.endswith(".md"):
        findings.append(Finding(f"source file `{filename}` must use the `.md` extension"))
    if not KEBAB_RE.fullmatch(stem):
        findings.append(Finding(f"source filename `{filename}` must be kebab-case"))
    if stem != inp.entry.name:
        findings.append(Finding(f"source filename `{filename}` does not match manifest name `{inp.entry.name}`"))
    return findings


RULES: tuple[RuleDef, ...] = (
    RuleDef(MANIFEST_PRESENT, "document has a manifest entry", Severity.ERROR, check_manifest_present, fix_hint="Add an entry with name, description, filePath and tags to the manifest."),
    RuleDef(MANIFEST_PATH_VALID, "manifest filePath points at the document", Severity.ERROR, check_manifest_path_valid, fix_hint="Set filePath to the document path relative to the library root.", needs_entry=True),
    RuleDef(TAG_COUNT, "manifest entry carries the expected number of tags", Severity.ERROR, check_tag_count, fix_hint="Tag each instruction with 2-4 topics.", needs_entry=True),
    RuleDef(TAG_FORMAT, "manifest tags are unique lowercase kebab-case", Severity.ERROR, check_tag_format, fix_hint="Use lowercase tags such as `error-handling`.", needs_entry=True),
    RuleDef(FILENAME_MATCH, "kebab-case filename matches the manifest name", Severity.ERROR, check_filename_match, fix_hint="Rename the file or the manifest entry so both use the same kebab-case name.", needs_entry=True),
)
