from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..core.fs import read_text
from ..document import InstructionDocument, parse_document
from ..manifest.model import Manifest, ManifestEntry

_SKIPPED_NAMES = {"readme.md"}


@dataclass(frozen=True)
class PairedDocument:
    document: InstructionDocument
    entry: ManifestEntry | None


def discover_documents(root: Path, instructions_dir: str) -> list[Path]:
    base = root / instructions_dir
    if not base.is_dir():
        return []
    return sorted(
        path
        for path in base.rglob("*.md")
        if path.is_file() and path.name.lower() not in _SKIPPED_NAMES and not path.name.startswith("_")
    )


def load_document(root: Path, path: Path) -> InstructionDocument:
    try:
        rel = path.resolve().relative_to(root.resolve()).as_posix()
    except ValueError:
        rel = path.as_posix()
    return parse_document(read_text(path), rel)


def pair_documents(documents: list[InstructionDocument], manifest: Manifest) -> list[PairedDocument]:
    return [PairedDocument(document=doc, entry=manifest.entry_for(doc.name, doc.source_path)) for doc in documents]
