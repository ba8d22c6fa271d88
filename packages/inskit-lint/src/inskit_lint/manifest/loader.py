from __future__ import annotations

from pathlib import Path
from typing import Any

from ..contracts import MANIFEST, validate
from ..core.yaml_utils import load_structured
from ..errors import LintError
from ..exit_codes import ERR_VALIDATION
from .model import Manifest, ManifestEntry


def manifest_from_payload(payload: Any, source: str = "") -> Manifest:
    """Build a `Manifest` from a decoded YAML/JSON payload.

    A bare list of entries is accepted as shorthand for `{"instructions": [...]}`.
    """
    if isinstance(payload, list):
        payload = {"instructions": payload}
    if payload is None:
        payload = {"instructions": []}
    validate(MANIFEST, payload, code=ERR_VALIDATION, subject=source or "manifest")
    entries = tuple(
        ManifestEntry(
            name=str(row["name"]),
            description=str(row["description"]),
            file_path=str(row["filePath"]),
            tags=tuple(str(tag) for tag in row["tags"]),
        )
        for row in payload["instructions"]
    )
    return Manifest(entries=entries, source=source)


def load_manifest(path: Path) -> Manifest:
    if not path.is_file():
        raise LintError(f"manifest not found: {path}", ERR_VALIDATION, kind="missing_manifest")
    payload = load_structured(path, code=ERR_VALIDATION)
    return manifest_from_payload(payload, source=path.as_posix())
