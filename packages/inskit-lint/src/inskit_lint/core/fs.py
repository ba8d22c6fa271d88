from __future__ import annotations

from pathlib import Path
from typing import Any

from ..errors import LintError
from ..exit_codes import ERR_USAGE
from .serialize import dumps_json


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8", errors="replace")


def resolve_under(root: Path, path: Path) -> Path:
    return path.resolve() if path.is_absolute() else (root / path).resolve()


def write_json(path: Path, payload: Any) -> Path:
    ensure_dir(path.parent)
    path.write_text(dumps_json(payload, pretty=True) + "\n", encoding="utf-8")
    return path


def write_new_text(path: Path, content: str) -> Path:
    if path.exists():
        raise LintError(f"refusing to overwrite existing file: {path}", ERR_USAGE, kind="file_exists")
    ensure_dir(path.parent)
    path.write_text(content, encoding="utf-8")
    return path
