from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from ..errors import LintError
from ..exit_codes import ERR_CONFIG


def load_structured(path: Path, *, code: int = ERR_CONFIG) -> Any:
    """Load a YAML or JSON document, raising `LintError` with `code` on any read or parse failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LintError(f"unable to read {path}: {exc}", code, kind="unreadable_file") from exc
    try:
        if path.suffix.lower() == ".json":
            return json.loads(text)
        return yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise LintError(f"unable to parse {path}: {exc}", code, kind="unparsable_file") from exc
