from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from ..errors import LintError
from ..exit_codes import ERR_VALIDATION

_MAX_REPORTED = 3


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    version: int
    file: str


def schemas_root() -> Path:
    return Path(__file__).resolve().parent / "schemas"


@lru_cache(maxsize=None)
def load_catalog() -> dict[str, CatalogEntry]:
    raw = json.loads((schemas_root() / "catalog.json").read_text(encoding="utf-8"))
    return {
        str(row["name"]): CatalogEntry(name=str(row["name"]), version=int(row["version"]), file=str(row["file"]))
        for row in raw.get("schemas", [])
    }


def schema_path(schema_name: str) -> Path:
    entry = load_catalog().get(schema_name)
    if entry is None:
        raise LintError(f"unknown schema: {schema_name}", ERR_VALIDATION, kind="unknown_schema")
    return schemas_root() / entry.file


@lru_cache(maxsize=None)
def _validator(schema_name: str) -> Draft202012Validator:
    schema = json.loads(schema_path(schema_name).read_text(encoding="utf-8"))
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def _describe(error: ValidationError) -> str:
    pointer = "/".join(str(part) for part in error.absolute_path)
    return f"{pointer or '<root>'}: {error.message}"


def schema_errors(schema_name: str, payload: Any) -> list[str]:
    """Every schema violation in `payload`, ordered by location."""
    errors = sorted(_validator(schema_name).iter_errors(payload), key=lambda e: [str(p) for p in e.absolute_path])
    return [_describe(error) for error in errors]


def validate(schema_name: str, payload: Any, *, code: int = ERR_VALIDATION, subject: str = "") -> None:
    problems = schema_errors(schema_name, payload)
    if not problems:
        return
    shown = "; ".join(problems[:_MAX_REPORTED])
    extra = len(problems) - _MAX_REPORTED
    suffix = f" (+{extra} more)" if extra > 0 else ""
    raise LintError(f"schema validation failed for {subject or schema_name}: {shown}{suffix}", code, kind="schema_violation")


def validate_self(schema_name: str, payload: dict[str, Any]) -> dict[str, Any]:
    validate(schema_name, payload)
    return payload
