"""Schema catalog and validation APIs."""

from .validate import CatalogEntry, load_catalog, schema_errors, schema_path, schemas_root, validate, validate_self

CHECK_RUN = "inskit.check-run.v1"
INDEX = "inskit.index.v1"
LINT_CONFIG = "inskit.lint.config.v1"
MANIFEST = "inskit.manifest.v1"

__all__ = [
    "CHECK_RUN",
    "CatalogEntry",
    "INDEX",
    "LINT_CONFIG",
    "MANIFEST",
    "load_catalog",
    "schema_errors",
    "schema_path",
    "schemas_root",
    "validate",
    "validate_self",
]
