"""Library-level discovery, validation runs, indexing and scaffolding."""

from .discovery import PairedDocument, discover_documents, load_document, pair_documents
from .index import build_index, search_index
from .runner import LibraryReport, check_manifest_pairing, run_library, validate_paired
from .scaffold import scaffold_instruction

__all__ = [
    "LibraryReport",
    "PairedDocument",
    "build_index",
    "check_manifest_pairing",
    "discover_documents",
    "load_document",
    "pair_documents",
    "run_library",
    "scaffold_instruction",
    "search_index",
    "validate_paired",
]
