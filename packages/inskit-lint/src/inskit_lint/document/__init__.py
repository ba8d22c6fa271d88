"""Instruction document model and markdown parsing."""

from .model import CodeBlock, InstructionDocument, Section, normalize_heading
from .parser import normalize_source_path, parse_document
from .word_count import word_count

__all__ = [
    "CodeBlock",
    "InstructionDocument",
    "Section",
    "normalize_heading",
    "normalize_source_path",
    "parse_document",
    "word_count",
]
