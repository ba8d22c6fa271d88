from __future__ import annotations

LENGTH_MIN = "LENGTH_MIN"
LENGTH_TARGET = "LENGTH_TARGET"
LENGTH_MAX = "LENGTH_MAX"
GUIDELINE_COUNT = "GUIDELINE_COUNT"
CODE_EXAMPLE_COUNT = "CODE_EXAMPLE_COUNT"
CODE_LANG_TAGGED = "CODE_LANG_TAGGED"
QUICK_REF_COUNT = "QUICK_REF_COUNT"
REQUIRED_SECTIONS = "REQUIRED_SECTIONS"
MANIFEST_PRESENT = "MANIFEST_PRESENT"
MANIFEST_PATH_VALID = "MANIFEST_PATH_VALID"
TAG_COUNT = "TAG_COUNT"
TAG_FORMAT = "TAG_FORMAT"
FILENAME_MATCH = "FILENAME_MATCH"
NO_TOOL_NAMES = "NO_TOOL_NAMES"
RULE_ERROR = "RULE_ERROR"

MANIFEST_ORPHAN_ENTRY = "MANIFEST_ORPHAN_ENTRY"
MANIFEST_DUPLICATE_NAME = "MANIFEST_DUPLICATE_NAME"
MANIFEST_DUPLICATE_PATH = "MANIFEST_DUPLICATE_PATH"

CORE_GUIDELINES = "Core Guidelines"
QUICK_REFERENCE = "Quick Reference"
