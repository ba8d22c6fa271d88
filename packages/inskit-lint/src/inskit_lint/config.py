from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from .contracts import LINT_CONFIG, validate
from .core.yaml_utils import load_structured
from .errors import LintError
from .exit_codes import ERR_CONFIG

CONFIG_FILENAME = "inskit-lint.yaml"
DEFAULT_INSTRUCTIONS_DIR = "instructions"
DEFAULT_MANIFEST_CANDIDATES = ("manifest.yaml", "manifest.yml", "manifest.json")

DEFAULT_TOOL_DENYLIST: tuple[str, ...] = (
    "chatgpt",
    "claude",
    "codeium",
    "codewhisperer",
    "copilot",
    "gemini",
    "tabnine",
    "windsurf",
)
DEFAULT_ALLOWED_CONTEXT_HEADINGS: tuple[str, ...] = ("Testing Tools",)


@dataclass(frozen=True)
class RuleLimits:
    word_min: int = 300
    word_target_min: int = 400
    word_target_max: int = 600
    word_max: int = 800
    guidelines_min: int = 3
    guidelines_max: int = 7
    code_examples_min: int = 2
    code_examples_max: int = 5
    quick_ref_min: int = 3
    quick_ref_max: int = 7
    tags_min: int = 2
    tags_max: int = 4

    def inconsistencies(self) -> list[str]:
        pairs = (
            ("word_min", "word_max"),
            ("word_target_min", "word_target_max"),
            ("guidelines_min", "guidelines_max"),
            ("code_examples_min", "code_examples_max"),
            ("quick_ref_min", "quick_ref_max"),
            ("tags_min", "tags_max"),
        )
        return [
            f"limits.{low} ({getattr(self, low)}) exceeds limits.{high} ({getattr(self, high)})"
            for low, high in pairs
            if getattr(self, low) > getattr(self, high)
        ]


@dataclass(frozen=True)
class LintConfig:
    instructions_dir: str = DEFAULT_INSTRUCTIONS_DIR
    manifest: str | None = None
    limits: RuleLimits = field(default_factory=RuleLimits)
    tool_denylist: tuple[str, ...] = DEFAULT_TOOL_DENYLIST
    allowed_context_headings: tuple[str, ...] = DEFAULT_ALLOWED_CONTEXT_HEADINGS
    source: Path | None = None

    def manifest_path(self, root: Path) -> Path:
        if self.manifest:
            path = Path(self.manifest)
            return path if path.is_absolute() else root / path
        for candidate in DEFAULT_MANIFEST_CANDIDATES:
            if (root / candidate).is_file():
                return root / candidate
        return root / DEFAULT_MANIFEST_CANDIDATES[0]


def config_from_mapping(raw: dict[str, Any], source: Path | None = None) -> LintConfig:
    validate(LINT_CONFIG, raw, code=ERR_CONFIG, subject=str(source or "config"))
    limits = RuleLimits(**dict(raw.get("limits") or {}))
    problems = limits.inconsistencies()
    if problems:
        raise LintError(f"invalid limits in {source or 'config'}: " + "; ".join(problems), ERR_CONFIG, kind="invalid_limits")
    config = LintConfig(limits=limits, source=source)
    if "instructions_dir" in raw:
        config = replace(config, instructions_dir=str(raw["instructions_dir"]))
    if "manifest" in raw:
        config = replace(config, manifest=str(raw["manifest"]))
    if "tool_denylist" in raw:
        config = replace(config, tool_denylist=tuple(str(x) for x in raw["tool_denylist"]))
    if "allowed_context_headings" in raw:
        config = replace(config, allowed_context_headings=tuple(str(x) for x in raw["allowed_context_headings"]))
    return config


def load_config(root: Path, explicit: Path | None = None) -> LintConfig:
    path = explicit if explicit is not None else root / CONFIG_FILENAME
    if explicit is None and not path.is_file():
        return LintConfig()
    if not path.is_file():
        raise LintError(f"config file not found: {path}", ERR_CONFIG, kind="missing_config")
    raw = load_structured(path, code=ERR_CONFIG)
    if raw is None:
        return LintConfig(source=path)
    if not isinstance(raw, dict):
        raise LintError(f"{path}: config root must be a mapping", ERR_CONFIG, kind="invalid_config")
    return config_from_mapping(raw, source=path)
