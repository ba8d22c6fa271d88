from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import yaml

from inskit_lint.document import parse_document, word_count
from inskit_lint.document.model import InstructionDocument
from inskit_lint.manifest import ManifestEntry

ROOT = Path(__file__).resolve().parents[3]
SRC = ROOT / "packages/inskit-lint/src"

_INTRO = "{intro}"


def code_block(lang: str = "python") -> list[str]:
    return [f"```{lang}", "# good", "total = sum(values)", "# avoid", "t = 0", "```", ""]


def instruction_text(
    *,
    title: str = "Example Guide",
    words: int = 450,
    guidelines: int = 5,
    code_blocks: int | None = None,
    quick_ref: int = 6,
    lang: str = "python",
    extra: str = "",
) -> str:
    """Build a well-formed instruction whose prose word count is exactly `words`."""
    blocks = guidelines if code_blocks is None else code_blocks
    parts = [f"# {title}", "", _INTRO, "", "## Core Guidelines", ""]
    for i in range(1, guidelines + 1):
        parts += [f"### {i}. Guideline {i}", "", "Prefer explicit names.", ""]
        if i <= blocks:
            parts += code_block(lang)
    for _ in range(max(0, blocks - guidelines)):
        parts += code_block(lang)
    parts += ["## Quick Reference", ""]
    parts += [f"- [ ] Check item {i}" for i in range(1, quick_ref + 1)]
    text = "\n".join(parts) + "\n" + extra
    filler = words - word_count(text.replace(_INTRO, ""))
    if filler < 0:
        raise ValueError(f"structure alone exceeds {words} words")
    return text.replace(_INTRO, " ".join(["word"] * filler))


def make_document(name: str = "x", **kwargs: object) -> InstructionDocument:
    return parse_document(instruction_text(**kwargs), f"instructions/{name}.md")  # type: ignore[arg-type]


def make_entry(name: str = "x", tags: tuple[str, ...] = ("a", "b"), file_path: str | None = None) -> ManifestEntry:
    return ManifestEntry(
        name=name,
        description=f"{name} guidance",
        file_path=file_path or f"instructions/{name}.md",
        tags=tags,
    )


def write_library(root: Path, instructions: dict[str, list[str]], **kwargs: object) -> Path:
    (root / "instructions").mkdir(parents=True, exist_ok=True)
    rows = []
    for name, tags in instructions.items():
        (root / "instructions" / f"{name}.md").write_text(
            instruction_text(title=name.replace("-", " ").title(), **kwargs),  # type: ignore[arg-type]
            encoding="utf-8",
        )
        rows.append(
            {
                "name": name,
                "description": f"Guidance on {name.replace('-', ' ')}",
                "filePath": f"instructions/{name}.md",
                "tags": tags,
            }
        )
    (root / "manifest.yaml").write_text(yaml.safe_dump({"instructions": rows}, sort_keys=False), encoding="utf-8")
    return root


def run_inskit_lint(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC)
    env.pop("CI", None)
    env["INSKIT_LINT_RUN_ID"] = "pytest-run"
    return subprocess.run(
        [sys.executable, "-m", "inskit_lint.cli", *args],
        cwd=(cwd or ROOT),
        env=env,
        text=True,
        capture_output=True,
        check=False,
    )
