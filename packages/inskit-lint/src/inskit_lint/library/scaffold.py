from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ..core.fs import write_new_text
from ..errors import LintError
from ..exit_codes import ERR_USAGE
from ..manifest.model import ManifestEntry
from ..rules.naming import KEBAB_RE

PLACEHOLDER_TAGS = ("todo-topic", "todo-area")

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
INSTRUCTION_TEMPLATE = "instruction.md.j2"


def _env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render_template(title: str) -> str:
    return _env().get_template(INSTRUCTION_TEMPLATE).render(title=title.strip())


def scaffold_instruction(root: Path, name: str, title: str, instructions_dir: str) -> tuple[Path, ManifestEntry]:
    if not KEBAB_RE.fullmatch(name):
        raise LintError(f"instruction name `{name}` must be lowercase kebab-case", ERR_USAGE, kind="invalid_name")
    if not title.strip():
        raise LintError("instruction title must not be empty", ERR_USAGE, kind="invalid_title")
    rel = f"{instructions_dir.strip('/')}/{name}.md"
    path = write_new_text(root / rel, render_template(title))
    entry = ManifestEntry(name=name, description=title.strip(), file_path=rel, tags=PLACEHOLDER_TAGS)
    return path, entry
