from __future__ import annotations

import argparse
from dataclasses import asdict
from pathlib import Path

import yaml

from .. import __version__
from ..config import LintConfig, load_config
from ..core.context import RunContext
from ..core.fs import resolve_under, write_json
from ..core.logging import log_event
from ..errors import LintError
from ..exit_codes import ERR_FINDINGS, ERR_USAGE, OK
from ..library import build_index, run_library, scaffold_instruction, search_index
from ..library.runner import LibraryReport
from ..manifest import Manifest, load_manifest
from ..report import build_report_payload, render_text
from ..rules import RULES
from .output import emit_result, result_payload


def configure_check_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("check", help="validate instruction documents against the manifest")
    p.add_argument("names", nargs="*", help="only validate these instruction names")
    p.add_argument("--jobs", type=int, default=1, help="validate documents on N worker threads")
    p.add_argument("--strict", action="store_true", help="fail on warnings as well as errors")
    p.add_argument("--out-file", help="also write the JSON report to this path")


def configure_index_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("index", help="emit the machine-readable instruction index")
    p.add_argument("--out-file", help="also write the index to this path")


def configure_search_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("search", help="search the instruction index")
    p.add_argument("query", nargs="?", default="", help="substring matched against name, title and description")
    p.add_argument("--tag", action="append", default=[], help="require this tag (repeatable)")


def configure_rules_parser(sub: argparse._SubParsersAction) -> None:
    sub.add_parser("rules", help="list validation rules and active limits")


def configure_new_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("new", help="scaffold a new instruction from the template")
    p.add_argument("name", help="kebab-case instruction name")
    p.add_argument("--title", required=True, help="document title")


def configure_version_parser(sub: argparse._SubParsersAction) -> None:
    sub.add_parser("version", help="print the tool version")


def _config(ctx: RunContext, ns: argparse.Namespace) -> LintConfig:
    explicit = resolve_under(ctx.library_root, Path(ns.config)) if ns.config else None
    config = load_config(ctx.library_root, explicit)
    log_event(ctx, "debug", "config", "load", source=str(config.source or "defaults"))
    return config


def _manifest(ctx: RunContext, ns: argparse.Namespace, config: LintConfig) -> Manifest:
    path = resolve_under(ctx.library_root, Path(ns.manifest)) if ns.manifest else config.manifest_path(ctx.library_root)
    manifest = load_manifest(path)
    log_event(ctx, "info", "manifest", "load", path=path.as_posix(), entries=len(manifest.entries))
    return manifest


def _library(ctx: RunContext, ns: argparse.Namespace, *, jobs: int = 1, names: list[str] | None = None) -> LibraryReport:
    config = _config(ctx, ns)
    return run_library(ctx, _manifest(ctx, ns, config), config, jobs=jobs, names=names)


def _write_out(ctx: RunContext, out_file: str | None, payload: dict[str, object]) -> None:
    if not out_file:
        return
    path = write_json(resolve_under(ctx.library_root, Path(out_file)), payload)
    log_event(ctx, "info", "cli", "write", path=path.as_posix())


def run_check_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    if ns.jobs < 1:
        raise LintError("--jobs must be at least 1", ERR_USAGE, kind="invalid_jobs")
    report = _library(ctx, ns, jobs=ns.jobs, names=list(ns.names) or None)
    payload = build_report_payload(report, run_id=ctx.run_id, strict=ns.strict)
    _write_out(ctx, ns.out_file, payload)
    emit_result(ctx, payload, render_text(report, strict=ns.strict).splitlines())
    return OK if payload["status"] == "pass" else ERR_FINDINGS


def run_index_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    payload = build_index(_library(ctx, ns))
    _write_out(ctx, ns.out_file, payload)
    emit_result(ctx, payload)
    return OK


def run_search_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    rows = search_index(build_index(_library(ctx, ns))["instructions"], ns.query, ns.tag)
    lines = [
        f"{row['name']}{'' if row['valid'] else ' (invalid)'}  [{', '.join(row['tags'])}]  {row['title'] or ''}".rstrip()
        for row in rows
    ]
    payload = result_payload("search", query=ns.query, tags=sorted(set(ns.tag)), instructions=rows)
    emit_result(ctx, payload, lines or ["no matching instructions"])
    return OK


def run_rules_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    config = _config(ctx, ns)
    payload = result_payload(
        "rules",
        rules=[
            {
                "id": rule.rule_id,
                "severity": rule.severity.value,
                "description": rule.description,
                "hint": rule.fix_hint,
                "needs_manifest_entry": rule.needs_entry,
            }
            for rule in RULES
        ],
        limits=asdict(config.limits),
        tool_denylist=list(config.tool_denylist),
        allowed_context_headings=list(config.allowed_context_headings),
    )
    lines = [f"{rule.rule_id:<20} {rule.severity.value:<8} {rule.description}" for rule in RULES]
    emit_result(ctx, payload, lines)
    return OK


def run_new_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    config = _config(ctx, ns)
    path, entry = scaffold_instruction(ctx.library_root, ns.name, ns.title, config.instructions_dir)
    log_event(ctx, "info", "scaffold", "write", path=path.as_posix())
    lines = [
        f"created {path.as_posix()}",
        f"add this entry to the manifest, replacing the placeholder tags ({config.limits.tags_min}-{config.limits.tags_max} required):",
        yaml.safe_dump([entry.as_row()], sort_keys=False).rstrip(),
    ]
    emit_result(ctx, result_payload("new", path=path.as_posix(), entry=entry.as_row()), lines)
    return OK


def run_version_command(ctx: RunContext, ns: argparse.Namespace) -> int:
    payload = result_payload("version", version=__version__, run_id=ctx.run_id)
    emit_result(ctx, payload, [f"inskit-lint {__version__}"])
    return OK


CONFIGURE_HOOKS = (
    configure_check_parser,
    configure_index_parser,
    configure_search_parser,
    configure_rules_parser,
    configure_new_parser,
    configure_version_parser,
)

COMMANDS = {
    "check": run_check_command,
    "index": run_index_command,
    "search": run_search_command,
    "rules": run_rules_command,
    "new": run_new_command,
    "version": run_version_command,
}
