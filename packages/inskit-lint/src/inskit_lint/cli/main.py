from __future__ import annotations

import argparse
import os
import sys

from .. import __version__
from ..core.context import RunContext
from ..core.logging import log_event
from ..errors import LintError
from ..exit_codes import ERR_INTERNAL
from .commands import COMMANDS, CONFIGURE_HOOKS
from .output import render_error, resolve_output_format


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="inskit-lint", description="Validate and index an instruction library.")
    p.add_argument("--version", action="version", version=f"inskit-lint {__version__}")
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    p.add_argument("--root", help="library root (default: nearest directory holding a manifest or instructions/)")
    p.add_argument("--config", help="config file (default: <root>/inskit-lint.yaml when present)")
    p.add_argument("--manifest", help="manifest file (default: from config, else <root>/manifest.yaml)")
    p.add_argument("--run-id", help="run identifier stamped on logs and reports")
    p.add_argument("--log-json", action="store_true", help="write log events to stderr as JSON lines")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable debug log events")
    vg.add_argument("--quiet", action="store_true", help="only log errors")
    sub = p.add_subparsers(dest="cmd", required=True)
    for configure in CONFIGURE_HOOKS:
        configure(sub)
    return p


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    fmt = resolve_output_format(cli_json=ns.json, cli_format=ns.format, ci_present="CI" in os.environ)
    as_json = fmt == "json"
    try:
        ctx = RunContext.from_args(ns.run_id, ns.root, fmt, ns.verbose, ns.quiet, ns.log_json)
        log_event(ctx, "debug", "cli", "start", cmd=ns.cmd, fmt=fmt, root=ctx.library_root.as_posix())
        return COMMANDS[ns.cmd](ctx, ns)
    except LintError as exc:
        print(render_error(as_json=as_json, message=str(exc), code=exc.code, kind=exc.kind), file=sys.stderr)
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(render_error(as_json=as_json, message=f"internal error: {exc}", code=ERR_INTERNAL), file=sys.stderr)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
