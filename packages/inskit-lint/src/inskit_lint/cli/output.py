"""Rendering of command results and errors for the terminal."""

from __future__ import annotations

from ..core.context import RunContext
from ..core.serialize import dumps_json

TOOL = "inskit-lint"


def result_payload(kind: str, **fields: object) -> dict[str, object]:
    return {"schema_version": 1, "tool": TOOL, "kind": kind, **fields}


def emit(payload: dict[str, object], as_json: bool) -> None:
    print(dumps_json(payload, pretty=not as_json))


def emit_result(ctx: RunContext, payload: dict[str, object], text_lines: list[str] | None = None) -> None:
    """JSON mode prints `payload` on one line; text mode prints `text_lines`, or the payload indented."""
    if ctx.as_json or text_lines is None:
        emit(payload, ctx.as_json)
        return
    print("\n".join(text_lines))


def resolve_output_format(*, cli_json: bool, cli_format: str | None, ci_present: bool) -> str:
    if cli_json:
        return "json"
    return cli_format or ("json" if ci_present else "text")


def render_error(*, as_json: bool, message: str, code: int, kind: str = "generic_error") -> str:
    if not as_json:
        return f"{TOOL}: error: {message}"
    return dumps_json(
        {
            "schema_version": 1,
            "tool": TOOL,
            "status": "error",
            "errors": [{"code": code, "kind": kind, "message": message}],
        }
    )
