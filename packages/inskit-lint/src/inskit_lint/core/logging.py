"""Structured run events on stderr.

Events are filtered by the context's verbosity: `quiet` keeps errors only,
the default drops `debug`. Text mode writes one `key=value` line per event;
values containing whitespace or quotes are JSON-quoted so lines stay splittable.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from .serialize import dumps_json

if TYPE_CHECKING:
    from .context import RunContext

_LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}


def _threshold(ctx: RunContext) -> int:
    if ctx.quiet:
        return _LEVELS["error"]
    return _LEVELS["debug"] if ctx.verbose else _LEVELS["info"]


def _text_value(value: object) -> str:
    text = value if isinstance(value, str) else dumps_json(value)
    if not text or any(ch.isspace() or ch in "\"=" for ch in text):
        return dumps_json(text)
    return text


def log_event(ctx: RunContext, level: str, component: str, action: str, **fields: object) -> None:
    if _LEVELS.get(level, _LEVELS["info"]) < _threshold(ctx):
        return
    event: dict[str, object] = {
        "ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
        "level": level,
        "run_id": ctx.run_id,
        "component": component,
        "action": action,
        **fields,
    }
    if ctx.log_json:
        line = dumps_json(event)
    else:
        line = " ".join(f"{key}={_text_value(value)}" for key, value in event.items())
    sys.stderr.write(line + "\n")
