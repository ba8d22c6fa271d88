"""Library root detection helpers.

`Path.cwd()` is only allowed in this module.
"""

from __future__ import annotations

from pathlib import Path

_ROOT_MARKERS = ("inskit-lint.yaml", "manifest.yaml", "manifest.yml", "manifest.json")


def find_library_root(start: Path | None = None) -> Path:
    cur = (start or Path.cwd()).resolve()
    if cur.is_file():
        cur = cur.parent
    origin = cur
    while True:
        if any((cur / marker).is_file() for marker in _ROOT_MARKERS) or (cur / "instructions").is_dir():
            return cur
        if cur.parent == cur:
            return origin
        cur = cur.parent
