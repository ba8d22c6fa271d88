from __future__ import annotations

import socket
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

from helpers import write_library

_ALLOWED_MARKERS = {"unit", "integration"}

settings.register_profile("inskit", deadline=None, suppress_health_check=[HealthCheck.too_slow])
settings.load_profile("inskit")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def no_network_for_unit(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> None:
    if request.node.get_closest_marker("integration"):
        return

    def _blocked(*_args: object, **_kwargs: object) -> socket.socket:
        raise RuntimeError("network disabled in unit tests")

    monkeypatch.setattr(socket, "create_connection", _blocked)


@pytest.fixture
def library_root(tmp_path: Path) -> Path:
    root = tmp_path / "library"
    write_library(root, {"error-handling": ["errors", "python"], "naming-things": ["naming", "style"]})
    return root
