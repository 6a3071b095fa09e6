from __future__ import annotations

import os

import pytest

from tests.support.control_plane import FakeRouteClient


@pytest.fixture(autouse=True)
def isolated_control_plane_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in [name for name in os.environ if name.startswith("MESHSYNC_")]:
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def fake_route_client() -> FakeRouteClient:
    return FakeRouteClient()
