from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch):
    """Prevent the developer shell's SVCS_ROOT / SVCS_DEBUG from influencing tests."""

    monkeypatch.delenv("SVCS_ROOT", raising=False)
    monkeypatch.setenv("SVCS_DEBUG", "")
