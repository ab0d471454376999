from __future__ import annotations

import pytest

from tests._fixtures.fake_github import FakeGitHub


@pytest.fixture
def fake_github() -> FakeGitHub:
    """Provide an empty fake GitHub API; tests register the payloads they need."""
    return FakeGitHub()


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REPODOC_API_BASE_URL", raising=False)
