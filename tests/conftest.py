"""Shared pytest fixtures: settings with/without a Gemini key and fake expanders."""

from __future__ import annotations

import pytest

from socialeye.core.settings import Settings


@pytest.fixture
def no_key_settings(monkeypatch) -> Settings:
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.delenv("google_api_key", raising=False)
    return Settings(_env_file=None, google_api_key=None)


@pytest.fixture
def key_settings() -> Settings:
    return Settings(
        _env_file=None,
        google_api_key="test-key",
        gemini_base_url="https://gemini.test/v1beta",
        gemini_model="gemini-test",
    )


class FakeExpander:
    """Records calls; returns a fixed answer or raises."""

    def __init__(self, answer=None, error: Exception | None = None) -> None:
        self.answer = answer
        self.error = error
        self.calls: list[str] = []

    async def __call__(self, query: str):
        self.calls.append(query)
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def fake_expander_factory():
    return FakeExpander
