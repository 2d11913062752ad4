import pytest


@pytest.fixture(autouse=True)
def clean_openai_env(monkeypatch):
    """Keep host OpenAI configuration out of the tests."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_MODEL", raising=False)
