"""Global pytest fixtures for STRINGKIT."""

from __future__ import annotations

import pytest

from stringkit import config


@pytest.fixture(autouse=True)
def _clean_stringkit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep STRINGKIT environment variables from the host out of every test."""
    monkeypatch.delenv(config.SEPARATOR_ENV_VAR, raising=False)
    monkeypatch.delenv("STRINGKIT_LOG_PATH", raising=False)
