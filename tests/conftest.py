"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import pytest

_GHCOMMIT_ENV_VARS = (
    "GHCOMMIT_GITHUB_TOKEN",
    "GITHUB_TOKEN",
    "GHCOMMIT_GITHUB_ENDPOINT",
    "GHCOMMIT_GITHUB_TIMEOUT_S",
    "GHCOMMIT_LOCALE",
    "GHCOMMIT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolate_ghcommit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test without ghcommit configuration in the environment."""
    for name in _GHCOMMIT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
