"""Shared pytest fixtures for the full Numeronym test suite."""

from __future__ import annotations

import pytest

from numeronym.config import ENV_KEYS


@pytest.fixture(autouse=True)
def _clear_numeronym_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer `NUMERONYM_*` variables from leaking into tests."""

    for env_key in ENV_KEYS.values():
        monkeypatch.delenv(env_key, raising=False)
