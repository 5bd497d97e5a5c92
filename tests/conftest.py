"""Shared fixtures."""

import pytest

from llmbridge.server.core.config import get_settings

PROVIDER_ENV_VARS = ("NVIDIA_API_KEY", "NVIDIA_BASE_URL", "HTTP_TIMEOUT", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep process environment and any local .env out of credential resolution."""
    for var in PROVIDER_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
