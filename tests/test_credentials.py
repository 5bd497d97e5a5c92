"""Tests for provider credential resolution."""

import pytest

from llmbridge.server.core.config import Settings
from llmbridge.server.providers.base import ProviderConfig, ProviderSettings
from llmbridge.server.providers.credentials import resolve_provider_credentials

CONFIG = ProviderConfig(
    api_token_key="NVIDIA_API_KEY",
    base_url_key="NVIDIA_BASE_URL",
    base_url="https://integrate.api.nvidia.com/v1",
)


@pytest.fixture
def empty_settings():
    return Settings(_env_file=None)


class TestApiKeyPrecedence:
    """Tests for API key resolution order."""

    def test_explicit_key_wins(self, empty_settings):
        result = resolve_provider_credentials(
            "NVIDIA",
            CONFIG,
            api_keys={"NVIDIA": "explicit"},
            server_env={"NVIDIA_API_KEY": "server"},
            settings=Settings(_env_file=None, nvidia_api_key="process"),
        )
        assert result.api_key == "explicit"

    def test_explicit_key_for_other_provider_ignored(self, empty_settings):
        result = resolve_provider_credentials(
            "NVIDIA",
            CONFIG,
            api_keys={"OpenAI": "sk-other"},
            server_env={"NVIDIA_API_KEY": "server"},
            settings=empty_settings,
        )
        assert result.api_key == "server"

    def test_process_settings_last(self):
        result = resolve_provider_credentials(
            "NVIDIA",
            CONFIG,
            settings=Settings(_env_file=None, nvidia_api_key="process"),
        )
        assert result.api_key == "process"

    def test_process_environment(self, monkeypatch):
        monkeypatch.setenv("NVIDIA_API_KEY", "from-env")
        result = resolve_provider_credentials("NVIDIA", CONFIG)
        assert result.api_key == "from-env"

    def test_empty_values_count_as_unset(self, empty_settings):
        result = resolve_provider_credentials(
            "NVIDIA",
            CONFIG,
            api_keys={"NVIDIA": ""},
            server_env={"NVIDIA_API_KEY": ""},
            settings=empty_settings,
        )
        assert result.api_key is None

    def test_nothing_resolves(self, empty_settings):
        result = resolve_provider_credentials("NVIDIA", CONFIG, settings=empty_settings)
        assert result.api_key is None


class TestBaseUrlPrecedence:
    """Tests for base URL resolution order."""

    def test_stored_setting_wins(self, empty_settings):
        result = resolve_provider_credentials(
            "NVIDIA",
            CONFIG,
            provider_settings=ProviderSettings(base_url="https://stored.example/v1"),
            server_env={"NVIDIA_BASE_URL": "https://server.example/v1"},
            settings=empty_settings,
        )
        assert result.base_url == "https://stored.example/v1"

    def test_server_env_before_process(self):
        result = resolve_provider_credentials(
            "NVIDIA",
            CONFIG,
            server_env={"NVIDIA_BASE_URL": "https://server.example/v1"},
            settings=Settings(_env_file=None, nvidia_base_url="https://process.example/v1"),
        )
        assert result.base_url == "https://server.example/v1"

    def test_default_endpoint(self, empty_settings):
        result = resolve_provider_credentials("NVIDIA", CONFIG, settings=empty_settings)
        assert result.base_url == "https://integrate.api.nvidia.com/v1"

    def test_trailing_slash_stripped(self, empty_settings):
        result = resolve_provider_credentials(
            "NVIDIA",
            CONFIG,
            provider_settings=ProviderSettings(base_url="https://stored.example/v1/"),
            settings=empty_settings,
        )
        assert result.base_url == "https://stored.example/v1"

    def test_resolution_is_repeatable(self, empty_settings):
        kwargs = dict(
            api_keys={"NVIDIA": "k"},
            server_env={"NVIDIA_BASE_URL": "https://server.example/v1"},
            settings=empty_settings,
        )
        first = resolve_provider_credentials("NVIDIA", CONFIG, **kwargs)
        second = resolve_provider_credentials("NVIDIA", CONFIG, **kwargs)
        assert first == second
