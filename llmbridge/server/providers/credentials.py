"""API key and base URL resolution for provider adapters."""

from collections.abc import Mapping

from llmbridge.server.core.config import Settings, get_settings
from llmbridge.server.providers.base import (
    CredentialResolution,
    ProviderConfig,
    ProviderSettings,
)


def _first(*candidates: str | None) -> str | None:
    for candidate in candidates:
        if candidate:
            return candidate
    return None


def resolve_provider_credentials(
    provider_name: str,
    config: ProviderConfig,
    *,
    api_keys: Mapping[str, str] | None = None,
    provider_settings: ProviderSettings | None = None,
    server_env: Mapping[str, str] | None = None,
    settings: Settings | None = None,
) -> CredentialResolution:
    """Resolve the API key and base URL for one provider call.

    API key precedence: ``api_keys[provider_name]``, then
    ``server_env[config.api_token_key]``, then the process settings.
    Base URL precedence: ``provider_settings.base_url``, then
    ``server_env[config.base_url_key]``, then the process settings, then
    ``config.base_url``. Empty strings count as unset.

    Args:
        provider_name: Provider tag used to index ``api_keys``.
        config: Provider's environment variable names and default endpoint.
        api_keys: Explicit request-level keys, by provider name.
        provider_settings: Stored settings for this provider.
        server_env: Server environment mapping.
        settings: Process settings; defaults to ``get_settings()``.

    Returns:
        CredentialResolution with the resolved key (possibly None) and base URL.
    """
    settings = settings or get_settings()
    api_keys = api_keys or {}
    server_env = server_env or {}

    api_key = _first(
        api_keys.get(provider_name),
        server_env.get(config.api_token_key),
        settings.lookup(config.api_token_key),
    )

    base_url = _first(
        provider_settings.base_url if provider_settings else None,
        server_env.get(config.base_url_key),
        settings.lookup(config.base_url_key),
        config.base_url,
    )
    if base_url:
        base_url = base_url.rstrip("/")

    return CredentialResolution(api_key=api_key, base_url=base_url)
