"""Provider adapters for remote LLM inference APIs.

Each adapter serves a static model catalog, enumerates the live catalog of an
account and builds chat handles bound to the resolved endpoint.
"""

from llmbridge.exceptions import UnknownProviderError
from llmbridge.server.providers.base import (
    CredentialResolution,
    LLMProvider,
    ModelDescriptor,
    ProviderConfig,
    ProviderSettings,
)
from llmbridge.server.providers.nvidia import NvidiaProvider

# Registered adapters, by provider name
PROVIDERS: dict[str, LLMProvider] = {
    provider.name: provider for provider in (NvidiaProvider(),)
}


def get_provider(name: str) -> LLMProvider:
    """Get the adapter registered under ``name`` (case-insensitive).

    Raises:
        UnknownProviderError: If no adapter is registered under ``name``.
    """
    for provider_name, provider in PROVIDERS.items():
        if provider_name.lower() == (name or "").lower():
            return provider
    raise UnknownProviderError(name, available=list(PROVIDERS))


def list_providers() -> list[LLMProvider]:
    """List registered adapters in registration order."""
    return list(PROVIDERS.values())


__all__ = [
    "CredentialResolution",
    "LLMProvider",
    "ModelDescriptor",
    "NvidiaProvider",
    "PROVIDERS",
    "ProviderConfig",
    "ProviderSettings",
    "get_provider",
    "list_providers",
]
