"""Base protocol and types for LLM provider adapters."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    import httpx

    from llmbridge.server.core.litellm_client import ChatModelHandle


class ModelDescriptor(BaseModel):
    """Descriptor for a callable model.

    Immutable once built. Produced both by the curated static catalogs and by
    translating entries of a provider's live model listing.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Model identifier", examples=["gpt-4o"])
    label: str = Field(..., description="Human-readable label", examples=["GPT-4o"])
    provider: str = Field(..., description="Provider tag", examples=["NVIDIA"])
    max_token_allowed: int = Field(..., gt=0, description="Context window in tokens")
    max_completion_tokens: int = Field(..., gt=0, description="Output token ceiling")


class ProviderSettings(BaseModel):
    """Persisted per-provider settings supplied by the caller."""

    enabled: bool = True
    base_url: str | None = None


@dataclass(frozen=True)
class ProviderConfig:
    """Well-known environment variable names and default endpoint for a provider."""

    api_token_key: str
    base_url_key: str
    base_url: str


@dataclass(frozen=True)
class CredentialResolution:
    """API key and base URL resolved for a single call."""

    api_key: str | None = None
    base_url: str | None = None


class LLMProvider(Protocol):
    """Protocol for provider adapters.

    An adapter advertises a static model catalog, can enumerate the live
    catalog of the remote account, and builds client handles bound to the
    resolved endpoint and credentials.
    """

    name: str
    get_api_key_link: str
    config: ProviderConfig
    static_models: list[ModelDescriptor]

    async def get_dynamic_models(
        self,
        api_keys: Mapping[str, str] | None = None,
        settings: ProviderSettings | None = None,
        server_env: Mapping[str, str] | None = None,
        *,
        http_client: "httpx.AsyncClient | None" = None,
    ) -> list[ModelDescriptor]:
        """Return models visible to the account that are not in the static catalog.

        Raises:
            MissingCredentialError: No API key resolved; no request is made.
            TransportError: The listing request failed.
            MalformedResponseError: The listing payload had an unexpected shape.
        """
        ...

    def get_model_instance(
        self,
        model: str,
        server_env: Mapping[str, str] | None = None,
        api_keys: Mapping[str, str] | None = None,
        provider_settings: Mapping[str, ProviderSettings] | None = None,
    ) -> "ChatModelHandle":
        """Return a client handle for ``model``. Performs no network I/O."""
        ...
