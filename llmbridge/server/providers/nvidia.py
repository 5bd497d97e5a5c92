"""NVIDIA provider adapter.

Targets the OpenAI-compatible inference API hosted at
``integrate.api.nvidia.com``. Serves a curated static catalog, enumerates the
account's live catalog via ``GET {base_url}/models`` and builds LiteLLM chat
handles bound to the resolved endpoint.
"""

import logging
import re
from collections.abc import Mapping

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from llmbridge.exceptions import (
    MalformedResponseError,
    MissingCredentialError,
    TransportError,
)
from llmbridge.server.core.config import get_settings
from llmbridge.server.core.litellm_client import ChatModelHandle, bearer_headers
from llmbridge.server.providers.base import (
    CredentialResolution,
    ModelDescriptor,
    ProviderConfig,
    ProviderSettings,
)
from llmbridge.server.providers.credentials import resolve_provider_credentials
from llmbridge.server.providers.limits import (
    MAX_CONTEXT_TOKENS,
    completion_tokens_for,
    context_window_for,
)

logger = logging.getLogger(__name__)

PROVIDER_NAME = "NVIDIA"
DEFAULT_BASE_URL = "https://integrate.api.nvidia.com/v1"

# Identifier families served through the OpenAI-compatible listing
MODEL_ID_PATTERN = re.compile(r"^(gpt-|chatgpt-|o[0-9])")


def _static(name: str, label: str, context: int, completion: int) -> ModelDescriptor:
    return ModelDescriptor(
        name=name,
        label=label,
        provider=PROVIDER_NAME,
        max_token_allowed=context,
        max_completion_tokens=completion,
    )


# Stable fallback models; limits are conservative published values
NVIDIA_STATIC_MODELS: tuple[ModelDescriptor, ...] = (
    _static("gpt-4o", "GPT-4o", 128000, 4096),
    _static("gpt-4o-mini", "GPT-4o Mini", 128000, 4096),
    _static("gpt-3.5-turbo", "GPT-3.5 Turbo", 16000, 4096),
    # reasoning
    _static("o1-preview", "o1-preview", 128000, 32000),
    _static("o1-mini", "o1-mini", 128000, 65000),
    _static("qwen/qwen3-coder-480b-a35b-instruct", "Qwen3 Coder 480B", 32000, 8192),
    _static("moonshotai/kimi-k2-instruct-0905", "Kimi K2 Instruct", 32000, 8192),
)


class RemoteModel(BaseModel):
    """One entry of an OpenAI-compatible ``/models`` listing."""

    model_config = ConfigDict(extra="allow")

    id: str
    object: str
    context_length: int | None = None


class RemoteModelList(BaseModel):
    """Body of an OpenAI-compatible ``/models`` listing."""

    model_config = ConfigDict(extra="allow")

    data: list[RemoteModel]


def to_model_descriptor(remote: RemoteModel) -> ModelDescriptor:
    """Translate a listing entry into a ModelDescriptor.

    The label reports the window as listed; ``max_token_allowed`` is capped at
    MAX_CONTEXT_TOKENS.
    """
    context_window = context_window_for(remote.id, remote.context_length)
    return ModelDescriptor(
        name=remote.id,
        label=f"{remote.id} ({context_window // 1000}k context)",
        provider=PROVIDER_NAME,
        max_token_allowed=min(context_window, MAX_CONTEXT_TOKENS),
        max_completion_tokens=completion_tokens_for(remote.id),
    )


class NvidiaProvider:
    """Adapter for the NVIDIA-hosted OpenAI-compatible API."""

    name = PROVIDER_NAME
    get_api_key_link = "https://build.nvidia.com/"
    config = ProviderConfig(
        api_token_key="NVIDIA_API_KEY",
        base_url_key="NVIDIA_BASE_URL",
        base_url=DEFAULT_BASE_URL,
    )

    def __init__(self) -> None:
        self.static_models: list[ModelDescriptor] = list(NVIDIA_STATIC_MODELS)

    def _resolve(
        self,
        api_keys: Mapping[str, str] | None,
        settings: ProviderSettings | None,
        server_env: Mapping[str, str] | None,
    ) -> CredentialResolution:
        return resolve_provider_credentials(
            self.name,
            self.config,
            api_keys=api_keys,
            provider_settings=settings,
            server_env=server_env,
        )

    async def get_dynamic_models(
        self,
        api_keys: Mapping[str, str] | None = None,
        settings: ProviderSettings | None = None,
        server_env: Mapping[str, str] | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> list[ModelDescriptor]:
        """Fetch the account's models that the static catalog does not list.

        Args:
            api_keys: Explicit keys by provider name.
            settings: Stored settings for this provider.
            server_env: Server environment mapping.
            http_client: Client to send the request with; a fresh
                ``httpx.AsyncClient`` is used when omitted.

        Returns:
            Descriptors in listing order, filtered to OpenAI-family
            identifiers absent from ``static_models``, each id once.

        Raises:
            MissingCredentialError: No API key resolved; no request is made.
            TransportError: The request failed or returned an error status.
            MalformedResponseError: The body is not a valid model listing.
        """
        credentials = self._resolve(api_keys, settings, server_env)
        if not credentials.api_key:
            raise MissingCredentialError(provider=self.name)

        url = f"{credentials.base_url or DEFAULT_BASE_URL}/models"
        headers = bearer_headers(credentials.api_key)

        if http_client is not None:
            payload = await self._fetch_listing(http_client, url, headers)
        else:
            async with httpx.AsyncClient(timeout=get_settings().http_timeout) as client:
                payload = await self._fetch_listing(client, url, headers)

        try:
            listing = RemoteModelList.model_validate(payload)
        except ValidationError as e:
            raise MalformedResponseError(
                f"Unexpected model listing from {self.name} API: {e.error_count()} invalid field(s)",
                provider=self.name,
            ) from e

        # Static ids, then each listed id once; first occurrence wins
        seen_ids = {m.name for m in self.static_models}
        models: list[ModelDescriptor] = []
        for remote in listing.data:
            if remote.object != "model" or not MODEL_ID_PATTERN.match(remote.id):
                continue
            if remote.id in seen_ids:
                continue
            seen_ids.add(remote.id)
            models.append(to_model_descriptor(remote))

        logger.info(
            "Discovered %d new models from %s (%d listed)",
            len(models),
            self.name,
            len(listing.data),
        )
        return models

    async def _fetch_listing(
        self, client: httpx.AsyncClient, url: str, headers: dict[str, str]
    ) -> object:
        try:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "HTTP error listing models from %s: %s",
                self.name,
                e.response.status_code,
            )
            raise TransportError.from_httpx(e, provider=self.name) from e
        except httpx.HTTPError as e:
            logger.error("Request error listing models from %s: %s", self.name, str(e))
            raise TransportError.from_httpx(e, provider=self.name) from e
        except (httpx.InvalidURL, UnicodeEncodeError) as e:
            # Raised while building the request from caller-supplied URL or key
            logger.error("Invalid request to %s: %s", self.name, type(e).__name__)
            raise TransportError(
                f"Invalid request to {self.name} API: {type(e).__name__}",
                provider=self.name,
            ) from e

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(
                f"Model listing from {self.name} API is not valid JSON",
                provider=self.name,
            ) from e

    def get_model_instance(
        self,
        model: str,
        server_env: Mapping[str, str] | None = None,
        api_keys: Mapping[str, str] | None = None,
        provider_settings: Mapping[str, ProviderSettings] | None = None,
    ) -> ChatModelHandle:
        """Build a chat handle for ``model`` bound to the resolved endpoint.

        Raises:
            MissingCredentialError: No API key resolved.
        """
        settings = provider_settings.get(self.name) if provider_settings else None
        credentials = self._resolve(api_keys, settings, server_env)
        if not credentials.api_key:
            raise MissingCredentialError(provider=self.name)

        return ChatModelHandle(
            model=model,
            base_url=credentials.base_url or DEFAULT_BASE_URL,
            api_key=credentials.api_key,
            headers=bearer_headers(credentials.api_key),
        )
