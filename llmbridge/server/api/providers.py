"""Provider catalog API endpoints."""

import logging
from collections.abc import Mapping

from fastapi import APIRouter, Depends, Header, HTTPException, Query, status

from llmbridge.exceptions import UnknownProviderError
from llmbridge.server.api.schemas.provider import (
    ProviderInfoResponse,
    ProviderListResponse,
    ProviderModelsResponse,
)
from llmbridge.server.core.config import get_settings
from llmbridge.server.providers import LLMProvider, ProviderSettings, get_provider, list_providers
from llmbridge.server.providers.manager import get_model_list

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{get_settings().api_prefix}/providers", tags=["providers"])


def get_server_env() -> Mapping[str, str]:
    """Server environment consulted during credential resolution.

    Process settings are consulted separately; override this dependency to
    inject deployment-specific values.
    """
    return {}


def _provider_info(provider: LLMProvider) -> ProviderInfoResponse:
    return ProviderInfoResponse(
        name=provider.name,
        get_api_key_link=provider.get_api_key_link,
        api_token_key=provider.config.api_token_key,
        base_url_key=provider.config.base_url_key,
        base_url=provider.config.base_url,
    )


@router.get("", response_model=ProviderListResponse)
async def list_provider_adapters() -> ProviderListResponse:
    """List registered provider adapters.

    Returns:
        Provider names, key links and configuration keys
    """
    items = [_provider_info(p) for p in list_providers()]
    return ProviderListResponse(items=items, total=len(items))


@router.get("/{name}/models", response_model=ProviderModelsResponse)
async def list_provider_models(
    name: str,
    dynamic: bool = Query(True, description="Include the provider's live catalog"),
    x_provider_api_key: str | None = Header(None),
    x_provider_base_url: str | None = Header(None),
    server_env: Mapping[str, str] = Depends(get_server_env),
) -> ProviderModelsResponse:
    """List a provider's models.

    Args:
        name: Provider name (case-insensitive)
        dynamic: Whether to query the live catalog
        x_provider_api_key: Request-level API key
        x_provider_base_url: Request-level base URL
        server_env: Server environment mapping

    Returns:
        Static catalog followed by live models; ``error`` explains a failed
        live listing

    Raises:
        HTTPException: If the provider is not registered
    """
    try:
        provider = get_provider(name)
    except UnknownProviderError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    api_keys = {provider.name: x_provider_api_key} if x_provider_api_key else None
    provider_settings = (
        {provider.name: ProviderSettings(base_url=x_provider_base_url)}
        if x_provider_base_url
        else None
    )

    result = await get_model_list(
        provider,
        api_keys=api_keys,
        provider_settings=provider_settings,
        server_env=server_env,
        include_dynamic=dynamic,
    )
    return ProviderModelsResponse(
        provider=result.provider,
        models=result.models,
        error=result.error,
    )
