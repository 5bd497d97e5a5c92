"""Aggregate static and live model catalogs for a provider."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from llmbridge.exceptions import ProviderError
from llmbridge.server.providers.base import LLMProvider, ModelDescriptor, ProviderSettings

logger = logging.getLogger(__name__)


@dataclass
class ModelListResult:
    """Models offered by one provider, with the live-catalog failure if any."""

    provider: str
    models: list[ModelDescriptor] = field(default_factory=list)
    error: str | None = None


async def get_model_list(
    provider: LLMProvider,
    *,
    api_keys: Mapping[str, str] | None = None,
    provider_settings: Mapping[str, ProviderSettings] | None = None,
    server_env: Mapping[str, str] | None = None,
    include_dynamic: bool = True,
) -> ModelListResult:
    """Return the static catalog followed by the provider's live models.

    The adapter raises on a failed live listing; this is the one place that
    falls back. A ProviderError from the live listing is logged and the
    static catalog is returned with ``error`` set.

    Args:
        provider: Adapter to query.
        api_keys: Explicit keys by provider name.
        provider_settings: Stored settings by provider name.
        server_env: Server environment mapping.
        include_dynamic: Query the live catalog as well as the static one.

    Returns:
        ModelListResult; empty when the provider is disabled in its settings.
    """
    settings = (provider_settings or {}).get(provider.name)
    if settings is not None and not settings.enabled:
        logger.debug("Provider %s disabled, skipping", provider.name)
        return ModelListResult(provider=provider.name)

    models = list(provider.static_models)
    if not include_dynamic:
        return ModelListResult(provider=provider.name, models=models)

    try:
        dynamic = await provider.get_dynamic_models(api_keys, settings, server_env)
    except ProviderError as e:
        logger.warning(
            "Live model listing failed for %s, using static catalog: %s",
            provider.name,
            e.message,
        )
        return ModelListResult(provider=provider.name, models=models, error=e.message)

    models.extend(dynamic)
    return ModelListResult(provider=provider.name, models=models)
