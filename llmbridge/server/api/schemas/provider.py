"""Pydantic schemas for Provider API."""

from pydantic import BaseModel, Field

from llmbridge.server.providers.base import ModelDescriptor


class ProviderInfoResponse(BaseModel):
    """Schema for a registered provider adapter."""

    name: str = Field(..., description="Provider name", examples=["NVIDIA"])
    get_api_key_link: str = Field(
        ...,
        description="Where users obtain an API key",
        examples=["https://build.nvidia.com/"],
    )
    api_token_key: str = Field(
        ...,
        description="Environment variable holding the API key",
        examples=["NVIDIA_API_KEY"],
    )
    base_url_key: str = Field(
        ...,
        description="Environment variable holding the base URL",
        examples=["NVIDIA_BASE_URL"],
    )
    base_url: str = Field(
        ...,
        description="Default API endpoint",
        examples=["https://integrate.api.nvidia.com/v1"],
    )


class ProviderListResponse(BaseModel):
    """Schema for the provider list response."""

    items: list[ProviderInfoResponse] = Field(..., description="Registered providers")
    total: int = Field(..., description="Number of providers")


class ProviderModelsResponse(BaseModel):
    """Schema for a provider's model catalog."""

    provider: str = Field(..., description="Provider name")
    models: list[ModelDescriptor] = Field(..., description="Static then live models")
    error: str | None = Field(
        None,
        description="Why the live listing was skipped, when it failed",
    )
