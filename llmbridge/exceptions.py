"""llmbridge exceptions."""

from __future__ import annotations

import httpx


class LLMBridgeError(Exception):
    """Base exception for all llmbridge errors."""


class UnknownProviderError(LLMBridgeError):
    """Raised when a provider name is not registered."""

    def __init__(self, name: str, *, available: list[str]) -> None:
        super().__init__(f"Unknown provider '{name}'. Available: {available}")
        self.name = name
        self.available = available


class ProviderError(LLMBridgeError):
    """Raised when a provider adapter cannot complete an operation."""

    message: str
    provider: str

    def __init__(self, message: str, *, provider: str) -> None:
        super().__init__(message)
        self.message = message
        self.provider = provider


class MissingCredentialError(ProviderError):
    """Raised when no API key resolves for a provider."""

    def __init__(self, *, provider: str) -> None:
        super().__init__(f"Missing API Key configuration for {provider} API", provider=provider)


class TransportError(ProviderError):
    """Raised when the HTTP call to the provider fails or returns an error status."""

    status_code: int | None
    request: httpx.Request | None

    def __init__(
        self,
        message: str,
        *,
        provider: str,
        request: httpx.Request | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, provider=provider)
        self.request = request
        self.status_code = status_code

    @classmethod
    def from_httpx(cls, exc: httpx.HTTPError, *, provider: str) -> TransportError:
        try:
            request = exc.request
        except RuntimeError:
            request = None

        if isinstance(exc, httpx.HTTPStatusError):
            status_code = exc.response.status_code
            message = f"HTTP {status_code} from {provider} API"
        else:
            status_code = None
            message = f"Request to {provider} API failed: {exc}"

        return cls(message, provider=provider, request=request, status_code=status_code)


class MalformedResponseError(ProviderError):
    """Raised when the provider returns a payload of unexpected shape."""
