"""llmbridge: provider adapters for OpenAI-compatible LLM inference APIs."""

from llmbridge.exceptions import (
    LLMBridgeError,
    MalformedResponseError,
    MissingCredentialError,
    ProviderError,
    TransportError,
    UnknownProviderError,
)
from llmbridge.server.core.litellm_client import ChatModelHandle
from llmbridge.server.providers import (
    ModelDescriptor,
    NvidiaProvider,
    ProviderSettings,
    get_provider,
    list_providers,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ChatModelHandle",
    "LLMBridgeError",
    "MalformedResponseError",
    "MissingCredentialError",
    "ModelDescriptor",
    "NvidiaProvider",
    "ProviderError",
    "ProviderSettings",
    "TransportError",
    "UnknownProviderError",
    "get_provider",
    "list_providers",
]
