"""
LiteLLM-backed chat model handle for OpenAI-compatible endpoints.

A ChatModelHandle binds a model identifier to a base URL, an API key and the
request headers. Building one performs no I/O; each ``complete`` or
``complete_stream`` call issues exactly one ``litellm.acompletion`` request.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, AsyncIterator, Dict, List

import litellm
from litellm import acompletion
from litellm.exceptions import AuthenticationError, BadRequestError

logger = logging.getLogger(__name__)

# LiteLLM route prefix for custom OpenAI-compatible endpoints
OPENAI_COMPATIBLE_PREFIX = "openai/"

litellm.suppress_debug_info = True


def bearer_headers(api_key: str) -> Dict[str, str]:
    """Request headers for Bearer-authenticated JSON APIs."""
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }


@dataclass(frozen=True)
class ChatModelHandle:
    """
    Ready-to-use client handle for one model on one endpoint.

    Usage:
        handle = provider.get_model_instance("gpt-4o", server_env={})

        response = await handle.complete(
            messages=[{"role": "user", "content": "Hello"}]
        )

        async for chunk in handle.complete_stream(
            messages=[{"role": "user", "content": "Hello"}]
        ):
            print(chunk)
    """

    model: str
    base_url: str
    api_key: str = field(repr=False)
    headers: Dict[str, str] = field(default_factory=dict, repr=False, hash=False)

    @property
    def litellm_model(self) -> str:
        """Model name with the LiteLLM OpenAI-compatible route prefix."""
        if self.model.startswith(OPENAI_COMPATIBLE_PREFIX):
            return self.model
        return f"{OPENAI_COMPATIBLE_PREFIX}{self.model}"

    def _completion_kwargs(
        self, messages: List[Dict[str, str]], stream: bool, **kwargs
    ) -> Dict[str, Any]:
        return {
            "model": self.litellm_model,
            "messages": messages,
            "stream": stream,
            "api_base": self.base_url,
            "api_key": self.api_key,
            "extra_headers": dict(self.headers),
            **kwargs,
        }

    async def complete(self, messages: List[Dict[str, str]], **kwargs) -> Any:
        """
        Execute a non-streaming completion.

        Args:
            messages: List of message dicts with "role" and "content"
            **kwargs: Additional arguments passed to litellm.acompletion
                (temperature, max_tokens, timeout, ...)

        Returns:
            LiteLLM completion response

        Raises:
            AuthenticationError: Invalid API credentials
            BadRequestError: Invalid request parameters
        """
        try:
            response = await acompletion(**self._completion_kwargs(messages, False, **kwargs))
        except AuthenticationError as e:
            logger.error("Authentication failed for model %s: %s", self.model, e)
            raise
        except BadRequestError as e:
            logger.error("Bad request for model %s: %s", self.model, e)
            raise

        logger.debug("Completion successful for model %s", self.model)
        return response

    async def complete_stream(
        self, messages: List[Dict[str, str]], **kwargs
    ) -> AsyncIterator[Any]:
        """Execute a streaming completion, yielding LiteLLM chunks."""
        try:
            response = await acompletion(**self._completion_kwargs(messages, True, **kwargs))
        except AuthenticationError as e:
            logger.error("Authentication failed for model %s: %s", self.model, e)
            raise
        except BadRequestError as e:
            logger.error("Bad request for model %s: %s", self.model, e)
            raise

        async for chunk in response:
            yield chunk

        logger.debug("Streaming completed for model %s", self.model)
