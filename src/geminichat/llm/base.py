from abc import ABC, abstractmethod
from typing import Any

from .models import Content, LLMResponse


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    This module hides the design decision of how a conversation reaches the
    model. Implementations handle:
    - HTTP client setup and authentication
    - Request/response format conversion
    - Mapping transport and API failures onto the geminichat errors

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            response = await provider.chat_completion(contents)
        # Automatically cleaned up
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Name of the model requests are sent to."""

    @abstractmethod
    async def chat_completion(self, contents: list[Content], **kwargs: Any) -> LLMResponse:
        """Generate the next model turn for a conversation.

        Args:
            contents: Full conversation history, oldest first
            **kwargs: Provider-specific parameters

        Returns:
            LLMResponse containing generated content and metadata

        Raises:
            GeminiAPIError: The API answered with a non-success status
            UnexpectedResponseError: The success body had no usable text
            httpx.HTTPError: Transport failure
            ValueError: The body was not valid JSON
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "LLMProvider":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
