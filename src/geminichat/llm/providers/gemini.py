"""Google Gemini provider over the Generative Language REST API.

Talks to ``models/{model}:generateContent`` directly with httpx so the
HTTP status and the raw response shape stay visible to the caller.
Reference: https://ai.google.dev/api/generate-content

Note: the request is sent exactly once. There is no retry and, unless a
timeout is configured, no deadline on the call.
"""

import time
from collections.abc import Callable
from typing import Any

import httpx
from pydantic import ValidationError

from ...errors import GeminiAPIError, UnexpectedResponseError
from ..base import LLMProvider
from ..models import Content, GenerateContentRequest, GenerateContentResponse, LLMResponse

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash"

DebugCallback = Callable[[str, str, str], None]


class GeminiProvider(LLMProvider):
    """Google Gemini LLM provider implementation.

    Hidden design decisions:
    - httpx client initialization and lifetime
    - API key passed as the ``key`` query parameter
    - Error body parsing (``{"error": {"message": ...}}``)
    - Which part of the success body becomes the reply text
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = None,
        **client_kwargs: Any
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Google AI API key
            model: Model name (gemini-2.0-flash, gemini-2.5-flash, ...)
            base_url: API root, without trailing slash
            timeout: Request timeout in seconds, None waits indefinitely
            **client_kwargs: Additional kwargs for httpx.AsyncClient
                (e.g. ``transport`` for testing)
        """
        if not api_key:
            raise ValueError("Gemini provider requires a non-empty api_key")
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(timeout=timeout, **client_kwargs)
        self._debug_callback: DebugCallback | None = None

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    @property
    def endpoint(self) -> str:
        """URL of the generateContent method for the configured model."""
        return f"{self._base_url}/models/{self._model}:generateContent"

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback for request tracing.

        Args:
            callback: Called as callback(level, component, message)
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback is not None:
            self._debug_callback(level, "LLM", message)

    @staticmethod
    def _error_message(response: httpx.Response) -> str | None:
        """Pull ``error.message`` out of a failure body, if there is one."""
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict):
                message = error.get("message")
                if isinstance(message, str) and message:
                    return message
        return None

    @staticmethod
    def _extract_content(body: Any) -> tuple[str, dict[str, int] | None]:
        """Return ``candidates[0].content.parts[0].text`` and token usage.

        Raises:
            UnexpectedResponseError: If the body does not have that shape
        """
        try:
            parsed = GenerateContentResponse.model_validate(body)
        except ValidationError as e:
            raise UnexpectedResponseError(body=body) from e

        if not parsed.candidates:
            raise UnexpectedResponseError(body=body)
        content = parsed.candidates[0].content
        if content is None or not content.parts:
            raise UnexpectedResponseError(body=body)
        text = content.parts[0].text
        if text is None:
            raise UnexpectedResponseError(body=body)

        usage = None
        if parsed.usage_metadata is not None:
            usage = {
                "prompt_tokens": parsed.usage_metadata.prompt_token_count,
                "completion_tokens": parsed.usage_metadata.candidates_token_count,
                "total_tokens": parsed.usage_metadata.total_token_count,
            }
        return text, usage

    async def chat_completion(self, contents: list[Content], **kwargs: Any) -> LLMResponse:
        """Send the conversation and return the model's reply.

        Args:
            contents: Conversation history, oldest first
            **kwargs: Extra top-level body fields (e.g. ``generationConfig``)

        Returns:
            LLMResponse with the reply text, model name, usage and latency
        """
        payload = GenerateContentRequest(contents=contents).to_payload()
        payload.update(kwargs)

        self._debug("debug", f"POST {self.endpoint} ({len(contents)} turns)")
        started = time.perf_counter()

        response = await self._client.post(
            self.endpoint,
            params={"key": self._api_key},
            headers={"Content-Type": "application/json"},
            json=payload,
        )
        latency = time.perf_counter() - started

        if not response.is_success:
            server_message = self._error_message(response)
            self._debug("error", f"API error {response.status_code}: {response.text[:500]}")
            raise GeminiAPIError(
                response.status_code,
                response.reason_phrase,
                server_message,
            )

        body = response.json()
        try:
            text, usage = self._extract_content(body)
        except UnexpectedResponseError:
            self._debug("error", f"Unexpected API response structure: {str(body)[:500]}")
            raise

        self._debug("info", f"Reply received in {latency:.2f}s ({len(text)} chars)")
        return LLMResponse(content=text, model=self._model, usage=usage, latency=latency)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
