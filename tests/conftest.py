"""Pytest configuration and shared fixtures."""
import asyncio
import json
import os

import httpx
import pytest

from geminichat.llm import Content, GeminiProvider, LLMProvider, LLMResponse


class FakeProvider(LLMProvider):
    """In-memory provider that records every conversation it is sent."""

    def __init__(
        self,
        replies: list[str] | None = None,
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
        model: str = "fake-model",
    ) -> None:
        self.calls: list[list[Content]] = []
        self.closed = False
        self._replies = list(replies or [])
        self._error = error
        self._gate = gate
        self._model = model

    @property
    def model(self) -> str:
        return self._model

    async def chat_completion(self, contents, **kwargs) -> LLMResponse:
        self.calls.append(list(contents))
        if self._gate is not None:
            await self._gate.wait()
        if self._error is not None:
            raise self._error
        content = self._replies.pop(0) if self._replies else "ok"
        return LLMResponse(
            content=content,
            model=self._model,
            usage={"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5},
            latency=0.01,
        )

    async def close(self) -> None:
        self.closed = True


def gemini_reply(text: str, **extra) -> dict:
    """Build a minimal successful generateContent body."""
    body = {
        "candidates": [
            {"content": {"role": "model", "parts": [{"text": text}]}, "finishReason": "STOP"}
        ],
    }
    body.update(extra)
    return body


class RecordingTransport:
    """httpx.MockTransport wrapper that keeps every request it served."""

    def __init__(self, respond) -> None:
        self.requests: list[httpx.Request] = []
        self._respond = respond
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "gemini": os.getenv("GEMINI_API_KEY"),
    }


@pytest.fixture(scope="session")
def fake_provider_cls():
    """The FakeProvider class (session scoped so property tests can use it)."""
    return FakeProvider


@pytest.fixture(scope="session")
def reply_body():
    """Factory for successful response bodies."""
    return gemini_reply


@pytest.fixture
async def make_gemini():
    """Create GeminiProviders backed by a recording mock transport.

    Usage:
        transport, provider = make_gemini(lambda request: httpx.Response(200, json=...))
    """
    providers: list[GeminiProvider] = []

    def _make(respond, **config):
        recorder = RecordingTransport(respond)
        config.setdefault("api_key", "test-key")
        provider = GeminiProvider(transport=recorder.transport, **config)
        providers.append(provider)
        return recorder, provider

    yield _make

    for provider in providers:
        await provider.close()
