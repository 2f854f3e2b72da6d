"""Wire models for the Generative Language ``generateContent`` call.

Field names follow the REST API (camelCase on the wire, snake_case in
Python via aliases). Unknown response fields are ignored so that new API
additions never break parsing.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Part(BaseModel):
    """A fragment of message content (always plain text here)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    text: str | None = Field(default=None, description="Text of this part")


class Content(BaseModel):
    """One conversation turn: a role and its parts."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    role: str | None = Field(default=None, description="'user', 'model' (or a local role)")
    parts: list[Part] = Field(default_factory=list)


class GenerateContentRequest(BaseModel):
    """Request body: the whole conversation in order."""

    model_config = ConfigDict(frozen=True)

    contents: list[Content]

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body sent on the wire."""
        return self.model_dump(exclude_none=True)


class Candidate(BaseModel):
    """One proposed completion."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    content: Content | None = None
    finish_reason: str | None = Field(default=None, alias="finishReason")


class UsageMetadata(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    prompt_token_count: int = Field(default=0, alias="promptTokenCount")
    candidates_token_count: int = Field(default=0, alias="candidatesTokenCount")
    total_token_count: int = Field(default=0, alias="totalTokenCount")


class GenerateContentResponse(BaseModel):
    """Success body of ``generateContent``."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    candidates: list[Candidate] = Field(default_factory=list)
    usage_metadata: UsageMetadata | None = Field(default=None, alias="usageMetadata")


class LLMResponse(BaseModel):
    """Response from an LLM provider."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Generated text content")
    model: str = Field(description="Model that generated the response")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Token usage information"
    )
    latency: float = Field(default=0.0, description="Round-trip time in seconds")
