from .base import LLMProvider
from .factory import create_llm_provider
from .models import (
    Candidate,
    Content,
    GenerateContentRequest,
    GenerateContentResponse,
    LLMResponse,
    Part,
)
from .providers import GeminiProvider

__all__ = [
    "Candidate",
    "Content",
    "GeminiProvider",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "LLMProvider",
    "LLMResponse",
    "Part",
    "create_llm_provider",
]
