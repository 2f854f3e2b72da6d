"""
geminichat: a terminal chat client for the Google Gemini API.

Each module hides one design decision: the wire format lives in ``llm``,
conversation state and the send cycle in ``chat``, presentation in ``ui``
and process configuration in ``cli``.
"""

__version__ = "0.1.0"

from .chat import ChatSession, Conversation, Message, Role
from .errors import (
    ConfigurationError,
    GeminiAPIError,
    GeminiChatError,
    UnexpectedResponseError,
)
from .llm import LLMProvider, create_llm_provider

__all__ = [
    "ChatSession",
    "ConfigurationError",
    "Conversation",
    "GeminiAPIError",
    "GeminiChatError",
    "LLMProvider",
    "Message",
    "Role",
    "UnexpectedResponseError",
    "create_llm_provider",
]
