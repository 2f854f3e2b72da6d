"""Conversation data model.

Hides how a message is represented locally and how it maps onto a wire
``Content`` turn.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..llm.models import Content, Part


class Role(str, Enum):
    """Conversation participant tag."""

    USER = "user"
    MODEL = "model"
    ERROR = "error"

    @property
    def label(self) -> str:
        """Human-readable name shown above a message."""
        return _LABELS[self]


_LABELS = {
    Role.USER: "You",
    Role.MODEL: "Gemini",
    Role.ERROR: "Error",
}


class Message(BaseModel):
    """A single entry of the conversation. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Who produced the message")
    text: str = Field(description="Plain text of the message")
    timestamp: datetime = Field(default_factory=datetime.now, exclude=True)

    @classmethod
    def user(cls, text: str) -> "Message":
        return cls(role=Role.USER, text=text)

    @classmethod
    def model(cls, text: str) -> "Message":
        return cls(role=Role.MODEL, text=text)

    @classmethod
    def error(cls, text: str) -> "Message":
        return cls(role=Role.ERROR, text=text)

    def to_content(self) -> Content:
        """Wire form: ``{"role": ..., "parts": [{"text": ...}]}``."""
        return Content(role=self.role.value, parts=[Part(text=self.text)])
