"""Conversation state and the request/response cycle."""

from .conversation import Conversation
from .models import Message, Role
from .notifications import (
    TOAST_TIMEOUT,
    ConsoleNotifier,
    Notifier,
    RecordingNotifier,
    ToastNotifier,
)
from .session import UNEXPECTED_FORMAT_MESSAGE, ChatSession

__all__ = [
    "TOAST_TIMEOUT",
    "UNEXPECTED_FORMAT_MESSAGE",
    "ChatSession",
    "ConsoleNotifier",
    "Conversation",
    "Message",
    "Notifier",
    "RecordingNotifier",
    "Role",
    "ToastNotifier",
]
