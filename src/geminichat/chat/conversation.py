"""In-memory conversation store.

Append-only: insertion order is display order, and nothing is ever edited
or removed while the process lives.
"""

from collections.abc import Callable, Iterator

from ..llm.models import Content
from .models import Message, Role

AppendListener = Callable[[Message], None]


class Conversation:
    """Ordered, append-only sequence of messages with change listeners."""

    def __init__(self, messages: list[Message] | None = None) -> None:
        self._messages: list[Message] = list(messages or [])
        self._listeners: list[AppendListener] = []

    def add_listener(self, listener: AppendListener) -> None:
        """Register a callback invoked with every appended message."""
        self._listeners.append(listener)

    def append(self, message: Message) -> None:
        """Add a message to the end and notify listeners."""
        if not isinstance(message, Message):
            raise TypeError(f"Expected Message, got {type(message).__name__}")
        self._messages.append(message)
        for listener in list(self._listeners):
            listener(message)

    @property
    def messages(self) -> tuple[Message, ...]:
        """Snapshot of all messages in insertion order."""
        return tuple(self._messages)

    def last(self, role: Role | None = None) -> Message | None:
        """Newest message, optionally restricted to one role."""
        for message in reversed(self._messages):
            if role is None or message.role == role:
                return message
        return None

    def to_contents(self, exclude_errors: bool = False) -> list[Content]:
        """Wire form of the conversation, oldest first."""
        return [
            m.to_content()
            for m in self._messages
            if not (exclude_errors and m.role == Role.ERROR)
        ]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.messages)
