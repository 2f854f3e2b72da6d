"""Chat session: conversation state plus the send cycle.

One ``ChatSession`` owns the conversation and the two transient flags
(``pending_input`` and ``awaiting_response``). The provider and the
notifier are injected so the same session drives the TUI, the headless
CLI and the tests.
"""

from collections.abc import Callable

from ..errors import UnexpectedResponseError
from ..llm.base import LLMProvider
from ..llm.models import LLMResponse
from .conversation import Conversation
from .models import Message
from .notifications import Notifier

UNEXPECTED_FORMAT_MESSAGE = "Received an unexpected response format from the AI."

DebugCallback = Callable[[str, str, str], None]
StateListener = Callable[["ChatSession"], None]


class ChatSession:
    """Single-request-at-a-time dispatcher over a conversation.

    Example:
        session = ChatSession(provider, RecordingNotifier())
        reply = await session.send("Hello")
    """

    def __init__(
        self,
        provider: LLMProvider,
        notifier: Notifier,
        conversation: Conversation | None = None,
        exclude_error_turns: bool = False,
    ) -> None:
        """Create a session.

        Args:
            provider: LLM provider the conversation is sent to
            notifier: Surface for transient notifications
            conversation: Existing conversation (a new empty one by default)
            exclude_error_turns: Leave error-role messages out of the request
                payload. Off by default, so the payload mirrors the store.
        """
        self.provider = provider
        self.notifier = notifier
        self.conversation = conversation if conversation is not None else Conversation()
        self.exclude_error_turns = exclude_error_turns
        self.pending_input = ""
        self.last_response: LLMResponse | None = None
        self._awaiting_response = False
        self._state_listeners: list[StateListener] = []
        self._debug_callback: DebugCallback | None = None

    @property
    def awaiting_response(self) -> bool:
        """True while a request is in flight."""
        return self._awaiting_response

    def _set_awaiting_response(self, value: bool) -> None:
        self._awaiting_response = value
        for listener in list(self._state_listeners):
            listener(self)

    def add_state_listener(self, listener: StateListener) -> None:
        """Register a callback invoked whenever ``awaiting_response`` changes."""
        self._state_listeners.append(listener)

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback for session and provider tracing.

        Args:
            callback: Called as callback(level, component, message)
        """
        self._debug_callback = callback
        if hasattr(self.provider, "set_debug_callback"):
            self.provider.set_debug_callback(callback)

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback is not None:
            self._debug_callback(level, "Session", message)

    def can_send(self, text: str) -> bool:
        """Whether ``send(text)`` would dispatch a request."""
        return bool(text.strip()) and not self._awaiting_response

    async def send(self, text: str | None = None) -> Message | None:
        """Send one user turn and record the outcome.

        Empty or whitespace-only text, or a call made while another request
        is in flight, does nothing. Otherwise the user message is appended
        before any network activity, and exactly one of the following
        happens once the call returns:

        - the model reply is appended and returned
        - the body had an unexpected shape: a notification is shown and
          nothing is appended
        - the call failed: a notification is shown and an error message
          is appended

        ``awaiting_response`` is always false again when this returns.

        Args:
            text: Text to send. Defaults to ``pending_input``.

        Returns:
            The appended model message, or None
        """
        if text is None:
            text = self.pending_input
        if not self.can_send(text):
            return None

        history = self.conversation.to_contents(exclude_errors=self.exclude_error_turns)
        user_message = Message.user(text)
        self.conversation.append(user_message)
        self.pending_input = ""
        self._set_awaiting_response(True)

        contents = [*history, user_message.to_content()]
        self._debug("info", f"Sending {len(contents)} turn(s) to {self.provider.model}")

        try:
            response = await self.provider.chat_completion(contents)
        except UnexpectedResponseError:
            self.notifier.notify(UNEXPECTED_FORMAT_MESSAGE, "error")
            return None
        except Exception as e:
            error_text = str(e) or type(e).__name__
            self._debug("error", f"Error sending message: {error_text}")
            self.notifier.notify(f"Error: {error_text}", "error")
            self.conversation.append(Message.error(f"Error: {error_text}. Please try again."))
            return None
        else:
            self.last_response = response
            reply = Message.model(response.content)
            self.conversation.append(reply)
            return reply
        finally:
            self._set_awaiting_response(False)
