"""Main Textual TUI application.

Wires a ChatSession to the widgets: conversation appends become message
bubbles, the session's busy flag drives the input bar and the thinking
indicator, and notifications become toasts.
"""

import asyncio
import contextlib

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static, TextArea

from ..chat import ChatSession, Message, ToastNotifier
from ..llm.base import LLMProvider
from .config import APP_SUBTITLE, THINKING_TEXT, LogLevel
from .styles import APP_CSS
from .themes import GEMINI_INDIGO
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, MetricsPanel


class GeminiChatApp(App):
    """Textual TUI for chatting with a Gemini model."""

    CSS = APP_CSS
    TITLE = "Gemini Chat"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
        Binding("ctrl+y", "copy_metrics", "Copy Metrics"),
        Binding("ctrl+d", "toggle_debug", "Log", priority=True),
    ]

    def __init__(
        self,
        provider: LLMProvider,
        log_level: str | None = None,
        exclude_error_turns: bool = False,
    ) -> None:
        super().__init__()
        self._provider = provider
        self._log_level = log_level
        self.session = ChatSession(
            provider,
            ToastNotifier(self),
            exclude_error_turns=exclude_error_turns,
        )

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(id="chat-history")
        yield Static(THINKING_TEXT, id="thinking")
        yield DebugPanel(id="debug-panel")

        with Vertical(id="bottom-bar"):
            yield MetricsPanel(id="metrics")
            yield ChatInputBar(id="chat-input-bar")

        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(GEMINI_INDIGO)
        self.theme = "gemini-indigo"
        self.sub_title = f"{APP_SUBTITLE} | {self._provider.model}"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.parse(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {log_panel.log_level.name}")

        def debug_callback(level: str, component: str, message: str) -> None:
            """Route debug messages to the log panel."""
            log_panel.write_log(component, message, LogLevel.parse(level))

        self.session.set_debug_callback(debug_callback)
        self.session.conversation.add_listener(self._on_message_appended)
        self.session.add_state_listener(self._on_session_state)

        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def _on_message_appended(self, message: Message) -> None:
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        chat.add_message(message)
        self.query_one("#metrics", MetricsPanel).update_metrics(
            messages=len(self.session.conversation)
        )

    def _on_session_state(self, session: ChatSession) -> None:
        busy = session.awaiting_response
        self.query_one("#chat-input-bar", ChatInputBar).set_busy(busy)
        self.query_one("#thinking", Static).set_class(busy, "-active")
        if busy:
            return

        response = session.last_response
        if response is not None:
            usage = response.usage or {}
            self.query_one("#metrics", MetricsPanel).update_metrics(
                latency=response.latency,
                input_tokens=usage.get("prompt_tokens", 0),
                output_tokens=usage.get("completion_tokens", 0),
            )
            session.last_response = None

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self.session.pending_input = event.text_area.text

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        self._dispatch(event.value)

    @work(group="dispatch")
    async def _dispatch(self, text: str) -> None:
        """Run one send cycle as an async worker on the app's event loop."""
        await self.session.send(text)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_metrics(self) -> None:
        """Copy metrics to clipboard."""
        metrics = self.query_one("#metrics", MetricsPanel)
        self.copy_to_clipboard(metrics.get_plain_text())
        self.notify("Metrics copied")

    def action_copy_last_response(self) -> None:
        """Copy last model response to clipboard."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        response = chat.get_last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_textual_tui(
    provider: LLMProvider,
    log_level: str | None = None,
    exclude_error_turns: bool = False,
) -> None:
    """Run the Textual TUI.

    Args:
        provider: LLM provider instance (closed when the app exits)
        log_level: Log level for panel (debug/info/warning/error), None to hide
        exclude_error_turns: Leave error messages out of request payloads
    """
    app = GeminiChatApp(
        provider=provider,
        log_level=log_level,
        exclude_error_turns=exclude_error_turns,
    )
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        with contextlib.suppress(RuntimeError):
            await provider.close()
