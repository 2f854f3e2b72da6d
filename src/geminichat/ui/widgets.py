"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Message bubble rendering per role
- Input history and the Enter / Shift+Enter split
- Metrics display formatting
- Log rendering and level filtering
"""

from datetime import datetime

from rich.text import Text
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click, Key
from textual.message import Message as TextualMessage
from textual.widgets import Button, Markdown, RichLog, Static, TextArea

from ..chat.models import Message, Role
from .config import (
    EMPTY_STATE_HINT,
    EMPTY_STATE_TITLE,
    INPUT_HISTORY_MAX_SIZE,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    MESSAGE_TIMESTAMP_FORMAT,
    LogLevel,
)


class MessageBubble(Vertical):
    """One conversation entry. Clicking it copies the text to the clipboard."""

    def __init__(self, message: Message, *args, **kwargs) -> None:
        super().__init__(*args, classes=f"{message.role.value}-message", **kwargs)
        self.message = message

    def compose(self):
        timestamp = self.message.timestamp.strftime(MESSAGE_TIMESTAMP_FORMAT)
        yield Static(
            Text(f"{self.message.role.label} [{timestamp}]"),
            classes="message-header",
        )
        if self.message.role == Role.MODEL:
            yield Markdown(self.message.text, classes="message-content")
        else:
            # Plain text keeps user input and error details verbatim
            yield Static(Text(self.message.text), classes="message-content")

    def on_click(self, event: Click) -> None:
        event.stop()
        self.app.copy_to_clipboard(self.message.text)
        self.app.notify("Copied to clipboard", timeout=2)


class ChatHistoryWidget(VerticalScroll):
    """Scrollable conversation view. Always scrolls to the newest message."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "Conversation history"
    ALLOW_MAXIMIZE = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._messages: list[Message] = []

    def compose(self):
        yield Static(
            Text(f"{EMPTY_STATE_TITLE}\n{EMPTY_STATE_HINT}"),
            id="empty-state",
        )

    @property
    def rendered_messages(self) -> list[Message]:
        """Messages rendered so far, in display order."""
        return list(self._messages)

    def add_message(self, message: Message) -> None:
        """Render a message at the bottom and scroll to it."""
        if not self._messages:
            for placeholder in self.query("#empty-state"):
                placeholder.remove()
        self._messages.append(message)
        self.mount(MessageBubble(message))
        self.border_subtitle = f"{len(self._messages)} messages"
        self.call_after_refresh(self.scroll_end, animate=False)

    def get_last_response(self) -> str | None:
        """Get the last model reply."""
        for message in reversed(self._messages):
            if message.role == Role.MODEL:
                return message.text
        return None


class PromptArea(TextArea):
    """Multi-line prompt where Enter submits and Shift+Enter adds a newline."""

    class SubmitRequested(TextualMessage):
        """Posted when the user presses Enter."""

    async def _on_key(self, event: Key) -> None:
        # prevent_default stops TextArea's own key handler from inserting "\n"
        if event.key == "enter":
            event.prevent_default()
            event.stop()
            self.post_message(self.SubmitRequested())
        elif event.key == "shift+enter":
            event.prevent_default()
            event.stop()
            self.insert("\n")


class ChatInputBar(Horizontal):
    """Chat input bar with a prompt area and a Send button."""

    class Submitted(TextualMessage):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1
        self._busy = False

    def compose(self):
        text_area = PromptArea(id="chat-input", show_line_numbers=False, soft_wrap=True)
        text_area.cursor_blink = False
        yield text_area
        yield Button("Send", id="send-btn", disabled=True).with_tooltip(
            "Send message (Enter)"
        )

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", PromptArea)
        text_area.highlight_cursor_line = False
        text_area.focus()

    @property
    def text(self) -> str:
        return self.query_one("#chat-input", PromptArea).text

    def _refresh_send_button(self) -> None:
        button = self.query_one("#send-btn", Button)
        button.disabled = self._busy or not self.text.strip()

    def set_busy(self, busy: bool) -> None:
        """Disable input while a request is in flight."""
        self._busy = busy
        text_area = self.query_one("#chat-input", PromptArea)
        text_area.disabled = busy
        self._refresh_send_button()
        if not busy:
            text_area.focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_prompt_area_submit_requested(self, event: PromptArea.SubmitRequested) -> None:
        event.stop()
        self._submit()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self._refresh_send_button()

    def on_key(self, event: Key) -> None:
        """Handle keyboard shortcuts.

        Note: many terminals cannot report Shift+Enter, so Ctrl+J also
        submits.
        """
        if event.key == "ctrl+j":
            self._submit()
            event.prevent_default()
            event.stop()
        elif event.key == "up" and self._is_cursor_at_start():
            self._navigate_history(-1)
            event.prevent_default()
            event.stop()
        elif event.key == "down" and self._is_cursor_at_end():
            self._navigate_history(1)
            event.prevent_default()
            event.stop()

    def _is_cursor_at_start(self) -> bool:
        text_area = self.query_one("#chat-input", PromptArea)
        return text_area.cursor_location == (0, 0)

    def _is_cursor_at_end(self) -> bool:
        text_area = self.query_one("#chat-input", PromptArea)
        lines = text_area.text.split("\n")
        last_row = len(lines) - 1
        last_col = len(lines[-1]) if lines else 0
        return text_area.cursor_location == (last_row, last_col)

    def _navigate_history(self, direction: int) -> None:
        if not self._history:
            return
        text_area = self.query_one("#chat-input", PromptArea)
        if direction < 0:  # Up
            if self._history_index == -1:
                self._history_index = len(self._history) - 1
            elif self._history_index > 0:
                self._history_index -= 1
        else:  # Down
            if self._history_index < len(self._history) - 1:
                self._history_index += 1
            else:
                self._history_index = -1
                text_area.text = ""
                return
        text_area.text = self._history[self._history_index]

    def _submit(self) -> None:
        if self._busy:
            return
        text_area = self.query_one("#chat-input", PromptArea)
        value = text_area.text
        if not value.strip():
            return
        if not self._history or self._history[-1] != value:
            self._history.append(value)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1
        text_area.text = ""
        self.post_message(self.Submitted(value))

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", PromptArea).focus()


class MetricsPanel(Static):
    """One-line summary: message count, last latency and token usage."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._messages = 0
        self._latency = 0.0
        self._input_tokens = 0
        self._output_tokens = 0

    def on_mount(self) -> None:
        self._update_display()

    def update_metrics(
        self,
        messages: int | None = None,
        latency: float | None = None,
        input_tokens: int = 0,
        output_tokens: int = 0,
    ) -> None:
        """Update the metrics display.

        Args:
            messages: Number of messages in the conversation
            latency: Round-trip time of the last request in seconds
            input_tokens: Prompt tokens to add to the running total
            output_tokens: Completion tokens to add to the running total
        """
        if messages is not None:
            self._messages = messages
        if latency is not None:
            self._latency = latency
        self._input_tokens += input_tokens
        self._output_tokens += output_tokens
        self._update_display()

    def _update_display(self) -> None:
        total = self._input_tokens + self._output_tokens
        parts = [
            f"[bold cyan]Messages:[/] {self._messages}",
            f"[bold yellow]Last:[/] {self._latency:.2f}s",
            f"[bold magenta]Tokens:[/] {total:,} "
            f"[dim]({self._input_tokens:,}/{self._output_tokens:,})[/]",
        ]
        self.update("  ".join(parts))

    def get_plain_text(self) -> str:
        """Get metrics as plain text for clipboard."""
        total = self._input_tokens + self._output_tokens
        return (
            f"Messages: {self._messages}  "
            f"Last: {self._latency:.2f}s  "
            f"Tokens: {total} ({self._input_tokens}/{self._output_tokens})"
        )


class DebugPanel(RichLog):
    """Log panel for request tracing with level filtering.

    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    _level_colors = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    _component_colors = {
        "TUI": "cyan",
        "Session": "green",
        "LLM": "magenta",
    }

    def __init__(self, *args, log_level: LogLevel = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = LogLevel(log_level)

    @property
    def log_level(self) -> LogLevel:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = LogLevel(level)
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {self._log_level.name}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def write_log(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Session, LLM)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self._level_colors.get(level, "white")
        comp_color = self._component_colors.get(component, "white")

        line = Text()
        line.append(f"{timestamp} ", style="dim")
        line.append(f"{LogLevel(level).name:<7} ", style=level_color)
        line.append(f"[{component}] ", style=comp_color)
        line.append(message)
        self.write(line)

    def debug(self, component: str, message: str) -> None:
        """Log a DEBUG level message."""
        self.write_log(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        """Log an INFO level message."""
        self.write_log(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        """Log a WARNING level message."""
        self.write_log(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        """Log an ERROR level message."""
        self.write_log(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
