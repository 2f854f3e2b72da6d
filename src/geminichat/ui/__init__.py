"""Terminal UI module for geminichat.

Provides a Textual-based TUI around a ChatSession.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (message bubbles, input bar, metrics, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette and theme configuration
- config.py: UI constants and log levels
- app.py: Application orchestration (user interaction flow)
"""

from .app import GeminiChatApp, run_textual_tui
from .config import LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, MessageBubble, MetricsPanel

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "GeminiChatApp",
    "LogLevel",
    "MessageBubble",
    "MetricsPanel",
    "run_textual_tui",
]
