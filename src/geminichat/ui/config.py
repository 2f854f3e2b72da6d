"""UI constants: log panel levels, display strings and limits."""

from enum import IntEnum


class LogLevel(IntEnum):
    """Log panel thresholds. A line is shown when its level >= the panel's."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Level for a ``--log-level`` or debug-callback name; unknown names map to DEBUG."""
        return cls.__members__.get(value.upper(), cls.DEBUG)


# Header and placeholders
APP_SUBTITLE = "Powered by Google Gemini API"
EMPTY_STATE_TITLE = "Start a conversation!"
EMPTY_STATE_HINT = "Type your message below and press Enter."
THINKING_TEXT = "Gemini is thinking..."

# Message bubbles
MESSAGE_TIMESTAMP_FORMAT = "%H:%M"

# Prompt history (Up/Down)
INPUT_HISTORY_MAX_SIZE = 50

# Log panel
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 300
