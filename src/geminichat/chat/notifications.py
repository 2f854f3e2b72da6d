"""Transient user notifications (toasts).

A notification is fire-and-forget: it is shown and then removed by a fixed
timer. There is no queue, no stacking limit and no dismissal API.
"""

from typing import TYPE_CHECKING, Literal, Protocol

from rich.console import Console
from rich.text import Text

if TYPE_CHECKING:
    from textual.app import App

Severity = Literal["information", "warning", "error"]

TOAST_TIMEOUT = 4.0  # Seconds before a toast removes itself


class Notifier(Protocol):
    """Anything that can surface a short message to the user."""

    def notify(self, message: str, severity: Severity = "information") -> None: ...


class ToastNotifier:
    """Shows notifications as Textual toasts that expire after TOAST_TIMEOUT."""

    def __init__(self, app: "App", timeout: float = TOAST_TIMEOUT) -> None:
        self._app = app
        self._timeout = timeout

    def notify(self, message: str, severity: Severity = "information") -> None:
        self._app.notify(message, severity=severity, timeout=self._timeout, markup=False)


class ConsoleNotifier:
    """Prints notifications on a Rich console (headless mode)."""

    _styles = {
        "information": "cyan",
        "warning": "yellow",
        "error": "red",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    def notify(self, message: str, severity: Severity = "information") -> None:
        style = self._styles.get(severity, "white")
        self._console.print(Text(message, style=style))


class RecordingNotifier:
    """Keeps notifications in memory, in the order they were raised."""

    def __init__(self) -> None:
        self.notifications: list[tuple[str, Severity]] = []

    def notify(self, message: str, severity: Severity = "information") -> None:
        self.notifications.append((message, severity))

    @property
    def messages(self) -> list[str]:
        return [message for message, _ in self.notifications]
