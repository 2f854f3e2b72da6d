"""Unit tests for the notification surfaces."""
import io

from rich.console import Console

from geminichat.chat import TOAST_TIMEOUT, ConsoleNotifier, RecordingNotifier, ToastNotifier


class FakeApp:
    def __init__(self):
        self.calls = []

    def notify(self, message, **kwargs):
        self.calls.append((message, kwargs))


def test_toast_timeout_is_four_seconds():
    assert TOAST_TIMEOUT == 4.0


def test_toast_notifier_uses_fixed_timeout():
    app = FakeApp()
    notifier = ToastNotifier(app)

    notifier.notify("Error: boom", "error")

    assert app.calls == [
        ("Error: boom", {"severity": "error", "timeout": 4.0, "markup": False})
    ]


def test_toast_notifier_default_severity():
    app = FakeApp()

    ToastNotifier(app).notify("hello")

    assert app.calls[0][1]["severity"] == "information"


def test_console_notifier_prints_text_verbatim():
    buffer = io.StringIO()
    notifier = ConsoleNotifier(Console(file=buffer, width=120, color_system=None))

    notifier.notify("Error: [bold] is not markup", "error")

    assert "Error: [bold] is not markup" in buffer.getvalue()


def test_recording_notifier_keeps_order():
    notifier = RecordingNotifier()

    notifier.notify("first")
    notifier.notify("second", "warning")

    assert notifier.notifications == [("first", "information"), ("second", "warning")]
    assert notifier.messages == ["first", "second"]
