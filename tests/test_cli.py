"""Tests for the Typer command line interface."""
import pytest
import typer
from typer.testing import CliRunner

from geminichat.cli import app as cli_app
from geminichat.cli.providers import get_llm
from geminichat.errors import ConfigurationError, GeminiAPIError
from geminichat.llm import GeminiProvider

runner = CliRunner()


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("GEMINI_API_KEY", "GEMINI_MODEL", "GEMINI_BASE_URL", "GEMINI_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestGetLLM:
    def test_missing_api_key(self, clean_env):
        with pytest.raises(ConfigurationError, match="GEMINI_API_KEY"):
            get_llm()

    def test_defaults(self, clean_env):
        clean_env.setenv("GEMINI_API_KEY", "env-key")

        provider = get_llm()

        assert isinstance(provider, GeminiProvider)
        assert provider.model == "gemini-2.0-flash"
        assert provider.endpoint == (
            "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.0-flash:generateContent"
        )

    def test_environment_overrides(self, clean_env):
        clean_env.setenv("GEMINI_API_KEY", "env-key")
        clean_env.setenv("GEMINI_MODEL", "gemini-2.5-flash")
        clean_env.setenv("GEMINI_BASE_URL", "http://localhost:9000/v1")

        provider = get_llm()

        assert provider.endpoint == "http://localhost:9000/v1/models/gemini-2.5-flash:generateContent"

    def test_model_argument_wins(self, clean_env):
        clean_env.setenv("GEMINI_API_KEY", "env-key")
        clean_env.setenv("GEMINI_MODEL", "gemini-2.5-flash")

        assert get_llm("gemini-2.5-pro").model == "gemini-2.5-pro"

    @pytest.mark.parametrize("value", ["soon", "0", "-3"])
    def test_invalid_timeout(self, clean_env, value):
        clean_env.setenv("GEMINI_API_KEY", "env-key")
        clean_env.setenv("GEMINI_TIMEOUT", value)

        with pytest.raises(ConfigurationError, match="GEMINI_TIMEOUT"):
            get_llm()


class TestAskCommand:
    def test_missing_api_key_exits_with_error(self, clean_env):
        result = runner.invoke(cli_app.app, ["ask", "hello"])

        assert result.exit_code == 1
        assert "GEMINI_API_KEY" in result.output

    def test_prints_reply(self, monkeypatch, fake_provider_cls):
        provider = fake_provider_cls(replies=["Hello from Gemini"])
        monkeypatch.setattr(cli_app, "require_llm", lambda model, console: provider)

        result = runner.invoke(cli_app.app, ["ask", "hello", "--raw"])

        assert result.exit_code == 0
        assert "Hello from Gemini" in result.output
        assert provider.closed
        assert provider.calls[0][0].parts[0].text == "hello"

    def test_failure_prints_notification_and_exits(self, monkeypatch, fake_provider_cls):
        provider = fake_provider_cls(error=GeminiAPIError(403, "Forbidden", "API key not valid"))
        monkeypatch.setattr(cli_app, "require_llm", lambda model, console: provider)

        result = runner.invoke(cli_app.app, ["ask", "hello"])

        assert result.exit_code == 1
        assert "API key not valid" in result.output

    def test_blank_message_sends_nothing(self, monkeypatch, fake_provider_cls):
        provider = fake_provider_cls()
        monkeypatch.setattr(cli_app, "require_llm", lambda model, console: provider)

        result = runner.invoke(cli_app.app, ["ask", "   "])

        assert result.exit_code == 1
        assert provider.calls == []


def test_chat_command_requires_api_key(clean_env):
    result = runner.invoke(cli_app.app, ["chat"])

    assert result.exit_code == 1
    assert "GEMINI_API_KEY" in result.output


class TestChatCommand:
    def test_options_are_forwarded_to_tui(self, monkeypatch, fake_provider_cls):
        provider = fake_provider_cls()
        requested_models = []
        launched = {}

        def fake_require_llm(model, console):
            requested_models.append(model)
            return provider

        async def fake_run_textual_tui(provider, log_level=None, exclude_error_turns=False):
            launched.update(
                provider=provider,
                log_level=log_level,
                exclude_error_turns=exclude_error_turns,
            )

        monkeypatch.setattr(cli_app, "require_llm", fake_require_llm)
        monkeypatch.setattr("geminichat.ui.run_textual_tui", fake_run_textual_tui)

        result = runner.invoke(
            cli_app.app,
            ["chat", "--model", "gemini-2.5-pro", "--log-level", "warning", "--exclude-errors"],
        )

        assert result.exit_code == 0
        assert requested_models == ["gemini-2.5-pro"]
        assert launched == {
            "provider": provider,
            "log_level": "warning",
            "exclude_error_turns": True,
        }

    def test_defaults(self, monkeypatch, fake_provider_cls):
        launched = {}

        async def fake_run_textual_tui(provider, log_level=None, exclude_error_turns=False):
            launched.update(log_level=log_level, exclude_error_turns=exclude_error_turns)

        monkeypatch.setattr(cli_app, "require_llm", lambda model, console: fake_provider_cls())
        monkeypatch.setattr("geminichat.ui.run_textual_tui", fake_run_textual_tui)

        result = runner.invoke(cli_app.app, ["chat"])

        assert result.exit_code == 0
        assert launched == {"log_level": None, "exclude_error_turns": False}


def test_ask_notifications_go_to_stderr(monkeypatch, capsys, fake_provider_cls):
    provider = fake_provider_cls(error=GeminiAPIError(403, "Forbidden", "API key not valid"))
    monkeypatch.setattr(cli_app, "require_llm", lambda model, console: provider)

    with pytest.raises(typer.Exit):
        cli_app.ask("hello", model=None, raw=True)

    captured = capsys.readouterr()
    assert "API key not valid" in captured.err
    assert "API key not valid" not in captured.out
