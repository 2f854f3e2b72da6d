"""Provider factory functions for CLI.

Centralizes creation of the LLM provider from environment variables.
Hides configuration details from command implementations.
"""

import os

from rich.console import Console

from ..errors import ConfigurationError
from ..llm import LLMProvider, create_llm_provider
from ..llm.providers import DEFAULT_BASE_URL, DEFAULT_MODEL

# Default console for output
_console = Console()


def _read_timeout() -> float | None:
    raw = os.getenv("GEMINI_TIMEOUT")
    if raw is None or not raw.strip():
        return None
    try:
        timeout = float(raw)
    except ValueError as e:
        raise ConfigurationError(f"GEMINI_TIMEOUT must be a number, got {raw!r}") from e
    if timeout <= 0:
        raise ConfigurationError(f"GEMINI_TIMEOUT must be positive, got {raw!r}")
    return timeout


def get_llm(model: str | None = None) -> LLMProvider:
    """Create the Gemini provider from environment variables.

    Args:
        model: Model override (takes precedence over GEMINI_MODEL)

    Returns:
        LLM provider instance

    Raises:
        ConfigurationError: If GEMINI_API_KEY is missing or a value is invalid

    Environment variables:
        GEMINI_API_KEY: Gemini API key (required)
        GEMINI_MODEL: Gemini model (default: gemini-2.0-flash)
        GEMINI_BASE_URL: API root (default: Generative Language v1beta)
        GEMINI_TIMEOUT: Request timeout in seconds (default: none)
    """
    api_key = os.getenv("GEMINI_API_KEY")
    if not api_key:
        raise ConfigurationError("GEMINI_API_KEY not set in environment")

    return create_llm_provider(
        "gemini",
        api_key=api_key,
        model=model or os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        base_url=os.getenv("GEMINI_BASE_URL", DEFAULT_BASE_URL),
        timeout=_read_timeout(),
    )


def require_llm(model: str | None = None, console: Console | None = None) -> LLMProvider:
    """Get LLM provider, exiting with an error if not configured.

    Args:
        model: Model override
        console: Optional Rich console for output

    Returns:
        LLM provider instance

    Raises:
        SystemExit: If LLM provider is not configured
    """
    import typer

    con = console or _console
    try:
        return get_llm(model)
    except ConfigurationError as e:
        con.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)
