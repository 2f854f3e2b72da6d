"""Main CLI application using Typer."""
import asyncio

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

from ..chat import ChatSession, ConsoleNotifier
from .providers import require_llm

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="geminichat",
    help="Chat with Google Gemini from the terminal",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


@app.command()
def chat(
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model to use (default: GEMINI_MODEL or gemini-2.0-flash)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show the log panel at this level (debug, info, warning, error)"
    ),
    exclude_errors: bool = typer.Option(
        False,
        "--exclude-errors",
        help="Do not resend error messages to the API as conversation turns"
    ),
):
    """Start the interactive chat interface."""
    from ..ui import run_textual_tui

    provider = require_llm(model, console)
    asyncio.run(
        run_textual_tui(
            provider,
            log_level=log_level,
            exclude_error_turns=exclude_errors,
        )
    )


@app.command()
def ask(
    text: str = typer.Argument(..., help="Message to send"),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model to use (default: GEMINI_MODEL or gemini-2.0-flash)"
    ),
    raw: bool = typer.Option(
        False,
        "--raw",
        help="Print the reply as plain text instead of rendered Markdown"
    ),
):
    """Send a single message and print the reply."""
    provider = require_llm(model, console)

    async def _ask():
        async with provider:
            session = ChatSession(provider, ConsoleNotifier())
            reply = await session.send(text)
        return session, reply

    session, reply = asyncio.run(_ask())

    if reply is None:
        # The error message (if any) was already surfaced by the notifier
        raise typer.Exit(code=1)

    if raw:
        console.print(reply.text, markup=False, highlight=False)
    else:
        console.print(Panel(Markdown(reply.text), title=reply.role.label, border_style="blue"))

    response = session.last_response
    if response is not None and response.usage:
        console.print(
            f"[dim]{response.model} | {response.latency:.2f}s | "
            f"{response.usage.get('total_tokens', 0)} tokens[/dim]"
        )


if __name__ == "__main__":
    app()
