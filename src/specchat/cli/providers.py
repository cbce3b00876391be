"""Provider factory functions for CLI.

Centralizes creation of the completion client and orchestrator settings
from environment variables. Hides configuration details from command
implementations.
"""

import os

import typer
from rich.console import Console

from ..config import (
    DEFAULT_ENDPOINT,
    DEFAULT_OPENAI_MODEL,
    DEFAULT_TIMEOUT,
    OrchestratorConfig,
)
from ..llm import CompletionClient, create_completion_client

# Default console for output
_console = Console()


def get_client(console: Console | None = None) -> CompletionClient:
    """Create the completion client from environment variables.

    Args:
        console: Optional Rich console for output

    Returns:
        Completion client instance

    Raises:
        typer.Exit: If the selected provider is unknown or missing its key

    Environment variables:
        SPECCHAT_PROVIDER: Backend type (http, openai; default: http)
        SPECCHAT_ENDPOINT: Chat endpoint URL (default: http://localhost:3000/api/chat)
        SPECCHAT_TIMEOUT: Request timeout in seconds (default: 30)
        OPENAI_API_KEY: OpenAI API key (for openai provider)
        OPENAI_CHAT_MODEL: OpenAI model (default: gpt-4o-mini)
    """
    con = console or _console
    provider = os.getenv("SPECCHAT_PROVIDER", "http").lower()

    if provider == "http":
        try:
            timeout = float(os.getenv("SPECCHAT_TIMEOUT", str(DEFAULT_TIMEOUT)))
        except ValueError:
            con.print("[red]Error: SPECCHAT_TIMEOUT must be a number[/red]")
            raise typer.Exit(code=1) from None
        return create_completion_client(
            "http",
            endpoint=os.getenv("SPECCHAT_ENDPOINT", DEFAULT_ENDPOINT),
            timeout=timeout,
        )

    if provider == "openai":
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            con.print("[red]Error: OPENAI_API_KEY not set in environment[/red]")
            raise typer.Exit(code=1)
        model = os.getenv("OPENAI_CHAT_MODEL", DEFAULT_OPENAI_MODEL)
        return create_completion_client("openai", api_key=api_key, model=model)

    con.print(f"[red]Error: Unknown completion provider: {provider}[/red]")
    raise typer.Exit(code=1)


def get_orchestrator_config(console: Console | None = None) -> OrchestratorConfig:
    """Build orchestrator settings from environment variables.

    Environment variables:
        SPECCHAT_MAX_RETRIES: Retries after a network failure (default: 0)
    """
    con = console or _console
    raw = os.getenv("SPECCHAT_MAX_RETRIES", "0")
    try:
        max_retries = int(raw)
    except ValueError:
        con.print(f"[yellow]Warning: ignoring invalid SPECCHAT_MAX_RETRIES={raw!r}[/yellow]")
        max_retries = 0
    return OrchestratorConfig(max_retries=max(max_retries, 0))
