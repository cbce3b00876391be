"""Main CLI application using Typer."""
import asyncio
import os

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from ..catalog import DEFAULT_DEMO, DemoConfig, Product, get_demo, get_product
from ..conversation import Message
from ..log import configure_logging
from ..orchestrator import ConversationOrchestrator, TriggerSurface
from ..prompts import FollowUpAction
from .formatting import render_message, render_spec_table
from .providers import get_client, get_orchestrator_config

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="specchat",
    help="Ask an AI sales assistant to explain product specifications",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

# Slash commands understood by the interactive chat
CHAT_FOLLOW_UPS = {
    "/more": FollowUpAction.MORE_DETAILS,
    "/simple": FollowUpAction.SIMPLIFIED,
    "/compare": FollowUpAction.COMPARE,
}


def _load_demo(demo: str) -> tuple[DemoConfig, Product]:
    try:
        config = get_demo(demo)
        return config, get_product(config.product)
    except KeyError as e:
        console.print(f"[red]Error: {e.args[0]}[/red]")
        raise typer.Exit(code=1) from None


def _print_transcript(orchestrator: ConversationOrchestrator, theme_color: str) -> None:
    for message in orchestrator.get_messages():
        console.print(render_message(message, theme_color))


@app.callback()
def main(
    log_level: str = typer.Option(
        os.getenv("SPECCHAT_LOG_LEVEL", "warning"),
        "--log-level",
        help="Logging level: debug, info, warning, error"
    )
):
    """Configure logging before any command runs."""
    configure_logging(log_level)


@app.command()
def specs(
    demo: str = typer.Option(DEFAULT_DEMO, "--demo", "-d", help="Demo configuration to use")
):
    """List the technical specifications of the demo product."""
    config, product = _load_demo(demo)
    console.print(f"[bold {config.theme_color}]{config.title}[/]")
    console.print(render_spec_table(product))
    console.print("[dim]Explain one with: specchat explain <number>[/dim]")


@app.command()
def explain(
    number: int = typer.Argument(..., help="Spec number as listed by 'specchat specs'"),
    follow_up: list[FollowUpAction] = typer.Option(
        [],
        "--follow-up",
        "-f",
        help="Follow-up request to send after the explanation (repeatable)"
    ),
    demo: str = typer.Option(DEFAULT_DEMO, "--demo", "-d", help="Demo configuration to use")
):
    """Explain one specification, optionally followed by refinements."""
    config, product = _load_demo(demo)
    if not 1 <= number <= len(product.specs):
        console.print(f"[red]Error: spec number must be between 1 and {len(product.specs)}[/red]")
        raise typer.Exit(code=1)

    async def _explain():
        async with get_client(console) as client:
            orchestrator = ConversationOrchestrator(client, config=get_orchestrator_config(console))
            with console.status("[dim]Asking AI Sales...[/dim]"):
                await orchestrator.on_spec_selected(product.specs[number - 1])
                for action in follow_up:
                    await orchestrator.on_follow_up_selected(action)
            _print_transcript(orchestrator, config.theme_color)

    asyncio.run(_explain())


@app.command()
def ask(
    question: str = typer.Argument(..., help="Free-text question for the assistant"),
    demo: str = typer.Option(DEFAULT_DEMO, "--demo", "-d", help="Demo configuration to use")
):
    """Ask a free-text question."""
    config, _ = _load_demo(demo)
    if not question.strip():
        console.print("[yellow]Nothing to ask.[/yellow]")
        raise typer.Exit(code=1)

    async def _ask():
        async with get_client(console) as client:
            orchestrator = ConversationOrchestrator(client, config=get_orchestrator_config(console))
            with console.status("[dim]Asking AI Sales...[/dim]"):
                await orchestrator.on_user_submit(question)
            _print_transcript(orchestrator, config.theme_color)

    asyncio.run(_ask())


@app.command()
def chat(
    demo: str = typer.Option(DEFAULT_DEMO, "--demo", "-d", help="Demo configuration to use")
):
    """Start an interactive chat session.

    Type a spec number to explain it, /more, /simple or /compare for a
    follow-up, /specs to list specs, /clear to reset the conversation and
    /quit to leave. Anything else is sent as a question. Requests run in the
    background, so you can keep typing while an answer is on its way.
    """
    config, product = _load_demo(demo)

    def _on_reply(task: asyncio.Task) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            console.print(f"[red]Error: request failed: {escape(str(error))}[/red]")
            return
        message: Message | None = task.result()
        if message is not None:
            console.print(render_message(message, config.theme_color))

    async def _chat():
        async with get_client(console) as client:
            orchestrator = ConversationOrchestrator(client, config=get_orchestrator_config(console))
            surface = TriggerSurface(orchestrator, product.specs)

            console.print(f"[bold {config.theme_color}]{config.title}[/]")
            console.print(render_spec_table(product))
            greeting = orchestrator.greet(config.greeting)
            if greeting is not None:
                console.print(render_message(greeting, config.theme_color))

            while True:
                try:
                    line = await asyncio.to_thread(console.input, "[bold]> [/bold]")
                except (EOFError, KeyboardInterrupt):
                    break

                command = line.strip()
                if command in ("/quit", "/exit"):
                    break
                if command == "/clear":
                    orchestrator.clear_conversation()
                    console.print("[dim]Conversation cleared.[/dim]")
                    continue
                if command == "/specs":
                    console.print(render_spec_table(product))
                    continue

                if command.isdigit():
                    try:
                        task = surface.select_spec(int(command) - 1)
                    except IndexError:
                        console.print(f"[red]No spec number {command}[/red]")
                        continue
                elif command in CHAT_FOLLOW_UPS:
                    task = surface.on_follow_up_selected(CHAT_FOLLOW_UPS[command])
                else:
                    task = surface.on_user_submit(line)

                if task is None:
                    continue
                console.print(render_message(orchestrator.get_messages()[-1], config.theme_color))
                task.add_done_callback(_on_reply)

            if orchestrator.is_awaiting_response():
                with console.status("[dim]Waiting for pending answers...[/dim]"):
                    await orchestrator.drain()

    asyncio.run(_chat())


if __name__ == "__main__":
    app()
