"""``genbridge chat`` — stream one answer from the chat model."""

from __future__ import annotations

import asyncio
import sys
import uuid

import click

from genbridge.cli_commands import configure_logging
from genbridge.cli_commands._output import console, print_outcome, print_token
from genbridge.core.agent import Agent, ChatMemoryProvider
from genbridge.core.interface.client import StreamingChatClient
from genbridge.settings import load_settings
from genbridge.transports import get_generation_transport
from genbridge.utils.telemetry import configure_from_settings


@click.command()
@click.argument("prompt")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), default=None,
              help="Settings YAML file.")
@click.option("--model", "-m", default=None, help="Override the chat model.")
@click.option("--conversation-id", default=None, help="Conversation id (default: random).")
@click.option("--json", "as_json", is_flag=True, help="Print the outcome as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option("--telemetry", is_flag=True, help="Enable telemetry.")
def chat(
    prompt: str,
    config_path: str | None,
    model: str | None,
    conversation_id: str | None,
    as_json: bool,
    verbose: bool,
    telemetry: bool,
) -> None:
    """Send PROMPT to the chat model and stream the answer."""
    configure_logging(verbose)

    try:
        settings = load_settings(config_path)
    except Exception as exc:
        console.print(f"[red]Validation error:[/red] {exc}")
        sys.exit(1)

    if model:
        settings.model.chat_model = model
    if telemetry:
        settings.telemetry.enabled = True
    configure_from_settings(settings.telemetry)

    memory_id = conversation_id or uuid.uuid4().hex
    client = StreamingChatClient(settings.model, get_generation_transport(settings.model))
    agent = Agent(
        client,
        memory_provider=ChatMemoryProvider(settings.agent.max_messages),
        system_prompt=settings.agent.system_prompt,
        max_iterations=settings.agent.max_iterations,
    )

    if not as_json:
        console.print(f"[dim]Conversation: {memory_id}[/dim]")

    try:
        result = asyncio.run(
            agent.ask(prompt, memory_id, on_token=None if as_json else print_token)
        )
    except Exception as exc:
        console.print(f"\n[red]Chat error:[/red] {exc}")
        sys.exit(1)

    print_outcome(result, conversation_id=memory_id, as_json=as_json)
