"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from genbridge.core.embedding.adapter import Embedding
    from genbridge.core.streaming.sink import TerminalValue

console = Console()


def print_token(token: str) -> None:
    """Write one streamed token without markup processing or a newline."""
    console.out(token, end="", highlight=False)


def print_outcome(result: TerminalValue, *, conversation_id: str, as_json: bool = False) -> None:
    """Print the terminal outcome of a chat call."""
    if as_json:
        payload = {"conversation_id": conversation_id, "result": result.model_dump()}
        console.print_json(json.dumps(payload, default=str))
        return

    # Tokens were already streamed; close the line.
    console.out("")
    if result.type == "tool_invocation":
        console.print(f"[yellow]Tool requested:[/yellow] {result.name}")
        console.print(f"  Arguments: {_truncate(json.dumps(result.arguments))}")


def print_embeddings_table(texts: list[str], embeddings: list[Embedding]) -> None:
    """Pretty-print one row per embedded text."""
    table = Table(title="Embeddings")
    table.add_column("#", justify="right")
    table.add_column("Text", style="cyan")
    table.add_column("Dimension", justify="right")
    table.add_column("Head")

    for index, (text, embedding) in enumerate(zip(texts, embeddings, strict=True)):
        head = ", ".join(f"{v:.4f}" for v in embedding.vector[:3])
        table.add_row(str(index), _truncate(text), str(embedding.dimension), head)

    console.print(table)


def print_embeddings_json(texts: list[str], embeddings: list[Embedding]) -> None:
    data = [
        {"text": text, "vector": embedding.vector}
        for text, embedding in zip(texts, embeddings, strict=True)
    ]
    console.print_json(json.dumps(data))


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
