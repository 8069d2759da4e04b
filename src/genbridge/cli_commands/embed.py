"""``genbridge embed`` — embed one or more texts."""

from __future__ import annotations

import asyncio
import sys

import click

from genbridge.cli_commands import configure_logging
from genbridge.cli_commands._output import console, print_embeddings_json, print_embeddings_table
from genbridge.core.embedding import EmbeddingAdapter
from genbridge.settings import load_settings
from genbridge.transports import get_embedding_transport


@click.command()
@click.argument("texts", nargs=-1, required=True)
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), default=None,
              help="Settings YAML file.")
@click.option("--model", "-m", default=None, help="Override the embedding model.")
@click.option("--json", "as_json", is_flag=True, help="Print the vectors as JSON.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def embed(
    texts: tuple[str, ...],
    config_path: str | None,
    model: str | None,
    as_json: bool,
    verbose: bool,
) -> None:
    """Embed each of TEXTS and report the resulting vectors."""
    configure_logging(verbose)

    try:
        settings = load_settings(config_path)
    except Exception as exc:
        console.print(f"[red]Validation error:[/red] {exc}")
        sys.exit(1)

    if model:
        settings.model.embedding_model = model

    config = settings.model
    adapter = EmbeddingAdapter(
        get_embedding_transport(config),
        config.embedding_model,
        max_concurrency=config.embedding_concurrency,
    )

    try:
        embeddings = asyncio.run(adapter.embed_batch(list(texts)))
    except Exception as exc:
        console.print(f"[red]Embedding error:[/red] {exc}")
        sys.exit(1)

    if as_json:
        print_embeddings_json(list(texts), embeddings)
    else:
        print_embeddings_table(list(texts), embeddings)
