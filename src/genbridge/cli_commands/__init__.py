"""CLI subcommand registration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from genbridge.cli_commands.chat import chat
    from genbridge.cli_commands.embed import embed

    cli.add_command(chat)
    cli.add_command(embed)


def configure_logging(verbose: bool) -> None:
    """Route library logs to stderr; ``--verbose`` lowers the level to DEBUG."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
