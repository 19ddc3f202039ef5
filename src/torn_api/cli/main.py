"""Main CLI application and entry point.

This module defines the main Typer application, the global options shared
by every query command, and the ``config`` command group.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from torn_api.cli.commands import config as config_commands
from torn_api.cli.commands import query as query_commands

app = typer.Typer(
    name="torn-api",
    help="Typed command-line client for the Torn API",
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)

app.command("user")(query_commands.user)
app.command("faction")(query_commands.faction)
app.command("key")(query_commands.key)
app.add_typer(config_commands.app, name="config", help="Configuration utilities")


@app.callback()
def main_callback(
    ctx: typer.Context,
    key: Annotated[
        str | None,
        typer.Option("--key", "-k", help="API key (overrides TORN_API_KEY)"),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="YAML configuration file",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    backend: Annotated[
        str | None,
        typer.Option("--backend", help="HTTP backend (httpx, aiohttp)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Torn API command-line client.

    Each query command sends exactly one request and prints the decoded
    selections as JSON.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.obj = {"key": key, "config": config, "backend": backend}


if __name__ == "__main__":
    app()
