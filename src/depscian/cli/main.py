"""Main CLI application and entry point.

This module defines the main Typer application, the global connection
options and the single-request commands, and aggregates the command groups
(player, fractions, families).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from depscian.cli.commands import families as families_commands
from depscian.cli.commands import fractions as fractions_commands
from depscian.cli.commands import player as player_commands
from depscian.cli.context import CLIState, ServerIdArg, run_request
from depscian.config import ENV_API_KEY, ENV_BASE_URL, ENV_TIMEOUT

app = typer.Typer(
    name="depscian",
    help="Depscian game statistics API client",
    no_args_is_help=True,
    pretty_exceptions_enable=True,
)

# Add command groups
app.add_typer(player_commands.app, name="player", help="Player lookup")
app.add_typer(fractions_commands.app, name="fractions", help="Factions and members")
app.add_typer(families_commands.app, name="families", help="Player families")


@app.callback()
def main_callback(
    ctx: typer.Context,
    api_key: Annotated[
        str | None,
        typer.Option("--api-key", envvar=ENV_API_KEY, help="Depscian API key"),
    ] = None,
    base_url: Annotated[
        str | None,
        typer.Option("--base-url", envvar=ENV_BASE_URL, help="API base URL"),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", envvar=ENV_TIMEOUT, help="Timeout in seconds"),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML file with api_key, base_url and timeout",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log requests to stderr"),
    ] = False,
) -> None:
    """Depscian API client.

    Every command performs a single request and prints the decoded
    payload as JSON.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    ctx.obj = CLIState(
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
        config_path=config_path,
    )


@app.command("status")
def status(ctx: typer.Context) -> None:
    """Show the status of all game servers."""
    run_request(ctx, lambda client: client.status.get())


@app.command("online")
def online(ctx: typer.Context, server_id: ServerIdArg) -> None:
    """List players online on a server."""
    run_request(ctx, lambda client: client.online.get(server_id))


@app.command("admins")
def admins(ctx: typer.Context, server_id: ServerIdArg) -> None:
    """List server administrators."""
    run_request(ctx, lambda client: client.admins.get(server_id))


@app.command("leaders")
def leaders(ctx: typer.Context, server_id: ServerIdArg) -> None:
    """List faction leaders."""
    run_request(ctx, lambda client: client.leadership.get_leaders(server_id))


@app.command("subleaders")
def subleaders(ctx: typer.Context, server_id: ServerIdArg) -> None:
    """List faction deputy leaders."""
    run_request(ctx, lambda client: client.leadership.get_subleaders(server_id))


@app.command("ghetto")
def ghetto(ctx: typer.Context, server_id: ServerIdArg) -> None:
    """Show gang territory ownership."""
    run_request(ctx, lambda client: client.ghetto.get(server_id))


@app.command("map")
def property_map(ctx: typer.Context, server_id: ServerIdArg) -> None:
    """Show the property map with points of interest."""
    run_request(ctx, lambda client: client.map.get(server_id))


@app.command("sobes")
def sobes(ctx: typer.Context, server_id: ServerIdArg) -> None:
    """List scheduled faction interviews."""
    run_request(ctx, lambda client: client.sobes.get(server_id))


if __name__ == "__main__":
    app()
