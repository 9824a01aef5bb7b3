"""Faction subcommands."""

from __future__ import annotations

from typing import Annotated

import typer

from depscian.cli.context import ServerIdArg, run_request

app = typer.Typer(no_args_is_help=True)


@app.command("list")
def list_fractions(ctx: typer.Context, server_id: ServerIdArg) -> None:
    """List the factions of a server."""
    run_request(ctx, lambda client: client.fractions.list(server_id))


@app.command("members")
def members(
    ctx: typer.Context,
    server_id: ServerIdArg,
    fraction_id: Annotated[str, typer.Argument(help="Faction identifier")],
) -> None:
    """Show the member roster of a faction.

    Examples:
        depscian fractions members 1 lspd
    """
    run_request(ctx, lambda client: client.fractions.get_members(server_id, fraction_id))
