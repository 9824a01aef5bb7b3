"""Family subcommands."""

from __future__ import annotations

from typing import Annotated

import typer

from depscian.cli.context import ServerIdArg, run_request

app = typer.Typer(no_args_is_help=True)


@app.command("list")
def list_families(ctx: typer.Context, server_id: ServerIdArg) -> None:
    """List the families of a server."""
    run_request(ctx, lambda client: client.families.list(server_id))


@app.command("get")
def get_family(
    ctx: typer.Context,
    server_id: ServerIdArg,
    fam_id: Annotated[int, typer.Argument(help="Family identifier")],
) -> None:
    """Show a family and its members."""
    run_request(ctx, lambda client: client.families.get(server_id, fam_id))
