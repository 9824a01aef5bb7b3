"""Player subcommands."""

from __future__ import annotations

from typing import Annotated

import typer

from depscian.cli.context import ServerIdArg, run_request

app = typer.Typer(no_args_is_help=True)


@app.command("find")
def find(
    ctx: typer.Context,
    server_id: ServerIdArg,
    nickname: Annotated[str, typer.Argument(help="In-game nickname")],
) -> None:
    """Find a player by nickname.

    Examples:
        depscian player find 1 Nick_Name
    """
    run_request(ctx, lambda client: client.player.find(server_id, nickname))
