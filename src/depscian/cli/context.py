"""Shared CLI state and request execution."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Any

import typer
import yaml
from pydantic import BaseModel, ValidationError

from depscian.cli.utils.output import print_error, print_payload
from depscian.client import DepscianClient
from depscian.config import ENV_API_KEY, ClientConfig
from depscian.exceptions import ConfigurationError, DepscianError, NotFoundError

ServerIdArg = Annotated[int, typer.Argument(help="Game server identifier")]


@dataclass
class CLIState:
    """Global options collected by the main callback."""

    api_key: str | None = None
    base_url: str | None = None
    timeout: float | None = None
    config_path: Path | None = None


def resolve_config(state: CLIState) -> ClientConfig:
    """Merge the YAML config file (if any) with command-line overrides.

    Raises:
        ConfigurationError: If no API key is available.
        ValidationError: If a value is out of range.
    """
    data: dict[str, Any] = {}
    if state.config_path is not None:
        with open(state.config_path) as f:
            loaded = yaml.safe_load(f)
        if loaded is not None and not isinstance(loaded, dict):
            raise ConfigurationError("configuration must be a YAML mapping")
        data.update(loaded or {})

    overrides = {
        "api_key": state.api_key,
        "base_url": state.base_url,
        "timeout": state.timeout,
    }
    data.update({key: value for key, value in overrides.items() if value is not None})

    if not data.get("api_key"):
        raise ConfigurationError(f"API key required (--api-key or {ENV_API_KEY})")
    return ClientConfig.model_validate(data)


def create_client(config: ClientConfig) -> DepscianClient:
    return DepscianClient.from_config(config)


def run_request(
    ctx: typer.Context,
    fetch: Callable[[DepscianClient], Awaitable[BaseModel]],
) -> None:
    """Run one API call and print its payload.

    Exits with status 1 on configuration errors, missing resources and API
    failures.
    """
    state: CLIState = ctx.obj or CLIState()
    try:
        config = resolve_config(state)
    except (ConfigurationError, ValidationError) as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)
    except (OSError, yaml.YAMLError) as e:
        print_error(f"Failed to read configuration: {e}")
        raise typer.Exit(1)

    async def execute() -> BaseModel:
        async with create_client(config) as client:
            return await fetch(client)

    try:
        payload = asyncio.run(execute())
    except NotFoundError:
        print_error("not found")
        raise typer.Exit(1)
    except DepscianError as e:
        print_error(str(e))
        raise typer.Exit(1)

    print_payload(payload)
