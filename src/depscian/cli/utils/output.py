"""Rich console output formatting utilities."""

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

console = Console()


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def print_payload(payload: BaseModel) -> None:
    """Print a decoded API payload as highlighted JSON."""
    console.print_json(payload.model_dump_json())
