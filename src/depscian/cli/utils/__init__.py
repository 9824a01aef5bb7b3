"""CLI utility modules."""

from depscian.cli.utils.output import console, print_error, print_payload

__all__ = [
    "console",
    "print_error",
    "print_payload",
]
