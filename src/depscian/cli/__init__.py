"""Command-line interface for the Depscian API.

Usage:
    depscian --help
    depscian status
    depscian player find 1 Nick_Name
    python -m depscian.cli online 1
"""

from depscian.cli.main import app

__all__ = ["app"]
