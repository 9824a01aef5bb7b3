"""Entry point for running the CLI as a module.

Usage:
    python -m depscian.cli --help
"""

from depscian.cli.main import app

if __name__ == "__main__":
    app()
