"""CLI package for rushnotes.

This package contains the Typer application and all subcommands.
"""

from rushnotes.cli.main import app

__all__ = ["app"]
