"""CLI commands for rushnotes.

This package contains all subcommand implementations.
"""

from rushnotes.cli.commands import config, notes, packages

__all__ = ["config", "notes", "packages"]
