"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich. Markdown goes
to ``console`` (stdout); status messages go to ``err_console`` (stderr)
so the release notes can be piped.
"""

from __future__ import annotations

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rushnotes.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def create_project_table(title: str = "Release Packages") -> Table:
    """Create a pre-configured table for displaying selected projects.

    Args:
        title: Table title.

    Returns:
        Rich Table with Package, Folder, Tags and Latest columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Package", style="package", no_wrap=True)
    table.add_column("Folder", style="muted")
    table.add_column("Tags", style="info")
    table.add_column("Latest", style="version", justify="right")
    return table


def print_info(message: str) -> None:
    """Print an info message."""
    err_console.print(f"[info]{escape(message)}[/]")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    err_console.print(f"[success]{escape(message)}[/]")
