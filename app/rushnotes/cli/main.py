"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from typing import Annotated

import typer

from rushnotes import __version__
from rushnotes.cli.commands import config, notes, packages
from rushnotes.utils.logging_utils import setup_logging

# Create main Typer app
app = typer.Typer(
    name="rushnotes",
    help="Release notes for Rush monorepos.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"rushnotes version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """rushnotes - Release notes for Rush monorepos.

    Collects each package's CHANGELOG.json entry for a release and
    renders one markdown summary grouped by commit type.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    setup_logging(verbose=verbose, quiet=quiet)


# Register commands
app.add_typer(notes.app, name="notes")
app.add_typer(packages.app, name="packages")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
