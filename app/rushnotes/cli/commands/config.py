"""Config commands.

Creates and inspects the rushnotes.toml file of a monorepo.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from rushnotes.cli.types import ConfigOption, RushPathOption
from rushnotes.core.config import (
    ReleaseConfig,
    ReleaseConfigError,
    load_release_config_or_default,
    save_release_config,
)
from rushnotes.core.github import split_list_option
from rushnotes.core.paths import get_config_path
from rushnotes.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Manage the rushnotes.toml configuration.",
    no_args_is_help=True,
)


@app.command()
def init(
    rush_path: RushPathOption = Path("."),
    config_path: ConfigOption = None,
    tags: Annotated[
        str | None,
        typer.Option("--tags", "-t", help="Comma-separated project tags to include."),
    ] = None,
    exclude: Annotated[
        str | None,
        typer.Option("--exclude", "-x", help="Comma-separated package names to exclude."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a rushnotes.toml with default settings."""
    path = config_path or get_config_path(rush_path)

    if path.exists() and not force:
        print_error(f"Config already exists: {path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    config = ReleaseConfig(tags=split_list_option(tags), exclude=split_list_option(exclude))
    try:
        save_release_config(config, path)
    except ReleaseConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {path}")


@app.command()
def show(
    rush_path: RushPathOption = Path("."),
    config_path: ConfigOption = None,
) -> None:
    """Print the effective configuration as JSON."""
    path = config_path or get_config_path(rush_path)
    try:
        config = load_release_config_or_default(path)
    except ReleaseConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=1) from e

    if not path.exists():
        print_info(f"Showing defaults; no config at {path}")
    console.print_json(json.dumps(config.model_dump()))
