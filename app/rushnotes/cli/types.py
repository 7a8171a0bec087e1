"""Shared option types and helpers for CLI commands.

Options that select projects are read from GitHub Actions inputs as
well, so the same commands work in a terminal and as a workflow step.
"""

from pathlib import Path
from typing import Annotated

import typer

from rushnotes.core.config import ReleaseConfig, ReleaseConfigError, load_release_config_or_default
from rushnotes.core.github import split_list_option
from rushnotes.core.paths import get_config_path
from rushnotes.utils.formatting import print_error

RushPathOption = Annotated[
    Path,
    typer.Option(
        "--rush-path",
        "-p",
        envvar="INPUT_RUSH_PATH",
        help="Monorepo root containing rush.json.",
        file_okay=False,
    ),
]

TagsOption = Annotated[
    str | None,
    typer.Option(
        "--tags",
        "-t",
        envvar="INPUT_TAGS",
        help="Comma-separated project tags to include.",
    ),
]

BlacklistOption = Annotated[
    str | None,
    typer.Option(
        "--blacklist",
        "-x",
        envvar="INPUT_BLACKLIST",
        help="Comma-separated package names to exclude.",
    ),
]

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        "-c",
        help="Path to rushnotes.toml (default: <rush-path>/rushnotes.toml).",
        dir_okay=False,
    ),
]


def resolve_release_config(
    rush_path: Path,
    config_path: Path | None,
    tags: str | None,
    blacklist: str | None,
) -> ReleaseConfig:
    """Load the release config and apply command-line filters.

    Raises:
        typer.Exit: If the config file exists but is invalid.
    """
    path = config_path or get_config_path(rush_path)
    try:
        config = load_release_config_or_default(path)
    except ReleaseConfigError as e:
        print_error(f"Failed to load config: {e}")
        raise typer.Exit(code=1) from e

    return config.with_overrides(
        tags=split_list_option(tags),
        exclude=split_list_option(blacklist),
    )
