"""Notes command implementation.

Builds the markdown release summary for a version across all selected
packages of the monorepo.
"""

from pathlib import Path
from typing import Annotated

import typer

from rushnotes.cli.types import (
    BlacklistOption,
    ConfigOption,
    RushPathOption,
    TagsOption,
    resolve_release_config,
)
from rushnotes.core.extractor import read_changelog_of_version
from rushnotes.core.github import write_github_output
from rushnotes.core.locator import RushConfigError, RushConfigNotFoundError
from rushnotes.core.renderer import convert_logs_to_markdown
from rushnotes.utils.formatting import err_console, print_error, print_success

app = typer.Typer(
    help="Generate markdown release notes from Rush changelogs.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def notes(
    ctx: typer.Context,
    version: Annotated[
        str | None,
        typer.Option(
            "--version",
            "-r",
            envvar="INPUT_VERSION",
            help="Version to report. Defaults to each package's latest entry.",
        ),
    ] = None,
    rush_path: RushPathOption = Path("."),
    tags: TagsOption = None,
    blacklist: BlacklistOption = None,
    config_path: ConfigOption = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the markdown to a file instead of stdout.",
            dir_okay=False,
        ),
    ] = None,
    github_output: Annotated[
        bool,
        typer.Option(
            "--github-output",
            help="Publish the markdown as the 'markdown' step output ($GITHUB_OUTPUT).",
        ),
    ] = False,
) -> None:
    """Generate release notes for a version.

    Comments are grouped by conventional commit type (feat, fix, ...).
    Comments that don't follow the convention are listed under "other".

    Examples:
        rushnotes notes                         # Latest entry of every package
        rushnotes notes --version 1.2.0         # A specific version
        rushnotes notes --tags public -o NOTES.md
        rushnotes notes --github-output         # Inside a GitHub workflow
    """
    if ctx.invoked_subcommand is not None:
        return

    config = resolve_release_config(rush_path, config_path, tags, blacklist)

    try:
        logs = read_changelog_of_version(
            version=version or None,
            rush_path=rush_path,
            tags=config.tags,
            exclude=config.exclude,
            changelog_filename=config.changelog_filename,
            manifest_filename=config.manifest_filename,
        )
    except RushConfigNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    except RushConfigError as e:
        print_error(f"Failed to load rush manifest: {e}")
        raise typer.Exit(code=1) from e

    markdown = convert_logs_to_markdown(logs)

    if github_output:
        try:
            written = write_github_output("markdown", markdown)
        except OSError as e:
            print_error(f"Failed to write step output: {e}")
            raise typer.Exit(code=1) from e
        if not written:
            print_error("--github-output requires the GITHUB_OUTPUT environment variable.")
            raise typer.Exit(code=1)

    if not markdown:
        err_console.print("[muted]No release notes found.[/muted]")
        return

    if output is not None:
        try:
            output.write_text(markdown, encoding="utf-8")
        except OSError as e:
            print_error(f"Failed to write {output}: {e}")
            raise typer.Exit(code=1) from e
        print_success(f"Release notes written to {output}")
        return

    # Plain echo keeps the markdown byte-for-byte (no Rich markup or emoji codes)
    typer.echo(markdown, nl=False)
