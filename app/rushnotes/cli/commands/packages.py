"""Packages command implementation.

Lists the projects that take part in a release, with the latest version
recorded in each project's changelog.
"""

import json
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
from rushnotes.core.loader import load_changelog
from rushnotes.core.locator import RushConfigError, find_selected_projects
from rushnotes.models.release import ChangelogLocation
from rushnotes.models.rush import RushProject
from rushnotes.utils.formatting import console, create_project_table, print_error, print_info

app = typer.Typer(
    help="List packages selected for release notes.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def list_packages(
    ctx: typer.Context,
    rush_path: RushPathOption = Path("."),
    tags: TagsOption = None,
    blacklist: BlacklistOption = None,
    config_path: ConfigOption = None,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            "-j",
            help="Output as JSON for scripting.",
        ),
    ] = False,
) -> None:
    """List publishable packages after tag and blacklist filtering.

    Examples:
        rushnotes packages                    # All publishable packages
        rushnotes packages --tags public      # Only packages tagged 'public'
        rushnotes packages --json             # JSON output for scripting
    """
    if ctx.invoked_subcommand is not None:
        return

    config = resolve_release_config(rush_path, config_path, tags, blacklist)

    try:
        projects = find_selected_projects(
            rush_path,
            tags=config.tags,
            exclude=config.exclude,
            manifest_filename=config.manifest_filename,
        )
    except RushConfigError as e:
        print_error(f"Failed to load rush manifest: {e}")
        raise typer.Exit(code=1) from e

    rows: list[tuple[RushProject, str | None]] = []
    for project in projects:
        location = ChangelogLocation(
            path=rush_path / project.project_folder,
            filename=config.changelog_filename,
        )
        document = load_changelog(location)
        rows.append((project, document.latest_version if document else None))

    if json_output:
        data = [
            {
                "name": project.package_name,
                "folder": project.project_folder,
                "tags": project.tags,
                "latest": latest,
            }
            for project, latest in rows
        ]
        console.print_json(json.dumps(data))
        return

    if not rows:
        print_info("No packages selected.")
        return

    table = create_project_table()
    for project, latest in rows:
        table.add_row(
            project.package_name,
            project.project_folder,
            ", ".join(project.tags) or "-",
            latest or "-",
        )
    console.print(table)
