"""Package locator for Rush monorepos.

Resolves which changelog files take part in a release by reading
rush.json and filtering its projects by publish flag, tags and an
exclusion list.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from rushnotes.core.documents import read_json_document
from rushnotes.core.paths import CHANGELOG_JSON, RUSH_JSON, get_rush_json_path
from rushnotes.models.release import ChangelogLocation
from rushnotes.models.rush import RushConfig, RushProject

logger = logging.getLogger(__name__)


class RushConfigError(Exception):
    """Base exception for monorepo manifest errors."""


class RushConfigNotFoundError(RushConfigError):
    """Raised when rush.json is missing or cannot be parsed."""


class RushConfigValidationError(RushConfigError):
    """Raised when rush.json does not have the expected shape."""


def load_rush_config(rush_path: Path, filename: str = RUSH_JSON) -> RushConfig:
    """Load the monorepo manifest.

    Args:
        rush_path: Monorepo root directory.
        filename: Manifest file name.

    Returns:
        Validated RushConfig.

    Raises:
        RushConfigNotFoundError: If the manifest is missing or not valid JSON.
        RushConfigValidationError: If the manifest content doesn't match the schema.
    """
    data = read_json_document(rush_path, filename)
    if data is None:
        manifest_path = get_rush_json_path(rush_path, filename)
        raise RushConfigNotFoundError(f"Rush manifest not found or unreadable: {manifest_path}")

    try:
        return RushConfig.model_validate(data)
    except ValidationError as e:
        raise RushConfigValidationError(f"Invalid rush manifest content: {e}") from e


def is_selected(
    project: RushProject,
    tags: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
) -> bool:
    """Check whether a project takes part in the release.

    A project is selected when it is publishable, shares at least one tag
    with ``tags`` (if a tag filter is given), and is not named in
    ``exclude`` (if an exclusion list is given).

    Args:
        project: Project declared in rush.json.
        tags: Optional tag filter. Empty means no filtering.
        exclude: Optional package names to leave out. Empty means none.

    Returns:
        True if the project should be included.
    """
    if not project.should_publish:
        return False
    if tags and not any(tag in tags for tag in project.tags):
        return False
    return not (exclude and project.package_name in exclude)


def find_selected_projects(
    rush_path: Path,
    tags: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    manifest_filename: str = RUSH_JSON,
) -> list[RushProject]:
    """Get the projects selected for release, in manifest order.

    Raises:
        RushConfigError: If rush.json cannot be loaded.
    """
    config = load_rush_config(rush_path, manifest_filename)
    selected = [p for p in config.projects if is_selected(p, tags, exclude)]
    logger.debug(
        "Selected %d of %d projects (tags=%s, exclude=%s)",
        len(selected),
        len(config.projects),
        list(tags or []),
        list(exclude or []),
    )
    return selected


def find_changelog_locations(
    rush_path: Path,
    tags: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    changelog_filename: str = CHANGELOG_JSON,
    manifest_filename: str = RUSH_JSON,
) -> list[ChangelogLocation]:
    """Resolve changelog locations of all selected projects.

    Args:
        rush_path: Monorepo root directory.
        tags: Optional tag filter.
        exclude: Optional package names to leave out.
        changelog_filename: Changelog file name inside each project folder.
        manifest_filename: Monorepo manifest file name.

    Returns:
        One ChangelogLocation per selected project, in manifest order.

    Raises:
        RushConfigError: If rush.json cannot be loaded.
    """
    projects = find_selected_projects(rush_path, tags, exclude, manifest_filename)
    return [
        ChangelogLocation(path=rush_path / p.project_folder, filename=changelog_filename)
        for p in projects
    ]
