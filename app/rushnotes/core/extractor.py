"""Comment extraction and changelog collection.

Collects the comments of the requested (or latest) version from every
selected package, one LogItem per contributing package.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from rushnotes.core.loader import load_changelog
from rushnotes.core.locator import find_changelog_locations
from rushnotes.core.paths import CHANGELOG_JSON, RUSH_JSON
from rushnotes.core.selector import select_version_entry
from rushnotes.models.changelog import VersionEntry
from rushnotes.models.release import LogItem

logger = logging.getLogger(__name__)


def extract_log_item(entry: VersionEntry, package_name: str) -> LogItem:
    """Flatten a version entry's comment buckets into a LogItem.

    Comments are kept verbatim, in bucket order none, patch, minor, major.
    """
    return LogItem(
        package_name=package_name,
        comments=tuple(item.comment for item in entry.comments.in_bucket_order()),
    )


def read_changelog_of_version(
    version: str | None = None,
    rush_path: Path = Path("."),
    tags: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    changelog_filename: str = CHANGELOG_JSON,
    manifest_filename: str = RUSH_JSON,
) -> list[LogItem]:
    """Collect log items for a release across the monorepo.

    Packages whose changelog is missing, empty, or lacks the requested
    version are skipped with an informational log line.

    Args:
        version: Requested version. None selects each package's latest entry.
        rush_path: Monorepo root directory.
        tags: Optional tag filter for projects.
        exclude: Optional package names to leave out.
        changelog_filename: Changelog file name inside each project folder.
        manifest_filename: Monorepo manifest file name.

    Returns:
        One LogItem per contributing package, in manifest order.

    Raises:
        RushConfigError: If rush.json cannot be loaded.
    """
    locations = find_changelog_locations(
        rush_path,
        tags=tags,
        exclude=exclude,
        changelog_filename=changelog_filename,
        manifest_filename=manifest_filename,
    )
    if not locations:
        return []

    logger.info(
        "read json file: \n %s",
        "\n".join(f"- {location.file_path}" for location in locations),
    )

    logs: list[LogItem] = []
    for location in locations:
        document = load_changelog(location)
        if document is None or not document.is_usable:
            logger.info("can't get changelog of %s", location.file_path)
            continue

        entry = select_version_entry(document, version)
        if entry is None:
            continue

        # is_usable guarantees a name
        logs.append(extract_log_item(entry, document.name or ""))

    return logs
