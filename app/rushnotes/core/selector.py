"""Version selection for a package changelog."""

import logging

from rushnotes.models.changelog import ChangelogDocument, VersionEntry

logger = logging.getLogger(__name__)


def select_version_entry(
    document: ChangelogDocument | None,
    version: str | None = None,
) -> VersionEntry | None:
    """Pick the entry a release should report for one package.

    With no requested version the first stored entry is used, which Rush
    guarantees to be the most recent. A requested version is matched by
    exact string equality; no semver comparison is done.

    Args:
        document: Parsed changelog, or None if it could not be loaded.
        version: Requested version identifier.

    Returns:
        The selected VersionEntry, or None if the package contributes nothing.
    """
    if document is None or not document.is_usable:
        return None

    logger.info(
        "get changelog of %s which has entries[ %d ]",
        document.name,
        len(document.entries),
    )

    if not version:
        return document.entries[0]

    entry = document.find_version(version)
    if entry is None:
        logger.info(
            "can't get log version %s, the latest log version is %s",
            version,
            document.latest_version,
        )
    return entry
