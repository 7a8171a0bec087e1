"""Changelog loader.

Turns a changelog location into a ChangelogDocument, or None when the
file is missing or does not look like a Rush changelog.
"""

import logging

from pydantic import ValidationError

from rushnotes.core.documents import read_json_document
from rushnotes.models.changelog import ChangelogDocument
from rushnotes.models.release import ChangelogLocation

logger = logging.getLogger(__name__)


def load_changelog(location: ChangelogLocation) -> ChangelogDocument | None:
    """Load one package's changelog.

    Args:
        location: Where the changelog lives.

    Returns:
        Parsed ChangelogDocument, or None if it is missing or malformed.
    """
    data = read_json_document(location.path, location.filename)
    if data is None:
        return None

    try:
        return ChangelogDocument.model_validate(data)
    except ValidationError as e:
        logger.debug("Malformed changelog %s: %s", location.file_path, e)
        return None
