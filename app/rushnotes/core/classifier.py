"""Conventional commit classification of changelog comments.

Each comment is matched against ``type(scope)!: subject``. Comments that
do not match are kept under the "other" type with the package name as
scope, so no change note is ever lost.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from rushnotes.models.release import ClassifiedEntry, TypeGroup

if TYPE_CHECKING:
    from rushnotes.models.release import LogItem

OTHER_TYPE = "other"

COMMIT_PATTERN = re.compile(
    r"^(feat|fix|docs|style|refactor|perf|test|chore|revert)(\((.+)\))?(!)?: (.+)$",
    re.IGNORECASE | re.MULTILINE,
)

LINE_BREAK_PATTERN = re.compile(r"\r\n?")


def dedupe_comments(comments: Iterable[str]) -> list[str]:
    """Trim comments and drop repeats, keeping the first occurrence.

    Comments that are empty after trimming are dropped as well.

    Args:
        comments: Raw comment texts of a single package.

    Returns:
        Unique trimmed comments in original order.
    """
    seen: set[str] = set()
    unique: list[str] = []
    for comment in comments:
        text = comment.strip()
        if not text or text in seen:
            continue
        seen.add(text)
        unique.append(text)
    return unique


def classify_comment(comment: str, package_name: str) -> ClassifiedEntry | None:
    """Classify a single comment.

    The type is matched case-insensitively but kept as authored. CRLF and
    lone CR line breaks are read as newlines, so a multi-line comment is
    classified by its first conventional line.

    Args:
        comment: Raw comment text.
        package_name: Owning package, used as the default scope.

    Returns:
        The ClassifiedEntry, or None if the comment is blank.
    """
    text = LINE_BREAK_PATTERN.sub("\n", comment).strip()
    if not text:
        return None

    match = COMMIT_PATTERN.search(text)
    if match is None:
        return ClassifiedEntry(type=OTHER_TYPE, scope=package_name, breaking=False, subject=text)

    return ClassifiedEntry(
        type=match.group(1),
        scope=match.group(3) or package_name,
        breaking=match.group(4) is not None,
        subject=match.group(5),
    )


def group_log_items(log_items: Iterable[LogItem]) -> TypeGroup:
    """Classify every log item and group the results by type.

    Duplicates are only suppressed within one package: the same note in
    two packages yields two entries.

    Args:
        log_items: Log items in package-processing order.

    Returns:
        Mapping of type tag to entries, in insertion order.
    """
    groups: TypeGroup = {}
    for log in log_items:
        for comment in dedupe_comments(log.comments):
            entry = classify_comment(comment, log.package_name)
            if entry is None:
                continue
            groups.setdefault(entry.type, []).append(entry)
    return groups
