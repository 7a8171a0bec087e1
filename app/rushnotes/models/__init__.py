"""Data models for rushnotes.

This module exports the core data structures used throughout the application.
"""

from rushnotes.models.changelog import (
    BUCKET_ORDER,
    ChangelogComments,
    ChangelogDocument,
    CommentItem,
    VersionEntry,
)
from rushnotes.models.release import ChangelogLocation, ClassifiedEntry, LogItem, TypeGroup
from rushnotes.models.rush import RushConfig, RushProject

__all__ = [
    "BUCKET_ORDER",
    "ChangelogComments",
    "ChangelogDocument",
    "ChangelogLocation",
    "ClassifiedEntry",
    "CommentItem",
    "LogItem",
    "RushConfig",
    "RushProject",
    "TypeGroup",
    "VersionEntry",
]
