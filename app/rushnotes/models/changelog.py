"""Changelog models for Rush-generated CHANGELOG.json files.

Rush writes one CHANGELOG.json per published project. Only the fields
needed to build release notes are modelled; everything else is ignored,
and every modelled field tolerates being absent.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# Severity buckets in the order their comments are emitted
BUCKET_ORDER: tuple[str, ...] = ("none", "patch", "minor", "major")


class CommentItem(BaseModel):
    """A single change description as authored with `rush change`.

    Attributes:
        comment: Raw comment text (may carry surrounding whitespace).
    """

    model_config = ConfigDict(extra="ignore")

    comment: Annotated[str, Field(description="Raw change description")] = ""


class ChangelogComments(BaseModel):
    """Comments of one version, bucketed by semver impact."""

    model_config = ConfigDict(extra="ignore")

    none: Annotated[list[CommentItem], Field(default_factory=list)]
    patch: Annotated[list[CommentItem], Field(default_factory=list)]
    minor: Annotated[list[CommentItem], Field(default_factory=list)]
    major: Annotated[list[CommentItem], Field(default_factory=list)]

    def in_bucket_order(self) -> list[CommentItem]:
        """Return all comments concatenated as none, patch, minor, major."""
        items: list[CommentItem] = []
        for bucket in BUCKET_ORDER:
            items.extend(getattr(self, bucket))
        return items


class VersionEntry(BaseModel):
    """One released (or pending) version of a package.

    Attributes:
        version: Version identifier, compared by exact string equality.
        tag: Release tag (e.g., "@scope/pkg_v1.2.0").
        date: Release date as written by Rush.
        comments: Bucketed change descriptions.
    """

    model_config = ConfigDict(extra="ignore")

    version: Annotated[str, Field(description="Version identifier")] = ""
    tag: Annotated[str, Field(description="Release tag")] = ""
    date: Annotated[str, Field(description="Release date")] = ""
    comments: Annotated[ChangelogComments, Field(default_factory=ChangelogComments)]


class ChangelogDocument(BaseModel):
    """Full change history of one package, newest entry first.

    Attributes:
        name: Package name.
        entries: Version entries in stored order (newest first).
    """

    model_config = ConfigDict(extra="ignore")

    name: Annotated[str | None, Field(description="Package name")] = None
    entries: Annotated[list[VersionEntry], Field(default_factory=list)]

    @property
    def is_usable(self) -> bool:
        """Check if the document names a package and has at least one entry."""
        return bool(self.name) and bool(self.entries)

    @property
    def latest_version(self) -> str | None:
        """Version identifier of the most recent entry, if any."""
        if not self.entries:
            return None
        return self.entries[0].version

    def find_version(self, version: str) -> VersionEntry | None:
        """Find the entry whose version equals ``version`` exactly."""
        for entry in self.entries:
            if entry.version == version:
                return entry
        return None
