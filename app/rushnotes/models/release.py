"""Pipeline records for building release notes.

These structures live for one invocation: extracted log items flow into
the classifier, which produces classified entries grouped by type.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ChangelogLocation:
    """Where one package's changelog lives.

    Attributes:
        path: Package folder.
        filename: Changelog file name inside the folder.
    """

    path: Path
    filename: str = "CHANGELOG.json"

    @property
    def file_path(self) -> Path:
        """Full path to the changelog file."""
        return self.path / self.filename


@dataclass(frozen=True, slots=True)
class LogItem:
    """Raw comments of one package's selected version.

    Attributes:
        package_name: Owning package name.
        comments: Comment texts in bucket order (none, patch, minor, major).
    """

    package_name: str
    comments: tuple[str, ...] = field(default=())


@dataclass(frozen=True, slots=True)
class ClassifiedEntry:
    """A comment classified by conventional commit type.

    Attributes:
        type: Commit type tag, or "other" when the comment did not parse.
        scope: Parsed scope, falling back to the package name.
        breaking: True when the type carried a "!" marker.
        subject: Text after the type prefix, or the whole comment.
    """

    type: str
    scope: str
    breaking: bool
    subject: str


# Classified entries keyed by type tag, insertion ordered
TypeGroup = dict[str, list[ClassifiedEntry]]
