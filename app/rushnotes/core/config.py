"""Release notes configuration.

A ``rushnotes.toml`` file at the monorepo root supplies defaults for
project filtering and file names. Command-line values take precedence.

Example:
    tags = ["public"]
    exclude = ["@acme/internal-tools"]
    changelog_filename = "CHANGELOG.json"
"""

import os
import tomllib
from collections.abc import Sequence
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rushnotes.core.paths import CHANGELOG_JSON, RUSH_JSON


class ReleaseConfig(BaseModel):
    """Settings for building release notes.

    Attributes:
        tags: Only include projects carrying at least one of these tags.
        exclude: Package names to leave out of the release notes.
        changelog_filename: Changelog file name inside each project folder.
        manifest_filename: Monorepo manifest file name.
    """

    model_config = ConfigDict(extra="forbid")

    tags: Annotated[
        list[str],
        Field(default_factory=list, description="Project tags to include"),
    ]
    exclude: Annotated[
        list[str],
        Field(default_factory=list, description="Package names to exclude"),
    ]
    changelog_filename: Annotated[
        str,
        Field(min_length=1, description="Per-project changelog file name"),
    ] = CHANGELOG_JSON
    manifest_filename: Annotated[
        str,
        Field(min_length=1, description="Monorepo manifest file name"),
    ] = RUSH_JSON

    def with_overrides(
        self,
        tags: Sequence[str] | None = None,
        exclude: Sequence[str] | None = None,
    ) -> "ReleaseConfig":
        """Return a copy with command-line filters applied.

        Empty or missing overrides keep the configured values.
        """
        update: dict[str, list[str]] = {}
        if tags:
            update["tags"] = list(tags)
        if exclude:
            update["exclude"] = list(exclude)
        return self.model_copy(update=update)


class ReleaseConfigError(Exception):
    """Base exception for release configuration errors."""


class ReleaseConfigNotFoundError(ReleaseConfigError):
    """Raised when the configuration file is not found."""


class ReleaseConfigParseError(ReleaseConfigError):
    """Raised when the configuration file cannot be parsed."""


def load_release_config(path: Path) -> ReleaseConfig:
    """Load release configuration from a TOML file.

    Args:
        path: Path to the config file.

    Returns:
        Validated ReleaseConfig object.

    Raises:
        ReleaseConfigNotFoundError: If the config file doesn't exist.
        ReleaseConfigParseError: If the TOML syntax is invalid.
        ReleaseConfigError: If the content doesn't match the schema.
    """
    if not path.exists():
        raise ReleaseConfigNotFoundError(f"Config not found: {path}")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ReleaseConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ReleaseConfigError(f"Failed to read config: {e}") from e

    try:
        return ReleaseConfig.model_validate(data)
    except ValidationError as e:
        raise ReleaseConfigError(f"Invalid config content: {e}") from e


def load_release_config_or_default(path: Path) -> ReleaseConfig:
    """Load release configuration, falling back to defaults if the file is absent.

    Raises:
        ReleaseConfigError: If the file exists but is invalid.
    """
    try:
        return load_release_config(path)
    except ReleaseConfigNotFoundError:
        return ReleaseConfig()


def save_release_config(config: ReleaseConfig, path: Path) -> Path:
    """Save release configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The ReleaseConfig to save.
        path: Destination path.

    Returns:
        Path where the config was saved.

    Raises:
        ReleaseConfigError: If the file cannot be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ReleaseConfigError(f"Failed to write config: {e}") from e

    return path


def _config_to_dict(config: ReleaseConfig) -> dict[str, object]:
    """Convert ReleaseConfig to a dictionary for TOML serialization."""
    return {
        "tags": list(config.tags),
        "exclude": list(config.exclude),
        "changelog_filename": config.changelog_filename,
        "manifest_filename": config.manifest_filename,
    }
