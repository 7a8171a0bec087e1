"""Well-known file locations inside a Rush monorepo.

Release notes are always built relative to a monorepo root, so every
path here is derived from that root rather than from XDG directories.
"""

import os
from pathlib import Path

# File names used by Rush and by rushnotes itself
RUSH_JSON = "rush.json"
CHANGELOG_JSON = "CHANGELOG.json"
CONFIG_FILENAME = "rushnotes.toml"


def get_rush_json_path(rush_path: Path, filename: str = RUSH_JSON) -> Path:
    """Get the monorepo manifest path.

    Args:
        rush_path: Monorepo root directory.
        filename: Manifest file name.

    Returns:
        Path to <rush_path>/rush.json.
    """
    return rush_path / filename


def get_config_path(rush_path: Path) -> Path:
    """Get the rushnotes configuration file path.

    Returns:
        Path to <rush_path>/rushnotes.toml.
    """
    return rush_path / CONFIG_FILENAME


def get_github_output_path() -> Path | None:
    """Get the GitHub Actions step output file, if running inside a workflow.

    Returns:
        Path from $GITHUB_OUTPUT, or None when the variable is unset or empty.
    """
    value = os.environ.get("GITHUB_OUTPUT")
    if value:
        return Path(value)
    return None
