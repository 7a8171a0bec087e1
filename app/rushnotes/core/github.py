"""GitHub Actions step outputs.

When running as a workflow step, results are published by appending to
the file named by $GITHUB_OUTPUT using the multi-line heredoc syntax.
"""

import logging
import uuid
from pathlib import Path

from rushnotes.core.paths import get_github_output_path

logger = logging.getLogger(__name__)


def split_list_option(value: str | None) -> list[str]:
    """Split a comma or newline separated action input into a list.

    Blank items are dropped, e.g. "a, b,,c" gives ["a", "b", "c"].
    """
    if not value:
        return []
    items = value.replace("\n", ",").split(",")
    return [item.strip() for item in items if item.strip()]


def format_output(name: str, value: str) -> str:
    """Format a step output in heredoc form.

    A random delimiter is used so the value may contain any line.
    """
    delimiter = f"ghadelimiter_{uuid.uuid4().hex}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def write_github_output(name: str, value: str, path: Path | None = None) -> bool:
    """Append a step output to the GitHub Actions output file.

    Args:
        name: Output name (e.g., "markdown").
        value: Output value, possibly multi-line.
        path: Output file. If None, uses $GITHUB_OUTPUT.

    Returns:
        True if the output was written, False if no output file is configured.

    Raises:
        OSError: If the output file cannot be written.
    """
    output_path = path or get_github_output_path()
    if output_path is None:
        logger.debug("GITHUB_OUTPUT is not set; skipping output %s", name)
        return False

    with open(output_path, "a", encoding="utf-8") as f:
        f.write(format_output(name, value))
    logger.debug("Wrote output %s to %s", name, output_path)
    return True
