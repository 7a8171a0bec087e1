"""JSON document store.

Reads JSON documents from a monorepo checkout. Rush manifests allow
JavaScript-style comments, so comments outside string literals are
removed before decoding. Every failure is reported as ``None``; callers
decide whether a missing document matters.
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def strip_json_comments(text: str) -> str:
    """Remove ``//`` and ``/* */`` comments that are not inside strings.

    Newlines inside removed comments are kept so decode errors still
    report meaningful line numbers.

    Args:
        text: JSON text possibly containing comments.

    Returns:
        The text with comments removed.
    """
    out: list[str] = []
    i = 0
    length = len(text)
    in_string = False

    while i < length:
        char = text[i]
        if in_string:
            out.append(char)
            if char == "\\" and i + 1 < length:
                out.append(text[i + 1])
                i += 2
                continue
            if char == '"':
                in_string = False
            i += 1
            continue

        if char == '"':
            in_string = True
            out.append(char)
            i += 1
        elif text.startswith("//", i):
            end = text.find("\n", i)
            i = length if end == -1 else end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            block = text[i:] if end == -1 else text[i : end + 2]
            out.append("\n" * block.count("\n"))
            i = length if end == -1 else end + 2
        else:
            out.append(char)
            i += 1

    return "".join(out)


def read_json_document(path: Path, filename: str) -> dict[str, Any] | None:
    """Read and parse a JSON object from ``path / filename``.

    Args:
        path: Directory containing the document.
        filename: Document file name.

    Returns:
        The parsed JSON object, or None if the file is missing,
        unreadable, not valid JSON, or not a JSON object.
    """
    file_path = path / filename
    logger.info("read json file: %s", file_path)

    try:
        text = file_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("JSON document not found: %s", file_path)
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Failed to read %s: %s", file_path, e)
        return None

    try:
        data: object = json.loads(strip_json_comments(text))
    except json.JSONDecodeError as e:
        logger.debug("Invalid JSON in %s: %s", file_path, e)
        return None

    if not isinstance(data, dict):
        logger.debug("Expected a JSON object in %s, got %s", file_path, type(data).__name__)
        return None
    return data
