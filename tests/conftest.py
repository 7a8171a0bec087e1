"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import json
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest

RUSH_JSON_TEMPLATE = """// This is the main configuration file for Rush.
{
  "$schema": "https://developer.microsoft.com/json-schemas/rush/v5/rush.schema.json",
  "rushVersion": "5.100.0",
  /* Projects are listed in build order */
  "projects": %s
}
"""


def make_entry(
    version: str,
    none: list[str] | None = None,
    patch: list[str] | None = None,
    minor: list[str] | None = None,
    major: list[str] | None = None,
) -> dict[str, Any]:
    """Build a CHANGELOG.json version entry."""
    comments: dict[str, list[dict[str, str]]] = {}
    for bucket, items in (("none", none), ("patch", patch), ("minor", minor), ("major", major)):
        if items is not None:
            comments[bucket] = [{"comment": text, "author": "dev"} for text in items]
    return {
        "version": version,
        "tag": f"pkg_v{version}",
        "date": "Mon, 02 Jan 2024 10:00:00 GMT",
        "comments": comments,
    }


@pytest.fixture
def write_rush_json(tmp_path: Path) -> Callable[[list[dict[str, Any]]], Path]:
    """Factory writing rush.json (with comments) into tmp_path."""

    def _write(projects: list[dict[str, Any]]) -> Path:
        path = tmp_path / "rush.json"
        path.write_text(RUSH_JSON_TEMPLATE % json.dumps(projects, indent=2))
        return path

    return _write


@pytest.fixture
def write_changelog(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing <folder>/CHANGELOG.json into tmp_path."""

    def _write(folder: str, name: str | None, entries: list[dict[str, Any]]) -> Path:
        project_dir = tmp_path / folder
        project_dir.mkdir(parents=True, exist_ok=True)
        data: dict[str, Any] = {"entries": entries}
        if name is not None:
            data["name"] = name
        path = project_dir / "CHANGELOG.json"
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def rush_repo(
    tmp_path: Path,
    write_rush_json: Callable[[list[dict[str, Any]]], Path],
    write_changelog: Callable[..., Path],
) -> Path:
    """A two-package monorepo plus one unpublished and one changelog-less project.

    pkg-a (tag: public) latest 2.0.0 with a duplicated feat comment.
    pkg-b (tag: internal) latest 1.1.0 with a scoped fix.
    """
    write_rush_json(
        [
            {
                "packageName": "pkg-a",
                "projectFolder": "packages/a",
                "tags": ["public"],
                "shouldPublish": True,
            },
            {
                "packageName": "pkg-b",
                "projectFolder": "packages/b",
                "tags": ["internal"],
                "shouldPublish": True,
            },
            {
                "packageName": "pkg-private",
                "projectFolder": "packages/private",
                "shouldPublish": False,
            },
            {
                "packageName": "pkg-new",
                "projectFolder": "packages/new",
                "shouldPublish": True,
            },
        ]
    )
    write_changelog(
        "packages/a",
        "pkg-a",
        [
            make_entry("2.0.0", minor=["feat: add X", "feat: add X"]),
            make_entry("1.0.0", patch=["fix: old bug"]),
        ],
    )
    write_changelog(
        "packages/b",
        "pkg-b",
        [
            make_entry("1.1.0", patch=["fix(core): patch Y"]),
            make_entry("1.0.0", none=["docs: readme"]),
        ],
    )
    write_changelog(
        "packages/private",
        "pkg-private",
        [make_entry("0.1.0", minor=["feat: secret"])],
    )
    return tmp_path


@pytest.fixture
def entry_factory() -> Callable[..., dict[str, Any]]:
    """Expose make_entry to tests."""
    return make_entry


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo CLI logging setup so caplog sees records in every test."""
    yield
    logger = logging.getLogger("rushnotes")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
