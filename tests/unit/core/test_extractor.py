"""Unit tests for comment extraction and changelog collection."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from rushnotes.core.extractor import extract_log_item, read_changelog_of_version
from rushnotes.core.locator import RushConfigNotFoundError
from rushnotes.core.renderer import convert_logs_to_markdown
from rushnotes.models.changelog import VersionEntry
from rushnotes.models.release import LogItem


class TestExtractLogItem:
    """Tests for extract_log_item."""

    def test_bucket_order(self, entry_factory: Callable[..., dict[str, Any]]) -> None:
        """Comments are flattened none, patch, minor, major."""
        entry = VersionEntry.model_validate(
            entry_factory(
                "1.0.0",
                major=["feat!: big"],
                minor=["feat: mid"],
                patch=["fix: small"],
                none=["chore: tiny"],
            )
        )
        item = extract_log_item(entry, "pkg")
        assert item == LogItem("pkg", ("chore: tiny", "fix: small", "feat: mid", "feat!: big"))

    def test_comments_kept_verbatim(self, entry_factory: Callable[..., dict[str, Any]]) -> None:
        """Whitespace is not trimmed at extraction."""
        entry = VersionEntry.model_validate(entry_factory("1.0.0", patch=["  fix: x\n"]))
        assert extract_log_item(entry, "pkg").comments == ("  fix: x\n",)

    def test_entry_without_comments(self) -> None:
        """An entry without comments yields an empty LogItem."""
        item = extract_log_item(VersionEntry.model_validate({"version": "1.0.0"}), "pkg")
        assert item == LogItem("pkg", ())


class TestReadChangelogOfVersion:
    """Tests for read_changelog_of_version."""

    def test_latest_versions(self, rush_repo: Path) -> None:
        """Without a version each package's latest entry is used."""
        logs = read_changelog_of_version(rush_path=rush_repo)
        assert logs == [
            LogItem("pkg-a", ("feat: add X", "feat: add X")),
            LogItem("pkg-b", ("fix(core): patch Y",)),
        ]

    def test_requested_version(self, rush_repo: Path) -> None:
        """A requested version is looked up in every package."""
        logs = read_changelog_of_version("1.0.0", rush_path=rush_repo)
        assert logs == [
            LogItem("pkg-a", ("fix: old bug",)),
            LogItem("pkg-b", ("docs: readme",)),
        ]

    def test_version_missing_in_some_packages(
        self, rush_repo: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Packages without the version are skipped, others continue."""
        with caplog.at_level(logging.INFO, logger="rushnotes"):
            logs = read_changelog_of_version("2.0.0", rush_path=rush_repo)
        assert logs == [LogItem("pkg-a", ("feat: add X", "feat: add X"))]
        assert "can't get log version 2.0.0, the latest log version is 1.1.0" in caplog.text

    def test_missing_changelog_logged(
        self, rush_repo: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A project without CHANGELOG.json is reported and skipped."""
        with caplog.at_level(logging.INFO, logger="rushnotes"):
            read_changelog_of_version(rush_path=rush_repo)
        assert "can't get changelog of" in caplog.text
        assert "packages/new" in caplog.text

    def test_filters_passed_through(self, rush_repo: Path) -> None:
        """Tag and exclusion filters apply."""
        internal = read_changelog_of_version(rush_path=rush_repo, tags=["internal"])
        assert [log.package_name for log in internal] == ["pkg-b"]
        assert read_changelog_of_version(rush_path=rush_repo, exclude=["pkg-a", "pkg-b"]) == []

    def test_empty_entry_still_emitted(
        self,
        tmp_path: Path,
        write_rush_json: Callable[[list[dict[str, Any]]], Path],
        write_changelog: Callable[..., Path],
        entry_factory: Callable[..., dict[str, Any]],
    ) -> None:
        """A selected entry without comments yields an empty LogItem."""
        write_rush_json([{"packageName": "p", "projectFolder": "p", "shouldPublish": True}])
        write_changelog("p", "p", [entry_factory("1.0.0")])
        logs = read_changelog_of_version(rush_path=tmp_path)
        assert logs == [LogItem("p", ())]
        assert convert_logs_to_markdown(logs) == ""

    def test_nameless_changelog_skipped(
        self,
        tmp_path: Path,
        write_rush_json: Callable[[list[dict[str, Any]]], Path],
        write_changelog: Callable[..., Path],
        entry_factory: Callable[..., dict[str, Any]],
    ) -> None:
        """A changelog without a name contributes nothing."""
        write_rush_json([{"packageName": "p", "projectFolder": "p", "shouldPublish": True}])
        write_changelog("p", None, [entry_factory("1.0.0", patch=["fix: x"])])
        assert read_changelog_of_version(rush_path=tmp_path) == []

    def test_missing_manifest_raises(self, tmp_path: Path) -> None:
        """A missing rush.json is fatal for the locator."""
        with pytest.raises(RushConfigNotFoundError):
            read_changelog_of_version(rush_path=tmp_path)

    def test_end_to_end_markdown(self, rush_repo: Path) -> None:
        """The fixture monorepo renders the expected summary."""
        markdown = convert_logs_to_markdown(read_changelog_of_version(rush_path=rush_repo))
        assert markdown == "## 🆕 feat \n- **pkg-a**: add X\n## 🐛 fix \n- **core**: patch Y\n"
