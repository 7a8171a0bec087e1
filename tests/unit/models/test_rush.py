"""Unit tests for rush.json models."""

import pytest
from pydantic import ValidationError
from rushnotes.models.rush import RushConfig, RushProject


class TestRushProject:
    """Tests for RushProject."""

    def test_parses_camel_case_keys(self) -> None:
        """rush.json keys map onto snake_case fields."""
        project = RushProject.model_validate(
            {
                "packageName": "@acme/core",
                "projectFolder": "libraries/core",
                "tags": ["public"],
                "shouldPublish": True,
                "reviewCategory": "production",
            }
        )
        assert project.package_name == "@acme/core"
        assert project.project_folder == "libraries/core"
        assert project.tags == ["public"]
        assert project.should_publish is True

    def test_defaults(self) -> None:
        """Tags default to empty and publishing to off."""
        project = RushProject.model_validate({"packageName": "a", "projectFolder": "a"})
        assert project.tags == []
        assert project.should_publish is False

    def test_populate_by_name(self) -> None:
        """Projects can be built with field names."""
        project = RushProject(package_name="a", project_folder="a", should_publish=True)
        assert project.should_publish is True

    def test_requires_package_name(self) -> None:
        """packageName is required."""
        with pytest.raises(ValidationError):
            RushProject.model_validate({"projectFolder": "a"})


class TestRushConfig:
    """Tests for RushConfig."""

    def test_empty_config(self) -> None:
        """A manifest without projects has none."""
        assert RushConfig.model_validate({}).projects == []
