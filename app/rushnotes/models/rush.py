"""Models for the Rush monorepo manifest (rush.json).

rush.json carries many settings unrelated to publishing; only the project
list is modelled here.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class RushProject(BaseModel):
    """A project declared in rush.json.

    Attributes:
        package_name: NPM package name (``packageName``).
        project_folder: Folder relative to the monorepo root (``projectFolder``).
        tags: Free-form project tags used for filtering.
        should_publish: Whether Rush publishes this project (``shouldPublish``).
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    package_name: Annotated[str, Field(alias="packageName")]
    project_folder: Annotated[str, Field(alias="projectFolder")]
    tags: Annotated[list[str], Field(default_factory=list)]
    should_publish: Annotated[bool, Field(alias="shouldPublish")] = False


class RushConfig(BaseModel):
    """The parts of rush.json needed to locate changelogs."""

    model_config = ConfigDict(extra="ignore")

    projects: Annotated[list[RushProject], Field(default_factory=list)]
