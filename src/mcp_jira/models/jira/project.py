"""Jira project models."""

import re

from pydantic import Field

from ..base import ApiModel
from .common import JiraUser

PROJECT_API_PATH_RE = re.compile(r"/rest/api/\d+/project/")


class JiraComponent(ApiModel):
    id: str | None = None
    name: str = ""
    description: str | None = None
    lead: JiraUser | None = None


class JiraVersion(ApiModel):
    id: str | None = None
    name: str = ""
    description: str | None = None
    released: bool | None = None
    archived: bool | None = None
    release_date: str | None = None
    start_date: str | None = None


class JiraProject(ApiModel):
    """
    Model representing a Jira project.

    List responses carry only the summary attributes; ``description``,
    ``lead``, ``components`` and ``versions`` are present when the project
    is fetched individually.
    """

    id: str | None = None
    key: str = ""
    name: str = ""
    self_url: str | None = Field(default=None, alias="self")
    description: str | None = None
    style: str | None = None
    simplified: bool | None = None
    project_type_key: str | None = None
    lead: JiraUser | None = None
    avatar_urls: dict[str, str] | None = None
    components: list[JiraComponent] = Field(default_factory=list)
    versions: list[JiraVersion] = Field(default_factory=list)

    @property
    def browse_url(self) -> str | None:
        if not self.self_url:
            return None
        return PROJECT_API_PATH_RE.sub("/browse/", self.self_url, count=1)


class JiraProjectPage(ApiModel):
    """A page from ``/rest/api/3/project/search``."""

    start_at: int = 0
    max_results: int = 0
    total: int = 0
    is_last: bool | None = None
    values: list[JiraProject] = Field(default_factory=list)
