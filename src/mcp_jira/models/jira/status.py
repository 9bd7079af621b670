"""Jira status models."""

from pydantic import Field

from ..base import ApiModel
from .common import JiraStatus


class JiraIssueTypeStatuses(ApiModel):
    """Statuses available to one issue type of a project."""

    id: str | None = None
    name: str | None = None
    subtask: bool | None = None
    statuses: list[JiraStatus] = Field(default_factory=list)
