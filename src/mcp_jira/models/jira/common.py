"""
Common Jira entity models.

This module provides the small models shared by issues, projects, comments
and statuses: users, priorities, issue types and status references.
"""

from pydantic import Field

from ..base import ApiModel


class JiraUser(ApiModel):
    """A Jira user as embedded in issues, comments and projects."""

    account_id: str | None = None
    display_name: str | None = None
    email_address: str | None = None
    active: bool | None = None


class JiraStatusCategory(ApiModel):
    id: int | None = None
    key: str | None = None
    name: str | None = None
    color_name: str | None = None


class JiraStatus(ApiModel):
    """A workflow status."""

    id: str | None = None
    name: str = ""
    description: str | None = None
    self_url: str | None = Field(default=None, alias="self")
    status_category: JiraStatusCategory | None = None


class JiraPriority(ApiModel):
    id: str | None = None
    name: str | None = None


class JiraIssueType(ApiModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    subtask: bool | None = None


class JiraProjectRef(ApiModel):
    """The project reference embedded in issue fields."""

    id: str | None = None
    key: str | None = None
    name: str | None = None
