"""
Jira issue models.

This module provides Pydantic models for Jira issues and the entities
embedded in their fields: attachments, time tracking and issue links.
"""

import logging
import re
from typing import Any

from pydantic import Field

from ..base import ApiModel
from .comment import JiraComment, JiraCommentPage
from .common import JiraIssueType, JiraPriority, JiraProjectRef, JiraStatus, JiraUser

logger = logging.getLogger(__name__)

ISSUE_API_PATH_RE = re.compile(r"/rest/api/\d+/issue/")


class JiraAttachment(ApiModel):
    id: str | None = None
    filename: str = ""
    mime_type: str | None = None
    size: int = 0
    created: str | None = None
    author: JiraUser | None = None
    content: str | None = None


class JiraTimeTracking(ApiModel):
    original_estimate: str | None = None
    remaining_estimate: str | None = None
    time_spent: str | None = None

    @property
    def has_data(self) -> bool:
        return bool(self.original_estimate or self.remaining_estimate or self.time_spent)


class JiraIssueLinkType(ApiModel):
    id: str | None = None
    name: str | None = None
    inward: str | None = None
    outward: str | None = None


class JiraLinkedIssueFields(ApiModel):
    summary: str | None = None
    status: JiraStatus | None = None


class JiraLinkedIssue(ApiModel):
    """The abbreviated issue on the other end of an issue link."""

    id: str | None = None
    key: str = ""
    self_url: str | None = Field(default=None, alias="self")
    fields: JiraLinkedIssueFields = Field(default_factory=JiraLinkedIssueFields)

    @property
    def browse_url(self) -> str | None:
        return browse_url(self.self_url)


class JiraIssueLink(ApiModel):
    id: str | None = None
    type: JiraIssueLinkType = Field(default_factory=JiraIssueLinkType)
    inward_issue: JiraLinkedIssue | None = None
    outward_issue: JiraLinkedIssue | None = None


class JiraIssueFields(ApiModel):
    """The ``fields`` object of an issue; custom fields are kept as extras."""

    summary: str = ""
    description: Any = None
    issuetype: JiraIssueType | None = None
    status: JiraStatus | None = None
    priority: JiraPriority | None = None
    project: JiraProjectRef | None = None
    assignee: JiraUser | None = None
    reporter: JiraUser | None = None
    creator: JiraUser | None = None
    created: str | None = None
    updated: str | None = None
    timetracking: JiraTimeTracking | None = None
    attachment: list[JiraAttachment] = Field(default_factory=list)
    comment: JiraCommentPage | list[JiraComment] | None = None
    issuelinks: list[JiraIssueLink] = Field(default_factory=list)

    @property
    def comments(self) -> list[JiraComment]:
        if self.comment is None:
            return []
        if isinstance(self.comment, list):
            return self.comment
        return self.comment.comments


class JiraIssue(ApiModel):
    """
    Model representing a Jira issue.
    """

    id: str | None = None
    key: str = ""
    self_url: str | None = Field(default=None, alias="self")
    fields: JiraIssueFields = Field(default_factory=JiraIssueFields)

    @property
    def browse_url(self) -> str | None:
        return browse_url(self.self_url)


def browse_url(api_url: str | None) -> str | None:
    """Turn an issue REST URL into its browser URL."""
    if not api_url:
        return None
    return ISSUE_API_PATH_RE.sub("/browse/", api_url, count=1)
