"""
Jira comment models.

Comment bodies are kept as returned: an ADF document on Jira Cloud or a plain
string on older endpoints. Rendering happens in the formatters.
"""

from typing import Any

from pydantic import Field

from ..base import ApiModel
from .common import JiraUser


class JiraComment(ApiModel):
    """
    Model representing a Jira issue comment.
    """

    id: str | None = None
    self_url: str | None = Field(default=None, alias="self")
    author: JiraUser | None = None
    update_author: JiraUser | None = None
    body: Any = None
    created: str | None = None
    updated: str | None = None


class JiraCommentPage(ApiModel):
    """A page of comments from ``/rest/api/3/issue/{key}/comment``."""

    start_at: int = 0
    max_results: int = 0
    total: int = 0
    comments: list[JiraComment] = Field(default_factory=list)
