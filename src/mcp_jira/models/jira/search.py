"""
Jira search result models.

This module provides the Pydantic model for JQL search results.
"""

from pydantic import Field

from ..base import ApiModel
from .issue import JiraIssue


class JiraSearchResult(ApiModel):
    """
    Model representing a Jira search (JQL) result page.
    """

    start_at: int = 0
    max_results: int = 0
    total: int = 0
    issues: list[JiraIssue] = Field(default_factory=list)
