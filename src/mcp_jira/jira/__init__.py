"""Jira API module for mcp_jira.

This module provides the JiraFetcher, which combines the service mixins
into a single client for the Jira Cloud REST API.
"""

from .client import JiraClient
from .comments import CommentsMixin
from .config import JiraConfig
from .development import DevelopmentMixin
from .issues import IssuesMixin
from .projects import ProjectsMixin
from .search import SearchMixin
from .statuses import StatusesMixin


class JiraFetcher(
    IssuesMixin,
    SearchMixin,
    CommentsMixin,
    ProjectsMixin,
    StatusesMixin,
    DevelopmentMixin,
):
    """
    The main Jira client class providing access to all Jira operations.

    This class inherits from multiple mixins that provide specific
    functionality:
    - IssuesMixin: Issue retrieval and update
    - SearchMixin: JQL search
    - CommentsMixin: Comment listing and creation
    - ProjectsMixin: Project listing and details
    - StatusesMixin: Workflow statuses
    - DevelopmentMixin: Linked repositories, branches and pull requests
    """

    pass


__all__ = ["JiraFetcher", "JiraConfig", "JiraClient"]
