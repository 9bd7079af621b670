"""Module for Jira search operations.

JQL searches go through ``GET /rest/api/3/search`` with offset pagination
(``startAt`` / ``maxResults`` / ``total``).

Example:
    >>> result = fetcher.search_issues("project = PROJ ORDER BY updated DESC")
    >>> [issue.key for issue in result.issues]
    ['PROJ-2', 'PROJ-1']
"""

import logging
from collections.abc import Sequence

from ..models.jira import JiraSearchResult
from ..utils.pagination import DEFAULT_PAGE_SIZE
from .client import JiraClient
from .constants import API_PATH, SEARCH_ISSUE_FIELDS

logger = logging.getLogger("mcp-jira.jira.search")


class SearchMixin(JiraClient):
    """Mixin for Jira search operations."""

    def search_issues(
        self,
        jql: str,
        start_at: int = 0,
        max_results: int = DEFAULT_PAGE_SIZE,
        fields: Sequence[str] | None = None,
    ) -> JiraSearchResult:
        """
        Search for issues using JQL (Jira Query Language).

        Args:
            jql: JQL query string
            start_at: Offset of the first issue to return
            max_results: Page size
            fields: Fields to include per issue

        Returns:
            One page of matching issues

        Raises:
            MCPJiraError: API_ERROR 400 carrying ``errorMessages`` for
                invalid JQL
        """
        logger.debug(f"Searching issues: jql={jql!r} startAt={start_at}")
        data = self.request(
            "GET",
            f"{API_PATH}/search",
            params={
                "jql": jql,
                "startAt": start_at,
                "maxResults": max_results,
                "fields": ",".join(fields or SEARCH_ISSUE_FIELDS),
            },
        )
        return JiraSearchResult.from_api_response(data, "issues search")
