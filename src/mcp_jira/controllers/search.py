"""Search controller: JQL search rendered as a results document."""

import logging
from collections.abc import Sequence

from ..jira import JiraFetcher
from ..utils.errors import handle_controller_error
from ..utils.pagination import DEFAULT_PAGE_SIZE
from .base import ControllerResponse
from .issues import list_issues

logger = logging.getLogger("mcp-jira.controllers.search")


def search(
    fetcher: JiraFetcher,
    jql: str | None = None,
    limit: int | None = DEFAULT_PAGE_SIZE,
    start_at: int = 0,
    project_key_or_id: str | None = None,
    statuses: Sequence[str] | None = None,
    order_by: str | None = None,
) -> ControllerResponse:
    """Search issues and show the query above the results."""
    try:
        result = list_issues(
            fetcher,
            jql=jql,
            project_key_or_id=project_key_or_id,
            statuses=statuses,
            order_by=order_by,
            limit=limit,
            start_at=start_at,
        )
    except Exception as e:
        raise handle_controller_error(e, "searching issues") from e

    header = "# Jira Search Results\n\n"
    if jql:
        header += f"**JQL Query:** `{jql}`\n\n"

    if result.pagination is not None:
        logger.debug(
            f"Search returned {result.pagination.count} issues, "
            f"has_more={result.pagination.has_more}"
        )
    return ControllerResponse(content=header + result.content, pagination=result.pagination)
