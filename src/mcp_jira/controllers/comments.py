"""Comment controllers."""

import logging

from ..adf import markdown_to_adf
from ..exceptions import create_api_error
from ..formatting import format_added_comment, format_comments_list
from ..jira import JiraFetcher
from ..logging_config import log_operation
from ..utils.errors import handle_controller_error
from ..utils.pagination import (
    DEFAULT_PAGE_SIZE,
    PaginationType,
    clamp_page_size,
    extract_pagination_info,
)
from .base import ControllerResponse

logger = logging.getLogger("mcp-jira.controllers.comments")


def list_comments(
    fetcher: JiraFetcher,
    issue_id_or_key: str,
    limit: int | None = DEFAULT_PAGE_SIZE,
    start_at: int = 0,
    order_by: str | None = None,
) -> ControllerResponse:
    """List one page of an issue's comments."""
    with log_operation(logger, "list_comments", issue=issue_id_or_key):
        try:
            page = fetcher.get_issue_comments(
                issue_id_or_key,
                start_at=start_at,
                max_results=clamp_page_size(limit),
                order_by=order_by,
            )
        except Exception as e:
            raise handle_controller_error(
                e, f"listing comments for issue {issue_id_or_key}"
            ) from e

        pagination = extract_pagination_info(
            page.model_dump(by_alias=True), PaginationType.OFFSET, source="list_comments"
        )
        return ControllerResponse(
            content=format_comments_list(page.comments, issue_id_or_key, fetcher.base_url),
            pagination=pagination,
        )


def add_comment(
    fetcher: JiraFetcher, issue_id_or_key: str, comment_body: str
) -> ControllerResponse:
    """Add a Markdown comment to an issue."""
    if not comment_body or not comment_body.strip():
        raise create_api_error("Comment body must not be empty", 400)

    with log_operation(logger, "add_comment", issue=issue_id_or_key):
        try:
            comment = fetcher.add_comment(
                issue_id_or_key, markdown_to_adf(comment_body).to_dict()
            )
        except Exception as e:
            raise handle_controller_error(
                e, f"adding comment to issue {issue_id_or_key}"
            ) from e

        return ControllerResponse(
            content=format_added_comment(comment, issue_id_or_key, fetcher.base_url)
        )
