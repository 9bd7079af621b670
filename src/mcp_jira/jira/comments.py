"""Module for Jira comment operations."""

import logging
from typing import Any

from ..models.jira import JiraComment, JiraCommentPage
from ..utils.pagination import DEFAULT_PAGE_SIZE
from .client import JiraClient
from .constants import API_PATH

logger = logging.getLogger("mcp-jira.jira.comments")


class CommentsMixin(JiraClient):
    """Mixin for Jira comment operations."""

    def get_issue_comments(
        self,
        id_or_key: str,
        start_at: int = 0,
        max_results: int = DEFAULT_PAGE_SIZE,
        order_by: str | None = None,
    ) -> JiraCommentPage:
        """
        Get a page of comments for an issue.

        Args:
            id_or_key: The issue ID or key (e.g. 'PROJ-123')
            start_at: Offset of the first comment
            max_results: Page size
            order_by: ``created`` or ``-created``

        Returns:
            The comment page, bodies still in ADF
        """
        data = self.request(
            "GET",
            f"{API_PATH}/issue/{id_or_key}/comment",
            params={
                "startAt": start_at,
                "maxResults": max_results,
                "orderBy": order_by,
                "expand": "renderedBody",
            },
        )
        return JiraCommentPage.from_api_response(data, "comments")

    def add_comment(self, id_or_key: str, body_adf: dict[str, Any]) -> JiraComment:
        """Add a comment to an issue.

        Args:
            id_or_key: The issue ID or key (e.g. 'PROJ-123')
            body_adf: The comment body as an ADF document dict

        Returns:
            The created comment
        """
        logger.info(f"Adding comment to issue {id_or_key}")
        data = self.request(
            "POST",
            f"{API_PATH}/issue/{id_or_key}/comment",
            data={"body": body_adf},
        )
        return JiraComment.from_api_response(data, "comment")
