"""Module for Jira issue operations."""

import logging
from collections.abc import Sequence
from typing import Any

from ..models.jira import JiraIssue
from .client import JiraClient
from .constants import API_PATH, DEFAULT_ISSUE_FIELDS

logger = logging.getLogger("mcp-jira.jira.issues")


class IssuesMixin(JiraClient):
    """Mixin for Jira issue operations."""

    def get_issue(
        self,
        id_or_key: str,
        fields: Sequence[str] | None = None,
        expand: Sequence[str] | None = None,
        update_history: bool = True,
    ) -> JiraIssue:
        """
        Get a single issue.

        Args:
            id_or_key: Issue ID or key (e.g. 'PROJ-123')
            fields: Fields to request; defaults to the fields the detail
                view renders
            expand: Optional expansions (e.g. ``["renderedFields"]``)
            update_history: Whether Jira should record the issue as viewed

        Returns:
            The validated issue

        Raises:
            MCPJiraError: If the request fails or the payload is malformed
        """
        logger.debug(f"Getting issue {id_or_key}")
        data = self.request(
            "GET",
            f"{API_PATH}/issue/{id_or_key}",
            params={
                "fields": ",".join(fields or DEFAULT_ISSUE_FIELDS),
                "expand": ",".join(expand) if expand else None,
                "updateHistory": str(update_history).lower(),
            },
        )
        return JiraIssue.from_api_response(data, "issue")

    def update_issue(
        self,
        id_or_key: str,
        fields: dict[str, Any] | None = None,
        update: dict[str, Any] | None = None,
        notify_users: bool = True,
        return_issue: bool = False,
        expand: Sequence[str] | None = None,
    ) -> dict[str, Any]:
        """
        Edit an issue.

        ``fields`` sets values outright; ``update`` carries operation lists
        (``{"labels": [{"add": "x"}]}``). Rich-text values must already be
        ADF documents.

        Returns:
            The updated issue when ``return_issue`` is set, otherwise an
            empty dict (Jira answers 204).
        """
        if not fields and not update:
            raise ValueError("Either fields or update must be provided")

        body: dict[str, Any] = {}
        if fields:
            body["fields"] = fields
        if update:
            body["update"] = update

        logger.debug(
            f"Updating issue {id_or_key}: fields={sorted(fields or {})}, "
            f"update={sorted(update or {})}"
        )
        data = self.request(
            "PUT",
            f"{API_PATH}/issue/{id_or_key}",
            params={
                "notifyUsers": str(notify_users).lower(),
                "returnIssue": str(return_issue).lower(),
                "expand": ",".join(expand) if expand else None,
            },
            data=body,
        )
        return data or {}
