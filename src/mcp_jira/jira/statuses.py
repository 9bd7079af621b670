"""Module for Jira status operations."""

import logging

from ..models.jira import JiraIssueTypeStatuses, JiraStatus
from ..utils.validation import validate_response
from .client import JiraClient
from .constants import API_PATH

logger = logging.getLogger("mcp-jira.jira.statuses")


class StatusesMixin(JiraClient):
    """Mixin for Jira status operations."""

    def list_statuses(self, project_key_or_id: str | None = None) -> list[JiraStatus]:
        """
        List workflow statuses.

        Without a project this returns every status of the instance. For a
        project, Jira groups statuses per issue type; the groups are
        flattened and each status kept once, in first-seen order.

        Args:
            project_key_or_id: Optional project to restrict to

        Returns:
            The statuses
        """
        if not project_key_or_id:
            data = self.request("GET", f"{API_PATH}/status")
            return validate_response(data or [], list[JiraStatus], "global statuses")

        data = self.request("GET", f"{API_PATH}/project/{project_key_or_id}/statuses")
        issue_types = validate_response(
            data or [],
            list[JiraIssueTypeStatuses],
            f"project statuses response for {project_key_or_id}",
        )

        seen: set[str | None] = set()
        statuses: list[JiraStatus] = []
        for issue_type in issue_types:
            for status in issue_type.statuses:
                key = status.id or status.name
                if key in seen:
                    continue
                seen.add(key)
                statuses.append(status)

        logger.debug(
            f"Project {project_key_or_id}: {len(statuses)} unique statuses "
            f"across {len(issue_types)} issue types"
        )
        return statuses
