"""Development information module for Jira (Bitbucket integration).

Jira Cloud exposes the repositories, branches and pull requests linked to an
issue through the internal dev-status API, keyed by numeric issue ID. The
summary endpoint reports counts; details are fetched per data type.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from ..models.jira import (
    DevelopmentInformation,
    DevInfoResponse,
    DevInfoSummaryResponse,
)
from .client import JiraClient
from .constants import DEV_INFO_APPLICATION_TYPE, DEV_STATUS_PATH

logger = logging.getLogger("mcp-jira.jira.development")


class DevelopmentMixin(JiraClient):
    """Mixin for development-related operations in Jira."""

    def get_dev_info_summary(self, issue_id: str) -> DevInfoSummaryResponse:
        """Get the repository, branch and pull request counts for an issue."""
        data = self.request(
            "GET",
            f"{DEV_STATUS_PATH}/issue/summary",
            params={"issueId": issue_id},
        )
        return DevInfoSummaryResponse.from_api_response(
            data or {}, "development summary"
        )

    def _get_dev_info_detail(self, issue_id: str, data_type: str) -> DevInfoResponse:
        data = self.request(
            "GET",
            f"{DEV_STATUS_PATH}/issue/detail",
            params={
                "issueId": issue_id,
                "applicationType": DEV_INFO_APPLICATION_TYPE,
                "dataType": data_type,
            },
        )
        return DevInfoResponse.from_api_response(
            data or {}, f"development {data_type} detail"
        )

    def get_dev_info_commits(self, issue_id: str) -> DevInfoResponse:
        """Get the repositories (with commits) linked to an issue."""
        return self._get_dev_info_detail(issue_id, "repository")

    def get_dev_info_branches(self, issue_id: str) -> DevInfoResponse:
        """Get the branches linked to an issue."""
        return self._get_dev_info_detail(issue_id, "branch")

    def get_dev_info_pull_requests(self, issue_id: str) -> DevInfoResponse:
        """Get the pull requests linked to an issue."""
        return self._get_dev_info_detail(issue_id, "pullrequest")

    def get_all_dev_info(self, issue_id: str) -> DevelopmentInformation:
        """
        Fetch the summary and all detail types concurrently.

        Args:
            issue_id: The numeric issue ID (not the key)

        Returns:
            The combined development information

        Raises:
            MCPJiraError: If any of the four requests fails
        """
        logger.debug(f"Fetching development information for issue {issue_id}")
        with ThreadPoolExecutor(max_workers=4) as executor:
            summary = executor.submit(self.get_dev_info_summary, issue_id)
            commits = executor.submit(self.get_dev_info_commits, issue_id)
            branches = executor.submit(self.get_dev_info_branches, issue_id)
            pull_requests = executor.submit(self.get_dev_info_pull_requests, issue_id)

            return DevelopmentInformation(
                summary=summary.result(),
                commits=commits.result(),
                branches=branches.result(),
                pull_requests=pull_requests.result(),
            )
