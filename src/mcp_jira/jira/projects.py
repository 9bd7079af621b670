"""Module for Jira project operations."""

import logging

from ..models.jira import JiraComponent, JiraProject, JiraProjectPage, JiraVersion
from ..utils.pagination import DEFAULT_PAGE_SIZE
from ..utils.validation import validate_response
from .client import JiraClient
from .constants import API_PATH, PROJECT_EXPAND

logger = logging.getLogger("mcp-jira.jira.projects")


class ProjectsMixin(JiraClient):
    """Mixin for Jira project operations."""

    def list_projects(
        self,
        query: str | None = None,
        order_by: str | None = None,
        start_at: int = 0,
        max_results: int = DEFAULT_PAGE_SIZE,
    ) -> JiraProjectPage:
        """
        Search projects visible to the current user.

        Args:
            query: Filter on project key or name
            order_by: e.g. ``name``, ``-lastIssueUpdatedTime``
            start_at: Offset of the first project
            max_results: Page size

        Returns:
            One page of projects
        """
        data = self.request(
            "GET",
            f"{API_PATH}/project/search",
            params={
                "query": query,
                "orderBy": order_by,
                "startAt": start_at,
                "maxResults": max_results,
                "expand": "description,lead",
            },
        )
        return JiraProjectPage.from_api_response(data, "projects")

    def get_project(
        self,
        id_or_key: str,
        include_components: bool = True,
        include_versions: bool = True,
    ) -> JiraProject:
        """
        Get a project with its components and versions.

        Components and versions come from their own endpoints so that they
        are complete even when the project payload omits them.
        """
        data = self.request(
            "GET",
            f"{API_PATH}/project/{id_or_key}",
            params={"expand": PROJECT_EXPAND},
        )
        project = JiraProject.from_api_response(data, "project")

        if include_components:
            raw = self.request("GET", f"{API_PATH}/project/{id_or_key}/components")
            project.components = validate_response(
                raw or [], list[JiraComponent], "project components"
            )
        if include_versions:
            raw = self.request("GET", f"{API_PATH}/project/{id_or_key}/versions")
            project.versions = validate_response(
                raw or [], list[JiraVersion], "project versions"
            )
        return project
