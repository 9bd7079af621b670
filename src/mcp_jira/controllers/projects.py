"""Project controllers."""

import logging

from ..formatting import format_project_details, format_projects_list
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

logger = logging.getLogger("mcp-jira.controllers.projects")

DEFAULT_PROJECT_ORDER = "lastIssueUpdatedTime"


def list_projects(
    fetcher: JiraFetcher,
    query: str | None = None,
    order_by: str | None = None,
    limit: int | None = DEFAULT_PAGE_SIZE,
    start_at: int = 0,
) -> ControllerResponse:
    """List projects, most recently active first unless ordered otherwise."""
    with log_operation(logger, "list_projects", query=query):
        try:
            page = fetcher.list_projects(
                query=query,
                order_by=order_by or DEFAULT_PROJECT_ORDER,
                start_at=start_at,
                max_results=clamp_page_size(limit),
            )
        except Exception as e:
            raise handle_controller_error(e, "listing projects") from e

        pagination = extract_pagination_info(
            page.model_dump(by_alias=True), PaginationType.OFFSET, source="list_projects"
        )
        return ControllerResponse(
            content=format_projects_list(page.values, total=page.total),
            pagination=pagination,
        )


def get_project(fetcher: JiraFetcher, id_or_key: str) -> ControllerResponse:
    with log_operation(logger, "get_project", project=id_or_key):
        try:
            project = fetcher.get_project(id_or_key)
        except Exception as e:
            raise handle_controller_error(e, f"retrieving project {id_or_key}") from e
        return ControllerResponse(content=format_project_details(project))
