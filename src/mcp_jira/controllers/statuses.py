"""Status controller."""

import logging

from ..formatting import format_statuses_list
from ..jira import JiraFetcher
from ..logging_config import log_operation
from ..utils.errors import handle_controller_error
from .base import ControllerResponse

logger = logging.getLogger("mcp-jira.controllers.statuses")


def list_statuses(
    fetcher: JiraFetcher, project_key_or_id: str | None = None
) -> ControllerResponse:
    """List workflow statuses, optionally for one project."""
    with log_operation(logger, "list_statuses", project=project_key_or_id):
        try:
            statuses = fetcher.list_statuses(project_key_or_id)
        except Exception as e:
            target = f"for project {project_key_or_id}" if project_key_or_id else "globally"
            raise handle_controller_error(e, f"listing statuses {target}") from e
        return ControllerResponse(
            content=format_statuses_list(statuses, project_key_or_id)
        )
