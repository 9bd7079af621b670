"""
Issue controllers.

Each controller fetches through a :class:`~mcp_jira.jira.JiraFetcher`,
normalizes pagination, and renders Markdown. Failures are re-raised with
operation context via :func:`handle_controller_error`.
"""

import logging
import re
from collections.abc import Sequence
from typing import Any

from ..adf import markdown_to_adf
from ..exceptions import create_api_error
from ..formatting import (
    format_issue_details,
    format_issues_list,
    format_update_issue_response,
)
from ..jira import JiraFetcher
from ..logging_config import log_operation
from ..models.jira import JiraIssue
from ..utils.errors import handle_controller_error
from ..utils.pagination import (
    DEFAULT_PAGE_SIZE,
    PaginationType,
    clamp_page_size,
    extract_pagination_info,
)
from .base import ControllerResponse

logger = logging.getLogger("mcp-jira.controllers.issues")

DEFAULT_ORDER_BY = "updated DESC"

_ORDER_BY_RE = re.compile(r"\border\s+by\b", re.IGNORECASE)
_NUMERIC_ID_RE = re.compile(r"^\d+$")


def build_jql(
    jql: str | None = None,
    project_key_or_id: str | None = None,
    statuses: Sequence[str] | None = None,
    order_by: str | None = None,
) -> str:
    """
    Combine the list filters into a single JQL query.

    Filters are ANDed; a user query is parenthesised unless it is only an
    ORDER BY clause. ``ORDER BY updated DESC`` is appended when no ordering
    is given anywhere.
    """
    user_jql = (jql or "").strip()
    user_order = ""
    match = _ORDER_BY_RE.search(user_jql)
    if match:
        user_order = user_jql[match.start() :].strip()
        user_jql = user_jql[: match.start()].strip()

    clauses = []
    if project_key_or_id:
        clauses.append(f'project = "{project_key_or_id}"')
    if statuses:
        quoted = ", ".join(f'"{status}"' for status in statuses)
        clauses.append(f"status IN ({quoted})")
    if user_jql:
        clauses.append(f"({user_jql})")

    query = " AND ".join(clauses)
    if order_by:
        ordering = f"ORDER BY {order_by}"
    else:
        ordering = user_order or f"ORDER BY {DEFAULT_ORDER_BY}"
    return f"{query} {ordering}".strip()


def list_issues(
    fetcher: JiraFetcher,
    jql: str | None = None,
    project_key_or_id: str | None = None,
    statuses: Sequence[str] | None = None,
    order_by: str | None = None,
    limit: int | None = DEFAULT_PAGE_SIZE,
    start_at: int = 0,
) -> ControllerResponse:
    """List issues matching the combined filters."""
    query = build_jql(jql, project_key_or_id, statuses, order_by)
    with log_operation(logger, "list_issues", jql=query, start_at=start_at):
        try:
            result = fetcher.search_issues(
                query,
                start_at=start_at,
                max_results=clamp_page_size(limit),
            )
        except Exception as e:
            raise handle_controller_error(e, "listing issues") from e

        logger.debug(f"Retrieved {len(result.issues)} of {result.total} issues")
        pagination = extract_pagination_info(
            result.model_dump(by_alias=True),
            PaginationType.OFFSET,
            source="list_issues",
        )
        return ControllerResponse(
            content=format_issues_list(result.issues, fetcher.base_url),
            pagination=pagination,
        )


def get_issue(fetcher: JiraFetcher, id_or_key: str) -> ControllerResponse:
    """Get one issue with its development information when there is any."""
    if not id_or_key or id_or_key == "invalid":
        raise create_api_error("Invalid issue ID", 400)

    with log_operation(logger, "get_issue", issue=id_or_key):
        try:
            issue = fetcher.get_issue(id_or_key)
        except Exception as e:
            raise handle_controller_error(e, f"retrieving issue {id_or_key}") from e

        dev_info = None
        if issue.id:
            try:
                summary = fetcher.get_dev_info_summary(issue.id)
                if summary.has_data:
                    dev_info = fetcher.get_all_dev_info(issue.id)
            except Exception as e:  # noqa: BLE001 - Intentional fallback with logging
                logger.warning(f"Development information unavailable for {id_or_key}: {e}")

        return ControllerResponse(content=format_issue_details(issue, dev_info))


def _id_or_name(value: str) -> dict[str, str]:
    return {"id": value} if _NUMERIC_ID_RE.match(value) else {"name": value}


def prepare_update_fields(fields: dict[str, Any] | None) -> dict[str, Any]:
    """
    Translate user-friendly field values into the shapes Jira expects.

    Non-empty strings for ``description`` and ``customfield_*`` become ADF
    documents. ``priority``, ``components`` and ``fixVersions`` strings
    become ``{"id": ...}`` when numeric, else ``{"name": ...}``; an
    ``assignee`` string is an account ID.
    """
    prepared: dict[str, Any] = {}
    for name, value in (fields or {}).items():
        is_rich_text = name == "description" or name.startswith("customfield_")
        if is_rich_text and isinstance(value, str) and value.strip():
            prepared[name] = markdown_to_adf(value).to_dict()
            logger.debug(f"Converted field {name} to ADF format")
        else:
            prepared[name] = value

    if isinstance(prepared.get("priority"), str) and prepared["priority"]:
        prepared["priority"] = _id_or_name(prepared["priority"])
    if isinstance(prepared.get("assignee"), str) and prepared["assignee"]:
        prepared["assignee"] = {"accountId": prepared["assignee"]}
    for name in ("components", "fixVersions"):
        if isinstance(prepared.get(name), list):
            prepared[name] = [
                _id_or_name(item) if isinstance(item, str) else item
                for item in prepared[name]
            ]
    return prepared


def update_issue(
    fetcher: JiraFetcher,
    id_or_key: str,
    fields: dict[str, Any] | None = None,
    update: dict[str, Any] | None = None,
    notify_users: bool = True,
    return_issue: bool = False,
    expand: Sequence[str] | None = None,
) -> ControllerResponse:
    """Update an issue and render the confirmation."""
    with log_operation(logger, "update_issue", issue=id_or_key):
        try:
            response = fetcher.update_issue(
                id_or_key,
                fields=prepare_update_fields(fields) or None,
                update=update,
                notify_users=notify_users,
                return_issue=return_issue,
                expand=expand,
            )
            issue = (
                JiraIssue.from_api_response(response, "issue")
                if return_issue and response
                else None
            )
        except Exception as e:
            raise handle_controller_error(e, f"updating issue {id_or_key}") from e

        return ControllerResponse(
            content=format_update_issue_response(response, id_or_key, issue)
        )
