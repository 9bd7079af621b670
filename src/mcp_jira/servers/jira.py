"""Jira FastMCP server instance and tool definitions."""

import logging
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from mcp_jira.controllers import comments, issues, projects, statuses
from mcp_jira.controllers.search import search as search_controller
from mcp_jira.controllers.base import ControllerResponse
from mcp_jira.formatting import format_pagination
from mcp_jira.servers.dependencies import get_jira_fetcher
from mcp_jira.utils.decorators import check_write_access
from mcp_jira.utils.errors import format_error_for_tool
from mcp_jira.utils.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE

logger = logging.getLogger("mcp-jira.servers.jira")

jira_mcp = FastMCP(
    name="Jira MCP Service",
    instructions=(
        "Provides tools for reading Jira Cloud projects, issues, comments and "
        "statuses as Markdown, and for updating issues and adding comments."
    ),
)

Limit = Annotated[
    int,
    Field(
        description=f"Maximum number of items to return (1-{MAX_PAGE_SIZE}).",
        ge=1,
        le=MAX_PAGE_SIZE,
    ),
]
StartAt = Annotated[
    int,
    Field(
        description="Index of the first item to return (0-based). Use the "
        "'Next StartAt' value from a previous response to get the next page.",
        ge=0,
    ),
]


def render_response(response: ControllerResponse) -> str:
    """Append the pagination hint an agent needs to request the next page."""
    pagination = response.pagination
    if pagination is None:
        return response.content

    summary = format_pagination(
        pagination.count or 0, pagination.has_more, None, pagination.total
    )
    lines = [response.content]
    if summary:
        lines.extend(["", summary])
    if pagination.has_more and pagination.next_cursor:
        lines.append(f"*Next StartAt: {pagination.next_cursor}*")
    return "\n".join(lines)


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "List Projects", "readOnlyHint": True},
)
async def ls_projects(
    ctx: Context,
    name_filter: Annotated[
        str | None,
        Field(description="Filter projects by key or name (partial match)."),
    ] = None,
    order_by: Annotated[
        str | None,
        Field(
            description="Sort field, e.g. 'name', 'key' or '-lastIssueUpdatedTime'. "
            "Defaults to most recently updated."
        ),
    ] = None,
    limit: Limit = DEFAULT_PAGE_SIZE,
    start_at: StartAt = 0,
) -> str:
    """
    List Jira projects accessible to the configured user.

    Returns:
        Markdown list of projects with keys, styles and links.
    """
    try:
        jira = await get_jira_fetcher(ctx)
        return render_response(
            projects.list_projects(
                jira, query=name_filter, order_by=order_by, limit=limit, start_at=start_at
            )
        )
    except Exception as e:  # noqa: BLE001 - Errors are reported to the agent as text
        return format_error_for_tool(e)


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get Project", "readOnlyHint": True},
)
async def get_project(
    ctx: Context,
    project_key_or_id: Annotated[
        str, Field(description="Project key (e.g. 'PROJ') or numeric ID.")
    ],
) -> str:
    """Get a project with its lead, components and versions."""
    try:
        jira = await get_jira_fetcher(ctx)
        return render_response(projects.get_project(jira, project_key_or_id))
    except Exception as e:  # noqa: BLE001 - Errors are reported to the agent as text
        return format_error_for_tool(e)


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "List Issues", "readOnlyHint": True},
)
async def ls_issues(
    ctx: Context,
    jql: Annotated[
        str | None,
        Field(
            description="Optional JQL filter, e.g. \"assignee = currentUser()\". "
            "Combined with the other filters using AND."
        ),
    ] = None,
    project_key_or_id: Annotated[
        str | None, Field(description="Only list issues of this project.")
    ] = None,
    statuses: Annotated[
        list[str] | None,
        Field(description="Only list issues in these statuses, e.g. ['To Do', 'In Progress']."),
    ] = None,
    order_by: Annotated[
        str | None,
        Field(description="JQL ordering without 'ORDER BY', e.g. 'priority DESC'."),
    ] = None,
    limit: Limit = DEFAULT_PAGE_SIZE,
    start_at: StartAt = 0,
) -> str:
    """
    List Jira issues, newest updates first unless ordered otherwise.

    Returns:
        Markdown list of issues with status, priority, people and dates.
    """
    try:
        jira = await get_jira_fetcher(ctx)
        return render_response(
            issues.list_issues(
                jira,
                jql=jql,
                project_key_or_id=project_key_or_id,
                statuses=statuses,
                order_by=order_by,
                limit=limit,
                start_at=start_at,
            )
        )
    except Exception as e:  # noqa: BLE001 - Errors are reported to the agent as text
        return format_error_for_tool(e)


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get Issue", "readOnlyHint": True},
)
async def get_issue(
    ctx: Context,
    issue_id_or_key: Annotated[
        str, Field(description="Issue key (e.g. 'PROJ-123') or numeric ID.")
    ],
) -> str:
    """
    Get the full details of an issue.

    Includes description, people, dates, time tracking, attachments,
    comments, linked issues and linked development work.
    """
    try:
        jira = await get_jira_fetcher(ctx)
        return render_response(issues.get_issue(jira, issue_id_or_key))
    except Exception as e:  # noqa: BLE001 - Errors are reported to the agent as text
        return format_error_for_tool(e)


@jira_mcp.tool(
    tags={"jira", "write"},
    annotations={"title": "Update Issue", "destructiveHint": True},
)
@check_write_access
async def update_issue(
    ctx: Context,
    issue_id_or_key: Annotated[
        str, Field(description="Issue key (e.g. 'PROJ-123') or numeric ID.")
    ],
    fields: Annotated[
        dict[str, Any] | None,
        Field(
            description=(
                "Fields to set, e.g. {\"summary\": \"New title\", \"priority\": \"High\"}. "
                "'description' and 'customfield_*' strings are Markdown. "
                "'assignee' takes an account ID; 'components' and 'fixVersions' "
                "take lists of names or IDs."
            )
        ),
    ] = None,
    update: Annotated[
        dict[str, Any] | None,
        Field(
            description="Field operations, e.g. {\"labels\": [{\"add\": \"urgent\"}]}."
        ),
    ] = None,
    notify_users: Annotated[
        bool, Field(description="Send notification emails to watchers.")
    ] = True,
    return_issue: Annotated[
        bool, Field(description="Include the updated issue in the response.")
    ] = False,
) -> str:
    """Update fields of an existing issue."""
    try:
        jira = await get_jira_fetcher(ctx)
        return render_response(
            issues.update_issue(
                jira,
                issue_id_or_key,
                fields=fields,
                update=update,
                notify_users=notify_users,
                return_issue=return_issue,
            )
        )
    except Exception as e:  # noqa: BLE001 - Errors are reported to the agent as text
        return format_error_for_tool(e)


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Search Issues", "readOnlyHint": True},
)
async def search(
    ctx: Context,
    jql: Annotated[
        str | None,
        Field(
            description="JQL query, e.g. \"project = PROJ AND status = 'In Progress'\"."
        ),
    ] = None,
    limit: Limit = DEFAULT_PAGE_SIZE,
    start_at: StartAt = 0,
) -> str:
    """Search issues with JQL."""
    try:
        jira = await get_jira_fetcher(ctx)
        return render_response(
            search_controller(jira, jql=jql, limit=limit, start_at=start_at)
        )
    except Exception as e:  # noqa: BLE001 - Errors are reported to the agent as text
        return format_error_for_tool(e)


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "List Comments", "readOnlyHint": True},
)
async def ls_comments(
    ctx: Context,
    issue_id_or_key: Annotated[
        str, Field(description="Issue key (e.g. 'PROJ-123') or numeric ID.")
    ],
    limit: Limit = DEFAULT_PAGE_SIZE,
    start_at: StartAt = 0,
    order_by: Annotated[
        str | None,
        Field(description="'created' (oldest first) or '-created' (newest first)."),
    ] = None,
) -> str:
    """List the comments of an issue."""
    try:
        jira = await get_jira_fetcher(ctx)
        return render_response(
            comments.list_comments(
                jira, issue_id_or_key, limit=limit, start_at=start_at, order_by=order_by
            )
        )
    except Exception as e:  # noqa: BLE001 - Errors are reported to the agent as text
        return format_error_for_tool(e)


@jira_mcp.tool(
    tags={"jira", "write"},
    annotations={"title": "Add Comment", "destructiveHint": True},
)
@check_write_access
async def add_comment(
    ctx: Context,
    issue_id_or_key: Annotated[
        str, Field(description="Issue key (e.g. 'PROJ-123') or numeric ID.")
    ],
    comment_body: Annotated[
        str,
        Field(
            description="Comment text in Markdown (headings, lists, **bold**, "
            "*italic*, `code`, ~~strike~~, [links](url), > quotes)."
        ),
    ],
) -> str:
    """Add a comment to an issue."""
    try:
        jira = await get_jira_fetcher(ctx)
        return render_response(comments.add_comment(jira, issue_id_or_key, comment_body))
    except Exception as e:  # noqa: BLE001 - Errors are reported to the agent as text
        return format_error_for_tool(e)


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "List Statuses", "readOnlyHint": True},
)
async def ls_statuses(
    ctx: Context,
    project_key_or_id: Annotated[
        str | None,
        Field(description="Only list statuses used by this project's workflows."),
    ] = None,
) -> str:
    """List workflow statuses, grouped by category."""
    try:
        jira = await get_jira_fetcher(ctx)
        return render_response(statuses.list_statuses(jira, project_key_or_id))
    except Exception as e:  # noqa: BLE001 - Errors are reported to the agent as text
        return format_error_for_tool(e)
