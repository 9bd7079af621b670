"""Command-line interface: every Jira operation as a click subcommand."""

import json
import logging
import os
import sys
from collections.abc import Callable
from typing import Any

import click
from dotenv import load_dotenv

from . import __version__
from .controllers import ControllerResponse, comments, issues, projects, search, statuses
from .formatting import format_pagination
from .jira import JiraFetcher
from .logging_config import log_operation, setup_logger
from .utils.errors import format_error_for_cli
from .utils.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, parse_start_at

logger = logging.getLogger("mcp-jira.cli")

LIMIT_TYPE = click.IntRange(1, MAX_PAGE_SIZE)


def _level_for(verbose: int, default: str) -> str:
    if verbose >= 2:
        return "DEBUG"
    if verbose == 1:
        return "INFO"
    return os.getenv("LOG_LEVEL", default)


def render_response(response: ControllerResponse) -> str:
    """Append the pagination footer, including the ``--cursor`` hint."""
    pagination = response.pagination
    if pagination is None:
        return response.content
    footer = format_pagination(
        pagination.count or 0,
        pagination.has_more,
        pagination.next_cursor,
        pagination.total,
    )
    return f"{response.content}\n\n{footer}" if footer else response.content


def run_command(action: Callable[[JiraFetcher], ControllerResponse]) -> None:
    """Run a controller against a fresh fetcher and print the result.

    Errors are printed to stderr and the process exits with status 1.
    """
    try:
        fetcher = JiraFetcher()
        click.echo(render_response(action(fetcher)))
    except Exception as e:  # noqa: BLE001 - Every failure is reported on stderr
        click.echo(format_error_for_cli(e), err=True)
        sys.exit(1)


def _parse_json_option(value: str | None, name: str) -> dict[str, Any] | None:
    if value is None:
        return None
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"must be a JSON object: {e}", param_hint=name) from e
    if not isinstance(parsed, dict):
        raise click.BadParameter("must be a JSON object", param_hint=name)
    return parsed


def _start_at(cursor: str | None) -> int:
    try:
        return parse_start_at(cursor)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--cursor") from e


@click.group()
@click.version_option(__version__, prog_name="mcp-jira")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False),
    help="Also write logs to rotating files in this directory",
)
@click.pass_context
def main(
    ctx: click.Context, verbose: int, env_file: str | None, log_dir: str | None
) -> None:
    """MCP Jira - Jira Cloud from the command line or as an MCP server.

    Credentials come from ATLASSIAN_SITE_NAME, ATLASSIAN_USER_EMAIL and
    ATLASSIAN_API_TOKEN (or JIRA_URL, JIRA_USERNAME and JIRA_API_TOKEN).
    """
    ctx.ensure_object(dict)
    ctx.obj.update(verbose=verbose, log_dir=log_dir)

    # LOG_LEVEL may come from the .env file
    loaded = load_dotenv(env_file) if env_file else load_dotenv()

    setup_logger(
        level=_level_for(verbose, "WARNING"), log_to_file=bool(log_dir), log_dir=log_dir
    )
    logger.debug(f"Environment file {env_file or '.env'} loaded: {loaded}")


@main.command("ls-projects")
@click.option("--name-filter", help="Filter by project key or name")
@click.option("--order-by", help="Sort field, e.g. name or -lastIssueUpdatedTime")
@click.option("-l", "--limit", type=LIMIT_TYPE, default=DEFAULT_PAGE_SIZE, show_default=True)
@click.option("-c", "--cursor", help="Start offset from a previous page")
def ls_projects(
    name_filter: str | None, order_by: str | None, limit: int, cursor: str | None
) -> None:
    """List Jira projects."""
    start_at = _start_at(cursor)
    run_command(
        lambda jira: projects.list_projects(
            jira, query=name_filter, order_by=order_by, limit=limit, start_at=start_at
        )
    )


@main.command("get-project")
@click.option("-p", "--project-key-or-id", required=True, help="Project key or ID")
def get_project(project_key_or_id: str) -> None:
    """Show a project with its components and versions."""
    run_command(lambda jira: projects.get_project(jira, project_key_or_id))


@main.command("ls-issues")
@click.option("-q", "--jql", help="JQL filter")
@click.option("-p", "--project-key-or-id", help="Only issues of this project")
@click.option(
    "-s", "--status", "statuses", multiple=True, help="Status name (repeatable)"
)
@click.option("-o", "--order-by", help="Ordering, e.g. 'priority DESC'")
@click.option("-l", "--limit", type=LIMIT_TYPE, default=DEFAULT_PAGE_SIZE, show_default=True)
@click.option("-c", "--cursor", help="Start offset from a previous page")
def ls_issues(
    jql: str | None,
    project_key_or_id: str | None,
    statuses: tuple[str, ...],
    order_by: str | None,
    limit: int,
    cursor: str | None,
) -> None:
    """List issues, most recently updated first."""
    start_at = _start_at(cursor)
    run_command(
        lambda jira: issues.list_issues(
            jira,
            jql=jql,
            project_key_or_id=project_key_or_id,
            statuses=list(statuses) or None,
            order_by=order_by,
            limit=limit,
            start_at=start_at,
        )
    )


@main.command("get-issue")
@click.option("-i", "--issue-id-or-key", required=True, help="Issue key or ID")
def get_issue(issue_id_or_key: str) -> None:
    """Show the full details of an issue."""
    run_command(lambda jira: issues.get_issue(jira, issue_id_or_key))


@main.command("update-issue")
@click.option("-i", "--issue-id-or-key", required=True, help="Issue key or ID")
@click.option("--fields", "fields_json", help="JSON object of fields to set")
@click.option("--update", "update_json", help="JSON object of field operations")
@click.option("--no-notify", is_flag=True, help="Do not notify watchers")
@click.option("--return-issue", is_flag=True, help="Show the updated issue")
def update_issue(
    issue_id_or_key: str,
    fields_json: str | None,
    update_json: str | None,
    no_notify: bool,
    return_issue: bool,
) -> None:
    """Update fields of an issue."""
    fields = _parse_json_option(fields_json, "--fields")
    update = _parse_json_option(update_json, "--update")
    if not fields and not update:
        raise click.UsageError("Provide --fields and/or --update")
    run_command(
        lambda jira: issues.update_issue(
            jira,
            issue_id_or_key,
            fields=fields,
            update=update,
            notify_users=not no_notify,
            return_issue=return_issue,
        )
    )


@main.command("search")
@click.option("-q", "--jql", help="JQL query")
@click.option("-l", "--limit", type=LIMIT_TYPE, default=DEFAULT_PAGE_SIZE, show_default=True)
@click.option("-c", "--cursor", help="Start offset from a previous page")
def search_command(jql: str | None, limit: int, cursor: str | None) -> None:
    """Search issues with JQL."""
    start_at = _start_at(cursor)
    run_command(
        lambda jira: search.search(jira, jql=jql, limit=limit, start_at=start_at)
    )


@main.command("ls-comments")
@click.option("-i", "--issue-id-or-key", required=True, help="Issue key or ID")
@click.option("-l", "--limit", type=LIMIT_TYPE, default=DEFAULT_PAGE_SIZE, show_default=True)
@click.option("-c", "--cursor", help="Start offset from a previous page")
@click.option("-o", "--order-by", help="created or -created")
def ls_comments(
    issue_id_or_key: str, limit: int, cursor: str | None, order_by: str | None
) -> None:
    """List the comments of an issue."""
    start_at = _start_at(cursor)
    run_command(
        lambda jira: comments.list_comments(
            jira, issue_id_or_key, limit=limit, start_at=start_at, order_by=order_by
        )
    )


@main.command("add-comment")
@click.option("-i", "--issue-id-or-key", required=True, help="Issue key or ID")
@click.option("-b", "--body", "comment_body", required=True, help="Comment in Markdown")
def add_comment(issue_id_or_key: str, comment_body: str) -> None:
    """Add a Markdown comment to an issue."""
    run_command(lambda jira: comments.add_comment(jira, issue_id_or_key, comment_body))


@main.command("ls-statuses")
@click.option("-p", "--project-key-or-id", help="Only statuses of this project")
def ls_statuses(project_key_or_id: str | None) -> None:
    """List workflow statuses."""
    run_command(lambda jira: statuses.list_statuses(jira, project_key_or_id))


@main.command("serve")
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    default="stdio",
    show_default=True,
    help="Transport type",
)
@click.option("--port", default=8000, show_default=True, help="Port for HTTP transports")
@click.option("--host", default="0.0.0.0", show_default=True, help="Host for HTTP transports")  # noqa: S104
@click.pass_context
def serve(ctx: click.Context, transport: str, port: int, host: str) -> None:
    """Run the MCP server."""
    setup_logger(
        level=_level_for(ctx.obj["verbose"], "INFO"),
        log_to_file=bool(ctx.obj["log_dir"]),
        log_dir=ctx.obj["log_dir"],
    )

    from .servers import run_server

    with log_operation(logger, "serve", transport=transport):
        logger.info(f"Starting MCP Jira v{__version__} with {transport} transport")
        run_server(transport=transport, port=port, host=host)
