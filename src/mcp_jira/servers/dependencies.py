"""Dependency provider for JiraFetcher.

Provides get_jira_fetcher for use in tool functions.
"""

from __future__ import annotations

import logging

from fastmcp import Context

from mcp_jira.exceptions import create_auth_missing_error
from mcp_jira.jira import JiraFetcher
from mcp_jira.servers.context import MainAppContext

logger = logging.getLogger("mcp-jira.servers.dependencies")


def get_app_context(ctx: Context) -> MainAppContext | None:
    """Return the MainAppContext stored by the server lifespan, if any."""
    lifespan_ctx_dict = ctx.request_context.lifespan_context  # type: ignore
    return (
        lifespan_ctx_dict.get("app_lifespan_context")
        if isinstance(lifespan_ctx_dict, dict)
        else None
    )


async def get_jira_fetcher(ctx: Context) -> JiraFetcher:
    """Returns a JiraFetcher built from the configuration loaded at startup."""
    app_lifespan_ctx = get_app_context(ctx)
    if app_lifespan_ctx and app_lifespan_ctx.jira_config:
        logger.debug(
            "get_jira_fetcher: Using Jira config from lifespan_context. "
            f"Auth type: {app_lifespan_ctx.jira_config.auth_type}"
        )
        return JiraFetcher(config=app_lifespan_ctx.jira_config)

    logger.error("Jira configuration could not be resolved.")
    raise create_auth_missing_error(
        "Jira client is not configured. Set ATLASSIAN_SITE_NAME (or JIRA_URL), "
        "ATLASSIAN_USER_EMAIL and ATLASSIAN_API_TOKEN."
    )
