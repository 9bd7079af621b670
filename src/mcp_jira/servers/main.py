"""Main FastMCP server setup for the Jira integration."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Literal

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from mcp_jira.exceptions import MCPJiraError
from mcp_jira.jira.config import JiraConfig
from mcp_jira.utils.io import is_read_only_mode

from .context import MainAppContext
from .jira import jira_mcp

logger = logging.getLogger("mcp-jira.servers.main")

Transport = Literal["stdio", "sse", "streamable-http"]


@asynccontextmanager
async def main_lifespan(app: FastMCP[MainAppContext]) -> AsyncIterator[dict]:
    logger.info("Main Jira MCP server lifespan starting...")
    read_only = is_read_only_mode()

    loaded_jira_config: JiraConfig | None = None
    try:
        loaded_jira_config = JiraConfig.from_env()
        logger.info(
            f"Jira configuration loaded for {loaded_jira_config.url} "
            f"(auth: {loaded_jira_config.auth_type})"
        )
    except MCPJiraError as e:
        logger.error(f"Failed to load Jira configuration: {e.message}")

    app_context = MainAppContext(jira_config=loaded_jira_config, read_only=read_only)
    logger.info(f"Read-only mode: {'ENABLED' if read_only else 'DISABLED'}")

    try:
        yield {"app_lifespan_context": app_context}
    finally:
        logger.info("Main Jira MCP server lifespan shutdown complete.")


main_mcp = FastMCP(name="Jira MCP", lifespan=main_lifespan)
main_mcp.mount(jira_mcp, prefix="jira")


@main_mcp.custom_route("/healthz", methods=["GET"], include_in_schema=False)
async def health_check(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def run_server(
    transport: Transport = "stdio", port: int = 8000, host: str = "0.0.0.0"  # noqa: S104
) -> None:
    """Run the MCP server with the specified transport."""
    if transport == "stdio":
        main_mcp.run(transport="stdio")
        return

    logger.info(f"Serving MCP over {transport} on {host}:{port}")
    main_mcp.run(transport=transport, host=host, port=port)
