"""Entry point for running the MCP Jira CLI."""

from mcp_jira import main

if __name__ == "__main__":
    main()
