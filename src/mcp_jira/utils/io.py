"""I/O utility functions for MCP Jira."""

import os

TRUTHY_VALUES = {"true", "1", "yes", "y", "on"}


def is_env_truthy(name: str, default: str = "false") -> bool:
    """Check whether an environment variable holds a truthy flag."""
    return os.getenv(name, default).strip().lower() in TRUTHY_VALUES


def is_read_only_mode() -> bool:
    """Check if the server is running in read-only mode.

    Read-only mode refuses write tools (updating issues, adding comments)
    while allowing all read operations.

    Returns:
        True if read-only mode is enabled, False otherwise
    """
    return is_env_truthy("READ_ONLY_MODE")
