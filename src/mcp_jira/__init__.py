"""MCP Jira: Jira Cloud as Markdown, from the command line or over MCP."""

__version__ = "0.3.0"

from .cli import main  # noqa: E402
from .logging_config import log_operation, setup_logger  # noqa: E402

__all__ = ["main", "__version__", "setup_logger", "log_operation"]
