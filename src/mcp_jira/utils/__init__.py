"""Utility functions for the MCP Jira integration."""

from .date import parse_date
from .errors import (
    classify_http_error,
    extract_api_error_message,
    format_error_for_cli,
    format_error_for_tool,
    handle_controller_error,
)
from .io import is_read_only_mode
from .pagination import (
    DEFAULT_PAGE_SIZE,
    PaginationType,
    ResponsePagination,
    extract_pagination_info,
)
from .validation import validate_response

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "PaginationType",
    "ResponsePagination",
    "classify_http_error",
    "extract_api_error_message",
    "extract_pagination_info",
    "format_error_for_cli",
    "format_error_for_tool",
    "handle_controller_error",
    "is_read_only_mode",
    "parse_date",
    "validate_response",
]
