"""Classified errors raised across the Jira client, controllers and surfaces."""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Categories every failure is folded into."""

    AUTH_MISSING = "AUTH_MISSING"
    AUTH_INVALID = "AUTH_INVALID"
    API_ERROR = "API_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


class MCPJiraError(Exception):
    """Base exception for MCP-Jira errors.

    Carries the error kind, an optional HTTP status code and the original
    cause (an exception, a raw API error body or validation diagnostics).
    """

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.UNEXPECTED_ERROR,
        status_code: int | None = None,
        cause: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.cause = cause

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value}, "
            f"status_code={self.status_code}, message={self.message!r})"
        )


class MCPJiraAuthenticationError(MCPJiraError):
    """Raised when credentials are missing or rejected (401/403)."""

    pass


def create_auth_missing_error(
    message: str = "Authentication credentials are missing",
) -> MCPJiraAuthenticationError:
    return MCPJiraAuthenticationError(message, ErrorKind.AUTH_MISSING)


def create_auth_invalid_error(
    message: str = "Authentication credentials are invalid",
    cause: Any = None,
) -> MCPJiraAuthenticationError:
    return MCPJiraAuthenticationError(message, ErrorKind.AUTH_INVALID, 401, cause)


def create_api_error(
    message: str, status_code: int | None = None, cause: Any = None
) -> MCPJiraError:
    return MCPJiraError(message, ErrorKind.API_ERROR, status_code, cause)


def create_validation_error(message: str, cause: Any = None) -> MCPJiraError:
    return MCPJiraError(message, ErrorKind.VALIDATION_ERROR, 500, cause)


def create_unexpected_error(
    message: str = "An unexpected error occurred", cause: Any = None
) -> MCPJiraError:
    return MCPJiraError(message, ErrorKind.UNEXPECTED_ERROR, None, cause)


def ensure_error(error: BaseException | Any) -> MCPJiraError:
    """Return ``error`` as an MCPJiraError, wrapping anything else as unexpected."""
    if isinstance(error, MCPJiraError):
        return error
    if isinstance(error, BaseException):
        return create_unexpected_error(str(error) or type(error).__name__, error)
    return create_unexpected_error(str(error))
