"""Classification and presentation of Jira API failures.

Failures are classified once, where they are first observed (see
:func:`classify_http_error`), and rendered once, by the outermost CLI or MCP
tool adapter (see :func:`format_error_for_cli` and
:func:`format_error_for_tool`).
"""

import json
import logging
from typing import Any

from ..exceptions import (
    ErrorKind,
    MCPJiraError,
    create_api_error,
    create_auth_invalid_error,
    ensure_error,
)

logger = logging.getLogger("mcp-jira.utils.errors")


def extract_api_error_message(
    body: Any, status_code: int | None = None, reason: str | None = None
) -> str:
    """
    Pull the most specific human-readable message out of a Jira error body.

    The first available source wins: ``errorMessages`` (joined with ``; ``),
    the ``errors`` field map (``field: message`` joined with ``; ``), a
    top-level ``message``, the ``title`` of the first entry of an ``errors``
    list, then ``"<status> <reason>"``.
    """
    if isinstance(body, dict):
        error_messages = body.get("errorMessages")
        if isinstance(error_messages, list) and error_messages:
            return "; ".join(str(message) for message in error_messages)

        errors = body.get("errors")
        if isinstance(errors, dict) and errors:
            return "; ".join(f"{field}: {message}" for field, message in errors.items())

        message = body.get("message")
        if isinstance(message, str) and message:
            return message

        if isinstance(errors, list) and errors:
            first = errors[0]
            if isinstance(first, dict) and first.get("title"):
                return str(first["title"])

    return f"{status_code or ''} {reason or ''}".strip() or "Unknown error"


def parse_error_body(text: str | None) -> Any:
    """Decode a response body as JSON, falling back to the raw text."""
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError:
        return text


def classify_http_error(
    status_code: int, reason: str | None, body_text: str | None
) -> MCPJiraError:
    """Classify a non-2xx Jira response.

    Args:
        status_code: HTTP status returned by Jira.
        reason: HTTP reason phrase.
        body_text: Raw response body.

    Returns:
        The classified error; the decoded body is kept as its cause.
    """
    body = parse_error_body(body_text)
    detail = extract_api_error_message(body, status_code, reason)
    logger.debug(f"Jira API error {status_code}: {detail}")

    if status_code in (401, 403):
        return create_auth_invalid_error(
            f"Authentication failed. Jira API: {detail}", cause=body
        )
    if status_code == 404:
        return create_api_error(f"Resource not found. Jira API: {detail}", 404, body)
    return create_api_error(
        f"Jira API request failed. Detail: {detail}", status_code, body
    )


def get_api_error_body(error: MCPJiraError) -> dict[str, Any] | None:
    """Find the decoded Jira error body of a (possibly wrapped) API error."""
    while isinstance(error.cause, MCPJiraError):
        error = error.cause
    if error.kind is not ErrorKind.API_ERROR:
        return None

    candidate: Any = error.cause

    if isinstance(candidate, str):
        candidate = parse_error_body(candidate)
    if isinstance(candidate, dict):
        return candidate
    return None


def _jql_error_messages(error: MCPJiraError) -> list[str] | None:
    if error.status_code != 400:
        return None
    body = get_api_error_body(error)
    if not body:
        return None
    messages = body.get("errorMessages")
    if isinstance(messages, list) and messages:
        return [str(message) for message in messages]
    return None


def format_error_for_tool(error: BaseException) -> str:
    """Render an error as the text an MCP tool returns to the calling agent."""
    mcp_error = ensure_error(error)
    logger.error(f"{mcp_error.kind.value} error: {mcp_error.message}")

    jql_messages = _jql_error_messages(mcp_error)
    if jql_messages:
        return "Error: Invalid JQL Query.\n" + "\n".join(jql_messages)
    return f"Error: {mcp_error.message}"


def format_error_for_cli(error: BaseException) -> str:
    """Render an error as the line the CLI prints to stderr."""
    mcp_error = ensure_error(error)
    if mcp_error.status_code and mcp_error.status_code >= 500:
        logger.error(f"{mcp_error.kind.value} error occurred: {mcp_error.message}")
    else:
        logger.warning(f"{mcp_error.kind.value} error occurred: {mcp_error.message}")
    logger.debug(f"Error details: {mcp_error!r}, cause={mcp_error.cause!r}")

    jql_messages = _jql_error_messages(mcp_error)
    if jql_messages:
        return "Error: Invalid JQL Query (Status 400).\n" + "\n".join(jql_messages)
    return f"Error: {mcp_error.message}"


def handle_controller_error(error: BaseException, operation: str) -> MCPJiraError:
    """
    Add operation context to an error without re-classifying it.

    Args:
        error: The error raised while performing the operation.
        operation: What was being done, e.g. ``"listing issues"``.

    Returns:
        An error of the same kind and status whose cause is the original.
    """
    original = ensure_error(error)
    wrapped = MCPJiraError(
        f"Error {operation}: {original.message}",
        original.kind,
        original.status_code,
        original,
    )
    logger.debug(f"Wrapped {original!r} while {operation}")
    return wrapped
