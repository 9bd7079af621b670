"""Validation of Jira API payloads against the response models."""

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from ..exceptions import create_validation_error

logger = logging.getLogger("mcp-jira.utils.validation")


def validate_response(data: Any, model: Any, context: str) -> Any:
    """
    Validate raw JSON against a response model.

    Args:
        data: Decoded response payload.
        model: Model (or type such as ``list[JiraComponent]``) the payload
            must satisfy.
        context: Entity name used in the error message, e.g. ``"issue"``.

    Returns:
        The validated value.

    Raises:
        MCPJiraError: VALIDATION_ERROR (status 500) with the pydantic
            diagnostics as cause.
    """
    try:
        return TypeAdapter(model).validate_python(data)
    except ValidationError as e:
        logger.error(f"Invalid Jira {context} payload: {e.error_count()} error(s)")
        raise create_validation_error(
            f"API response validation failed: Invalid Jira {context} format",
            cause=e.errors(include_url=False),
        ) from e
