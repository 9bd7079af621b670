"""
Base models for Jira API payloads.

Models accept Jira's camelCase keys directly, allow (and keep) keys they do not
declare, and validate through :func:`validate_response` so that a malformed
payload surfaces as a classified validation error.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..utils.validation import validate_response

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """Base class for models built from Jira API responses."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="allow",
    )

    @classmethod
    def from_api_response(cls: type[T], data: Any, context: str | None = None) -> T:
        """
        Build a model from a decoded Jira API response.

        Args:
            data: The decoded JSON payload
            context: Entity name used if validation fails

        Returns:
            A validated instance
        """
        return validate_response(data, cls, context or cls.__name__)
