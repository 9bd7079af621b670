"""Shared controller types."""

from dataclasses import dataclass

from ..utils.pagination import ResponsePagination


@dataclass
class ControllerResponse:
    """Formatted Markdown for one operation, plus its pagination state."""

    content: str
    pagination: ResponsePagination | None = None
