"""Atlassian Document Format conversion."""

from .from_markdown import markdown_to_adf, parse_markdown_text, text_to_adf
from .models import AdfDocument, AdfMark, AdfNode, MarkType, NodeType
from .to_markdown import CONVERSION_ERROR_TEXT, adf_to_markdown

__all__ = [
    "AdfDocument",
    "AdfMark",
    "AdfNode",
    "CONVERSION_ERROR_TEXT",
    "MarkType",
    "NodeType",
    "adf_to_markdown",
    "markdown_to_adf",
    "parse_markdown_text",
    "text_to_adf",
]
