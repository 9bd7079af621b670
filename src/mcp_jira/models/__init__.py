"""
Pydantic models for Jira API responses.
"""

from .base import ApiModel

__all__ = ["ApiModel"]
