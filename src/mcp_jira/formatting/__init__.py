"""Markdown formatters for Jira entities."""

from .comments import format_added_comment, format_comments_list
from .common import (
    format_bullet_list,
    format_date,
    format_heading,
    format_numbered_list,
    format_pagination,
    format_separator,
    format_url,
)
from .development import format_development_info
from .issues import format_issue_details, format_issues_list, format_update_issue_response
from .projects import format_project_details, format_projects_list
from .statuses import format_statuses_list

__all__ = [
    "format_added_comment",
    "format_bullet_list",
    "format_comments_list",
    "format_date",
    "format_development_info",
    "format_heading",
    "format_issue_details",
    "format_issues_list",
    "format_numbered_list",
    "format_pagination",
    "format_project_details",
    "format_projects_list",
    "format_separator",
    "format_statuses_list",
    "format_update_issue_response",
    "format_url",
]
