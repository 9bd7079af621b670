"""Markdown formatter for workflow statuses."""

from ..models.jira import JiraStatus
from .common import format_heading, retrieved_footer

_NO_CATEGORY = "Uncategorized"


def format_statuses_list(
    statuses: list[JiraStatus], project_key_or_id: str | None = None
) -> str:
    """Format statuses grouped by status category (To Do, In Progress, Done)."""
    if not statuses:
        scope = f" for project {project_key_or_id}" if project_key_or_id else ""
        return f"No statuses found{scope}."

    title = "Jira Statuses"
    if project_key_or_id:
        title = f"{title} for Project {project_key_or_id}"
    lines = [format_heading(title, 1), ""]

    grouped: dict[str, list[JiraStatus]] = {}
    for status in statuses:
        category = status.status_category.name if status.status_category else None
        grouped.setdefault(category or _NO_CATEGORY, []).append(status)

    for category, members in grouped.items():
        lines.append(format_heading(category, 2))
        for status in members:
            line = f"- **{status.name}** (ID: {status.id})"
            if status.description:
                line += f": {status.description}"
            lines.append(line)
        lines.append("")

    lines.append(f"*{len(statuses)} status{'es' if len(statuses) != 1 else ''} found.*")
    lines.extend(retrieved_footer())
    return "\n".join(lines)
