"""Markdown formatters for Jira projects."""

from ..models.jira import JiraProject
from .common import (
    format_bullet_list,
    format_heading,
    format_now,
    format_numbered_list,
    format_separator,
    format_url,
)


def format_projects_list(projects: list[JiraProject], total: int | None = None) -> str:
    """Format a page of projects as a numbered Markdown document."""
    if not projects:
        return "No Jira projects found."

    def format_project(project: JiraProject, _: int) -> str:
        item_lines = [format_heading(project.name, 2)]
        item_lines.append(
            format_bullet_list(
                {
                    "ID": project.id,
                    "Key": project.key,
                    "Style": project.style or "Not specified",
                    "Simplified": project.simplified,
                    "URL": {"url": project.browse_url, "title": project.key}
                    if project.browse_url
                    else None,
                }
            )
        )
        avatar = (project.avatar_urls or {}).get("48x48")
        if avatar:
            item_lines.append(f"![{project.name} Avatar]({avatar})")
        return "\n".join(item_lines)

    lines = [format_heading("Jira Projects", 1), ""]
    lines.append(format_numbered_list(projects, format_project))

    if total:
        lines.extend(["", f"*Total projects: {total}*"])

    lines.extend(["", f"*Project information retrieved at {format_now()}*"])
    return "\n".join(lines)


def format_project_details(project: JiraProject) -> str:
    """Format a single project, its lead, components and versions."""
    project_url = project.browse_url

    lines = [
        format_heading(f"Project: {project.name}", 1),
        "",
        f"> A {project.style or 'standard'} project with key `{project.key}`.",
        "",
        format_heading("Basic Information", 2),
        format_bullet_list(
            {
                "ID": project.id,
                "Key": project.key,
                "Style": project.style or "Not specified",
                "Simplified": project.simplified,
            }
        ),
    ]

    if project.description:
        lines.extend(["", format_heading("Description", 2), project.description])

    if project.lead:
        lines.extend(["", format_heading("Project Lead", 2)])
        lines.append(
            format_bullet_list(
                {"Name": project.lead.display_name, "Active": project.lead.active}
            )
        )

    lines.extend(["", format_heading("Components", 2)])
    if project.components:
        for component in project.components:
            lines.append(format_heading(component.name, 3))
            if component.description:
                lines.extend([component.description, ""])
            lines.append(
                format_bullet_list(
                    {"Lead": component.lead.display_name if component.lead else None}
                )
            )
    else:
        lines.append("No components defined for this project.")

    lines.extend(["", format_heading("Versions", 2)])
    if project.versions:
        for version in project.versions:
            lines.append(format_heading(version.name, 3))
            if version.description:
                lines.extend([version.description, ""])
            lines.append(
                format_bullet_list(
                    {
                        "Released": version.released,
                        "Archived": version.archived,
                        "Release Date": version.release_date,
                        "Start Date": version.start_date,
                    }
                )
            )
    else:
        lines.append("No versions defined for this project.")

    lines.extend(["", format_heading("Links", 2)])
    if project_url:
        lines.append(f"- {format_url(project_url, 'Open in Jira')}")
        lines.append(f"- {format_url(f'{project_url}/issues', 'View Issues')}")
        lines.append(f"- {format_url(f'{project_url}/board', 'View Board')}")
    else:
        lines.append("- Not available")

    lines.extend(["", format_separator()])
    lines.append(f"*Project information retrieved at {format_now()}*")
    if project_url:
        lines.append(f"*To view this project in Jira, visit: {project_url}*")
    return "\n".join(lines)
