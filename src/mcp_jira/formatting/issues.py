"""Markdown formatters for Jira issues."""

from typing import Any

from ..adf import adf_to_markdown
from ..models.jira import DevelopmentInformation, JiraComment, JiraIssue, JiraIssueLink
from .common import (
    format_bullet_list,
    format_date,
    format_file_size,
    format_heading,
    format_numbered_list,
    format_separator,
    format_url,
    retrieved_footer,
)
from .development import format_development_info

# Checked in order; the first matching keyword decides
_STATUS_EMOJI: list[tuple[tuple[str, ...], str]] = [
    (("to do", "todo", "open", "new"), "⚪ "),
    (("in progress", "started"), "🔵 "),
    (("done", "closed", "resolved", "complete"), "✅ "),
    (("review", "testing"), "🔍 "),
    (("block", "impediment"), "🛑 "),
    (("backlog",), "📋 "),
    (("cancel", "won't", "wont"), "❌ "),
]
_UNKNOWN_STATUS_EMOJI = "⚫ "

_PRIORITY_EMOJI: list[tuple[tuple[str, ...], str]] = [
    (("highest", "critical", "blocker"), "🔴 "),
    (("high",), "🔺 "),
    (("medium", "normal"), "⚠️ "),
    (("lowest", "minor", "trivial"), "⬇️ "),
    (("low",), "🔽 "),
]


def status_emoji(status: str | None) -> str:
    if not status:
        return ""
    lowered = status.lower()
    for keywords, emoji in _STATUS_EMOJI:
        if any(keyword in lowered for keyword in keywords):
            return emoji
    return _UNKNOWN_STATUS_EMOJI


def priority_emoji(priority: str | None) -> str:
    if not priority:
        return ""
    lowered = priority.lower()
    for keywords, emoji in _PRIORITY_EMOJI:
        if any(keyword in lowered for keyword in keywords):
            return emoji
    return ""


def _status_label(issue: JiraIssue) -> str | None:
    status = issue.fields.status
    if not status:
        return None
    return f"{status_emoji(status.name)}{status.name}"


def _priority_label(issue: JiraIssue) -> str | None:
    priority = issue.fields.priority
    if not priority or not priority.name:
        return None
    return f"{priority_emoji(priority.name)}{priority.name}"


def render_rich_text(value: Any, unsupported: str) -> str:
    """Render a description or comment body stored as ADF or plain text."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return adf_to_markdown(value)
    return unsupported


def format_issues_list(issues: list[JiraIssue], base_url: str) -> str:
    """Format a page of issues as a numbered Markdown document."""
    if not issues:
        return "\n".join(["No issues found.", *retrieved_footer()])

    def format_issue(issue: JiraIssue, _: int) -> str:
        fields = issue.fields
        properties = {
            "Key": issue.key,
            "Summary": fields.summary,
            "Type": fields.issuetype.name if fields.issuetype else None,
            "Status": _status_label(issue),
            "Priority": _priority_label(issue),
            "Project": fields.project.name if fields.project else None,
            "Assignee": fields.assignee.display_name if fields.assignee else None,
            "Reporter": fields.reporter.display_name if fields.reporter else None,
            "Created On": format_date(fields.created),
            "Updated On": format_date(fields.updated),
            "URL": {"url": f"{base_url}/browse/{issue.key}", "title": issue.key},
        }
        return "\n".join(
            [
                format_heading(f"{issue.key}: {fields.summary}", 2),
                format_bullet_list(properties),
            ]
        )

    lines = [format_heading("Jira Issues", 1), ""]
    lines.append(format_numbered_list(issues, format_issue))
    lines.extend(retrieved_footer())
    return "\n".join(lines)


def format_issue_details(
    issue: JiraIssue, dev_info: DevelopmentInformation | None = None
) -> str:
    """Format a single issue with all of its sections as Markdown."""
    fields = issue.fields
    issue_url = issue.browse_url

    lines = [format_heading(f"Jira Issue: {fields.summary}", 1), ""]

    if fields.status:
        priority_name = fields.priority.name if fields.priority else None
        p_emoji = priority_emoji(priority_name)
        priority_part = f"with {p_emoji}{priority_name} priority " if p_emoji else ""
        project_name = fields.project.name if fields.project else "unknown"
        lines.append(
            f"> {status_emoji(fields.status.name)}A {fields.status.name.lower()} issue "
            f"{priority_part}in the {project_name} project."
        )
        lines.append("")

    lines.append(format_heading("Basic Information", 2))
    lines.append(
        format_bullet_list(
            {
                "ID": issue.id,
                "Key": issue.key,
                "Project": (
                    f"{fields.project.name} ({fields.project.key})"
                    if fields.project
                    else None
                ),
                "Type": fields.issuetype.name if fields.issuetype else None,
                "Status": _status_label(issue),
                "Priority": _priority_label(issue),
            }
        )
    )
    if fields.issuetype and fields.issuetype.description:
        lines.append(f"  *{fields.issuetype.description}*")

    if fields.description:
        lines.extend(["", format_heading("Description", 2)])
        lines.append(
            render_rich_text(fields.description, "*Description format not supported*")
        )

    lines.extend(["", format_heading("People", 2)])
    lines.extend(_people_lines(issue))

    lines.extend(["", format_heading("Dates", 2)])
    lines.append(
        format_bullet_list(
            {"Created": format_date(fields.created), "Updated": format_date(fields.updated)}
        )
    )

    if fields.timetracking and fields.timetracking.has_data:
        lines.extend(["", format_heading("Time Tracking", 2)])
        lines.append(
            format_bullet_list(
                {
                    "Original Estimate": fields.timetracking.original_estimate,
                    "Remaining Estimate": fields.timetracking.remaining_estimate,
                    "Time Spent": fields.timetracking.time_spent,
                }
            )
        )

    if fields.attachment:
        lines.extend(["", format_heading("Attachments", 2)])
        for index, attachment in enumerate(fields.attachment):
            lines.append(format_heading(attachment.filename, 3))
            lines.append(
                format_bullet_list(
                    {
                        "Content Type": attachment.mime_type,
                        "Size": format_file_size(attachment.size),
                        "Created At": format_date(attachment.created),
                        "Author": (
                            attachment.author.display_name if attachment.author else None
                        ),
                    }
                )
            )
            if attachment.content:
                lines.append(f"[Download]({attachment.content})")
            if index < len(fields.attachment) - 1:
                lines.append("")

    if fields.comments:
        lines.extend(["", format_heading("Comments", 2)])
        lines.extend(_comment_lines(fields.comments))

    if fields.issuelinks:
        lines.extend(_linked_issue_lines(fields.issuelinks))

    if dev_info is not None and dev_info.has_data:
        lines.append(format_development_info(dev_info))

    lines.extend(["", format_heading("Links", 2)])
    lines.append(f"- {format_url(issue_url, 'Open in Jira')}")

    lines.extend(retrieved_footer())
    if issue_url:
        lines.append(f"*View this issue in Jira: {issue_url}*")

    return "\n".join(lines)


def _people_lines(issue: JiraIssue) -> list[str]:
    fields = issue.fields
    reporter_name = fields.reporter.display_name if fields.reporter else None
    show_creator = fields.creator is not None and (
        fields.reporter is None or fields.creator.display_name != reporter_name
    )

    people: dict[str, Any] = {
        "Assignee": (fields.assignee.display_name if fields.assignee else None)
        or "Unassigned",
        "Reporter": reporter_name,
    }
    if show_creator:
        people["Creator"] = fields.creator.display_name

    lines = [format_bullet_list(people)]
    for person, shown in (
        (fields.assignee, True),
        (fields.reporter, True),
        (fields.creator, show_creator),
    ):
        if shown and person is not None and person.active is not None:
            lines.append(f"  - **Active**: {'Yes' if person.active else 'No'}")
    return lines


def _comment_lines(comments: list[JiraComment]) -> list[str]:
    lines = []
    for index, comment in enumerate(comments):
        author = comment.author.display_name if comment.author else None
        lines.append(
            format_heading(f"{author or 'Anonymous'} - {format_date(comment.created)}", 3)
        )
        lines.append(render_rich_text(comment.body, "*Comment content not available*"))
        if index < len(comments) - 1:
            lines.extend(["", format_separator(), ""])
    return lines


def _linked_issue_lines(links: list[JiraIssueLink]) -> list[str]:
    grouped: dict[str, list[JiraIssueLink]] = {}
    for link in links:
        if link.inward_issue is not None:
            relationship = link.type.inward
        elif link.outward_issue is not None:
            relationship = link.type.outward
        else:
            continue
        if relationship:
            grouped.setdefault(relationship, []).append(link)

    if not grouped:
        return []

    lines = ["", format_heading("Linked Issues", 2)]
    for relationship, group in grouped.items():
        lines.extend(["", format_heading(relationship, 3)])
        entries: dict[str, Any] = {}
        for link in group:
            target = link.inward_issue or link.outward_issue
            status = target.fields.status
            emoji = status_emoji(status.name if status else None)
            if target.fields.summary:
                title = f"{emoji}{target.fields.summary}"
            elif status and status.name:
                title = f"{emoji}{target.key} ({status.name})"
            else:
                title = target.key
            url = target.browse_url
            entries[target.key] = {"url": url, "title": title} if url else title
        lines.append(format_bullet_list(entries))
    return lines


def format_update_issue_response(
    response: dict[str, Any], id_or_key: str, issue: JiraIssue | None = None
) -> str:
    """Format the confirmation shown after an issue update."""
    issue_key = response.get("key") or (issue.key if issue else None) or id_or_key
    lines = ["# ✅ Issue Updated Successfully", "", f"**Issue:** {issue_key}"]

    issue_id = response.get("id") or (issue.id if issue else None)
    if issue_id:
        lines.append(f"**Issue ID:** {issue_id}")
    issue_self = response.get("self") or (issue.self_url if issue else None)
    if issue_self:
        lines.append(f"**Issue URL:** {issue_self}")
    lines.append("")

    if issue is not None:
        lines.extend(["## Updated Issue Details", "", format_issue_details(issue)])
    else:
        lines.append("✨ The issue has been updated successfully.")
        lines.append("")
        lines.append(
            "💡 **Tip:** Use `return_issue` to see the updated issue details in the response."
        )
    return "\n".join(lines)
