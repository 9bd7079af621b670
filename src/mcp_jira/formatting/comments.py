"""Markdown formatters for issue comments."""

from ..models.jira import JiraComment
from .common import (
    format_bullet_list,
    format_date,
    format_heading,
    format_numbered_list,
    format_url,
    retrieved_footer,
)
from .issues import render_rich_text


def _comment_url(comment: JiraComment, issue_key: str, base_url: str | None) -> str | None:
    if not base_url or not comment.id:
        return None
    return f"{base_url}/browse/{issue_key}?focusedCommentId={comment.id}"


def format_comments_list(
    comments: list[JiraComment], issue_key: str, base_url: str | None = None
) -> str:
    """Format the comments of one issue as Markdown."""
    if not comments:
        return f"No comments found for issue {issue_key}."

    def format_comment(comment: JiraComment, _: int) -> str:
        author = comment.author.display_name if comment.author else None
        properties = {
            "ID": comment.id,
            "Created": format_date(comment.created),
            "Updated": (
                format_date(comment.updated)
                if comment.updated and comment.updated != comment.created
                else None
            ),
        }
        item_lines = [
            format_heading(f"Comment by {author or 'Anonymous'}", 2),
            format_bullet_list(properties),
            "",
            render_rich_text(comment.body, "*Comment content not available*"),
        ]
        url = _comment_url(comment, issue_key, base_url)
        if url:
            item_lines.extend(["", format_url(url, "View in Jira")])
        return "\n".join(item_lines)

    lines = [format_heading(f"Comments for Issue {issue_key}", 1), ""]
    lines.append(format_numbered_list(comments, format_comment))
    lines.extend(retrieved_footer())
    return "\n".join(lines)


def format_added_comment(
    comment: JiraComment, issue_key: str, base_url: str | None = None
) -> str:
    """Format the confirmation shown after a comment is added."""
    author = comment.author.display_name if comment.author else None
    lines = [
        format_heading("Comment Added Successfully", 1),
        "",
        f"Your comment has been added to issue **{issue_key}**.",
        "",
        format_heading("Comment Details", 2),
        format_bullet_list(
            {
                "ID": comment.id,
                "Author": author,
                "Created": format_date(comment.created),
            }
        ),
        "",
        format_heading("Content", 2),
        render_rich_text(comment.body, "*Comment content not available*"),
    ]
    url = _comment_url(comment, issue_key, base_url)
    if url:
        lines.extend(["", format_url(url, "View Comment in Jira")])
    return "\n".join(lines)
