"""Markdown formatter for development information linked to an issue."""

from ..models.jira import DevelopmentInformation, DevInfoBranch, DevInfoPullRequest
from ..models.jira.development import DevInfoSummaryEntry
from .common import format_bullet_list, format_date, format_heading, format_url


def _summary_value(entry: DevInfoSummaryEntry, with_state: bool = False) -> str:
    overall = entry.overall
    last_updated = format_date(overall.last_updated) if overall.last_updated else "Unknown"
    if with_state:
        return (
            f"{overall.count} (Last updated: {last_updated}, "
            f"Status: {overall.state or 'Unknown'})"
        )
    return f"{overall.count} (Last updated: {last_updated})"


def format_development_info(dev_info: DevelopmentInformation) -> str:
    """
    Format commits, branches and pull requests linked to an issue.

    Returns an empty string when the summary reports no repositories,
    branches or pull requests.
    """
    if not dev_info.has_data:
        return ""

    summary = dev_info.summary.summary
    lines = ["", format_heading("Development Information", 2)]

    summary_props = {}
    if summary.repository and summary.repository.count:
        summary_props["Repositories"] = _summary_value(summary.repository)
    if summary.branch and summary.branch.count:
        summary_props["Branches"] = _summary_value(summary.branch)
    if summary.pullrequest and summary.pullrequest.count:
        summary_props["Pull Requests"] = _summary_value(
            summary.pullrequest, with_state=True
        )
    lines.extend(["", format_heading("Development Summary", 3)])
    lines.append(format_bullet_list(summary_props))

    if dev_info.commits and dev_info.commits.detail:
        lines.extend(["", format_heading("Commits", 3)])
        for detail in dev_info.commits.detail:
            for repo in detail.repositories:
                lines.append(f"**Repository**: {repo.name}")
                if not repo.commits:
                    lines.append("   No commits found")
                    continue
                lines.append("")
                for index, commit in enumerate(repo.commits, start=1):
                    author = commit.author.name if commit.author else None
                    lines.append(f"{index}. **{commit.display_id}** - {commit.headline}")
                    lines.append(
                        f"   Author: {author or 'Unknown'}, "
                        f"Date: {format_date(commit.author_timestamp)}"
                    )
                    if commit.url:
                        lines.append(f"   {format_url(commit.url, 'View Commit')}")
                    if index < len(repo.commits):
                        lines.append("")

    if dev_info.branches and dev_info.branches.detail:
        lines.extend(["", format_heading("Branches", 3)])
        for detail in dev_info.branches.detail:
            if not detail.branches:
                lines.append("No branches found")
                continue
            for branch in detail.branches:
                lines.extend(_branch_lines(branch))

    if dev_info.pull_requests and dev_info.pull_requests.detail:
        lines.extend(["", format_heading("Pull Requests", 3)])
        for detail in dev_info.pull_requests.detail:
            if not detail.pull_requests:
                lines.append("No pull requests found")
                continue
            for pull_request in detail.pull_requests:
                lines.extend(_pull_request_lines(pull_request))

    return "\n".join(lines)


def _branch_lines(branch: DevInfoBranch) -> list[str]:
    repository = branch.repository.name if branch.repository else None
    lines = [f"**Branch**: {branch.name}", f"**Repository**: {repository or 'Unknown'}"]
    if branch.last_commit:
        commit = branch.last_commit
        author = commit.author.name if commit.author else None
        lines.append(f"**Last Commit**: {commit.display_id} - {commit.headline}")
        lines.append(
            f"**Author**: {author or 'Unknown'}, "
            f"**Date**: {format_date(commit.author_timestamp)}"
        )
    if branch.url:
        lines.append(format_url(branch.url, "View Branch"))
    lines.append("")
    return lines


def _pull_request_lines(pull_request: DevInfoPullRequest) -> list[str]:
    author = pull_request.author.name if pull_request.author else None
    lines = [
        f"**{pull_request.name}** ({pull_request.status})",
        f"**Repository**: {pull_request.repository_name}",
        f"**Author**: {author or 'Unknown'}",
    ]
    source = pull_request.source.branch if pull_request.source else None
    destination = pull_request.destination.branch if pull_request.destination else None
    if source and destination:
        lines.append(f"**Source**: {source} → **Destination**: {destination}")

    approved = ", ".join(r.name for r in pull_request.reviewers if r.approved)
    waiting = ", ".join(r.name for r in pull_request.reviewers if not r.approved)
    if approved:
        lines.append(f"**Approved by**: {approved}")
    if waiting:
        lines.append(f"**Awaiting approval from**: {waiting}")

    lines.append(f"**Last Updated**: {format_date(pull_request.last_update)}")
    if pull_request.url:
        lines.append(format_url(pull_request.url, "View Pull Request"))
    lines.append("")
    return lines
