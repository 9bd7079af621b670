"""
Jira data models for the MCP Jira integration.
"""

from .comment import JiraComment, JiraCommentPage
from .common import (
    JiraIssueType,
    JiraPriority,
    JiraProjectRef,
    JiraStatus,
    JiraStatusCategory,
    JiraUser,
)
from .development import (
    DevelopmentInformation,
    DevInfoBranch,
    DevInfoCommit,
    DevInfoPullRequest,
    DevInfoResponse,
    DevInfoSummaryResponse,
)
from .issue import (
    JiraAttachment,
    JiraIssue,
    JiraIssueFields,
    JiraIssueLink,
    JiraLinkedIssue,
    JiraTimeTracking,
)
from .project import JiraComponent, JiraProject, JiraProjectPage, JiraVersion
from .search import JiraSearchResult
from .status import JiraIssueTypeStatuses

__all__ = [
    "DevInfoBranch",
    "DevInfoCommit",
    "DevInfoPullRequest",
    "DevInfoResponse",
    "DevInfoSummaryResponse",
    "DevelopmentInformation",
    "JiraAttachment",
    "JiraComment",
    "JiraCommentPage",
    "JiraComponent",
    "JiraIssue",
    "JiraIssueFields",
    "JiraIssueLink",
    "JiraIssueType",
    "JiraIssueTypeStatuses",
    "JiraLinkedIssue",
    "JiraPriority",
    "JiraProject",
    "JiraProjectPage",
    "JiraProjectRef",
    "JiraSearchResult",
    "JiraStatus",
    "JiraStatusCategory",
    "JiraTimeTracking",
    "JiraUser",
    "JiraVersion",
]
