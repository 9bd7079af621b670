"""Constants shared by the Jira service mixins."""

API_PATH = "rest/api/3"
DEV_STATUS_PATH = "rest/dev-status/latest"

DEFAULT_ISSUE_FIELDS: tuple[str, ...] = (
    "summary",
    "description",
    "status",
    "issuetype",
    "priority",
    "project",
    "assignee",
    "reporter",
    "creator",
    "created",
    "updated",
    "timetracking",
    "attachment",
    "comment",
    "issuelinks",
)

SEARCH_ISSUE_FIELDS: tuple[str, ...] = (
    "summary",
    "status",
    "issuetype",
    "priority",
    "project",
    "assignee",
    "reporter",
    "created",
    "updated",
)

PROJECT_EXPAND = "description,lead,issueTypes,url,projectKeys,permissions"

DEV_INFO_APPLICATION_TYPE = "bitbucket"
