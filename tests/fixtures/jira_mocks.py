"""Sample Jira Cloud REST API v3 payloads used across the unit tests."""

BASE_URL = "https://test.atlassian.net"

MOCK_ADF_DESCRIPTION = {
    "version": 1,
    "type": "doc",
    "content": [
        {
            "type": "heading",
            "attrs": {"level": 2},
            "content": [{"type": "text", "text": "Steps to reproduce"}],
        },
        {
            "type": "paragraph",
            "content": [
                {"type": "text", "text": "Open the"},
                {"type": "text", "text": "login page", "marks": [{"type": "strong"}]},
                {"type": "text", "text": " and submit."},
            ],
        },
        {
            "type": "orderedList",
            "content": [
                {
                    "type": "listItem",
                    "content": [
                        {"type": "paragraph", "content": [{"type": "text", "text": "First"}]}
                    ],
                },
                {
                    "type": "listItem",
                    "content": [
                        {"type": "paragraph", "content": [{"type": "text", "text": "Second"}]}
                    ],
                },
            ],
        },
        {
            "type": "codeBlock",
            "attrs": {"language": "python"},
            "content": [{"type": "text", "text": "print('hi')"}],
        },
    ],
}

MOCK_ADF_COMMENT_BODY = {
    "version": 1,
    "type": "doc",
    "content": [
        {
            "type": "paragraph",
            "content": [
                {"type": "text", "text": "Looks good to me, "},
                {"type": "mention", "attrs": {"id": "abc", "text": "@Jane Smith"}},
            ],
        }
    ],
}

MOCK_USER_JOHN = {
    "accountId": "5b10a2844c20165700ede21g",
    "displayName": "John Doe",
    "emailAddress": "john@example.com",
    "active": True,
}

MOCK_USER_JANE = {
    "accountId": "5b10ac8d82e05b22cc7d4ef5",
    "displayName": "Jane Smith",
    "active": False,
}

MOCK_STATUS_IN_PROGRESS = {
    "self": f"{BASE_URL}/rest/api/3/status/3",
    "id": "3",
    "name": "In Progress",
    "description": "This issue is being actively worked on.",
    "statusCategory": {"id": 4, "key": "indeterminate", "name": "In Progress", "colorName": "yellow"},
}

MOCK_STATUS_TODO = {
    "self": f"{BASE_URL}/rest/api/3/status/10000",
    "id": "10000",
    "name": "To Do",
    "description": "",
    "statusCategory": {"id": 2, "key": "new", "name": "To Do", "colorName": "blue-gray"},
}

MOCK_STATUS_DONE = {
    "self": f"{BASE_URL}/rest/api/3/status/10001",
    "id": "10001",
    "name": "Done",
    "statusCategory": {"id": 3, "key": "done", "name": "Done", "colorName": "green"},
}

MOCK_COMMENT = {
    "self": f"{BASE_URL}/rest/api/3/issue/10010/comment/10100",
    "id": "10100",
    "author": MOCK_USER_JOHN,
    "body": MOCK_ADF_COMMENT_BODY,
    "updateAuthor": MOCK_USER_JOHN,
    "created": "2024-01-15T10:30:00.000+0000",
    "updated": "2024-01-15T10:30:00.000+0000",
}

MOCK_COMMENTS_PAGE = {
    "startAt": 0,
    "maxResults": 25,
    "total": 2,
    "comments": [
        MOCK_COMMENT,
        {
            "self": f"{BASE_URL}/rest/api/3/issue/10010/comment/10101",
            "id": "10101",
            "author": MOCK_USER_JANE,
            "body": "Plain text body",
            "created": "2024-01-16T08:00:00.000+0000",
            "updated": "2024-01-17T09:00:00.000+0000",
        },
    ],
}

MOCK_ISSUE = {
    "id": "10010",
    "key": "PROJ-123",
    "self": f"{BASE_URL}/rest/api/3/issue/10010",
    "fields": {
        "summary": "Login fails on Safari",
        "description": MOCK_ADF_DESCRIPTION,
        "issuetype": {"id": "10004", "name": "Bug", "description": "A problem.", "subtask": False},
        "status": MOCK_STATUS_IN_PROGRESS,
        "priority": {"id": "2", "name": "High"},
        "project": {"id": "10000", "key": "PROJ", "name": "Project Alpha"},
        "assignee": MOCK_USER_JOHN,
        "reporter": MOCK_USER_JANE,
        "creator": MOCK_USER_JANE,
        "created": "2024-01-10T09:00:00.000+0000",
        "updated": "2024-01-15T10:30:00.000+0000",
        "timetracking": {
            "originalEstimate": "2d",
            "remainingEstimate": "1d",
            "timeSpent": "1d",
        },
        "attachment": [
            {
                "id": "20000",
                "filename": "screenshot.png",
                "mimeType": "image/png",
                "size": 2048,
                "created": "2024-01-11T12:00:00.000+0000",
                "author": MOCK_USER_JANE,
                "content": f"{BASE_URL}/rest/api/3/attachment/content/20000",
            }
        ],
        "comment": MOCK_COMMENTS_PAGE,
        "issuelinks": [
            {
                "id": "30000",
                "type": {"id": "1", "name": "Blocks", "inward": "is blocked by", "outward": "blocks"},
                "outwardIssue": {
                    "id": "10011",
                    "key": "PROJ-124",
                    "self": f"{BASE_URL}/rest/api/3/issue/10011",
                    "fields": {"summary": "Release 1.0", "status": MOCK_STATUS_TODO},
                },
            }
        ],
        "customfield_10020": None,
    },
}

MOCK_SEARCH_ISSUE = {
    "id": "10012",
    "key": "PROJ-125",
    "self": f"{BASE_URL}/rest/api/3/issue/10012",
    "fields": {
        "summary": "Update docs",
        "issuetype": {"id": "10001", "name": "Task"},
        "status": MOCK_STATUS_DONE,
        "priority": {"id": "3", "name": "Medium"},
        "project": {"id": "10000", "key": "PROJ", "name": "Project Alpha"},
        "assignee": None,
        "reporter": MOCK_USER_JOHN,
        "created": "2024-02-01T09:00:00.000+0000",
        "updated": "2024-02-02T09:00:00.000+0000",
    },
}

MOCK_SEARCH_RESPONSE = {
    "expand": "schema,names",
    "startAt": 0,
    "maxResults": 25,
    "total": 30,
    "issues": [MOCK_ISSUE, MOCK_SEARCH_ISSUE],
}

MOCK_JQL_ERROR_BODY = {
    "errorMessages": [
        "Field 'foo' does not exist or you do not have permission to view it."
    ],
    "errors": {},
}

MOCK_PROJECT = {
    "self": f"{BASE_URL}/rest/api/3/project/10000",
    "id": "10000",
    "key": "PROJ",
    "name": "Project Alpha",
    "description": "The alpha project.",
    "style": "next-gen",
    "simplified": True,
    "projectTypeKey": "software",
    "lead": MOCK_USER_JOHN,
    "avatarUrls": {"48x48": f"{BASE_URL}/rest/api/3/universal_avatar/view/type/project/avatar/10400"},
}

MOCK_PROJECT_SEARCH_RESPONSE = {
    "self": f"{BASE_URL}/rest/api/3/project/search?startAt=0&maxResults=25",
    "maxResults": 25,
    "startAt": 0,
    "total": 2,
    "isLast": True,
    "values": [
        MOCK_PROJECT,
        {
            "self": f"{BASE_URL}/rest/api/3/project/10001",
            "id": "10001",
            "key": "BETA",
            "name": "Project Beta",
            "style": "classic",
            "simplified": False,
        },
    ],
}

MOCK_PROJECT_COMPONENTS = [
    {"id": "10500", "name": "Backend", "description": "Server side", "lead": MOCK_USER_JOHN},
]

MOCK_PROJECT_VERSIONS = [
    {
        "id": "10600",
        "name": "1.0",
        "description": "First release",
        "released": True,
        "archived": False,
        "releaseDate": "2024-03-01",
    },
]

MOCK_PROJECT_STATUSES = [
    {
        "id": "10004",
        "name": "Bug",
        "subtask": False,
        "statuses": [MOCK_STATUS_TODO, MOCK_STATUS_IN_PROGRESS, MOCK_STATUS_DONE],
    },
    {
        "id": "10001",
        "name": "Task",
        "subtask": False,
        "statuses": [MOCK_STATUS_TODO, MOCK_STATUS_DONE],
    },
]

MOCK_GLOBAL_STATUSES = [MOCK_STATUS_TODO, MOCK_STATUS_IN_PROGRESS, MOCK_STATUS_DONE]

MOCK_DEV_INFO_SUMMARY = {
    "summary": {
        "repository": {"overall": {"count": 1, "lastUpdated": "2024-01-14T10:00:00.000+0000"}},
        "branch": {"overall": {"count": 1}},
        "pullrequest": {"overall": {"count": 1, "state": "OPEN"}},
    }
}

MOCK_DEV_INFO_EMPTY_SUMMARY = {
    "summary": {
        "repository": {"overall": {"count": 0}},
        "branch": {"overall": {"count": 0}},
        "pullrequest": {"overall": {"count": 0}},
    }
}

MOCK_DEV_INFO_COMMITS = {
    "errors": [],
    "detail": [
        {
            "repositories": [
                {
                    "name": "alpha-service",
                    "url": "https://bitbucket.org/acme/alpha-service",
                    "commits": [
                        {
                            "id": "a1b2c3d4e5",
                            "displayId": "a1b2c3d",
                            "message": "PROJ-123 Fix Safari login\n\nDetails here",
                            "author": {"name": "John Doe"},
                            "authorTimestamp": "2024-01-14T10:00:00.000+0000",
                            "url": "https://bitbucket.org/acme/alpha-service/commits/a1b2c3d4e5",
                            "fileCount": 3,
                            "merge": False,
                        }
                    ],
                }
            ]
        }
    ],
}

MOCK_DEV_INFO_BRANCHES = {
    "errors": [],
    "detail": [
        {
            "branches": [
                {
                    "name": "bugfix/PROJ-123-safari-login",
                    "url": "https://bitbucket.org/acme/alpha-service/branch/bugfix/PROJ-123-safari-login",
                    "repository": {"name": "alpha-service"},
                }
            ]
        }
    ],
}

MOCK_DEV_INFO_PULL_REQUESTS = {
    "errors": [],
    "detail": [
        {
            "pullRequests": [
                {
                    "id": "42",
                    "name": "PROJ-123 Fix Safari login",
                    "commentCount": 2,
                    "source": {"branch": "bugfix/PROJ-123-safari-login"},
                    "destination": {"branch": "main"},
                    "reviewers": [{"name": "Jane Smith", "approved": True}],
                    "status": "OPEN",
                    "url": "https://bitbucket.org/acme/alpha-service/pull-requests/42",
                    "lastUpdate": "2024-01-15T08:00:00.000+0000",
                    "repositoryName": "alpha-service",
                    "author": {"name": "John Doe"},
                }
            ]
        }
    ],
}
