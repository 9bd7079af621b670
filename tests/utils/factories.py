"""Test data factories for creating consistent test objects."""

from typing import Any


class JiraIssueFactory:
    """Factory for creating Jira issue test data."""

    @staticmethod
    def create(key: str = "TEST-123", **overrides) -> dict[str, Any]:
        """Create a Jira issue with default values."""
        defaults = {
            "id": "12345",
            "key": key,
            "self": f"https://test.atlassian.net/rest/api/3/issue/{key}",
            "fields": {
                "summary": "Test Issue Summary",
                "description": {
                    "version": 1,
                    "type": "doc",
                    "content": [
                        {
                            "type": "paragraph",
                            "content": [{"type": "text", "text": "Test issue description"}],
                        }
                    ],
                },
                "status": {
                    "name": "Open",
                    "id": "1",
                    "statusCategory": {"key": "new", "name": "To Do"},
                },
                "issuetype": {"name": "Task", "id": "10001"},
                "priority": {"name": "Medium", "id": "3"},
                "project": {"id": "10000", "key": "TEST", "name": "Test Project"},
                "assignee": {
                    "accountId": "test-account-id",
                    "displayName": "Test User",
                    "emailAddress": "test@example.com",
                },
                "created": "2023-01-01T12:00:00.000+0000",
                "updated": "2023-01-01T12:00:00.000+0000",
            },
        }
        return deep_merge(defaults, overrides)

    @staticmethod
    def create_minimal(key: str = "TEST-123") -> dict[str, Any]:
        """Create minimal Jira issue for basic tests."""
        return {
            "key": key,
            "fields": {"summary": "Test Issue", "status": {"name": "Open"}},
        }


class SearchResultFactory:
    """Factory for offset-paginated search responses."""

    @staticmethod
    def create(
        issues: list[dict[str, Any]] | None = None,
        start_at: int = 0,
        max_results: int = 25,
        total: int | None = None,
    ) -> dict[str, Any]:
        issues = issues if issues is not None else [JiraIssueFactory.create()]
        return {
            "startAt": start_at,
            "maxResults": max_results,
            "total": len(issues) if total is None else total,
            "issues": issues,
        }


class ErrorResponseFactory:
    """Factory for creating Jira error response bodies."""

    @staticmethod
    def create_api_error(
        status_code: int = 400, message: str = "Bad Request"
    ) -> dict[str, Any]:
        """Create API error response."""
        return {"errorMessages": [message], "errors": {}, "status": status_code}

    @staticmethod
    def create_auth_error() -> dict[str, Any]:
        """Create authentication error response."""
        return {"errorMessages": ["Authentication failed"], "errors": {}}

    @staticmethod
    def create_field_validation_error() -> dict[str, Any]:
        """Create field-level validation error response."""
        return {
            "errorMessages": [],
            "errors": {"summary": "You must specify a summary of the issue."},
        }


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
