"""Tests for response validation."""

import pytest

from mcp_jira.exceptions import ErrorKind, MCPJiraError
from mcp_jira.models.jira import JiraIssue, JiraStatus
from mcp_jira.utils.validation import validate_response
from tests.fixtures.jira_mocks import MOCK_GLOBAL_STATUSES, MOCK_STATUS_DONE


class TestValidateResponse:
    """Tests for validate_response."""

    def test_model(self):
        status = validate_response(MOCK_STATUS_DONE, JiraStatus, "status")

        assert isinstance(status, JiraStatus)
        assert status.name == "Done"
        assert status.status_category.key == "done"

    def test_list_type(self):
        statuses = validate_response(MOCK_GLOBAL_STATUSES, list[JiraStatus], "statuses")
        assert [status.name for status in statuses] == ["To Do", "In Progress", "Done"]

    def test_invalid_payload(self):
        with pytest.raises(MCPJiraError) as exc_info:
            validate_response({"key": "PROJ-1", "fields": "oops"}, JiraIssue, "issue")

        error = exc_info.value
        assert error.kind is ErrorKind.VALIDATION_ERROR
        assert error.status_code == 500
        assert error.message == "API response validation failed: Invalid Jira issue format"
        assert isinstance(error.cause, list)
        assert error.cause[0]["loc"] == ("fields",)

    def test_from_api_response_uses_context(self):
        with pytest.raises(MCPJiraError, match="Invalid Jira issue format"):
            JiraIssue.from_api_response([], "issue")

    def test_from_api_response_defaults_to_class_name(self):
        with pytest.raises(MCPJiraError, match="Invalid Jira JiraStatus format"):
            JiraStatus.from_api_response("nope")
