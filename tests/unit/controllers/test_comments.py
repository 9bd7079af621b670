"""Tests for the comment controllers."""

import pytest

from mcp_jira.adf import markdown_to_adf
from mcp_jira.controllers import comments
from mcp_jira.exceptions import MCPJiraError
from mcp_jira.models.jira import JiraComment, JiraCommentPage
from mcp_jira.utils.errors import classify_http_error
from mcp_jira.utils.pagination import ResponsePagination
from tests.fixtures.jira_mocks import MOCK_COMMENT, MOCK_COMMENTS_PAGE


class TestListComments:
    """Tests for the list_comments controller."""

    def test_list_comments(self, fetcher):
        fetcher.get_issue_comments.return_value = JiraCommentPage.from_api_response(
            MOCK_COMMENTS_PAGE
        )

        response = comments.list_comments(fetcher, "PROJ-123", order_by="-created")

        fetcher.get_issue_comments.assert_called_once_with(
            "PROJ-123", start_at=0, max_results=25, order_by="-created"
        )
        assert response.content.startswith("# Comments for Issue PROJ-123")
        assert response.pagination == ResponsePagination(count=2, has_more=False, total=2)

    def test_failure_is_wrapped(self, fetcher):
        fetcher.get_issue_comments.side_effect = classify_http_error(404, "Not Found", None)

        with pytest.raises(MCPJiraError, match="Error listing comments for issue PROJ-9"):
            comments.list_comments(fetcher, "PROJ-9")


class TestAddComment:
    """Tests for the add_comment controller."""

    @pytest.mark.parametrize("body", ["", "   \n"])
    def test_empty_body(self, fetcher, body):
        with pytest.raises(MCPJiraError) as exc_info:
            comments.add_comment(fetcher, "PROJ-123", body)

        assert exc_info.value.status_code == 400
        fetcher.add_comment.assert_not_called()

    def test_markdown_is_sent_as_adf(self, fetcher):
        fetcher.add_comment.return_value = JiraComment.from_api_response(MOCK_COMMENT)

        response = comments.add_comment(fetcher, "PROJ-123", "Looks **good**")

        fetcher.add_comment.assert_called_once_with(
            "PROJ-123", markdown_to_adf("Looks **good**").to_dict()
        )
        assert response.content.startswith("# Comment Added Successfully")
        assert response.pagination is None
