"""Tests for the Jira status operations."""

from tests.fixtures.jira_mocks import MOCK_GLOBAL_STATUSES, MOCK_PROJECT_STATUSES


class TestListStatuses:
    """Tests for StatusesMixin.list_statuses."""

    def test_global_statuses(self, jira_fetcher, response_factory):
        jira_fetcher.jira.get.return_value = response_factory(200, MOCK_GLOBAL_STATUSES)

        statuses = jira_fetcher.list_statuses()

        assert [status.name for status in statuses] == ["To Do", "In Progress", "Done"]
        jira_fetcher.jira.get.assert_called_once_with(
            "rest/api/3/status", params={}, advanced_mode=True
        )

    def test_project_statuses_are_deduplicated(self, jira_fetcher, response_factory):
        jira_fetcher.jira.get.return_value = response_factory(200, MOCK_PROJECT_STATUSES)

        statuses = jira_fetcher.list_statuses("PROJ")

        assert [status.name for status in statuses] == ["To Do", "In Progress", "Done"]
        jira_fetcher.jira.get.assert_called_once_with(
            "rest/api/3/project/PROJ/statuses", params={}, advanced_mode=True
        )

    def test_empty_response(self, jira_fetcher, response_factory):
        jira_fetcher.jira.get.return_value = response_factory(200, [])
        assert jira_fetcher.list_statuses("PROJ") == []
