"""Tests for the development information formatter."""

import pytest

from mcp_jira.formatting.development import format_development_info
from mcp_jira.models.jira import (
    DevelopmentInformation,
    DevInfoResponse,
    DevInfoSummaryResponse,
)
from tests.fixtures.jira_mocks import (
    MOCK_DEV_INFO_BRANCHES,
    MOCK_DEV_INFO_COMMITS,
    MOCK_DEV_INFO_EMPTY_SUMMARY,
    MOCK_DEV_INFO_PULL_REQUESTS,
    MOCK_DEV_INFO_SUMMARY,
)


@pytest.fixture
def dev_info():
    return DevelopmentInformation(
        summary=DevInfoSummaryResponse.model_validate(MOCK_DEV_INFO_SUMMARY),
        commits=DevInfoResponse.model_validate(MOCK_DEV_INFO_COMMITS),
        branches=DevInfoResponse.model_validate(MOCK_DEV_INFO_BRANCHES),
        pull_requests=DevInfoResponse.model_validate(MOCK_DEV_INFO_PULL_REQUESTS),
    )


class TestFormatDevelopmentInfo:
    """Tests for format_development_info."""

    def test_empty_summary(self):
        dev_info = DevelopmentInformation(
            summary=DevInfoSummaryResponse.model_validate(MOCK_DEV_INFO_EMPTY_SUMMARY)
        )
        assert format_development_info(dev_info) == ""
        assert format_development_info(DevelopmentInformation()) == ""

    def test_summary(self, dev_info):
        result = format_development_info(dev_info)

        assert "## Development Information\n\n### Development Summary\n" in result
        assert "- **Repositories**: 1 (Last updated: 2024-01-14 10:00:00 UTC)" in result
        assert "- **Branches**: 1 (Last updated: Unknown)" in result
        assert "- **Pull Requests**: 1 (Last updated: Unknown, Status: OPEN)" in result

    def test_commits(self, dev_info):
        result = format_development_info(dev_info)

        assert "### Commits\n**Repository**: alpha-service\n\n" in result
        assert "1. **a1b2c3d** - PROJ-123 Fix Safari login\n" in result
        assert "   Author: John Doe, Date: 2024-01-14 10:00:00 UTC" in result
        assert "[View Commit](https://bitbucket.org/acme/alpha-service/commits/a1b2c3d4e5)" in result

    def test_branches(self, dev_info):
        result = format_development_info(dev_info)

        assert (
            "### Branches\n**Branch**: bugfix/PROJ-123-safari-login\n"
            "**Repository**: alpha-service\n"
        ) in result

    def test_pull_requests(self, dev_info):
        result = format_development_info(dev_info)

        assert "### Pull Requests\n**PROJ-123 Fix Safari login** (OPEN)\n" in result
        assert "**Author**: John Doe" in result
        assert (
            "**Source**: bugfix/PROJ-123-safari-login → **Destination**: main" in result
        )
        assert "**Approved by**: Jane Smith" in result
        assert "Awaiting approval" not in result
        assert "**Last Updated**: 2024-01-15 08:00:00 UTC" in result
