"""Fixtures for the controller tests."""

from unittest.mock import MagicMock

import pytest

from mcp_jira.jira import JiraFetcher
from tests.fixtures.jira_mocks import BASE_URL


@pytest.fixture
def fetcher():
    """A JiraFetcher stand-in whose methods return real models."""
    mock = MagicMock(spec=JiraFetcher)
    mock.base_url = BASE_URL
    return mock
