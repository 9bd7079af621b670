"""
Root pytest configuration file for MCP Jira tests.

This module provides shared fixtures: a fully configured JiraConfig, a
JiraFetcher whose underlying ``atlassian.Jira`` client is mocked, and a
helper for building fake ``requests`` responses.
"""

import json
from unittest.mock import MagicMock

import pytest

from mcp_jira.jira import JiraFetcher
from mcp_jira.jira.config import JiraConfig
from tests.fixtures.jira_mocks import BASE_URL


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def clean_environment(monkeypatch):
    """Remove every Jira/Atlassian variable the configuration reads."""
    for name in (
        "JIRA_URL",
        "JIRA_USERNAME",
        "JIRA_API_TOKEN",
        "JIRA_PERSONAL_TOKEN",
        "JIRA_SSL_VERIFY",
        "JIRA_TIMEOUT",
        "ATLASSIAN_SITE_NAME",
        "ATLASSIAN_USER_EMAIL",
        "ATLASSIAN_API_TOKEN",
        "READ_ONLY_MODE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def jira_config():
    return JiraConfig(
        url=BASE_URL,
        auth_type="basic",
        username="test@example.com",
        api_token="test-token",
    )


def make_response(status_code: int = 200, body=None, reason: str = "OK"):
    """Build a mock ``requests.Response`` as returned in advanced mode."""
    response = MagicMock()
    response.status_code = status_code
    response.reason = reason
    if body is None:
        response.text = ""
        response.content = b""
        response.json.side_effect = ValueError("No JSON")
    else:
        text = body if isinstance(body, str) else json.dumps(body)
        response.text = text
        response.content = text.encode()
        if isinstance(body, str):
            response.json.side_effect = ValueError("Not JSON")
        else:
            response.json.return_value = body
    return response


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def jira_fetcher(jira_config):
    """A JiraFetcher with its atlassian ``Jira`` client replaced by a mock."""
    fetcher = JiraFetcher(config=jira_config)
    fetcher.jira = MagicMock()
    return fetcher
