"""Configuration module for Jira API interactions."""

import os
from dataclasses import dataclass
from typing import Literal

from ..exceptions import create_auth_missing_error
from ..utils.io import is_env_truthy
from ..utils.urls import is_atlassian_cloud_url, site_url

DEFAULT_TIMEOUT = 75


@dataclass
class JiraConfig:
    """Jira API configuration.

    Handles authentication for both Jira Cloud (using email/API token)
    and Jira Server/Data Center (using personal access token).
    """

    url: str  # Base URL for Jira
    auth_type: Literal["basic", "token"] = "basic"
    username: str | None = None  # Email or username (Cloud)
    api_token: str | None = None  # API token (Cloud)
    personal_token: str | None = None  # Personal access token (Server/DC)
    ssl_verify: bool = True
    timeout: int = DEFAULT_TIMEOUT

    @property
    def is_cloud(self) -> bool:
        """Check if this is a cloud instance (atlassian.net)."""
        return is_atlassian_cloud_url(self.url)

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        ``JIRA_URL``/``JIRA_USERNAME``/``JIRA_API_TOKEN`` take precedence over
        ``ATLASSIAN_SITE_NAME``/``ATLASSIAN_USER_EMAIL``/``ATLASSIAN_API_TOKEN``.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            MCPJiraAuthenticationError: AUTH_MISSING when the URL or the
                credentials for the detected deployment type are missing
        """
        url = cls.get_url()

        username = os.getenv("JIRA_USERNAME") or os.getenv("ATLASSIAN_USER_EMAIL")
        api_token = os.getenv("JIRA_API_TOKEN") or os.getenv("ATLASSIAN_API_TOKEN")
        personal_token = os.getenv("JIRA_PERSONAL_TOKEN")

        is_cloud = is_atlassian_cloud_url(url)

        match (is_cloud, bool(username and api_token), bool(personal_token)):
            case (True, True, _):
                auth_type = "basic"
            case (True, False, _):
                raise create_auth_missing_error(
                    "Jira Cloud authentication requires ATLASSIAN_USER_EMAIL "
                    "and ATLASSIAN_API_TOKEN (or JIRA_USERNAME and JIRA_API_TOKEN)"
                )
            case (False, _, True):
                auth_type = "token"
            case (False, True, False):
                auth_type = "basic"
            case _:
                raise create_auth_missing_error(
                    "Server/Data Center authentication requires JIRA_PERSONAL_TOKEN "
                    "or JIRA_USERNAME and JIRA_API_TOKEN"
                )

        timeout_env = os.getenv("JIRA_TIMEOUT")
        timeout = int(timeout_env) if timeout_env and timeout_env.isdigit() else DEFAULT_TIMEOUT

        return cls(
            url=url,
            auth_type=auth_type,
            username=username,
            api_token=api_token,
            personal_token=personal_token,
            ssl_verify=is_env_truthy("JIRA_SSL_VERIFY", "true"),
            timeout=timeout,
        )

    @staticmethod
    def get_url() -> str:
        """Resolve the Jira base URL from the environment."""
        url = os.getenv("JIRA_URL")
        if url:
            return url.rstrip("/")
        site_name = os.getenv("ATLASSIAN_SITE_NAME")
        if site_name:
            return site_url(site_name)
        raise create_auth_missing_error(
            "Missing required environment variable: ATLASSIAN_SITE_NAME or JIRA_URL"
        )
