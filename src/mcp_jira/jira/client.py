"""Base client module for Jira API interactions."""

import logging
from typing import Any, Literal

import requests
from atlassian import Jira

from ..exceptions import create_unexpected_error
from ..utils.errors import classify_http_error
from .config import JiraConfig

logger = logging.getLogger("mcp-jira.jira")

HttpMethod = Literal["GET", "POST", "PUT"]


class JiraClient:
    """Base client for Jira API interactions.

    Every request goes through :meth:`request`, which returns decoded JSON
    for successful responses and raises a classified
    :class:`~mcp_jira.exceptions.MCPJiraError` for everything else.
    """

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from
                environment variables.

        Raises:
            MCPJiraAuthenticationError: If credentials are missing.
        """
        self.config = config if config is not None else JiraConfig.from_env()

        if self.config.auth_type == "token":
            self.jira = Jira(
                url=self.config.url,
                token=self.config.personal_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
                timeout=self.config.timeout,
            )
        else:
            self.jira = Jira(
                url=self.config.url,
                username=self.config.username,
                password=self.config.api_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
                timeout=self.config.timeout,
            )

    @property
    def base_url(self) -> str:
        return self.config.url.rstrip("/")

    def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> Any:
        """Call the Jira REST API.

        Args:
            method: HTTP method.
            path: API path, e.g. ``rest/api/3/issue/PROJ-1``.
            params: Query parameters; ``None`` values are dropped.
            data: JSON body for POST/PUT requests.

        Returns:
            The decoded JSON body, or None for empty responses (e.g. 204).

        Raises:
            MCPJiraError: AUTH_INVALID for 401/403, API_ERROR for other
                non-2xx responses, UNEXPECTED_ERROR for transport failures.
        """
        query = {k: v for k, v in (params or {}).items() if v is not None}
        logger.debug(f"Jira {method} {path} params={query}")

        try:
            match method:
                case "GET":
                    response = self.jira.get(path, params=query, advanced_mode=True)
                case "POST":
                    response = self.jira.post(
                        path, data=data, params=query, advanced_mode=True
                    )
                case "PUT":
                    response = self.jira.put(
                        path, data=data, params=query, advanced_mode=True
                    )
                case _:
                    raise ValueError(f"Unsupported HTTP method: {method}")
        except requests.exceptions.RequestException as e:
            logger.error(f"Network error calling Jira {method} {path}: {e}")
            raise create_unexpected_error(
                f"Network error while contacting Jira: {e}", e
            ) from e

        if response is None:
            raise create_unexpected_error(f"No response from Jira for {method} {path}")

        if not 200 <= response.status_code < 300:
            error = classify_http_error(
                response.status_code, response.reason, response.text
            )
            logger.warning(
                f"Jira {method} {path} failed with {response.status_code}: {error.message}"
            )
            raise error

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise create_unexpected_error(
                f"Failed to parse Jira response for {method} {path}", e
            ) from e
