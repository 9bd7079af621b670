"""URL-related utility functions for MCP Jira."""

import re
from urllib.parse import urlparse

_PRIVATE_HOST_RE = re.compile(
    r"^(?:localhost$|127\.|10\.|192\.168\.|172\.(?:1[6-9]|2[0-9]|3[0-1])\.)"
)
_CLOUD_DOMAINS = (".atlassian.net", ".jira.com", ".jira-dev.com", "api.atlassian.com")


def is_atlassian_cloud_url(url: str | None) -> bool:
    """Determine if a URL belongs to Jira Cloud rather than Server/Data Center.

    Localhost and private-network addresses are always Server/Data Center.
    """
    if not url:
        return False

    hostname = urlparse(url).hostname or ""
    if _PRIVATE_HOST_RE.match(hostname):
        return False
    return any(domain in hostname for domain in _CLOUD_DOMAINS)


def site_url(site_name: str) -> str:
    """Build the Jira Cloud base URL for an ``ATLASSIAN_SITE_NAME``."""
    site_name = site_name.strip()
    if site_name.startswith(("http://", "https://")):
        return site_name.rstrip("/")
    return f"https://{site_name}.atlassian.net"
