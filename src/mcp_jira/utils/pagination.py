"""Normalize the pagination envelopes of Jira list endpoints."""

import logging
from enum import Enum
from typing import Any
from urllib.parse import parse_qs, unquote, urlparse

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger("mcp-jira.utils.pagination")

DEFAULT_PAGE_SIZE = 25
MAX_PAGE_SIZE = 100

# Item arrays checked, in order, for offset-style envelopes
OFFSET_ITEM_KEYS = ("values", "issues", "comments")


class PaginationType(str, Enum):
    """Upstream pagination styles."""

    OFFSET = "offset"
    CURSOR = "cursor"
    PAGE = "page"


class ResponsePagination(BaseModel):
    """Pagination state of a single response; never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    count: int | None = None
    has_more: bool = False
    next_cursor: str | None = None
    total: int | None = None


def extract_pagination_info(
    data: Any,
    pagination_type: PaginationType,
    source: str | None = None,
) -> ResponsePagination:
    """
    Extract a uniform pagination descriptor from a raw page envelope.

    Any problem while reading the envelope degrades to ``has_more=False``
    rather than failing the request.

    Args:
        data: Raw JSON object returned by a list endpoint.
        pagination_type: Which pagination style the endpoint uses.
        source: Label used in log messages.

    Returns:
        The normalized pagination descriptor.
    """
    label = source or "response"
    if not data:
        logger.debug(f"No data provided for pagination extraction ({label})")
        return ResponsePagination(has_more=False)

    try:
        match pagination_type:
            case PaginationType.OFFSET:
                pagination = _offset_pagination(data)
            case PaginationType.CURSOR:
                pagination = _cursor_pagination(data)
            case PaginationType.PAGE:
                pagination = _page_pagination(data)
            case _:
                raise ValueError(f"Unknown pagination type: {pagination_type}")
    except Exception as e:
        logger.warning(f"Could not extract pagination info for {label}: {e}")
        return ResponsePagination(has_more=False)

    logger.debug(f"Pagination for {label}: {pagination}")
    return pagination


def _offset_pagination(data: dict[str, Any]) -> ResponsePagination:
    items = next(
        (data[key] for key in OFFSET_ITEM_KEYS if isinstance(data.get(key), list)),
        None,
    )
    count = len(items) if items is not None else None

    start_at = data.get("startAt")
    max_results = data.get("maxResults")
    total = data.get("total")

    has_more = False
    next_cursor = None
    if (
        start_at is not None
        and max_results is not None
        and total is not None
        and start_at + max_results < total
    ):
        has_more = True
        next_cursor = str(start_at + max_results)
    elif data.get("nextPage"):
        has_more = True
        next_cursor = str(data["nextPage"])

    return ResponsePagination(
        count=count,
        has_more=has_more,
        next_cursor=next_cursor,
        total=total if isinstance(total, int) else None,
    )


def _cursor_pagination(data: dict[str, Any]) -> ResponsePagination:
    results = data.get("results")
    count = len(results) if isinstance(results, list) else None

    next_link = (data.get("_links") or {}).get("next")
    if next_link and "cursor=" in next_link:
        raw_cursor = next_link.split("cursor=", 1)[1].split("&", 1)[0]
        if raw_cursor:
            next_cursor = unquote(raw_cursor, errors="strict")
            return ResponsePagination(count=count, has_more=True, next_cursor=next_cursor)
    return ResponsePagination(count=count, has_more=False)


def _page_pagination(data: dict[str, Any]) -> ResponsePagination:
    values = data.get("values")
    count = len(values) if isinstance(values, list) else None

    next_url = data.get("next")
    if next_url:
        page = parse_qs(urlparse(next_url).query).get("page")
        if page and page[0]:
            return ResponsePagination(count=count, has_more=True, next_cursor=page[0])
    return ResponsePagination(count=count, has_more=False)


def clamp_page_size(limit: int | None, default: int = DEFAULT_PAGE_SIZE) -> int:
    """Bound a requested page size to what Jira list endpoints accept."""
    if limit is None:
        return default
    return max(1, min(int(limit), MAX_PAGE_SIZE))


def parse_start_at(cursor: str | int | None) -> int:
    """Turn an offset cursor back into a ``startAt`` value."""
    if cursor is None or cursor == "":
        return 0
    try:
        return max(0, int(cursor))
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid cursor '{cursor}': expected a numeric offset") from e
