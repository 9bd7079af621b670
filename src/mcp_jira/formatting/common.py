"""Markdown building blocks shared by the entity formatters."""

import logging
import re
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime, timezone
from typing import Any, TypeVar

from ..utils.date import parse_date

logger = logging.getLogger("mcp-jira.formatting")

T = TypeVar("T")

_ISO_DATETIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}")

NOT_AVAILABLE = "Not available"


def format_date(value: str | int | float | datetime | None) -> str:
    """Format a timestamp as ``YYYY-MM-DD HH:MM:SS UTC``."""
    if value is None or value == "":
        return NOT_AVAILABLE
    try:
        parsed = parse_date(value)
    except ValueError:
        return "Invalid date"
    if parsed is None:
        return NOT_AVAILABLE
    return parsed.strftime("%Y-%m-%d %H:%M:%S UTC")


def format_now() -> str:
    return format_date(datetime.now(timezone.utc))


def format_url(url: str | None, title: str | None = None) -> str:
    if not url:
        return NOT_AVAILABLE
    return f"[{title or url}]({url})"


def format_heading(text: str, level: int = 1) -> str:
    level = min(max(level, 1), 6)
    return f"{'#' * level} {text}"


def format_separator() -> str:
    return "---"


def format_value(value: Any) -> str:
    """Render a single bullet-list value."""
    if value is None:
        return NOT_AVAILABLE
    if isinstance(value, datetime):
        return format_date(value)
    if isinstance(value, Mapping) and isinstance(value.get("url"), str):
        return format_url(value["url"], value.get("title"))
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, str):
        if value.startswith(("http://", "https://")):
            return format_url(value)
        if _ISO_DATETIME_RE.match(value):
            return format_date(value)
        return value
    return str(value)


def format_bullet_list(
    items: Mapping[str, Any],
    key_formatter: Callable[[str], str] | None = None,
) -> str:
    """Render ``- **Key**: value`` lines, skipping keys whose value is None."""
    lines = []
    for key, value in items.items():
        if value is None:
            continue
        label = key_formatter(key) if key_formatter else key
        lines.append(f"- **{label}**: {format_value(value)}")
    return "\n".join(lines)


def format_numbered_list(
    items: Sequence[T], formatter: Callable[[T, int], str]
) -> str:
    """Render items separated by horizontal rules."""
    if not items:
        return "No items."
    separator = f"\n\n{format_separator()}\n\n"
    return separator.join(formatter(item, index) for index, item in enumerate(items))


def format_pagination(
    count: int,
    has_more: bool,
    next_cursor: str | None = None,
    total: int | None = None,
) -> str:
    """
    Render the pagination hint shown under a list.

    The total is shown only when known and positive; the "more" notice only
    when more results exist; the cursor hint only when there is also a
    cursor to continue from.
    """
    parts = []
    if total is not None and total > 0:
        parts.append(f"*Showing {count} of {total} total items.*")
    elif count > 0:
        parts.append(f"*Showing {count} item{'' if count == 1 else 's'}.*")
    elif total == 0:
        parts.append("*Showing 0 of 0 total items.*")

    if has_more:
        parts.append("More results are available.")

    if has_more and next_cursor:
        parts.append(f'\nTo see more results, use --cursor "{next_cursor}"')

    result = " ".join(parts).strip()
    logger.debug(f"Formatted pagination: {result}")
    return result


def format_file_size(size: int | None) -> str:
    if not size:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB", "TB"]
    value = float(size)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    return f"{round(value, 2):g} {units[index]}"


def retrieved_footer(label: str = "Information retrieved at") -> list[str]:
    return [f"\n\n{format_separator()}", f"*{label}: {format_now()}*"]
