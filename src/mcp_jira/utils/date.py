"""Utility functions for date operations."""

import logging
from datetime import datetime, timezone

import dateutil.parser

logger = logging.getLogger("mcp-jira.utils.date")


def parse_date(value: str | int | float | datetime | None) -> datetime | None:
    """
    Parse a Jira timestamp into an aware UTC datetime.

    Accepts:
    - None or empty string (returns None)
    - datetime instances (naive values are taken as UTC)
    - epoch timestamps in milliseconds, as numbers or digit-only strings
    - any format supported by `dateutil.parser` (ISO 8601, RFC 3339, etc.)

    Raises:
        ValueError: If the value cannot be parsed.
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        parsed = value
    elif (isinstance(value, int | float) and not isinstance(value, bool)) or (
        isinstance(value, str) and value.isdigit()
    ):
        try:
            parsed = datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"Timestamp out of range: {value!r}") from e
    elif isinstance(value, str):
        try:
            parsed = dateutil.parser.parse(value)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"Unparseable date: {value!r}") from e
    else:
        raise ValueError(f"Unsupported date value: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
