"""Date parsing and formatting utilities."""

import re
from datetime import date, datetime, timezone
from typing import Optional, Union

DateLike = Union[date, str, None]

_ISO_DATE_PREFIX = re.compile(r"\d{4}-\d{2}-\d{2}(?:$|T)")


def parse_date(value: DateLike) -> Optional[date]:
    """Parse a TMDb date.

    Accepts ``YYYY-MM-DD`` strings, full ISO timestamps (only the date part
    is used) and date objects.

    Args:
        value: Value to parse.

    Returns:
        Parsed date, or None if missing or malformed.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if not isinstance(value, str):
        return None
    text = value.strip()
    if not _ISO_DATE_PREFIX.match(text):
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def format_long_date(value: date) -> str:
    """Format a date as e.g. "April 15, 2024"."""
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def format_time_ago(moment: datetime, now: Optional[datetime] = None) -> str:
    """Describe how long ago a moment was.

    Args:
        moment: Past moment. Naive values are treated as UTC.
        now: Reference time, defaults to the current UTC time.

    Returns:
        Human readable description such as "3 hours ago".
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    seconds = int((now - moment).total_seconds())
    if seconds < 60:
        return "just now"

    for unit, size in (("day", 86400), ("hour", 3600), ("minute", 60)):
        count = seconds // size
        if count >= 1:
            return f"{count} {unit}{'s' if count != 1 else ''} ago"

    return "just now"
