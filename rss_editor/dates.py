from __future__ import annotations

import calendar
import time
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Optional

from feedparser.datetimes import _parse_date


def parse_date(value: str) -> Optional[datetime]:
    """
    Parse a feed date string (RFC 2822, ISO 8601 and the other formats
    feedparser knows) into an aware UTC datetime. Returns None when unparseable.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    parsed = _parse_date(value.strip())
    if not isinstance(parsed, time.struct_time):
        return None
    # feedparser normalizes to UTC, so use timegm rather than mktime.
    try:
        return datetime.fromtimestamp(calendar.timegm(parsed), tz=timezone.utc)
    except (OverflowError, ValueError, OSError):
        return None


def is_valid_date(value: str) -> bool:
    return parse_date(value) is not None


def format_rfc2822(dt: Optional[datetime] = None) -> str:
    """Format as e.g. "Sun, 18 Oct 2026 12:00:00 GMT". Defaults to now."""
    if dt is None:
        dt = datetime.now(timezone.utc)
    elif dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return format_datetime(dt.astimezone(timezone.utc), usegmt=True)
