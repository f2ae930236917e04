from __future__ import annotations

from datetime import datetime, timezone

from dateutil import parser


def now_utc_iso() -> str:
    """Return the current UTC time as an ISO 8601 string.

    Microseconds are always included so that timestamps written by this
    function sort lexically in chronological order.

    Example:
        >>> now_utc_iso()
        '2026-10-19T08:15:02.120394+00:00'
    """
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


def parse_datetime_iso(dt_str: str) -> datetime:
    """Parse a datetime string and convert it to UTC.

    Naive values are assumed to be UTC already.

    Example:
        >>> parse_datetime_iso('2024-12-29T12:00:00+05:30')
        datetime.datetime(2024, 12, 29, 6, 30, tzinfo=datetime.timezone.utc)
    """
    dt = parser.parse(dt_str)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_local(dt_str: str) -> str:
    """Format a stored timestamp for display, e.g. ``2024-12-29 06:30``."""
    try:
        return parse_datetime_iso(dt_str).strftime("%Y-%m-%d %H:%M")
    except (ValueError, OverflowError):
        return dt_str
